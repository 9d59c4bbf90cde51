from .calculator import Calculator, get_version
from .errors import CalcUserError
from .holder import DataHolder, HolderProtocol

__all__ = ["Calculator", "get_version", "CalcUserError", "DataHolder", "HolderProtocol"]
