"""
Shared test infrastructure for calc.

Modules:
- file_utils: creating files and directories
- cli_utils: running calc.cli in a subprocess
"""

from .file_utils import write, write_calc_yaml, write_holder_module
from .cli_utils import run_cli, jload

__all__ = [
    "write", "write_calc_yaml", "write_holder_module",
    "run_cli", "jload",
]
