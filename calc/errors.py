"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from CalcUserError.

Programming errors and failures raised by a collaborator should NOT inherit
from CalcUserError — they propagate with full tracebacks.
"""

from __future__ import annotations


class CalcUserError(Exception):
    """
    Base class for all user-facing errors in calc.

    These errors indicate problems that the user can fix:
    configuration issues, bad holder references, malformed CLI steps.
    """
    pass


class ConfigError(CalcUserError):
    """Invalid calc.yaml (wrong shape, unknown key, bad value)."""
    pass


class HolderResolveError(CalcUserError):
    """A holder reference of the form 'module:attr' could not be resolved."""
    pass


class StepError(CalcUserError):
    """Malformed step passed to `calc run`."""
    pass


__all__ = ["CalcUserError", "ConfigError", "HolderResolveError", "StepError"]
