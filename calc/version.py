from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Version of the installed distribution.
    Kept free of other calc imports (no cycles).
    """
    try:
        return metadata.version("calc-demo")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["tool_version"]
