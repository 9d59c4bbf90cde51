from __future__ import annotations

import logging
from typing import Any, Optional

from . import int32
from .holder import DataHolder, HolderFactory

logger = logging.getLogger(__name__)

VERSION = "Calculator v1.0"


def get_version() -> str:
    return VERSION


class Calculator:
    """
    Integer calculator that remembers its last result.

    Arithmetic is 32-bit signed with silent wraparound on overflow.
    Not synchronized: share an instance across threads only under an
    external lock.
    """

    def __init__(self, holder_factory: Optional[HolderFactory] = None):
        """
        Args:
            holder_factory: Zero-argument callable producing the collaborator
                            for data_holder_test(). Defaults to DataHolder.
        """
        self._last_result = 0
        self._holder_factory: HolderFactory = holder_factory or DataHolder

    @property
    def last_result(self) -> int:
        return self._last_result

    def add(self, a: Any, b: Any) -> int:
        self._last_result = int32.add(int32.coerce(a), int32.coerce(b))
        logger.debug("add(%r, %r) -> %d", a, b, self._last_result)
        return self._last_result

    def multiply(self, a: Any, b: Any) -> int:
        self._last_result = int32.mul(int32.coerce(a), int32.coerce(b))
        logger.debug("multiply(%r, %r) -> %d", a, b, self._last_result)
        return self._last_result

    def get_last_result(self) -> int:
        return self._last_result

    @staticmethod
    def get_version() -> str:
        return get_version()

    def format_result(self, prefix: str) -> str:
        return f"{prefix}: {self._last_result}"

    def data_holder_test(self) -> int:
        """
        Build a fresh collaborator and return what it reports.

        Whatever the factory or report() raises reaches the caller as is.
        The reported value is opaque and returned untouched: no type check,
        no 32-bit narrowing, and last_result is not updated.
        """
        holder = self._holder_factory()
        value = holder.report()
        logger.debug("data_holder_test via %s -> %r", type(holder).__name__, value)
        return value

    def __repr__(self) -> str:
        return f"Calculator(last_result={self._last_result})"


__all__ = ["Calculator", "get_version", "VERSION"]
