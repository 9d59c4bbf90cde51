"""
Collaborator contract for Calculator.data_holder_test().

The collaborator is opaque: it is constructed with no arguments and reports
a single integer. Its meaning is not defined here.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class HolderProtocol(Protocol):
    """Anything with a zero-argument report() returning an int."""

    def report(self) -> int:
        ...


HolderFactory = Callable[[], HolderProtocol]


class DataHolder:
    """Built-in collaborator used when nothing else is configured."""

    def report(self) -> int:
        return 1


__all__ = ["HolderProtocol", "HolderFactory", "DataHolder"]
