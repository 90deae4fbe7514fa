"""Result type for operations a coordinate system does not support."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnsupportedOperation:
    """Returned instead of a value when an operation is not available.

    Falsy, so code that only checks truthiness treats it like a missing result.
    """

    operation: str
    coordinate_system: str = ""
    reason: str = "Not implemented."

    def __bool__(self) -> bool:
        return False
