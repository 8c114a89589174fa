"""Error taxonomy for tempomap.

Every failure raised by the core is a contract violation by the caller,
never a transient condition. Nothing here retries or recovers.
"""

from __future__ import annotations

from typing import Any


class TempoMapError(Exception):
    """Base class for all tempomap errors."""


class InvalidOperationError(TempoMapError, ArithmeticError):
    """An arithmetic operation that has no defined result was requested.

    Raised for zero denominators, the reciprocal of zero and exact
    division by zero.
    """


class TypeMismatchError(TempoMapError, TypeError):
    """A value was compared against an incompatible type.

    Attributes:
        expected: Name of the type the comparison accepts.
        actual: Name of the type that was supplied.
    """

    def __init__(self, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(f"Cannot compare {expected} with {self.actual}")
