"""Exact rational numbers for sub-beat arithmetic.

Rational keeps every value as a fully reduced fraction with a positive
denominator, so beats subdivided thousands of times never drift the way
floating-point positions do.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from tempomap.core.errors import InvalidOperationError
from tempomap.core.mathematics.gcd import int_gcd
from tempomap.core.utils.compare import compare_to


@dataclass(frozen=True, slots=True, init=False, eq=False)
class Rational:
    """An immutable, reduced fraction.

    Invariants:
        - ``denominator > 0``
        - ``gcd(|numerator|, denominator) == 1``
        - a zero numerator always has ``denominator == 1``

    Attributes:
        numerator: Signed numerator (carries the sign of the value).
        denominator: Positive denominator.

    Example:
        >>> Rational(-6, -3)
        Rational(2, 1)
        >>> Rational(1, 3) + Rational(1, 6)
        Rational(1, 2)
    """

    ZERO: ClassVar[Rational]
    ONE: ClassVar[Rational]

    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """Create a reduced fraction.

        Args:
            numerator: Numerator
            denominator: Denominator (any sign, never zero)

        Raises:
            InvalidOperationError: If denominator is zero
        """
        if denominator == 0:
            raise InvalidOperationError(f"Denominator must not be 0 (numerator={numerator})")

        gcd = int_gcd(numerator, denominator)
        num = numerator // gcd
        den = denominator // gcd
        if den < 0:
            num = -num
            den = -den
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @property
    def integer_part(self) -> int:
        """Integer part, truncated toward zero."""
        quotient = abs(self.numerator) // self.denominator
        return quotient if self.numerator >= 0 else -quotient

    @property
    def fraction_part(self) -> Rational:
        """Fractional part; shares the sign of the whole value."""
        return Rational(self.numerator - self.integer_part * self.denominator, self.denominator)

    @property
    def reciprocal(self) -> Rational:
        """``1 / self``.

        Raises:
            InvalidOperationError: If the value is zero
        """
        if self.numerator == 0:
            raise InvalidOperationError("The reciprocal of 0 is undefined")
        return Rational(self.denominator, self.numerator)

    def to_float(self) -> float:
        """Approximate value as a float."""
        return self.numerator / self.denominator

    def __float__(self) -> float:
        return self.to_float()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    # ------------------------------------------------------------------
    # Sign
    # ------------------------------------------------------------------

    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def __abs__(self) -> Rational:
        return self if self.numerator >= 0 else -self

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            return _add(self.numerator, self.denominator, other.numerator, other.denominator)
        if isinstance(other, int):
            return _add(self.numerator, self.denominator, other, 1)
        return NotImplemented

    def __radd__(self, other: Any) -> Rational:
        if isinstance(other, int):
            return _add(other, 1, self.numerator, self.denominator)
        return NotImplemented

    def __sub__(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            return _add(self.numerator, self.denominator, -other.numerator, other.denominator)
        if isinstance(other, int):
            return _add(self.numerator, self.denominator, -other, 1)
        return NotImplemented

    def __rsub__(self, other: Any) -> Rational:
        if isinstance(other, int):
            return _add(other, 1, -self.numerator, self.denominator)
        return NotImplemented

    def __mul__(self, other: Any) -> Rational | float:
        if isinstance(other, Rational):
            return _mul(self.numerator, self.denominator, other.numerator, other.denominator)
        if isinstance(other, int):
            return _mul(self.numerator, self.denominator, other, 1)
        if isinstance(other, float):
            return self.numerator * other / self.denominator
        return NotImplemented

    def __rmul__(self, other: Any) -> Rational | float:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Rational | float:
        if isinstance(other, Rational):
            if other.numerator == 0:
                raise InvalidOperationError(f"Cannot divide {self} by 0")
            return _mul(self.numerator, self.denominator, other.denominator, other.numerator)
        if isinstance(other, int):
            if other == 0:
                raise InvalidOperationError(f"Cannot divide {self} by 0")
            return _mul(self.numerator, self.denominator, 1, other)
        if isinstance(other, float):
            return self.numerator / (self.denominator * other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Rational | float:
        if isinstance(other, int):
            if self.numerator == 0:
                raise InvalidOperationError(f"Cannot divide {other} by 0")
            return _mul(other, 1, self.denominator, self.numerator)
        if isinstance(other, float):
            return other * self.denominator / self.numerator
        return NotImplemented

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, int):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # Integral values hash like the equal int.
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:
        terms = _terms(other)
        if terms is None:
            return NotImplemented
        return _less(self.numerator, self.denominator, *terms)

    def __gt__(self, other: Any) -> bool:
        terms = _terms(other)
        if terms is None:
            return NotImplemented
        return _less(*terms, self.numerator, self.denominator)

    def __le__(self, other: Any) -> bool:
        terms = _terms(other)
        if terms is None:
            return NotImplemented
        return not _less(*terms, self.numerator, self.denominator)

    def __ge__(self, other: Any) -> bool:
        terms = _terms(other)
        if terms is None:
            return NotImplemented
        return not _less(self.numerator, self.denominator, *terms)

    def compare_to(self, other: Any) -> int:
        """Three-way comparison against a Rational, an int or None.

        Args:
            other: Value to compare with. ``None`` orders before everything.

        Returns:
            -1, 0 or 1

        Raises:
            TypeMismatchError: If other is any other type
        """
        return compare_to(self, other, (Rational, int))


Rational.ZERO = Rational(0, 1)
Rational.ONE = Rational(1, 1)


def _terms(value: Any) -> tuple[int, int] | None:
    if isinstance(value, Rational):
        return value.numerator, value.denominator
    if isinstance(value, int):
        return value, 1
    return None


def _add(xn: int, xd: int, yn: int, yd: int) -> Rational:
    # Scale by the reduced denominators only, which keeps the
    # intermediate products small.
    gcd = int_gcd(xd, yd)
    xd_gcd = xd // gcd
    yd_gcd = yd // gcd
    return Rational(xn * yd_gcd + yn * xd_gcd, xd * yd_gcd)


def _mul(xn: int, xd: int, yn: int, yd: int) -> Rational:
    # Cross-reduce before multiplying.
    gcd_nd = int_gcd(xn, yd)
    gcd_dn = int_gcd(xd, yn)
    num = (xn // gcd_nd) * (yn // gcd_dn)
    den = (xd // gcd_dn) * (yd // gcd_nd)
    return Rational(num, den)


def _less(xn: int, xd: int, yn: int, yd: int) -> bool:
    gcd = int_gcd(xd, yd)
    return xn * (yd // gcd) < yn * (xd // gcd)
