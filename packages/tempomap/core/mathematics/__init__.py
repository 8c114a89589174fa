"""Exact and compensated arithmetic."""

from tempomap.core.mathematics.accumulator import Accumulator
from tempomap.core.mathematics.gcd import int_gcd
from tempomap.core.mathematics.rational import Rational

__all__ = [
    "Accumulator",
    "Rational",
    "int_gcd",
]
