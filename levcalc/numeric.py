"""Numeric primitives shared by every formula — no I/O."""
from __future__ import annotations

from .errors import DivisionByZero

EPSILON = 1e-9


def divide(numerator: float, denominator: float, epsilon: float = EPSILON) -> float:
    """Divide, refusing denominators closer to zero than ``epsilon``.

    Raises:
        DivisionByZero: if ``abs(denominator) < epsilon``.
    """
    if abs(denominator) < epsilon:
        raise DivisionByZero(numerator, denominator, epsilon)
    return numerator / denominator


def clamp01(value: float) -> float:
    """Restrict ``value`` to the unit interval [0, 1]."""
    return max(0.0, min(1.0, value))
