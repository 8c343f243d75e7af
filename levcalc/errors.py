"""Exceptions raised by the calculator."""
from __future__ import annotations


class CalculatorError(Exception):
    """Base class for calculator failures."""


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Raised when a divisor's magnitude is below the configured epsilon."""

    def __init__(self, numerator: float, denominator: float, epsilon: float) -> None:
        self.numerator = numerator
        self.denominator = denominator
        self.epsilon = epsilon
        super().__init__(
            f"Division by zero: |{denominator!r}| < epsilon {epsilon!r} "
            f"(numerator {numerator!r})"
        )

    def __reduce__(self):
        return (type(self), (self.numerator, self.denominator, self.epsilon))


class ConfigError(CalculatorError, ValueError):
    """Raised when calculator configuration values are invalid."""
