"""Rate and risk calculator for leveraged lending positions."""
from .calculator import RiskCalculator
from .config import CalculatorConfig, load_config
from .errors import CalculatorError, ConfigError, DivisionByZero
from .models import Outcome, PoolInputs, PositionInputs, PositionMetrics, RateBreakdown
from .numeric import EPSILON, clamp01, divide
from .pipeline import attempt, compute_position, compute_rates

__all__ = [
    "EPSILON",
    "CalculatorConfig",
    "CalculatorError",
    "ConfigError",
    "DivisionByZero",
    "Outcome",
    "PoolInputs",
    "PositionInputs",
    "PositionMetrics",
    "RateBreakdown",
    "RiskCalculator",
    "attempt",
    "clamp01",
    "compute_position",
    "compute_rates",
    "divide",
    "load_config",
]
