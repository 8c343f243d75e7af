"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import DivisionByZero

T = TypeVar("T")


@dataclass(frozen=True)
class PoolInputs:
    """Lending pool totals and its borrow-curve caps."""

    total_debt_usd: float
    total_supply_usd: float
    floor_cap: float
    ceiling_cap: float


@dataclass(frozen=True)
class PositionInputs:
    """A single leveraged position."""

    collateral_usd: float
    position_size_usd: float
    lv_apy: float
    lv_current_price: float
    lv_token_amount: float
    liquidation_threshold: float
    accrued_interest: float = 0.0


@dataclass(frozen=True)
class RateBreakdown:
    """Borrow and supply rates of a pool, before and after protocol fees."""

    utilization_rate: float
    borrow_apy_before_fee: float
    borrow_fee: float
    borrow_apy: float
    supply_apy_before_fee: float
    supply_fee: float
    net_supply_apy: float


@dataclass(frozen=True)
class PositionMetrics:
    """Yield and liquidation risk of a position."""

    debt_usd: float
    leverage_ratio: float
    leveraged_apy: float
    overall_apy: float
    liquidation_price: float
    health_factor: float

    @property
    def liquidatable(self) -> bool:
        return self.health_factor < 1.0


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a computed value or the DivisionByZero that prevented it."""

    value: T | None = None
    error: DivisionByZero | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the captured failure if there is one."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
