"""Composes the formulas into pool-rate and position-metric pipelines."""
from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from .calculator import RiskCalculator
from .errors import DivisionByZero
from .models import Outcome, PoolInputs, PositionInputs, PositionMetrics, RateBreakdown

logger = logging.getLogger(__name__)

T = TypeVar("T")


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Run a formula and capture a DivisionByZero into an :class:`Outcome`.

    Any other exception propagates.
    """
    try:
        return Outcome(value=func(*args, **kwargs))
    except DivisionByZero as exc:
        logger.debug("%s failed: %s", getattr(func, "__name__", func), exc)
        return Outcome(error=exc)


def compute_rates(calculator: RiskCalculator, pool: PoolInputs) -> RateBreakdown:
    """Utilization through net supply APY for one pool.

    Raises:
        DivisionByZero: if the pool has no supply.
    """
    ur = calculator.utilization_rate(pool.total_debt_usd, pool.total_supply_usd)
    if ur > 1.0:
        logger.debug("Pool over-utilized (utilization=%.6f)", ur)

    borrow_before_fee = calculator.borrow_apy_before_fee(ur, pool.floor_cap, pool.ceiling_cap)
    borrow_fee = calculator.borrow_fee(borrow_before_fee, ur)
    borrow_apy = calculator.borrow_apy(borrow_before_fee, borrow_fee)

    supply_before_fee = calculator.supply_apy_before_fee(borrow_before_fee, ur)
    supply_fee = calculator.supply_fee(supply_before_fee, ur)
    net_supply = calculator.net_supply_apy(supply_before_fee, supply_fee)

    rates = RateBreakdown(
        utilization_rate=ur,
        borrow_apy_before_fee=borrow_before_fee,
        borrow_fee=borrow_fee,
        borrow_apy=borrow_apy,
        supply_apy_before_fee=supply_before_fee,
        supply_fee=supply_fee,
        net_supply_apy=net_supply,
    )
    logger.debug("Computed rates: %s", rates)
    return rates


def compute_position(
    calculator: RiskCalculator, position: PositionInputs, borrow_apy: float
) -> PositionMetrics:
    """Leverage, yield and liquidation metrics for one position.

    A position with no outstanding debt (debt + accrued interest within
    epsilon of zero) carries no liquidation risk and gets an infinite
    health factor.

    Raises:
        DivisionByZero: if collateral or position size is zero.
    """
    debt = calculator.debt_usd(position.position_size_usd, position.collateral_usd)
    leverage = calculator.leverage_ratio(position.collateral_usd, debt)
    leveraged = calculator.leveraged_apy(position.lv_apy, leverage)
    overall = calculator.overall_apy(leveraged, position.collateral_usd, borrow_apy, debt)

    liquidation_price = calculator.liquidation_price(
        position.lv_current_price,
        position.collateral_usd,
        position.liquidation_threshold,
        position.position_size_usd,
    )

    if abs(debt + position.accrued_interest) < calculator.epsilon:
        logger.debug("No outstanding debt, health factor is unbounded")
        health = float("inf")
    else:
        health = calculator.health_factor(
            position.lv_current_price,
            position.lv_token_amount,
            position.liquidation_threshold,
            debt,
            position.accrued_interest,
        )

    metrics = PositionMetrics(
        debt_usd=debt,
        leverage_ratio=leverage,
        leveraged_apy=leveraged,
        overall_apy=overall,
        liquidation_price=liquidation_price,
        health_factor=health,
    )
    logger.debug("Computed position metrics: %s", metrics)
    return metrics
