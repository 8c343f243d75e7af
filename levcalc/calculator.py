"""Rate and risk formulas for leveraged lending positions — pure, no I/O.

Every method maps numeric inputs to a single float. The only failure is
:class:`~levcalc.errors.DivisionByZero`, raised when a divisor is closer to
zero than the configured epsilon; it propagates to the caller unmodified.
Inputs are not range-checked: negative amounts or utilization above 1 give
well-defined (if economically meaningless) results.
"""
from __future__ import annotations

from .config import CalculatorConfig, validate_config
from .numeric import clamp01, divide

# Borrow curve kink, width of the segment above it, and the utilization at
# which the fee fraction equals the base protocol fee.
KINK_UTILIZATION = 0.8
ABOVE_KINK_SPAN = 0.2
FEE_MIDPOINT = 0.5


class RiskCalculator:
    """Leverage, rate-curve, yield and liquidation formulas bound to one fee regime."""

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config or CalculatorConfig()
        validate_config(self._config)

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def epsilon(self) -> float:
        return self._config.epsilon

    @property
    def protocol_fee(self) -> float:
        return self._config.protocol_fee

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def divide(self, numerator: float, denominator: float) -> float:
        return divide(numerator, denominator, self._config.epsilon)

    @staticmethod
    def clamp01(value: float) -> float:
        return clamp01(value)

    # ------------------------------------------------------------------
    # Leverage & position sizing
    # ------------------------------------------------------------------

    def leverage_ratio(self, collateral_usd: float, debt_usd: float) -> float:
        """Total exposure per unit of collateral: (collateral + debt) / collateral."""
        return self.divide(collateral_usd + debt_usd, collateral_usd)

    @staticmethod
    def debt_usd(position_size_usd: float, collateral_usd: float) -> float:
        """Borrowed amount; negative when the position is smaller than collateral."""
        return position_size_usd - collateral_usd

    # ------------------------------------------------------------------
    # Borrow side
    # ------------------------------------------------------------------

    def utilization_rate(self, total_debt_usd: float, total_supply_usd: float) -> float:
        """Raw debt / supply ratio. Not clamped: > 1 signals an over-utilized pool."""
        return self.divide(total_debt_usd, total_supply_usd)

    @staticmethod
    def borrow_apy_before_fee(
        utilization_rate: float, floor_cap: float, ceiling_cap: float
    ) -> float:
        """Kinked borrow curve.

        Rises linearly from 0 to ``floor_cap`` as utilization goes 0 → 0.8,
        then from ``floor_cap`` to ``ceiling_cap`` as it goes 0.8 → 1.0.
        Utilization is clamped to [0, 1] first.
        """
        ur = clamp01(utilization_rate)
        if ur <= KINK_UTILIZATION:
            return (ur / KINK_UTILIZATION) * floor_cap
        return floor_cap + ((ur - KINK_UTILIZATION) / ABOVE_KINK_SPAN) * (
            ceiling_cap - floor_cap
        )

    def borrow_fee_fraction(self, utilization_rate: float) -> float:
        """Share of the pre-fee borrow rate charged as fee; 2x protocol fee at full use."""
        ur = clamp01(utilization_rate)
        fee = self._config.protocol_fee
        return fee + 2 * fee * (ur - FEE_MIDPOINT)

    def borrow_fee(self, borrow_apy_before_fee: float, utilization_rate: float) -> float:
        return borrow_apy_before_fee * self.borrow_fee_fraction(utilization_rate)

    @staticmethod
    def borrow_apy(borrow_apy_before_fee: float, borrow_fee: float) -> float:
        """Borrowers pay the base rate plus the fee surcharge."""
        return borrow_apy_before_fee + borrow_fee

    # ------------------------------------------------------------------
    # Supply side
    # ------------------------------------------------------------------

    @staticmethod
    def supply_apy_before_fee(borrow_apy_before_fee: float, utilization_rate: float) -> float:
        # Utilization is not clamped here.
        return borrow_apy_before_fee * utilization_rate

    def supply_fee_fraction(self, utilization_rate: float) -> float:
        """Mirror of :meth:`borrow_fee_fraction`; falls as utilization rises."""
        ur = clamp01(utilization_rate)
        fee = self._config.protocol_fee
        return fee - 2 * fee * (ur - FEE_MIDPOINT)

    def supply_fee(self, supply_apy_before_fee: float, utilization_rate: float) -> float:
        return supply_apy_before_fee * self.supply_fee_fraction(utilization_rate)

    @staticmethod
    def net_supply_apy(supply_apy_before_fee: float, supply_fee: float) -> float:
        return supply_apy_before_fee - supply_fee

    # ------------------------------------------------------------------
    # Leveraged & overall yield
    # ------------------------------------------------------------------

    @staticmethod
    def leveraged_apy(lv_apy: float, leverage_ratio: float) -> float:
        return lv_apy * leverage_ratio

    def overall_apy(
        self,
        leveraged_apy: float,
        collateral_usd: float,
        borrow_apy: float,
        debt_usd: float,
    ) -> float:
        """Net yield on collateral after paying borrow cost on the debt."""
        return self.divide(leveraged_apy * collateral_usd - borrow_apy * debt_usd, collateral_usd)

    # ------------------------------------------------------------------
    # Liquidation risk
    # ------------------------------------------------------------------

    def liquidation_price(
        self,
        current_price: float,
        collateral: float,
        liquidation_threshold: float,
        total_position_value: float,
    ) -> float:
        """Price at which the position becomes liquidatable.

        A negative result means the position is already past liquidation.
        """
        discount = self.divide(collateral * liquidation_threshold, total_position_value)
        return current_price - current_price * discount

    def health_factor(
        self,
        lv_current_price: float,
        lv_token_amount: float,
        liquidation_threshold: float,
        debt_usd: float,
        accrued_interest: float,
    ) -> float:
        """Risk-adjusted collateral value over debt; below 1 is liquidatable.

        Zero debt fails with DivisionByZero; callers treat it as "no risk".
        """
        return self.divide(
            lv_current_price * lv_token_amount * liquidation_threshold,
            debt_usd + accrued_interest,
        )
