"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from levcalc.calculator import RiskCalculator
from levcalc.config import CalculatorConfig
from levcalc.models import PoolInputs, PositionInputs


# ---------------------------------------------------------------------------
# Calculator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def default_config() -> CalculatorConfig:
    return CalculatorConfig(epsilon=1e-9, protocol_fee=0.1)


@pytest.fixture()
def calculator(default_config: CalculatorConfig) -> RiskCalculator:
    return RiskCalculator(default_config)


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_pool() -> PoolInputs:
    return PoolInputs(
        total_debt_usd=80.0,
        total_supply_usd=100.0,
        floor_cap=0.05,
        ceiling_cap=0.20,
    )


@pytest.fixture()
def sample_position() -> PositionInputs:
    # 100 USD collateral levered 4x; 50 tokens at $10 with 20 USD interest accrued.
    return PositionInputs(
        collateral_usd=100.0,
        position_size_usd=400.0,
        lv_apy=0.10,
        lv_current_price=10.0,
        lv_token_amount=50.0,
        liquidation_threshold=0.8,
        accrued_interest=20.0,
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    calculator:
      epsilon: 1.0e-6
      protocol_fee: 0.2
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "calculator.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
