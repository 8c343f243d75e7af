"""Configuration loader — reads calculator.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigError
from .numeric import EPSILON

logger = logging.getLogger(__name__)

DEFAULT_PROTOCOL_FEE = 0.1

# Resolved against the working directory at load time.
_DEFAULT_CONFIG_PATH = Path("calculator.yaml")


@dataclass(frozen=True)
class CalculatorConfig:
    """Constants fixed for the lifetime of a calculator instance."""

    epsilon: float = EPSILON
    protocol_fee: float = DEFAULT_PROTOCOL_FEE


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _as_float(raw: dict[str, Any], key: str, default: float) -> float:
    value = raw.get(key)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{key}' must be a number, got {value!r}") from exc


def _build_calculator(raw: dict[str, Any]) -> CalculatorConfig:
    return CalculatorConfig(
        epsilon=_as_float(raw, "epsilon", EPSILON),
        protocol_fee=_as_float(raw, "protocol_fee", DEFAULT_PROTOCOL_FEE),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> CalculatorConfig:
    """Load and validate calculator configuration from YAML + .env.

    Args:
        config_path: Path to calculator.yaml. Defaults to ``calculator.yaml``
            in the current working directory; built-in defaults are used
            when that file does not exist.
    """
    load_dotenv()

    if config_path is None:
        if not _DEFAULT_CONFIG_PATH.exists():
            logger.info("No %s found, using default constants", _DEFAULT_CONFIG_PATH.name)
            return CalculatorConfig()
        config_path = _DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    section = raw.get("calculator") or {}
    if not isinstance(section, dict):
        raise ConfigError("'calculator' section must be a mapping")

    cfg = _build_calculator(section)
    validate_config(cfg)
    logger.info(
        "Configuration loaded from %s (epsilon=%g, protocol_fee=%g)",
        config_path,
        cfg.epsilon,
        cfg.protocol_fee,
    )
    return cfg


def validate_config(cfg: CalculatorConfig) -> None:
    """Raise on invalid configuration."""
    for name in ("epsilon", "protocol_fee"):
        value = getattr(cfg, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(cfg.epsilon) or cfg.epsilon <= 0:
        raise ConfigError(f"epsilon must be a positive finite number, got {cfg.epsilon!r}")
    if not 0.0 <= cfg.protocol_fee <= 1.0:
        raise ConfigError(f"protocol_fee must be within [0, 1], got {cfg.protocol_fee!r}")
