from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, model_validator

from .utils.logger import get_logger

logger = get_logger(__name__)


class EngineConfig(BaseModel):
    """Numeric knobs of the synthetic price engine.

    Defaults reproduce the Sugar Token chart: token anchored at 0.45,
    driven by Indian sugar at 38 INR/kg.
    """
    model_config = ConfigDict(frozen=True)

    base_token_price: float = 0.45
    base_proxy_price: float = 38.0
    token_floor: float = 0.01
    proxy_floor: float = 30.0
    proxy_step: float = 0.02          # max fractional proxy move per step
    generation_jitter: Tuple[float, float] = (0.9, 1.1)
    tick_jitter: Tuple[float, float] = (0.98, 1.02)
    tick_interval_seconds: float = 1.0
    price_decimals: int = 4
    proxy_decimals: int = 2
    display_timezone: Optional[str] = None   # pytz name; None = local clock

    @model_validator(mode="after")
    def _check_ranges(self):
        if self.token_floor <= 0 or self.proxy_floor <= 0:
            raise ValueError("price floors must be positive")
        if self.base_proxy_price < self.proxy_floor:
            raise ValueError("base_proxy_price must not be below proxy_floor")
        if not 0 <= self.proxy_step < 1:
            raise ValueError("proxy_step must be in [0, 1)")
        if self.tick_interval_seconds <= 0:
            raise ValueError("tick_interval_seconds must be positive")
        for name in ("generation_jitter", "tick_jitter"):
            low, high = getattr(self, name)
            if low <= 0 or low > high:
                raise ValueError(f"{name} must satisfy 0 < low <= high")
        return self


DEFAULT_CONFIG = EngineConfig()


def load_config(path: str | Path | None = None, **overrides) -> EngineConfig:
    """Build an EngineConfig from an optional YAML file plus keyword overrides."""
    data = {}
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        logger.info(f"[load_config] loaded {len(data)} keys from {path}")
    data.update({k: v for k, v in overrides.items() if v is not None})
    return EngineConfig(**data)
