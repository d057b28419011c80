from __future__ import annotations
from typing import Tuple

from ..config import DEFAULT_CONFIG, EngineConfig
from ..models.series import DisplayStats, Series
from .provider import next_proxy_price, token_price_from_proxy
from .random_source import UniformSource, make_rng


def compute_stats(series: Series, config: EngineConfig = DEFAULT_CONFIG) -> DisplayStats:
    """Readout for a series: latest prices and change since the first point."""
    if not series:
        return DisplayStats.placeholder(f"{config.base_proxy_price:.{config.proxy_decimals}f}")
    first = float(series[0].price)
    last = series[-1]
    latest = float(last.price)
    # first price was floor-clamped at generation, never zero
    base = max(first, config.token_floor)
    return DisplayStats(
        current_price=f"{latest:.{config.price_decimals}f}",
        percent_change=(latest - base) / base * 100,
        current_secondary_price=last.secondary_price,
    )


def tick(series: Series, rng: UniformSource | None = None,
         config: EngineConfig = DEFAULT_CONFIG) -> Tuple[Series, DisplayStats]:
    """Advance the most recent sample by one bounded random step.

    Returns a new series in which only the last point's prices differ, plus
    the recomputed readout. An empty series is returned untouched.
    """
    series = tuple(series)
    if not series:
        return series, compute_stats(series, config)
    rng = rng if rng is not None else make_rng()

    last = series[-1]
    if last.secondary_price is not None:
        proxy = next_proxy_price(float(last.secondary_price), rng, config)
        low, high = config.tick_jitter
        price = token_price_from_proxy(proxy, rng.uniform(low, high), config)
        update = {
            "price": f"{price:.{config.price_decimals}f}",
            "secondary_price": f"{proxy:.{config.proxy_decimals}f}",
        }
    else:
        # no sugar reading on the point: walk the token price directly
        current = float(last.price)
        step = config.proxy_step
        price = max(config.token_floor, current + rng.uniform(-step, step) * current)
        update = {"price": f"{price:.{config.price_decimals}f}"}

    new_series = series[:-1] + (last.model_copy(update=update),)
    return new_series, compute_stats(new_series, config)
