from __future__ import annotations
import time
from datetime import datetime

import pandas as pd
import pytz

from ..config import DEFAULT_CONFIG, EngineConfig
from ..models.series import SamplePoint, Series, TimeFrame, params_for
from ..utils.logger import get_logger
from .random_source import UniformSource, make_rng

logger = get_logger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def format_label(timestamp_ms: int, timeframe, tz=None) -> str:
    """Axis label for a sample: ``HH:MM`` intraday, ``Mon D`` for day bars.

    ``tz`` is a tzinfo or pytz zone name; ``None`` uses the local wall clock.
    """
    if isinstance(tz, str):
        tz = pytz.timezone(tz)
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    if TimeFrame.parse(timeframe).is_intraday:
        return dt.strftime("%H:%M")
    return f"{dt:%b} {dt.day}"


def next_proxy_price(proxy: float, rng: UniformSource, config: EngineConfig = DEFAULT_CONFIG) -> float:
    """One bounded step of the sugar price walk, floor-clamped."""
    step = config.proxy_step
    delta = rng.uniform(-step, step)
    return max(config.proxy_floor, proxy * (1 + delta))


def token_price_from_proxy(proxy: float, jitter: float, config: EngineConfig = DEFAULT_CONFIG) -> float:
    factor = proxy / config.base_proxy_price
    return max(config.token_floor, config.base_token_price * factor * jitter)


def generate(timeframe, rng: UniformSource | None = None, now: int | None = None,
             config: EngineConfig = DEFAULT_CONFIG) -> Series:
    """Generate the initial Sugar Token series for a timeframe.

    Returns ``point_count + 1`` points ending at ``now``, spaced by the
    timeframe interval. The token price loosely follows a simulated sugar
    price (INR/kg): each step moves sugar by up to ``proxy_step`` and the
    token is re-derived from it with a little extra noise.
    """
    tf = TimeFrame.parse(timeframe)
    if not TimeFrame.is_known(timeframe):
        logger.warning(f"[generate] unknown timeframe {timeframe!r}, falling back to {tf.value}")
    params = params_for(tf)
    rng = rng if rng is not None else make_rng()
    now = now if now is not None else now_ms()

    low, high = config.generation_jitter
    proxy = config.base_proxy_price
    points = []
    for i in range(params.point_count, -1, -1):
        ts = now - i * params.interval_ms
        proxy = next_proxy_price(proxy, rng, config)
        price = token_price_from_proxy(proxy, rng.uniform(low, high), config)
        points.append(SamplePoint(
            timestamp=ts,
            label=format_label(ts, tf, config.display_timezone),
            price=f"{price:.{config.price_decimals}f}",
            secondary_price=f"{proxy:.{config.proxy_decimals}f}",
        ))

    logger.debug(f"[generate] {tf.value}: {len(points)} points, last={points[-1].price}")
    return tuple(points)


def series_to_frame(series: Series, tz=None) -> pd.DataFrame:
    """Tabular view of a series for charts and printouts."""
    columns = ["timestamp", "time", "label", "price", "secondary_price"]
    if not series:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame([p.model_dump() for p in series])
    df["time"] = pd.to_datetime(df["timestamp"], unit="ms", utc=True)
    if tz is not None:
        df["time"] = df["time"].dt.tz_convert(tz)
    df["price"] = df["price"].astype(float)
    df["secondary_price"] = pd.to_numeric(df["secondary_price"], errors="coerce")
    return df[columns]
