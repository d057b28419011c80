from __future__ import annotations
import argparse
import threading

import pandas as pd

from ..config import load_config
from ..data.provider import series_to_frame
from ..data.random_source import make_rng
from ..models.series import TimeFrame
from ..session.chart_session import ChartSession, SessionSnapshot


def run(timeframe: str = "24H", ticks: int = 5, interval: float | None = None,
        seed: int | None = None, config_path: str | None = None):
    cfg = load_config(config_path, tick_interval_seconds=interval)
    done = threading.Event()
    seen = []

    def report(snap: SessionSnapshot):
        seen.append(snap)
        stats = snap.stats
        print(f"tick {len(seen)}: ${stats.current_price} "
              f"({stats.percent_change:+.2f}%) sugar ₹{stats.current_secondary_price}/kg")
        if len(seen) >= ticks:
            done.set()

    session = ChartSession(timeframe, config=cfg, rng=make_rng(seed), on_tick=report)
    snap = session.mount()
    with pd.option_context("display.max_rows", 80, "display.width", 120):
        print(series_to_frame(snap.series, tz=cfg.display_timezone)[["label", "price", "secondary_price"]])
    print(f"Timeframe: {snap.timeframe.value}  price: ${snap.stats.current_price}  "
          f"change: {snap.stats.percent_change:+.2f}%")

    try:
        if ticks > 0:
            done.wait(timeout=cfg.tick_interval_seconds * (ticks + 2))
    finally:
        session.close()
    return seen


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Stream a synthetic Sugar Token price series")
    parser.add_argument("--timeframe", default="24H", choices=[tf.value for tf in TimeFrame])
    parser.add_argument("--ticks", type=int, default=5)
    parser.add_argument("--interval", type=float, default=None, help="seconds between ticks")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", default=None, help="YAML file with engine settings")
    args = parser.parse_args()
    run(timeframe=args.timeframe, ticks=args.ticks, interval=args.interval,
        seed=args.seed, config_path=args.config)
