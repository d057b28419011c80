from __future__ import annotations
import threading
from typing import Callable, NamedTuple, Optional

from ..config import DEFAULT_CONFIG, EngineConfig
from ..data.provider import generate
from ..data.random_source import UniformSource, make_rng
from ..data.updater import compute_stats, tick
from ..models.series import DisplayStats, Series, TimeFrame
from ..utils.logger import get_logger
from .ticker import PeriodicTicker

logger = get_logger(__name__)


class SessionSnapshot(NamedTuple):
    timeframe: TimeFrame
    series: Series
    stats: DisplayStats
    version: int


class ChartSession:
    """
    One mounted Sugar Token chart.
    - Owns its series, readout and a single periodic ticker.
    - Switching timeframe cancels the ticker, regenerates the series and
      starts a fresh ticker.
    - Ticks from a cancelled ticker are dropped by comparing versions.
    """

    def __init__(self, timeframe=TimeFrame.ONE_DAY, config: EngineConfig = DEFAULT_CONFIG,
                 rng: UniformSource | None = None, clock: Callable[[], int] | None = None,
                 on_tick: Callable[[SessionSnapshot], None] | None = None,
                 autostart: bool = True):
        self.config = config
        self.rng = rng if rng is not None else make_rng()
        self.clock = clock
        self.on_tick = on_tick
        self.autostart = autostart
        self.lock = threading.Lock()
        self.timeframe = TimeFrame.parse(timeframe)
        self.series: Series = ()
        self.stats = DisplayStats.placeholder(f"{config.base_proxy_price:.{config.proxy_decimals}f}")
        self.version = 0
        self._ticker: Optional[PeriodicTicker] = None
        self.closed = False
        self._join_timeout = max(1.0, config.tick_interval_seconds)

    # ---------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------
    def mount(self) -> SessionSnapshot:
        """Generate the first series and start ticking."""
        logger.info(f"[ChartSession.mount] timeframe={self.timeframe.value}")
        return self.switch_timeframe(self.timeframe)

    def switch_timeframe(self, timeframe) -> SessionSnapshot:
        """Replace the series for ``timeframe``; the previous ticker is cancelled first."""
        with self.lock:
            if self.closed:
                raise RuntimeError("session is closed")
            old = self._ticker
            if old is not None:
                old.cancel()
            self.version += 1
            self.timeframe = TimeFrame.parse(timeframe)
            now = self.clock() if self.clock is not None else None
            self.series = generate(self.timeframe, rng=self.rng, now=now, config=self.config)
            self.stats = compute_stats(self.series, self.config)
            new = self._make_ticker(self.version)
            self._ticker = new
            snap = self._snapshot()
        logger.info(f"[ChartSession.switch_timeframe] {self.timeframe.value} "
                    f"version={snap.version} points={len(snap.series)}")

        if old is not None:
            old.join(timeout=self._join_timeout)
        if self.autostart:
            with self.lock:
                # a later switch may already have replaced this ticker
                if self._ticker is new and not self.closed:
                    new.start()
        return snap

    def close(self):
        """Cancel the ticker and drop the series."""
        with self.lock:
            ticker, self._ticker = self._ticker, None
            self.closed = True
            self.version += 1
            self.series = ()
        if ticker is not None:
            ticker.cancel()
            ticker.join(timeout=self._join_timeout)
        logger.info("[ChartSession.close] session closed")

    # ---------------------------------------------------------
    # Ticking
    # ---------------------------------------------------------
    def tick_once(self, version: int | None = None) -> Optional[SessionSnapshot]:
        """
        Apply one tick. ``version`` identifies the ticker that fired; a stale
        version means the timeframe changed since, and the tick is dropped.
        """
        with self.lock:
            if self.closed or (version is not None and version != self.version):
                logger.debug(f"[ChartSession.tick_once] dropping stale tick v{version}")
                return None
            self.series, self.stats = tick(self.series, rng=self.rng, config=self.config)
            snap = self._snapshot()
        if self.on_tick is not None:
            self.on_tick(snap)
        return snap

    def snapshot(self) -> SessionSnapshot:
        with self.lock:
            return self._snapshot()

    @property
    def ticker(self) -> Optional[PeriodicTicker]:
        return self._ticker

    def _snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(self.timeframe, self.series, self.stats, self.version)

    def _make_ticker(self, version: int) -> PeriodicTicker:
        return PeriodicTicker(
            self.config.tick_interval_seconds,
            lambda: self.tick_once(version),
            name=f"sugar-token-{self.timeframe.value}-v{version}",
        )
