from __future__ import annotations
import threading
from typing import Callable

from ..utils.logger import get_logger

logger = get_logger(__name__)


class PeriodicTicker:
    """Calls ``callback`` every ``interval`` seconds on a daemon thread.

    Callbacks run one at a time on the ticker's own thread, so two ticks of
    the same ticker never overlap. ``cancel()`` wakes the loop at once; a
    callback already underway is allowed to finish.
    """

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "ticker"):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.callback = callback
        self.name = name
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self.fired = 0

    def start(self):
        self._thread.start()
        logger.debug(f"[PeriodicTicker.start] {self.name} every {self.interval}s")

    def cancel(self):
        self._stop.set()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: float | None = None):
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self):
        while not self._stop.wait(self.interval):
            try:
                self.callback()
                self.fired += 1
            except Exception as e:
                logger.exception(f"[PeriodicTicker] {self.name} callback failed: {e}")
