"""Background loop that snapshots and resets stats every metric interval."""

from __future__ import annotations

import threading
from typing import Callable

from ptp_stats.lib.logger import get_logger
from ptp_stats.reporter.interface import ReporterError, Stats

logger = get_logger(__name__)


class MetricsLoop:
    """Drive ``snapshot`` then ``reset`` on a fixed interval.

    ``before_snapshot`` runs first on every tick; servers use it to refresh
    gauges such as the UTC offset or per-worker subscription inventory.
    """

    def __init__(
        self,
        stats: Stats,
        interval: float,
        before_snapshot: Callable[[Stats], None] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._stats = stats
        self._interval = interval
        self._before_snapshot = before_snapshot
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def tick(self) -> None:
        if self._before_snapshot is not None:
            try:
                self._before_snapshot(self._stats)
            except Exception:
                logger.exception("stats.loop.hook_failed")
        self._stats.snapshot()
        self._stats.reset()

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            self.tick()

    def start(self) -> None:
        if self._thread is not None:
            raise ReporterError("Metrics loop already started")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="ptp-stats-loop", daemon=True)
        self._thread.start()
        logger.info("stats.loop.start", extra={"interval_seconds": self._interval})

    def stop(self, timeout: float | None = None) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join(timeout)
        self._thread = None
        logger.info("stats.loop.stop")
