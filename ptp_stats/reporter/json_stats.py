"""Pull-based reporter serving the last snapshot as JSON over HTTP."""

from __future__ import annotations

import threading
import time
from typing import Dict

import uvicorn

from ptp_stats.lib.logger import get_logger
from ptp_stats.lib.metrics import StatsRegistry
from ptp_stats.reporter.interface import ReporterError
from ptp_stats.reporter.routes import create_app

logger = get_logger(__name__)


class JSONStats(StatsRegistry):
    """Counter registry that keeps a reportable snapshot and serves it over HTTP.

    Mutators write to the live tables. ``snapshot`` copies them into a fresh
    registry which ``report`` and the HTTP endpoint read from, so readers
    never see counters mid-reset.
    """

    def __init__(self, host: str = "0.0.0.0") -> None:
        super().__init__()
        self.host = host
        self._report_lock = threading.Lock()
        self._report = StatsRegistry()
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self.port: int | None = None

    def snapshot(self) -> StatsRegistry:
        report = self.copy()
        with self._report_lock:
            self._report = report
        return report

    def report(self) -> Dict[str, int]:
        with self._report_lock:
            report = self._report
        return report.export()

    def _serve(self, server: uvicorn.Server) -> None:
        try:
            server.run()
        except SystemExit as exc:
            # uvicorn calls sys.exit when startup fails.
            logger.error("stats.reporter.exit", extra={"code": exc.code})

    def start(self, monitoring_port: int, timeout: float = 5.0) -> None:
        """Serve ``report()`` over HTTP, returning once the port is bound.

        Raises ``ReporterError`` when already running or when the server
        does not come up within ``timeout`` seconds.
        """

        if self._thread is not None:
            raise ReporterError("Stats reporter already started")

        config = uvicorn.Config(
            create_app(self),
            host=self.host,
            port=monitoring_port,
            log_config=None,
            access_log=False,
        )
        server = uvicorn.Server(config)
        thread = threading.Thread(target=self._serve, args=(server,), name="ptp-stats-http", daemon=True)
        thread.start()

        deadline = time.monotonic() + timeout
        while not server.started and thread.is_alive() and time.monotonic() < deadline:
            time.sleep(0.01)

        if not server.started:
            server.should_exit = True
            thread.join(timeout)
            logger.error(
                "stats.reporter.start_failed",
                extra={"host": self.host, "port": monitoring_port},
            )
            raise ReporterError(f"Stats reporter failed to bind {self.host}:{monitoring_port}")

        self._server = server
        self._thread = thread
        self.port = server.servers[0].sockets[0].getsockname()[1]
        logger.info(
            "stats.reporter.start",
            extra={"host": self.host, "port": self.port},
        )

    def stop(self, timeout: float = 5.0) -> None:
        if self._server is None or self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning("stats.reporter.stop_timeout", extra={"port": self.port})
            return
        logger.info("stats.reporter.stop", extra={"port": self.port})
        self._server = None
        self._thread = None
        self.port = None
