"""Standalone entrypoint: serve PTP stats and roll snapshots periodically."""

from __future__ import annotations

import threading

from ptp_stats.config import Settings, get_settings
from ptp_stats.lib.logger import configure_logging, get_logger
from ptp_stats.reporter.json_stats import JSONStats
from ptp_stats.reporter.loop import MetricsLoop

logger = get_logger(__name__)


def build_reporter(settings: Settings) -> tuple[JSONStats, MetricsLoop]:
    """Create the reporter and its metrics loop without starting either."""

    stats = JSONStats(host=settings.monitoring_host)
    loop = MetricsLoop(stats, settings.metric_interval_seconds)
    return stats, loop


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    stats, loop = build_reporter(settings)
    stats.start(settings.monitoring_port)
    loop.start()

    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        logger.info("stats.shutdown")
    finally:
        loop.stop()
        stats.stop()


if __name__ == "__main__":
    main()
