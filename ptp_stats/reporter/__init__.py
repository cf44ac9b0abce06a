"""Reporter package: stats contract, JSON HTTP reporter and snapshot loop."""

from ptp_stats.reporter.interface import ReporterError, ReportSource, Stats
from ptp_stats.reporter.json_stats import JSONStats
from ptp_stats.reporter.loop import MetricsLoop
from ptp_stats.reporter.routes import create_app

__all__ = ["JSONStats", "MetricsLoop", "ReportSource", "ReporterError", "Stats", "create_app"]
