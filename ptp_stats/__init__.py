"""Thread-safe counter registry and reporters for a PTP unicast server."""

from ptp_stats.lib.counters import KeyedCounterTable
from ptp_stats.lib.metrics import StatsRegistry
from ptp_stats.protocol import MessageType, message_type_name

__all__ = ["KeyedCounterTable", "MessageType", "StatsRegistry", "message_type_name"]
