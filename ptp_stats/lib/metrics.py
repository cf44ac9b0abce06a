"""In-memory counter registry for PTP server traffic and worker state."""

from __future__ import annotations

import threading
from typing import Dict

from ptp_stats.lib.counters import KeyedCounterTable
from ptp_stats.protocol import message_type_name

_MESSAGE_TYPE_PREFIXES = (
    ("subscriptions", "subscriptions"),
    ("rx", "rx"),
    ("tx", "tx"),
    ("rx_signaling", "rx.signaling"),
    ("tx_signaling", "tx.signaling"),
)

_WORKER_SUFFIXES = (
    ("worker_queue", "queue"),
    ("worker_subs", "subscriptions"),
    ("txts_attempts", "txtsattempts"),
)


class StatsRegistry:
    """Eight independent counter tables plus the current UTC offset.

    Message-type tables and worker tables share integer keys but never
    each other's keyspace. ``reset`` and ``copy`` walk the tables one at a
    time, so readers may observe some categories before others.
    """

    def __init__(self) -> None:
        self.subscriptions = KeyedCounterTable()
        self.rx = KeyedCounterTable()
        self.tx = KeyedCounterTable()
        self.rx_signaling = KeyedCounterTable()
        self.tx_signaling = KeyedCounterTable()
        self.worker_queue = KeyedCounterTable()
        self.worker_subs = KeyedCounterTable()
        self.txts_attempts = KeyedCounterTable()
        self._utcoffset_lock = threading.Lock()
        self._utcoffset = 0

    def _tables(self) -> tuple[KeyedCounterTable, ...]:
        return (
            self.subscriptions,
            self.rx,
            self.tx,
            self.rx_signaling,
            self.tx_signaling,
            self.worker_queue,
            self.worker_subs,
            self.txts_attempts,
        )

    def reset(self) -> None:
        for table in self._tables():
            table.reset_all()
        with self._utcoffset_lock:
            self._utcoffset = 0

    def inc_subscription(self, message_type: int) -> None:
        self.subscriptions.increment(message_type)

    def inc_rx(self, message_type: int) -> None:
        self.rx.increment(message_type)

    def inc_tx(self, message_type: int) -> None:
        self.tx.increment(message_type)

    def inc_rx_signaling(self, message_type: int) -> None:
        self.rx_signaling.increment(message_type)

    def inc_tx_signaling(self, message_type: int) -> None:
        self.tx_signaling.increment(message_type)

    def inc_worker_subs(self, worker_id: int) -> None:
        self.worker_subs.increment(worker_id)

    def dec_subscription(self, message_type: int) -> None:
        self.subscriptions.decrement(message_type)

    def dec_rx(self, message_type: int) -> None:
        self.rx.decrement(message_type)

    def dec_tx(self, message_type: int) -> None:
        self.tx.decrement(message_type)

    def dec_rx_signaling(self, message_type: int) -> None:
        self.rx_signaling.decrement(message_type)

    def dec_tx_signaling(self, message_type: int) -> None:
        self.tx_signaling.decrement(message_type)

    def dec_worker_subs(self, worker_id: int) -> None:
        self.worker_subs.decrement(worker_id)

    def set_max_worker_queue(self, worker_id: int, queue: int) -> None:
        self.worker_queue.set(worker_id, queue)

    def set_max_txts_attempts(self, worker_id: int, retries: int) -> None:
        """Record the retries needed to fetch the latest TX timestamp."""

        self.txts_attempts.set(worker_id, retries)

    def set_utc_offset(self, utcoffset: int) -> None:
        with self._utcoffset_lock:
            self._utcoffset = int(utcoffset)

    def get_utc_offset(self) -> int:
        with self._utcoffset_lock:
            return self._utcoffset

    def copy(self) -> "StatsRegistry":
        """Return a fresh registry holding a point-in-time copy of this one."""

        clone = StatsRegistry()
        for source, target in zip(self._tables(), clone._tables()):
            source.copy_into(target)
        clone.set_utc_offset(self.get_utc_offset())
        return clone

    def export(self) -> Dict[str, int]:
        """Flatten every table into dotted metric names.

        ``utcoffset`` is always present; other names only appear once the
        underlying key has been written.
        """

        result: Dict[str, int] = {}

        for attr, prefix in _MESSAGE_TYPE_PREFIXES:
            table: KeyedCounterTable = getattr(self, attr)
            for key, value in table.items():
                result[f"{prefix}.{message_type_name(key).lower()}"] = value

        for attr, suffix in _WORKER_SUFFIXES:
            table = getattr(self, attr)
            for worker_id, value in table.items():
                result[f"worker.{worker_id:d}.{suffix}"] = value

        result["utcoffset"] = self.get_utc_offset()
        return result
