"""Capability surface every stats reporter must provide."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class ReporterError(RuntimeError):
    """Raised when a reporter is driven outside its lifecycle."""


@runtime_checkable
class Stats(Protocol):
    """Metric collection interface driven by the PTP server and a reporting loop."""

    def start(self, monitoring_port: int) -> None:
        """Begin serving or pushing reports using ``monitoring_port``."""

    def snapshot(self) -> Any:
        """Capture current values so they can be reported consistently."""

    def reset(self) -> None:
        """Zero every counter and the UTC offset."""

    def inc_subscription(self, message_type: int) -> None: ...

    def inc_rx(self, message_type: int) -> None: ...

    def inc_tx(self, message_type: int) -> None: ...

    def inc_rx_signaling(self, message_type: int) -> None: ...

    def inc_tx_signaling(self, message_type: int) -> None: ...

    def inc_worker_subs(self, worker_id: int) -> None: ...

    def dec_subscription(self, message_type: int) -> None: ...

    def dec_rx(self, message_type: int) -> None: ...

    def dec_tx(self, message_type: int) -> None: ...

    def dec_rx_signaling(self, message_type: int) -> None: ...

    def dec_tx_signaling(self, message_type: int) -> None: ...

    def dec_worker_subs(self, worker_id: int) -> None: ...

    def set_max_worker_queue(self, worker_id: int, queue: int) -> None: ...

    def set_max_txts_attempts(self, worker_id: int, retries: int) -> None: ...

    def set_utc_offset(self, utcoffset: int) -> None: ...


class ReportSource(Protocol):
    """Anything able to hand out the flattened export of its last snapshot."""

    def report(self) -> dict[str, int]: ...
