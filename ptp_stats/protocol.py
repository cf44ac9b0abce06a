"""PTPv2 message-type codes used to key the per-message counters."""

from __future__ import annotations

from enum import IntEnum


class MessageType(IntEnum):
    SYNC = 0x0
    DELAY_REQ = 0x1
    PDELAY_REQ = 0x2
    PDELAY_RESP = 0x3
    FOLLOW_UP = 0x8
    DELAY_RESP = 0x9
    PDELAY_RESP_FOLLOW_UP = 0xA
    ANNOUNCE = 0xB
    SIGNALING = 0xC
    MANAGEMENT = 0xD


def message_type_name(code: int) -> str:
    """Return the textual name for a message-type code.

    Unknown codes fall back to their decimal value.
    """

    try:
        return MessageType(code).name
    except ValueError:
        return str(int(code))
