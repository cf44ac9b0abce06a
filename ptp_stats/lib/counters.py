"""Lock-guarded integer-keyed counter table."""

from __future__ import annotations

import threading
from typing import Dict, List, Tuple

_INT64_MIN = -(1 << 63)
_UINT64 = 1 << 64


def _wrap_int64(value: int) -> int:
    return (value - _INT64_MIN) % _UINT64 + _INT64_MIN


class KeyedCounterTable:
    """Maps small integer keys to signed 64-bit counters.

    Every operation holds the table lock for its whole duration, so two
    operations on the same table never interleave. Keys appear on first
    write and survive ``reset_all``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: Dict[int, int] = {}

    def increment(self, key: int) -> None:
        with self._lock:
            self._values[key] = _wrap_int64(self._values.get(key, 0) + 1)

    def decrement(self, key: int) -> None:
        with self._lock:
            self._values[key] = _wrap_int64(self._values.get(key, 0) - 1)

    def set(self, key: int, value: int) -> None:
        with self._lock:
            self._values[key] = _wrap_int64(int(value))

    def get(self, key: int) -> int:
        with self._lock:
            return self._values.get(key, 0)

    def keys(self) -> List[int]:
        with self._lock:
            return list(self._values)

    def items(self) -> List[Tuple[int, int]]:
        with self._lock:
            return list(self._values.items())

    def copy_into(self, other: "KeyedCounterTable") -> None:
        """Copy every current key/value pair into ``other``.

        Each key is read and written separately, so concurrent writers on
        either table may interleave with the copy.
        """

        for key in self.keys():
            other.set(key, self.get(key))

    def reset_all(self) -> None:
        with self._lock:
            for key in self._values:
                self._values[key] = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
