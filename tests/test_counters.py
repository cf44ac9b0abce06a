"""Keyed counter table semantics and thread safety."""

from __future__ import annotations

import threading

from ptp_stats.lib.counters import KeyedCounterTable


def test_unwritten_key_reads_zero() -> None:
    table = KeyedCounterTable()

    assert table.get(42) == 0
    assert table.keys() == []
    assert len(table) == 0


def test_increment_and_decrement_create_keys() -> None:
    table = KeyedCounterTable()

    table.increment(1)
    table.decrement(2)
    table.decrement(2)

    assert table.get(1) == 1
    assert table.get(2) == -2
    assert sorted(table.keys()) == [1, 2]


def test_set_overwrites_value() -> None:
    table = KeyedCounterTable()
    table.increment(5)

    table.set(5, 100)
    table.set(6, -3)

    assert table.get(5) == 100
    assert table.get(6) == -3


def test_reset_all_keeps_keys() -> None:
    table = KeyedCounterTable()
    for key in (0, 3, 9):
        table.set(key, key + 10)

    table.reset_all()

    assert sorted(table.keys()) == [0, 3, 9]
    assert all(table.get(key) == 0 for key in (0, 3, 9))


def test_copy_into_matches_source() -> None:
    source = KeyedCounterTable()
    source.set(1, 11)
    source.set(2, 22)
    source.decrement(3)
    target = KeyedCounterTable()
    target.set(4, 44)

    source.copy_into(target)

    for key in source.keys():
        assert target.get(key) == source.get(key)
    assert target.get(4) == 44

    source.increment(1)
    assert target.get(1) == 11


def test_values_wrap_as_signed_64_bit() -> None:
    table = KeyedCounterTable()
    table.set(0, 2**63 - 1)
    table.increment(0)
    assert table.get(0) == -(2**63)

    table.decrement(0)
    assert table.get(0) == 2**63 - 1


def test_concurrent_increments_are_not_lost() -> None:
    table = KeyedCounterTable()
    threads_count = 16
    per_thread = 5000
    barrier = threading.Barrier(threads_count)

    def worker() -> None:
        barrier.wait()
        for _ in range(per_thread):
            table.increment(7)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert table.get(7) == threads_count * per_thread


def test_concurrent_mixed_updates_sum_algebraically() -> None:
    table = KeyedCounterTable()
    barrier = threading.Barrier(8)

    def incrementer() -> None:
        barrier.wait()
        for _ in range(3000):
            table.increment(1)

    def decrementer() -> None:
        barrier.wait()
        for _ in range(2000):
            table.decrement(1)

    threads = [threading.Thread(target=incrementer) for _ in range(4)]
    threads += [threading.Thread(target=decrementer) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert table.get(1) == 4 * 3000 - 4 * 2000
