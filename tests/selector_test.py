from __future__ import annotations

import random

import pytest

from largest_files.models import FileRecord
from largest_files.selector import TopKSelector


def rec(name: str, size: int) -> FileRecord:
    return FileRecord(name=name, size=size, path=f"/data/{name}")


def test_scenario_top_three():
    sel = TopKSelector(3)
    for i, size in enumerate([5, 100, 1, 999, 50]):
        sel.offer(rec(f"f{i}", size))
    assert [r.size for r in sel.finalize()] == [999, 100, 50]


@pytest.mark.parametrize("capacity", [0, -1, 1.5, True, "3"])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        TopKSelector(capacity)


def test_fill_below_capacity_inserts_everything():
    sel = TopKSelector(10)
    assert sel.offer(rec("a", 0))
    assert sel.offer(rec("b", 7))
    assert len(sel) == 2
    assert not sel.is_full()
    assert [r.name for r in sel.finalize()] == ["b", "a"]


def test_peek_min_tracks_smallest():
    sel = TopKSelector(2)
    assert sel.peek_min() is None
    sel.offer(rec("a", 30))
    sel.offer(rec("b", 10))
    assert sel.peek_min().name == "b"
    sel.offer(rec("c", 20))
    assert sel.peek_min().name == "c"
    assert len(sel) == 2


def test_smaller_record_is_discarded_when_full():
    sel = TopKSelector(2)
    sel.offer(rec("a", 30))
    sel.offer(rec("b", 20))
    assert sel.offer(rec("c", 5)) is False
    assert {r.name for r in sel.finalize()} == {"a", "b"}


def test_tie_at_boundary_keeps_existing_record():
    sel = TopKSelector(2)
    sel.offer(rec("a", 30))
    sel.offer(rec("b", 20))
    assert sel.offer(rec("c", 20)) is False
    assert [r.name for r in sel.finalize()] == ["a", "b"]


def test_equal_sizes_finalize_in_insertion_order():
    sel = TopKSelector(3)
    for name in ("x", "y", "z"):
        sel.offer(rec(name, 4))
    assert [r.name for r in sel.finalize()] == ["x", "y", "z"]


def test_eviction_among_equal_minimums_keeps_earlier():
    sel = TopKSelector(3)
    sel.offer(rec("first", 1))
    sel.offer(rec("second", 1))
    sel.offer(rec("big", 50))
    assert sel.offer(rec("bigger", 60))
    assert [r.name for r in sel.finalize()] == ["bigger", "big", "first"]


def test_finalize_empties_selector():
    sel = TopKSelector(2)
    sel.offer(rec("a", 1))
    assert len(sel.finalize()) == 1
    assert len(sel) == 0
    assert sel.finalize() == []
    assert sel.peek_min() is None


def test_no_offers_finalizes_to_empty():
    assert TopKSelector(5).finalize() == []


def test_matches_full_sort_on_random_stream():
    rng = random.Random(1234)
    sizes = [rng.randrange(0, 10_000) for _ in range(500)]
    records = [rec(f"f{i}", s) for i, s in enumerate(sizes)]
    sel = TopKSelector(25)
    for r in records:
        sel.offer(r)
        assert len(sel) <= 25
    out = sel.finalize()

    assert len(out) == 25
    assert [r.size for r in out] == sorted(sizes, reverse=True)[:25]
    assert all(a.size >= b.size for a, b in zip(out, out[1:]))
