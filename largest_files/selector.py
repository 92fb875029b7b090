from __future__ import annotations

"""
Bounded top-K selection over FileRecord streams.

TopKSelector keeps the `capacity` largest records it has been offered, using a
min-heap so the smallest retained record is always at the root. Each offer is
O(log capacity); memory never grows past `capacity` records.
"""

import heapq
import itertools
from typing import List, Optional, Tuple

from .models import FileRecord


# (size, -insertion_seq, record): among equal sizes the newest sorts lowest,
# so it is the first to be evicted and older records win ties.
_HeapItem = Tuple[int, int, FileRecord]


class TopKSelector:
    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._heap: List[_HeapItem] = []
        self._seq = itertools.count()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"TopKSelector(capacity={self._capacity}, count={len(self._heap)})"

    def is_full(self) -> bool:
        return len(self._heap) >= self._capacity

    def peek_min(self) -> Optional[FileRecord]:
        """Smallest retained record, or None when nothing is retained."""
        if not self._heap:
            return None
        return self._heap[0][2]

    def offer(self, record: FileRecord) -> bool:
        """
        Offer a record. Returns True if it was retained.

        When full, the record replaces the current minimum only if it is
        strictly larger; an equal size is discarded.
        """
        item = (record.size, -next(self._seq), record)
        if len(self._heap) < self._capacity:
            heapq.heappush(self._heap, item)
            return True
        if record.size > self._heap[0][0]:
            heapq.heapreplace(self._heap, item)
            return True
        return False

    def finalize(self) -> List[FileRecord]:
        """
        Return retained records sorted by size descending and empty the selector.

        Equal sizes keep insertion order.
        """
        items = sorted(self._heap, key=lambda it: (-it[0], -it[1]))
        self._heap = []
        return [it[2] for it in items]
