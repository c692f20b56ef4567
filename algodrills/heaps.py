"""Binary min-heap and heap-based selection and sorting."""

from __future__ import annotations

import heapq
from collections import Counter
from typing import Iterable


def _sift_down(items: list[int], i: int, size: int) -> None:
    while True:
        left = 2 * i + 1
        right = left + 1
        smallest = i
        if left < size and items[left] < items[smallest]:
            smallest = left
        if right < size and items[right] < items[smallest]:
            smallest = right
        if smallest == i:
            return
        items[i], items[smallest] = items[smallest], items[i]
        i = smallest


def _sift_up(items: list[int], i: int) -> None:
    while i > 0:
        parent = (i - 1) // 2
        if items[i] >= items[parent]:
            return
        items[i], items[parent] = items[parent], items[i]
        i = parent


class MinHeap:
    """An array-backed binary min-heap."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add a value, restoring the heap order."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        smallest = items.pop()
        _sift_down(items, 0, len(items))
        return smallest

    def top(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[int]:
        """Return the values in their array order."""
        return list(self._items)


def heapify(values: Iterable[int]) -> list[int]:
    """Return the values rearranged into min-heap order, bottom up."""
    items = list(values)
    size = len(items)
    for i in reversed(range(size // 2)):
        _sift_down(items, i, size)
    return items


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, keeping only k values in a max-heap."""
    if k < 1:
        raise ValueError("k must be at least 1")
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, -value)
        if len(heap) > k:
            heapq.heappop(heap)
    if len(heap) < k:
        raise ValueError("k is larger than the number of values")
    return -heap[0]


def sort_k_sorted(values: Iterable[int], k: int) -> list[int]:
    """Sort values in which each one is at most k places from its sorted position."""
    if k < 0:
        raise ValueError("k must not be negative")
    heap: list[int] = []
    result = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            result.append(heapq.heappop(heap))
    while heap:
        result.append(heapq.heappop(heap))
    return result


def top_k_frequent(values: Iterable[int], k: int) -> list[int]:
    """Return the k most frequent values, most frequent first; ties go to the larger value."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(values)
    ranked = heapq.nlargest(k, ((freq, value) for value, freq in counts.items()))
    return [value for _, value in ranked]


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort by draining a min-heap."""
    heap = MinHeap(values)
    return [heap.pop() for _ in range(len(heap))]