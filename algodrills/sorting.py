"""Classic sorting algorithms; each returns a new sorted list."""

from __future__ import annotations

from typing import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeated adjacent swaps, stopping once a pass swaps nothing."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    freq = [0] * (max(items) + 1)
    for v in items:
        freq[v] += 1
    for i in range(1, len(freq)):
        freq[i] += freq[i - 1]
    result = [0] * len(items)
    for v in reversed(items):
        freq[v] -= 1
        result[freq[v]] = v
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], first: int, last: int) -> int:
    pivot = items[last]
    i = first - 1
    for j in range(first, last):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[last] = items[last], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    stack = [(0, len(items) - 1)]
    while stack:
        first, last = stack.pop()
        if first >= last:
            continue
        pi = _partition(items, first, last)
        stack.append((first, pi - 1))
        stack.append((pi + 1, last))
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the minimum of the unsorted suffix to its front."""
    items = list(values)
    n = len(items)
    for i in range(n):
        min_idx = min(range(i, n), key=items.__getitem__)
        if min_idx != i:
            items[i], items[min_idx] = items[min_idx], items[i]
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by spreading them over one bucket per element."""
    items = list(values)
    size = len(items)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for v in items:
        if not 0 <= v < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {v!r}")
        buckets[int(v * size)].append(v)
    return [v for bucket in buckets for v in insertion_sort(bucket)]