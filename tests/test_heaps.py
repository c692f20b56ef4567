import pytest

from algodrills.heaps import (
    MinHeap,
    heap_sort,
    heapify,
    kth_smallest,
    sort_k_sorted,
    top_k_frequent,
)


def _is_min_heap(items):
    return all(
        items[(i - 1) // 2] <= items[i] for i in range(1, len(items))
    )


def test_min_heap_push_keeps_order():
    heap = MinHeap()
    for value in [100, 18, 12, 4, 3, 10]:
        heap.push(value)
        assert _is_min_heap(heap.items())
    assert heap.top() == 3
    assert len(heap) == 6


def test_min_heap_pops_in_sorted_order():
    values = [100, 18, 12, 4, 3, 10]
    heap = MinHeap(values)
    popped = []
    while len(heap):
        popped.append(heap.pop())
        assert _is_min_heap(heap.items())
    assert popped == sorted(values)


def test_min_heap_empty_raises():
    heap = MinHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.top()


def test_heapify_produces_heap_with_same_values():
    values = [10, 2, 14, 11, 1, 4]
    result = heapify(values)
    assert _is_min_heap(result)
    assert sorted(result) == sorted(values)
    assert result[0] == min(values)


def test_heapify_empty():
    assert heapify([]) == []


@pytest.mark.parametrize("k", [1, 3, 5, 9])
def test_kth_smallest_matches_sorted(k):
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert kth_smallest(values, k) == sorted(values)[k - 1]


def test_kth_smallest_out_of_range():
    with pytest.raises(ValueError):
        kth_smallest([1, 2], 3)
    with pytest.raises(ValueError):
        kth_smallest([1, 2], 0)


def test_sort_k_sorted():
    values = [6, 5, 3, 2, 8, 10, 9]
    assert sort_k_sorted(values, 3) == sorted(values)


def test_sort_k_sorted_negative_k():
    with pytest.raises(ValueError):
        sort_k_sorted([1], -1)


def test_top_k_frequent_orders_by_frequency():
    values = [1, 1, 1, 2, 3, 3, 4, 4, 4, 4]
    assert top_k_frequent(values, 4) == [4, 1, 3, 2]
    assert top_k_frequent(values, 2) == top_k_frequent(values, 4)[:2]


def test_top_k_frequent_zero():
    assert top_k_frequent([1, 2, 2], 0) == []


def test_heap_sort():
    values = [10, 1, 2, 20, 5, 8]
    assert heap_sort(values) == sorted(values)
    assert heap_sort([]) == []