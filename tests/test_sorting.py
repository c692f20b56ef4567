import random

import pytest

from algodrills.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_INPUTS = [
    [3, 4, 7, 4, 2, 1, 5, 3, 54, 2],
    [5, 3, 9, 3, 2, 4, 8, 7],
    [2, 4, 7, 9, 1, 3, 5, 8],
    [1, 7, 3, 8, 4, 6, 2, 10, 44, 21],
    [6, 2, 1, 5, 3, 4, 9, 7, 8],
    [1, 5, 2, 6, 4, 8, 3, 7, 9],
    [],
    [0],
]


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_source_examples(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert counting_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_random_inputs():
    rng = random.Random(1234)
    for _ in range(30):
        values = [rng.randint(0, 50) for _ in range(rng.randint(0, 40))]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert counting_sort(values) == expected
        assert insertion_sort(values) == expected
        assert merge_sort(values) == expected
        assert quick_sort(values) == expected
        assert selection_sort(values) == expected


def test_input_left_unchanged():
    values = [9, 1, 8, 2, 7, 3]
    copy = list(values)
    expected = sorted(copy)
    assert bubble_sort(values) == expected
    assert values == copy
    assert counting_sort(values) == expected
    assert values == copy
    assert insertion_sort(values) == expected
    assert values == copy
    assert merge_sort(values) == expected
    assert values == copy
    assert quick_sort(values) == expected
    assert values == copy
    assert selection_sort(values) == expected
    assert values == copy


def test_negative_values():
    values = [-3, 5, -10, 0, 2, -3]
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_counting_sort_rejects_negatives():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_sorted_and_reversed_inputs():
    values = list(range(20))
    assert bubble_sort(values) == values
    assert bubble_sort(reversed(values)) == values
    assert counting_sort(values) == values
    assert counting_sort(reversed(values)) == values
    assert insertion_sort(values) == values
    assert insertion_sort(reversed(values)) == values
    assert merge_sort(values) == values
    assert merge_sort(reversed(values)) == values
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values
    assert selection_sort(values) == values
    assert selection_sort(reversed(values)) == values


def test_bucket_sort():
    rng = random.Random(7)
    values = [rng.random() for _ in range(50)]
    assert bucket_sort(values) == sorted(values)
    assert bucket_sort([]) == []


def test_bucket_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        bucket_sort([0.5, 1.0])
    with pytest.raises(ValueError):
        bucket_sort([-0.1, 0.2])