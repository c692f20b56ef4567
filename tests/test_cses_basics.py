from itertools import permutations

import pytest

from algodrills.cses_basics import (
    beautiful_permutation,
    creating_strings,
    distinct_numbers,
    factory_machines,
    halloumi_boxes,
    is_clean_palindrome,
    longest_repetition,
    min_operations,
    minimizing_coins,
    palindrome_reorder,
    string_reorder,
    two_sets,
    weird_algorithm,
)


def test_creating_strings_invariants():
    result = creating_strings("aabac")
    assert result == sorted(result)
    assert len(result) == len(set(result))
    assert all(sorted(s) == sorted("aabac") for s in result)
    assert "aaabc" in result and "cbaaa" in result


def test_creating_strings_single_letter_kind():
    assert creating_strings("zzz") == ["zzz"]


def test_distinct_numbers():
    assert distinct_numbers([5] * 10) == 1
    assert distinct_numbers([]) == 0
    assert distinct_numbers(range(7)) == 7


@pytest.mark.parametrize("times,target", [([3, 2, 5], 7), ([1], 10), ([4, 9, 11], 100)])
def test_factory_machines_is_minimal(times, target):
    t = factory_machines(times, target)
    assert sum(t // k for k in times) >= target
    assert sum((t - 1) // k for k in times) < target


def test_factory_machines_errors():
    with pytest.raises(ValueError):
        factory_machines([], 3)
    with pytest.raises(ValueError):
        factory_machines([0, 2], 3)


def test_minimizing_coins():
    assert minimizing_coins([1, 5, 7], 11) == 3
    assert minimizing_coins([1], 9) == 9
    assert minimizing_coins([2], 3) == -1
    assert minimizing_coins([4, 6], 0) == 0


def test_minimizing_coins_rejects_zero_coin():
    with pytest.raises(ValueError):
        minimizing_coins([0, 1], 5)


@pytest.mark.parametrize("text", ["AAAACACBA", "aabb", "x", ""])
def test_palindrome_reorder_gives_palindrome(text):
    result = palindrome_reorder(text)
    assert result == result[::-1]
    assert sorted(result) == sorted(text)


def test_palindrome_reorder_impossible():
    assert palindrome_reorder("abc") is None


@pytest.mark.parametrize("n", [1, 4, 5, 8, 11])
def test_beautiful_permutation(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_impossible(n):
    assert beautiful_permutation(n) is None


def test_longest_repetition():
    assert longest_repetition("ATTCGGGA") == 3
    assert longest_repetition("aaaa") == 4
    assert longest_repetition("") == 0


@pytest.mark.parametrize("text", ["abb", "aabbc", "aab", "bbaac"])
def test_string_reorder_is_smallest_valid(text):
    valid = [
        "".join(p)
        for p in set(permutations(text))
        if all(a != b for a, b in zip(p, p[1:]))
    ]
    assert string_reorder(text) == min(valid)


def test_string_reorder_impossible():
    assert string_reorder("aaa") is None
    assert string_reorder("aaab") is None


def test_two_sets_split():
    first, second = two_sets(7)
    assert sum(first) == sum(second)
    assert sorted(first + second) == list(range(1, 8))


def test_two_sets_odd_total():
    assert two_sets(6) is None


def test_weird_algorithm():
    assert weird_algorithm(3) == [3, 10, 5, 16, 8, 4, 2, 1]
    assert weird_algorithm(1) == [1]
    with pytest.raises(ValueError):
        weird_algorithm(0)


def test_min_operations():
    assert min_operations([2, 4, 6]) == 0
    assert min_operations([7, 9, 11]) == 0
    assert min_operations([]) == 0
    with pytest.raises(ValueError):
        min_operations([3, 0])


def test_halloumi_boxes():
    assert halloumi_boxes([3, 1, 2], 2) is True
    assert halloumi_boxes([1, 2, 2, 5], 1) is True
    assert halloumi_boxes([2, 1], 1) is False
    assert halloumi_boxes([1, 2], 0) is False


def test_is_clean_palindrome():
    assert is_clean_palindrome("A man, a plan, a canal: Panama") is True
    assert is_clean_palindrome("amanaplanacanalpanama") is True
    assert is_clean_palindrome("race a car") is False