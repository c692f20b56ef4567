"""Small recursion exercises: number puzzles, subsets and combinations."""

from __future__ import annotations

import math
from itertools import product
from typing import Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")

KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero if either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a * (b // gcd(a, b)))


def tokenize(text: str, sep: str) -> list[str]:
    """Split text on sep; a trailing empty piece is dropped."""
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def alternate_sum(n: int) -> int:
    """Return 1 - 2 + 3 - 4 ... up to n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return sum(i if i % 2 else -i for i in range(1, n + 1))


def is_armstrong(n: int) -> bool:
    """Tell whether n equals the sum of its digits each raised to the digit count."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = str(n)
    power = len(digits)
    return sum(int(d) ** power for d in digits) == n


def is_palindrome_number(num: int) -> bool:
    """Tell whether the decimal digits of num read the same both ways."""
    if num < 0:
        return False
    digits = str(num)
    return digits == digits[::-1]


def count_paths(n: int, m: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an n x m grid."""
    if n <= 0 or m <= 0:
        return 0
    return math.comb(n + m - 2, n - 1)


def contains(values: Iterable[T], target: T) -> bool:
    """Tell whether target is among values."""
    return any(v == target for v in values)


def find_max(values: Iterable[int]) -> int:
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("find_max of an empty sequence")
    return max(items)


def frog_jump(heights: Sequence[int]) -> int:
    """Minimum total cost to reach the last stone, jumping one or two at a time."""
    n = len(heights)
    if n == 0:
        raise ValueError("frog_jump needs at least one stone")
    if n == 1:
        return 0
    after_next, nxt = 0, abs(heights[n - 2] - heights[n - 1])
    for i in range(n - 3, -1, -1):
        cost = min(
            abs(heights[i] - heights[i + 1]) + nxt,
            abs(heights[i] - heights[i + 2]) + after_next,
        )
        after_next, nxt = nxt, cost
    return nxt


def multiples(n: int, k: int) -> list[int]:
    """Return the first k multiples of n."""
    return [n * i for i in range(1, k + 1)]


def keypad_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad gives for digits; 0 and 1 add nothing."""
    groups = []
    for ch in digits:
        if not ch.isdigit():
            raise ValueError(f"not a digit: {ch!r}")
        letters = KEYPAD[int(ch)]
        if letters:
            groups.append(letters)
    return ["".join(combo) for combo in product(*groups)]


def _choices(values: Sequence[T], include_first: bool) -> Iterator[tuple[T, ...]]:
    chosen: list[T] = []
    order = (True, False) if include_first else (False, True)

    def walk(i: int) -> Iterator[tuple[T, ...]]:
        if i == len(values):
            yield tuple(chosen)
            return
        for take in order:
            if take:
                chosen.append(values[i])
                yield from walk(i + 1)
                chosen.pop()
            else:
                yield from walk(i + 1)

    return walk(0)


def all_subsets(values: Sequence[T], include_first: bool = False) -> list[list[T]]:
    """Return every subset in recursion order; include_first picks before skipping."""
    return [list(c) for c in _choices(values, include_first)]


def increasing_sequence(n: int) -> list[int]:
    """Return 1, 2, ..., n."""
    return list(range(1, n + 1))


def remove_char(text: str, ch: str = "a") -> str:
    """Return text with every occurrence of ch removed."""
    return "".join(c for c in text if c != ch)


def subsequences(text: str, include_first: bool = False) -> list[str]:
    """Return every subsequence in recursion order; include_first picks before skipping."""
    return ["".join(c) for c in _choices(text, include_first)]


def subset_sums(values: Sequence[int]) -> list[int]:
    """Return the sum of every subset, in the order all_subsets gives them."""
    return [sum(c) for c in _choices(values, False)]


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of n."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    while n > 9:
        n, digit = divmod(n, 10)
        total += digit
    return total + n