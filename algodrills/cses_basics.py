"""Counting, string and number problems from the CSES set and a few contest tasks."""

from __future__ import annotations

import math
from collections import Counter
from itertools import groupby
from typing import Iterable, Optional, Sequence

_MAX_TIME = 10**18


def creating_strings(text: str) -> list[str]:
    """Return every distinct arrangement of the characters of text, sorted."""
    chars = list(text)
    found: set[str] = set()

    def walk(i: int) -> None:
        if i == len(chars):
            found.add("".join(chars))
            return
        seen: set[str] = set()
        for idx in range(i, len(chars)):
            if chars[idx] in seen:
                continue
            seen.add(chars[idx])
            chars[i], chars[idx] = chars[idx], chars[i]
            walk(i + 1)
            chars[i], chars[idx] = chars[idx], chars[i]

    walk(0)
    return sorted(found)


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many different values there are."""
    return len(set(values))


def factory_machines(times: Sequence[int], target: int) -> int:
    """Shortest time in which machines taking times[i] per product make target products."""
    if not times:
        raise ValueError("at least one machine is needed")
    if any(t <= 0 for t in times):
        raise ValueError("machine times must be positive")
    low, high = 1, _MAX_TIME
    answer = high
    while low <= high:
        mid = low + (high - low) // 2
        made = 0
        for t in times:
            made += mid // t
            if made >= target:
                break
        if made >= target:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def minimizing_coins(coins: Sequence[int], total: int) -> int:
    """Fewest coins summing to total, each value usable any number of times; -1 if impossible."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(c <= 0 for c in coins):
        raise ValueError("coin values must be positive")
    best = [0] + [math.inf] * total
    for amount in range(1, total + 1):
        best[amount] = min(
            (best[amount - c] + 1 for c in coins if c <= amount),
            default=math.inf,
        )
    return -1 if best[total] == math.inf else int(best[total])


def palindrome_reorder(text: str) -> Optional[str]:
    """Rearrange text into a palindrome, or return None when no arrangement is one."""
    counts = Counter(text)
    odd = [ch for ch, c in counts.items() if c % 2]
    if len(odd) >= 2:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]


def beautiful_permutation(n: int) -> Optional[list[int]]:
    """A permutation of 1..n with no adjacent values differing by one, or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n in (2, 3):
        return None
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def longest_repetition(text: str) -> int:
    """Length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=0)


def _can_finish(counts: Counter, last: Optional[str], length: int) -> bool:
    for ch, c in counts.items():
        if c > (length + 1) // 2:
            return False
        if ch == last and c > length // 2:
            return False
    return True


def string_reorder(text: str) -> Optional[str]:
    """Smallest rearrangement with no two equal neighbours, or None if there is none."""
    counts = Counter(text)
    if not _can_finish(counts, None, len(text)):
        return None
    result: list[str] = []
    last: Optional[str] = None
    for remaining in range(len(text) - 1, -1, -1):
        for ch in sorted(c for c, k in counts.items() if k > 0):
            if ch == last:
                continue
            counts[ch] -= 1
            if _can_finish(counts, ch, remaining):
                result.append(ch)
                last = ch
                break
            counts[ch] += 1
        else:
            return None
    return "".join(result)


def two_sets(n: int) -> Optional[tuple[list[int], list[int]]]:
    """Split 1..n into two sets of equal sum, largest numbers first, or None."""
    if n < 1:
        raise ValueError("n must be at least 1")
    total = n * (n + 1) // 2
    if total % 2:
        return None
    target = total // 2
    first: list[int] = []
    second: list[int] = []
    for i in range(n, 0, -1):
        if target >= i:
            target -= i
            first.append(i)
        else:
            second.append(i)
    return first, second


def weird_algorithm(n: int) -> list[int]:
    """The sequence that halves even numbers and maps odd x to 3x + 1, ending at 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    sequence = []
    while n != 1:
        sequence.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    sequence.append(1)
    return sequence


def _divisors(num: int) -> set[int]:
    found = set()
    for d in range(1, math.isqrt(num) + 1):
        if num % d == 0:
            found.add(d)
            found.add(num // d)
    return found


def min_operations(values: Sequence[int]) -> int:
    """Number of values minus the most values any single divisor divides."""
    if any(v <= 0 for v in values):
        raise ValueError("values must be positive")
    freq: Counter = Counter()
    for v in values:
        freq.update(_divisors(v))
    return len(values) - max(freq.values(), default=0)


def halloumi_boxes(values: Sequence[int], k: int) -> bool:
    """Tell whether reversing subarrays of length at most k can sort values."""
    if k >= 2:
        return True
    if k == 1:
        return all(a <= b for a, b in zip(values, values[1:]))
    return False


def is_clean_palindrome(text: str) -> bool:
    """Tell whether the letters and digits of text, lower-cased, read the same both ways."""
    clean = "".join(ch.lower() for ch in text if ch.isalnum())
    return clean == clean[::-1]