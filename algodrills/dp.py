"""Dynamic programming exercises: counting, probabilities, strings and bitmask DP."""

from __future__ import annotations

import math
from functools import cache
from itertools import product
from typing import Sequence

MOD = 1_000_000_007
DICE = (1, 2, 3, 4, 5, 6)
_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def _square(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def dice_combinations(n: int) -> int:
    """Count the ordered dice throws summing to n, modulo 1_000_000_007."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in DICE if face <= total) % MOD
    return ways[n]


def edit_distance(a: str, b: str) -> int:
    """Fewest insertions, deletions and replacements turning a into b, memoised top down."""

    @cache
    def cost(i: int, j: int) -> int:
        if i == len(a):
            return len(b) - j
        if j == len(b):
            return len(a) - i
        if a[i] == b[j]:
            return cost(i + 1, j + 1)
        return 1 + min(cost(i + 1, j + 1), cost(i + 1, j), cost(i, j + 1))

    return cost(0, 0)


def edit_distance_bottom_up(a: str, b: str) -> int:
    """Edit distance computed with a table filled from the ends of both strings."""
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for j in range(m + 1):
        table[n][j] = m - j
    for i in range(n + 1):
        table[i][m] = n - i
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = table[i + 1][j + 1]
            else:
                table[i][j] = 1 + min(table[i + 1][j + 1], table[i + 1][j], table[i][j + 1])
    return table[0][0]


def house_robber(values: Sequence[int]) -> int:
    """Largest sum of values with no two adjacent ones taken, memoised top down."""
    n = len(values)
    if n == 0:
        raise ValueError("house_robber needs at least one house")

    @cache
    def best(i: int) -> int:
        if i == n - 1:
            return values[i]
        if i == n - 2:
            return max(values[n - 1], values[n - 2])
        return max(values[i] + best(i + 2), best(i + 1))

    return best(0)


def house_robber_bottom_up(values: Sequence[int]) -> int:
    """House robber computed from the last house backwards."""
    n = len(values)
    if n == 0:
        raise ValueError("house_robber needs at least one house")
    if n == 1:
        return values[0]
    after_next, nxt = values[n - 1], max(values[n - 1], values[n - 2])
    for i in range(n - 3, -1, -1):
        after_next, nxt = nxt, max(after_next + values[i], nxt)
    return nxt


def coin_heads_probability(probs: Sequence[float]) -> float:
    """Probability that more than half of the coins land heads (at least (n+1)//2)."""
    need = (len(probs) + 1) // 2
    dist = [1.0]
    for p in probs:
        if not 0 <= p <= 1:
            raise ValueError(f"probability out of range: {p!r}")
        nxt = [0.0] * (len(dist) + 1)
        for heads, q in enumerate(dist):
            nxt[heads] += q * (1 - p)
            nxt[heads + 1] += q * p
        dist = nxt
    return sum(dist[need:])


def knight_probability(n: int, row: int, col: int, k: int) -> float:
    """Probability that a knight making k random moves stays on an n x n board."""
    if n < 1:
        raise ValueError("board size must be at least 1")
    if k < 0:
        raise ValueError("k must not be negative")

    @cache
    def stay(i: int, j: int, moves: int) -> float:
        if not (0 <= i < n and 0 <= j < n):
            return 0.0
        if moves == 0:
            return 1.0
        return sum(stay(i + di, j + dj, moves - 1) for di, dj in _KNIGHT_MOVES) / 8

    return stay(row, col, k)


def reduce_number(n: int) -> int:
    """Fewest steps to reach 1 by subtracting one or dividing by 2 or 3, top down."""
    if n < 1:
        raise ValueError("n must be at least 1")

    @cache
    def steps(x: int) -> int:
        if x == 1:
            return 0
        if x in (2, 3):
            return 1
        options = [steps(x - 1)]
        if x % 2 == 0:
            options.append(steps(x // 2))
        if x % 3 == 0:
            options.append(steps(x // 3))
        return 1 + min(options)

    for x in range(1, n, 500):
        steps(x)
    return steps(n)


def reduce_number_bottom_up(n: int) -> int:
    """Reduce-to-one step count computed upwards from 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0] * (n + 1)
    for x in range(2, n + 1):
        best = steps[x - 1]
        if x % 2 == 0:
            best = min(best, steps[x // 2])
        if x % 3 == 0:
            best = min(best, steps[x // 3])
        steps[x] = 1 + best
    return steps[n]


def survival_probabilities(rock: int, scissors: int, paper: int) -> tuple[float, float, float]:
    """Return the chances that rocks, scissors or papers are the last kind standing.

    Two random individuals of different kinds meet at every step; rock beats
    scissors, scissors beat paper and paper beats rock.
    """
    if min(rock, scissors, paper) < 0:
        raise ValueError("counts must not be negative")
    if rock == scissors == paper == 0:
        raise ValueError("at least one individual is needed")
    present = (rock > 0, scissors > 0, paper > 0)
    if sum(present) == 1:
        return tuple(float(p) for p in present)  # type: ignore[return-value]

    reach: dict[tuple[int, int, int], float] = {(rock, scissors, paper): 1.0}
    wins = [0.0, 0.0, 0.0]
    for r, s, p in product(range(rock, -1, -1), range(scissors, -1, -1), range(paper, -1, -1)):
        chance = reach.pop((r, s, p), 0.0)
        if chance == 0.0:
            continue
        if r == 0:
            wins[1] += chance
            continue
        if s == 0:
            wins[2] += chance
            continue
        if p == 0:
            wins[0] += chance
            continue
        meetings = r * s + s * p + r * p
        for state, weight in (((r, s - 1, p), r * s), ((r - 1, s, p), r * p), ((r, s, p - 1), s * p)):
            reach[state] = reach.get(state, 0.0) + chance * weight / meetings
    return wins[0], wins[1], wins[2]


def tourist(grid: Sequence[str]) -> int:
    """Most '*' cells two right/down walks from the top-left to the bottom-right can collect.

    '#' cells are blocked; a cell visited by both walks counts once. Returns 0
    when no walk gets through.
    """
    rows = [str(r) for r in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    n, m = len(rows), len(rows[0])
    if any(len(r) != m for r in rows):
        raise ValueError("grid must be rectangular")

    @cache
    def best(i: int, j: int, x: int) -> float:
        y = i + j - x
        if i >= n or j >= m or x >= n or not 0 <= y < m:
            return -math.inf
        if rows[i][j] == "#" or rows[x][y] == "#":
            return -math.inf
        gain = (rows[i][j] == "*") + (rows[x][y] == "*")
        if i == x and rows[i][j] == "*":
            gain -= 1
        if i == n - 1 and j == m - 1:
            return gain
        return gain + max(
            best(i + 1, j, x + 1),
            best(i + 1, j, x),
            best(i, j + 1, x + 1),
            best(i, j + 1, x),
        )

    result = best(0, 0, 0)
    return 0 if result == -math.inf else int(result)


def longest_common_subsequence(a: str, b: str) -> int:
    """Length of the longest common subsequence, memoised top down."""

    @cache
    def lcs(i: int, j: int) -> int:
        if i == len(a) or j == len(b):
            return 0
        if a[i] == b[j]:
            return 1 + lcs(i + 1, j + 1)
        return max(lcs(i + 1, j), lcs(i, j + 1))

    return lcs(0, 0)


def longest_common_subsequence_bottom_up(a: str, b: str) -> int:
    """Longest common subsequence length from a table filled from the string ends."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = 1 + table[i + 1][j + 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])
    return table[0][0]


def max_grouping_score(compat: Sequence[Sequence[int]]) -> int:
    """Best total of compat[i][j] (i < j) over pairs put in the same group, over all partitions."""
    n = _square(compat)
    full = 1 << n
    pair_sum = [0] * full
    for mask in range(1, full):
        low = (mask & -mask).bit_length() - 1
        rest = mask & (mask - 1)
        pair_sum[mask] = pair_sum[rest] + sum(compat[low][j] for j in range(n) if rest >> j & 1)

    best = [0] * full
    for mask in range(1, full):
        low_bit = mask & -mask
        rest = mask ^ low_bit
        score = 0
        sub = rest
        while True:
            group = sub | low_bit
            score = max(score, pair_sum[group] + best[mask ^ group])
            if sub == 0:
                break
            sub = (sub - 1) & rest
        best[mask] = score
    return best[full - 1]


def count_matchings(compat: Sequence[Sequence[int]]) -> int:
    """Count perfect matchings of men to compatible women, modulo 1_000_000_007."""
    n = _square(compat)
    full = 1 << n
    ways = [0] * full
    ways[0] = 1
    for mask in range(full):
        if not ways[mask]:
            continue
        man = bin(mask).count("1")
        if man == n:
            continue
        for woman in range(n):
            if not mask >> woman & 1 and compat[man][woman]:
                nxt = mask | 1 << woman
                ways[nxt] = (ways[nxt] + ways[mask]) % MOD
    return ways[full - 1]


def tsp(dist: Sequence[Sequence[int]]) -> int:
    """Shortest round trip from city 0 through every city and back."""
    n = _square(dist)
    if n == 0:
        raise ValueError("tsp needs at least one city")
    full = (1 << n) - 1

    @cache
    def tour(curr: int, mask: int) -> float:
        if mask == full:
            return dist[curr][0]
        return min(
            dist[curr][nxt] + tour(nxt, mask | 1 << nxt)
            for nxt in range(n)
            if not mask >> nxt & 1
        )

    return int(tour(0, 1))