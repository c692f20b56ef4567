"""Array algorithms: maximum subarray sum and spiral traversal."""

from __future__ import annotations

from typing import Iterable, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Kadane's algorithm; the empty subarray counts, so the result is never negative."""
    current = best = 0
    for v in values:
        current += v
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the matrix elements in clockwise spiral order from the top-left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    direction = 0
    while left <= right and top <= bottom:
        if direction == 0:
            result.extend(matrix[top][j] for j in range(left, right + 1))
            top += 1
        elif direction == 1:
            result.extend(matrix[i][right] for i in range(top, bottom + 1))
            right -= 1
        elif direction == 2:
            result.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        else:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
        direction = (direction + 1) % 4
    return result