"""Backtracking searches: combinations, permutations, tours, queens, mazes and sudoku."""

from __future__ import annotations

from typing import Iterable, Iterator, MutableSequence, Sequence

_KNIGHT_MOVES = ((-1, 2), (1, 2), (-2, 1), (2, 1), (-1, -2), (1, -2), (-2, -1), (2, -1))
_MAZE_MOVES = ((0, -1), (-1, 0), (0, 1), (1, 0))  # left, up, right, down


def _combinations(candidates: Iterable[int], target: int, reuse: bool) -> list[list[int]]:
    items = sorted(candidates)
    if any(c <= 0 for c in items):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def walk(idx: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        if idx == len(items):
            return
        if items[idx] <= remaining:
            chosen.append(items[idx])
            walk(idx if reuse else idx + 1, remaining - items[idx])
            chosen.pop()
        nxt = idx + 1
        while nxt < len(items) and items[nxt] == items[nxt - 1]:
            nxt += 1
        walk(nxt, remaining)

    walk(0, target)
    return result


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct multisets of candidates, each usable any number of times, summing to target."""
    return _combinations(candidates, target, reuse=True)


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations, each candidate used at most once, summing to target."""
    return _combinations(candidates, target, reuse=False)


def knights_tours(n: int, row: int, col: int) -> Iterator[list[list[int]]]:
    """Yield every knight's tour of an n x n board starting at (row, col).

    Each tour is a grid holding the move number at which every square is visited.
    """
    if n < 1:
        raise ValueError("board size must be at least 1")
    if not (0 <= row < n and 0 <= col < n):
        raise ValueError("starting square is off the board")
    grid = [[-1] * n for _ in range(n)]
    last = n * n - 1

    def walk(i: int, j: int, count: int) -> Iterator[list[list[int]]]:
        grid[i][j] = count
        if count == last:
            yield [list(r) for r in grid]
        else:
            for di, dj in _KNIGHT_MOVES:
                ni, nj = i + di, j + dj
                if 0 <= ni < n and 0 <= nj < n and grid[ni][nj] == -1:
                    yield from walk(ni, nj, count + 1)
        grid[i][j] = -1

    return walk(row, col, 0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens, row by row as 'Q'/'.' strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    result: list[list[str]] = []
    placement: list[int] = []
    cols: set[int] = set()
    diag: set[int] = set()
    anti: set[int] = set()

    def walk(r: int) -> None:
        if r == n:
            result.append(["." * c + "Q" + "." * (n - c - 1) for c in placement])
            return
        for c in range(n):
            if c in cols or r - c in diag or r + c in anti:
                continue
            cols.add(c)
            diag.add(r - c)
            anti.add(r + c)
            placement.append(c)
            walk(r + 1)
            placement.pop()
            cols.discard(c)
            diag.discard(r - c)
            anti.discard(r + c)

    walk(0)
    return result


def permutations(text: str) -> list[str]:
    """Return every arrangement of the characters, duplicates included, picking left to right."""
    if not text:
        return [""]
    return [
        ch + rest
        for i, ch in enumerate(text)
        for rest in permutations(text[:i] + text[i + 1:])
    ]


def unique_permutations(text: str) -> list[str]:
    """Return each distinct arrangement of the characters once, in swap order."""
    chars = list(text)
    result: list[str] = []

    def walk(i: int) -> None:
        if i == len(chars):
            result.append("".join(chars))
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
    return result


def rat_in_maze(grid: Sequence[Sequence[int]]) -> int:
    """Count simple paths from the top-left to the bottom-right of a square maze.

    Cells holding 0 are open, any other value is blocked; moves go in four directions.
    """
    cells = [list(r) for r in grid]
    n = len(cells)
    if n == 0:
        return 0
    if any(len(r) != n for r in cells):
        raise ValueError("maze must be square")

    def walk(i: int, j: int) -> int:
        if i == n - 1 and j == n - 1:
            return 1
        cells[i][j] = 2
        total = 0
        for di, dj in _MAZE_MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < n and 0 <= nj < n and cells[ni][nj] == 0:
                total += walk(ni, nj)
        cells[i][j] = 0
        return total

    return walk(0, 0)


def _is_safe(board: Sequence[Sequence[str]], r: int, c: int, digit: str) -> bool:
    if digit in board[r]:
        return False
    if any(board[row][c] == digit for row in range(9)):
        return False
    x, y = r // 3 * 3, c // 3 * 3
    return all(board[row][col] != digit for row in range(x, x + 3) for col in range(y, y + 3))


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the '.' cells of a 9 x 9 board in place; return whether a solution was found."""
    if len(board) != 9 or any(len(r) != 9 for r in board):
        raise ValueError("board must be 9 x 9")

    def walk(pos: int) -> bool:
        if pos == 81:
            return True
        r, c = divmod(pos, 9)
        if board[r][c] != ".":
            return walk(pos + 1)
        for k in "123456789":
            if _is_safe(board, r, c, k):
                board[r][c] = k
                if walk(pos + 1):
                    return True
                board[r][c] = "."
        return False

    return walk(0)