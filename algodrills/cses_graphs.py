"""Graph and grid problems from the CSES set."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, Sequence

from algodrills.graphs import DisjointSet

_LABYRINTH_MOVES = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is not in 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _bfs(adj: list[list[int]], source: int) -> tuple[list[int], list[int]]:
    dist = [-1] * len(adj)
    parent = [0] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nb in adj[node]:
            if dist[nb] == -1:
                dist[nb] = dist[node] + 1
                parent[nb] = node
                queue.append(nb)
    return dist, parent


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Fewest new roads joining cities 1..n into one network, as pairs of cities."""
    if n < 1:
        raise ValueError("n must be at least 1")
    sets = DisjointSet(n)
    for a, b in roads:
        _check_node(a, n)
        _check_node(b, n)
        sets.union(a, b)
    leaders = []
    seen: set[int] = set()
    for city in range(1, n + 1):
        root = sets.find(city)
        if root not in seen:
            seen.add(root)
            leaders.append(city)
    return list(zip(leaders, leaders[1:]))


def counting_rooms(grid: Sequence[str]) -> int:
    """Count the four-connected regions of '.' floor cells; '#' is wall."""
    rows = len(grid)
    visited: set[tuple[int, int]] = set()
    rooms = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != "." or (i, j) in visited:
                continue
            rooms += 1
            visited.add((i, j))
            stack = [(i, j)]
            while stack:
                x, y = stack.pop()
                for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                    if (
                        0 <= nx < rows
                        and 0 <= ny < len(grid[nx])
                        and grid[nx][ny] == "."
                        and (nx, ny) not in visited
                    ):
                        visited.add((nx, ny))
                        stack.append((nx, ny))
    return rooms


def labyrinth(grid: Sequence[str]) -> Optional[str]:
    """Shortest route from 'A' to 'B' as a string of D, U, R, L moves, or None."""
    start = end = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "A":
                start = (i, j)
            elif cell == "B":
                end = (i, j)
    if start is None or end is None:
        raise ValueError("the grid needs both an 'A' and a 'B'")
    came_from: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) == end:
            break
        for move, dx, dy in _LABYRINTH_MOVES:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < len(grid)
                and 0 <= ny < len(grid[nx])
                and grid[nx][ny] != "#"
                and (nx, ny) not in visited
            ):
                visited.add((nx, ny))
                came_from[(nx, ny)] = ((x, y), move)
                queue.append((nx, ny))
    if end not in visited:
        return None
    moves = []
    current = end
    while current != start:
        current, move = came_from[current]
        moves.append(move)
    return "".join(reversed(moves))


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> Optional[list[int]]:
    """Shortest list of computers from 1 to n over the connections, or None."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adj = _adjacency(n, edges)
    dist, parent = _bfs(adj, 1)
    if dist[n] == -1:
        return None
    path = [n]
    while path[-1] != 1:
        path.append(parent[path[-1]])
    return path[::-1]


def subordinates(n: int, bosses: Sequence[int]) -> list[int]:
    """Number of subordinates of employees 1..n, given the bosses of employees 2..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(bosses) != n - 1:
        raise ValueError("one boss is needed for each of employees 2..n")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        _check_node(boss, n)
        children[boss].append(employee)
    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])
    counts = [0] * (n + 1)
    for node in reversed(order):
        counts[node] = sum(1 + counts[child] for child in children[node])
    return counts[1:]


def tree_levels(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Depth of nodes 1..n below node 1; nodes not reached stay at 0."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dist, _ = _bfs(_adjacency(n, edges), 1)
    return [max(d, 0) for d in dist[1:]]


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest path of a tree over nodes 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adj = _adjacency(n, edges)
    dist, _ = _bfs(adj, 1)
    far = max(range(1, n + 1), key=lambda v: dist[v])
    dist, _ = _bfs(adj, far)
    return max(dist[1:])