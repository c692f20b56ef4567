"""Graph algorithms: disjoint sets, traversals, spanning trees, shortest paths and a trie."""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator


class DisjointSet:
    """Union-find over 0..n tracking each set's size, minimum and maximum."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)
        self._min = list(range(n + 1))
        self._max = list(range(n + 1))

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")

    def find(self, x: int) -> int:
        """Return the representative of x's set, compressing the path."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while x != root:
            nxt = self._parent[x]
            self._parent[x] = root
            x = nxt
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one set."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._rank[a] += 1
        self._parent[b] = a
        self._size[a] += self._size[b]
        self._min[a] = min(self._min[a], self._min[b])
        self._max[a] = max(self._max[a], self._max[b])
        return True

    def summary(self, x: int) -> tuple[int, int, int]:
        """Return (smallest element, largest element, size) of x's set."""
        root = self.find(x)
        return self._min[root], self._max[root], self._size[root]


class Graph:
    """An unweighted graph over nodes 0..n-1 stored as adjacency lists."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise IndexError(f"node {node} is out of range")

    def add_edge(self, source: int, dest: int, bidirectional: bool = True) -> None:
        """Add an edge from source to dest, and back unless directed."""
        self._check(source)
        self._check(dest)
        self._adj[source].append(dest)
        if bidirectional:
            self._adj[dest].append(source)

    def connected_components(self) -> int:
        """Count the components reachable by following edges from each unvisited node."""
        visited: set[int] = set()
        count = 0
        for start in range(len(self._adj)):
            if start in visited:
                continue
            count += 1
            visited.add(start)
            stack = [start]
            while stack:
                node = stack.pop()
                for nb in self._adj[node]:
                    if nb not in visited:
                        visited.add(nb)
                        stack.append(nb)
        return count

    def topological_order(self) -> list[int]:
        """Kahn's order of the directed edges; nodes on or behind a cycle are left out."""
        indegree = [0] * len(self._adj)
        for neighbours in self._adj:
            for nb in neighbours:
                indegree[nb] += 1
        queue = deque(i for i, d in enumerate(indegree) if d == 0)
        visited = set(queue)
        order = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nb in self._adj[node]:
                if nb in visited:
                    continue
                indegree[nb] -= 1
                if indegree[nb] == 0:
                    queue.append(nb)
                    visited.add(nb)
        return order

    def _paths(self, node: int, end: int, path: list[int], on_path: set[int]) -> Iterator[list[int]]:
        if node == end:
            yield path + [end]
            return
        on_path.add(node)
        path.append(node)
        for nb in self._adj[node]:
            if nb not in on_path:
                yield from self._paths(nb, end, path, on_path)
        path.pop()
        on_path.discard(node)

    def all_paths(self, start: int, end: int) -> list[list[int]]:
        """Return every simple path from start to end, in depth-first order."""
        self._check(start)
        self._check(end)
        return list(self._paths(start, end, [], set()))


class WeightedGraph:
    """A weighted graph over nodes 0..n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise IndexError(f"node {node} is out of range")

    def add_edge(self, source: int, dest: int, weight: int, bidirectional: bool = True) -> None:
        """Add a weighted edge from source to dest, and back unless directed."""
        self._check(source)
        self._check(dest)
        self._adj[source].append((dest, weight))
        if bidirectional:
            self._adj[dest].append((source, weight))

    def prims(self, source: int) -> int:
        """Return the weight of a minimum spanning tree of source's component."""
        self._check(source)
        best: dict[int, float] = {}
        visited: set[int] = set()
        heap: list[tuple[int, int]] = [(0, source)]
        total = 0
        while heap and len(visited) < len(self._adj):
            weight, node = heapq.heappop(heap)
            if node in visited:
                continue
            visited.add(node)
            total += weight
            for nb, wt in self._adj[node]:
                if nb not in visited and wt < best.get(nb, math.inf):
                    best[nb] = wt
                    heapq.heappush(heap, (wt, nb))
        return total

    def dijkstra(self, source: int) -> list[float]:
        """Return shortest distances from source; unreachable nodes get infinity."""
        self._check(source)
        if any(wt < 0 for neighbours in self._adj for _, wt in neighbours):
            raise ValueError("dijkstra needs non-negative weights")
        dist: list[float] = [math.inf] * len(self._adj)
        dist[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        done: set[int] = set()
        while heap:
            d, node = heapq.heappop(heap)
            if node in done:
                continue
            done.add(node)
            for nb, wt in self._adj[node]:
                if d + wt < dist[nb]:
                    dist[nb] = d + wt
                    heapq.heappush(heap, (d + wt, nb))
        return dist


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two nodes."""

    source: int
    dest: int
    weight: int


def kruskals(edges: Iterable[Edge], n: int) -> int:
    """Return the weight of a minimum spanning forest, taking at most n - 1 edges over nodes 0..n."""
    sets = DisjointSet(n)
    total = 0
    taken = 0
    for edge in sorted(edges, key=lambda e: e.weight):
        if taken >= n - 1:
            break
        if sets.union(edge.source, edge.dest):
            total += edge.weight
            taken += 1
    return total


@dataclass
class _TrieNode:
    terminal: bool = False
    children: dict[str, "_TrieNode"] = field(default_factory=dict)


class Trie:
    """A prefix tree of words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with prefix."""
        return self._walk(prefix) is not None