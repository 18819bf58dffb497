"""Minimum (or maximum) spanning tree cost with Prim's algorithm."""

from __future__ import annotations

import heapq


class Prim:
    """Prim's algorithm over weighted edges between nodes 0..n."""

    def __init__(self, n: int = 0, maximum: bool = False) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.maximum = maximum
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]

    def _check(self, node: int) -> None:
        if not 0 <= node <= self.n:
            raise IndexError(f"node {node} outside 0..{self.n}")

    def add_edge(self, u: int, v: int, w: int, directed: bool = False) -> None:
        """Add an edge u-v of weight w, or u->v when directed."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, w))
        if not directed:
            self._adj[v].append((u, w))

    def cost(self, root: int) -> int:
        """Total weight of the spanning tree of the part reachable from root."""
        self._check(root)
        sign = -1 if self.maximum else 1
        marked: set[int] = set()
        total = 0
        heap: list[tuple[int, int]] = [(0, root)]
        while heap:
            key, u = heapq.heappop(heap)
            if u in marked:
                continue
            marked.add(u)
            total += sign * key
            for v, w in self._adj[u]:
                if v not in marked:
                    heapq.heappush(heap, (sign * w, v))
        return total