"""Single-source and all-pairs shortest paths: Bellman-Ford, Dijkstra, Floyd-Warshall."""

from __future__ import annotations

import functools
import heapq
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

INF = math.inf


@functools.total_ordering
@dataclass(frozen=True)
class Edge:
    """A weighted edge from u to v, ordered by weight, then u, then v."""

    u: int
    v: int
    w: int = 0

    def _key(self) -> tuple[int, int, int]:
        return self.w, self.u, self.v

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() < other._key()

    def __iter__(self) -> Iterator[int]:
        yield self.u
        yield self.v
        yield self.w

    def inverted(self) -> Edge:
        """The same edge with its weight negated."""
        return Edge(self.u, self.v, -self.w)


def _triples(
    edges: Iterable[Edge | Sequence[int]], n: int, low: int
) -> list[tuple[int, int, int]]:
    out = []
    for edge in edges:
        u, v, w = edge
        for node in (u, v):
            if not low <= node <= n:
                raise ValueError(f"node {node} outside {low}..{n}")
        out.append((u, v, w))
    return out


def bellman_ford(n: int, edges: Iterable[Edge | Sequence[int]]) -> dict[int, float]:
    """Shortest distances from node 1 to every node 1..n over directed edges.

    Unreachable nodes get ``inf``; nodes reachable through a negative
    cycle get ``-inf``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    triples = _triples(edges, n, 1)
    dist: dict[int, float] = {node: INF for node in range(1, n + 1)}
    dist[1] = 0
    for _ in range(n):
        changed = False
        for u, v, w in triples:
            if dist[u] == INF:
                continue
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    for _ in range(n):
        changed = False
        for u, v, w in triples:
            if dist[u] == INF or dist[v] == -INF:
                continue
            if dist[u] + w < dist[v]:
                dist[v] = -INF
                changed = True
        if not changed:
            break
    return dist


def longest_path(n: int, edges: Iterable[Edge | Sequence[int]]) -> int:
    """Heaviest path weight from node 1 to node n; -1 if unreachable or unbounded."""
    negated = [(u, v, -w) for u, v, w in edges]
    d = bellman_ford(n, negated)[n]
    if math.isinf(d):
        return -1
    return int(-d)


class Dijkstra:
    """Shortest paths from a source over non-negatively weighted edges.

    Nodes are numbered 0..n, so both 0- and 1-based numbering work.
    """

    def __init__(
        self,
        n: int,
        edges: Iterable[Edge | Sequence[int]] = (),
        undirected: bool = True,
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        for u, v, w in _triples(edges, n, 0):
            self._adj[u].append((v, w))
            if undirected:
                self._adj[v].append((u, w))

    def _check(self, node: int) -> None:
        if not 0 <= node <= self.n:
            raise IndexError(f"node {node} outside 0..{self.n}")

    def distances(self, src: int) -> list[float]:
        """Distance from src to every node 0..n; ``inf`` where unreachable."""
        self._check(src)
        dist: list[float] = [INF] * (self.n + 1)
        dist[src] = 0
        heap: list[tuple[float, int]] = [(0, src)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, w in self._adj[u]:
                nd = d + w
                if nd < dist[v]:
                    dist[v] = nd
                    heapq.heappush(heap, (nd, v))
        return dist

    def min_cost(self, src: int, dest: int) -> int:
        """Distance from src to dest; -1 if dest cannot be reached."""
        self._check(dest)
        d = self.distances(src)[dest]
        return -1 if d == INF else int(d)


def floyd_warshall(
    n: int, edges: Iterable[Edge | Sequence[int]]
) -> list[list[float]]:
    """All-pairs distances over undirected edges between nodes 1..n.

    The result is indexed ``dist[u][v]``; row and column 0 are unused and
    unreachable pairs hold ``inf``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    dist: list[list[float]] = [[INF] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dist[i][i] = 0
    for u, v, w in _triples(edges, n, 1):
        best = min(dist[u][v], dist[v][u], w)
        dist[u][v] = dist[v][u] = best
    nodes = range(1, n + 1)
    for k in nodes:
        row_k = dist[k]
        for i in nodes:
            row_i = dist[i]
            via = row_i[k]
            if via == INF:
                continue
            for j in nodes:
                candidate = via + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
    return dist