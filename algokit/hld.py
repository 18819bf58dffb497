"""Heavy-light decomposition of a tree with path maximum queries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .segment_tree import MaxSegmentTree


def _target(item: Any) -> int:
    return item[0] if isinstance(item, (tuple, list)) else item


class HLD:
    """Split a tree into heavy chains laid out in a max segment tree.

    ``adj[u]`` lists the neighbours of u, either as node numbers or as
    (node, weight) pairs; weights are ignored. With ``values_on_edges``
    each edge's value is stored at its child node.
    """

    def __init__(
        self,
        n: int,
        adj: Sequence[Sequence[Any]],
        root: int = 1,
        values_on_edges: bool = False,
    ) -> None:
        self.n = n
        self.values_on_edges = values_on_edges
        self._adj = [[_target(item) for item in neighbours] for neighbours in adj]
        size = n + 5
        self.depth = [0] * size
        self.parent: list[int | None] = [None] * size
        self.head = [0] * size
        self.pos = [0] * size
        self.subtree = [0] * size
        self.heavy: list[int | None] = [None] * size
        self._init(root)
        self._decompose(root)
        self._seg = MaxSegmentTree(n + 5)

    def _init(self, root: int) -> None:
        order = []
        stack = [root]
        self.parent[root] = None
        self.depth[root] = 0
        while stack:
            u = stack.pop()
            order.append(u)
            for v in self._adj[u]:
                if v == self.parent[u]:
                    continue
                self.parent[v] = u
                self.depth[v] = self.depth[u] + 1
                stack.append(v)
        for u in reversed(order):
            self.subtree[u] = 1
            best: int | None = None
            for v in self._adj[u]:
                if v == self.parent[u]:
                    continue
                self.subtree[u] += self.subtree[v]
                if best is None or self.subtree[v] > self.subtree[best]:
                    best = v
            self.heavy[u] = best

    def _decompose(self, root: int) -> None:
        next_pos = 1
        stack: list[tuple[int, bool]] = [(root, True)]
        while stack:
            u, new_chain = stack.pop()
            self.head[u] = u if new_chain else self.head[self.parent[u]]
            self.pos[u] = next_pos
            next_pos += 1
            light = [
                v for v in self._adj[u] if v != self.parent[u] and v != self.heavy[u]
            ]
            stack.extend((v, True) for v in reversed(light))
            if self.heavy[u] is not None:
                stack.append((self.heavy[u], False))

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        while self.head[u] != self.head[v]:
            if self.depth[self.head[u]] < self.depth[self.head[v]]:
                u, v = v, u
            u = self.parent[self.head[u]]
        return u if self.depth[u] < self.depth[v] else v

    def _lower_first(self, u: int, v: int) -> tuple[int, int]:
        hu, hv = self.head[u], self.head[v]
        if self.depth[hu] < self.depth[hv] or (hu == hv and self.depth[u] < self.depth[v]):
            return v, u
        return u, v

    def query_path(self, u: int, v: int) -> list[tuple[int, int]]:
        """Segment tree ranges covering the path between u and v."""
        ranges = []
        while self.head[u] != self.head[v]:
            u, v = self._lower_first(u, v)
            ranges.append((self.pos[self.head[u]], self.pos[u]))
            u = self.parent[self.head[u]]
        u, v = self._lower_first(u, v)
        if not self.values_on_edges:
            ranges.append((self.pos[v], self.pos[u]))
        elif u != v:
            ranges.append((self.pos[v] + 1, self.pos[u]))
        return ranges

    def update(self, u: int, val: int) -> None:
        """Set the value of node u."""
        self._seg.update(self.pos[u], val)

    def update_edge(self, u: int, v: int, val: int) -> None:
        """Set the value of the edge u-v (stored at its child end)."""
        child = u if self.parent[u] == v else v
        self._seg.update(self.pos[child], val)

    def query(self, u: int, v: int) -> int:
        """Maximum value on the path between u and v (at least 0)."""
        result = 0
        for l, r in self.query_path(u, v):
            result = max(result, self._seg.query(l, r))
        return result