"""Disjoint set union that also keeps the members of each set."""

from __future__ import annotations


class DSU:
    """Union-find over nodes base..base + max_nodes - 1, with union by size."""

    def __init__(self, max_nodes: int, base: int = 1) -> None:
        if max_nodes < 0 or base < 0:
            raise ValueError("max_nodes and base must be non-negative")
        total = max_nodes + base
        self.base = base
        self._parent = list(range(total))
        self._size = [1] * total
        self._next: list[int | None] = [None] * total
        self._tail = list(range(total))
        self._pos = list(range(total))
        self._roots = list(range(total))

    def _check(self, node: int) -> None:
        if not self.base <= node < len(self._parent):
            raise IndexError(f"node {node} out of range")

    def find(self, node: int) -> int:
        """Leader of the set holding node."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def same(self, u: int, v: int) -> bool:
        """Whether u and v are in the same set."""
        return self.find(u) == self.find(v)

    def union(self, u: int, v: int) -> bool:
        """Join the sets of u and v; return False if they were already one."""
        a, b = self.find(u), self.find(v)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        p = self._pos[b]
        self._size[a] += self._size[b]
        self._parent[b] = a
        self._roots[p] = self._roots[-1]
        self._pos[self._roots[p]] = p
        self._roots.pop()
        self._next[self._tail[a]] = b
        self._tail[a] = self._tail[b]
        return True

    def size(self, u: int) -> int:
        """Size of the set holding u."""
        return self._size[self.find(u)]

    def components(self) -> list[list[int]]:
        """Members of every set, each listed from its leader."""
        result = []
        for root in self._roots[self.base:]:
            members = []
            node: int | None = root
            while node is not None:
                members.append(node)
                node = self._next[node]
            result.append(members)
        return result

    def component_count(self) -> int:
        """Number of sets."""
        return len(self._roots) - self.base