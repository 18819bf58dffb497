"""Lowest common ancestors by binary lifting, with optional edge weights."""

from __future__ import annotations

from collections.abc import Sequence


class _BinaryLifting:
    """Ancestor and path-cost tables of a rooted tree on nodes 0..n."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._log = max(1, (n + 1).bit_length())
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self.depth = [0] * (n + 1)
        self._up: list[list[int]] = []
        self._cost: list[list[int]] = []
        self._built = False

    def _check(self, node: int) -> None:
        if not 0 <= node <= self.n:
            raise IndexError(f"node {node} outside 0..{self.n}")

    def _link(self, u: int, v: int, w: int) -> None:
        self._check(u)
        self._check(v)
        self._adj[u].append((v, w))
        self._adj[v].append((u, w))
        self._built = False

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("call build() first")

    def _build(self, root: int) -> None:
        self._check(root)
        size, log = self.n + 1, self._log
        self.depth = [0] * size
        self._up = [[0] * log for _ in range(size)]
        self._cost = [[0] * log for _ in range(size)]
        up, cost = self._up, self._cost
        up[root] = [root] * log
        stack: list[tuple[int, int | None]] = [(root, None)]
        while stack:
            u, p = stack.pop()
            for v, w in self._adj[u]:
                if v == p:
                    continue
                self.depth[v] = self.depth[u] + 1
                up_v, cost_v = up[v], cost[v]
                up_v[0], cost_v[0] = u, w
                for b in range(1, log):
                    mid = up_v[b - 1]
                    up_v[b] = up[mid][b - 1]
                    cost_v[b] = cost_v[b - 1] + cost[mid][b - 1]
                stack.append((v, u))
        self._built = True

    def _kth_ancestor(self, u: int, k: int) -> int | None:
        self._require_built()
        self._check(u)
        if k < 0:
            raise ValueError("k must be non-negative")
        if self.depth[u] < k:
            return None
        for b in range(self._log):
            if k >> b & 1:
                u = self._up[u][b]
        return u

    def _lca(self, u: int, v: int) -> int:
        self._require_built()
        self._check(u)
        self._check(v)
        if self.depth[u] < self.depth[v]:
            u, v = v, u
        u = self._kth_ancestor(u, self.depth[u] - self.depth[v])
        if u == v:
            return u
        for b in reversed(range(self._log)):
            if self._up[u][b] != self._up[v][b]:
                u, v = self._up[u][b], self._up[v][b]
        return self._up[u][0]


class LCA(_BinaryLifting):
    """Unweighted tree: ancestors, LCA and edge-count distances."""

    def __init__(self, n: int = 0, adj: Sequence[Sequence[int]] | None = None) -> None:
        super().__init__(n)
        if adj is not None:
            for u, neighbours in enumerate(adj):
                for v in neighbours:
                    self._check(u)
                    self._check(v)
                    self._adj[u].append((v, 1))

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected tree edge u-v."""
        self._link(u, v, 1)

    def build(self, root: int = 1) -> None:
        """Root the tree at root and fill the jump tables."""
        self._build(root)

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """The ancestor k levels above u; None if u is not that deep."""
        return self._kth_ancestor(u, k)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        return self._lca(u, v)

    def distance(self, u: int, v: int) -> int:
        """Number of edges between u and v."""
        a = self.lca(u, v)
        return self.depth[u] + self.depth[v] - 2 * self.depth[a]


class WeightedLCA(_BinaryLifting):
    """Weighted tree: ancestors, LCA and path weight sums."""

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add the undirected tree edge u-v of weight w."""
        self._link(u, v, w)

    def build(self, root: int = 1) -> None:
        """Root the tree at root and fill the jump tables."""
        self._build(root)

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """The ancestor k levels above u; None if u is not that deep."""
        return self._kth_ancestor(u, k)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        return self._lca(u, v)

    def cost_up(self, u: int, dist: int) -> int | None:
        """Weight of the path from u up dist levels; None if u is not that deep."""
        self._require_built()
        self._check(u)
        if dist < 0:
            raise ValueError("dist must be non-negative")
        if self.depth[u] < dist:
            return None
        total = 0
        for b in range(self._log):
            if dist >> b & 1:
                total += self._cost[u][b]
                u = self._up[u][b]
        return total

    def query(self, u: int, v: int) -> int:
        """Weight of the path between u and v."""
        a = self.lca(u, v)
        return self.cost_up(u, self.depth[u] - self.depth[a]) + self.cost_up(
            v, self.depth[v] - self.depth[a]
        )