"""Adjacency-list graph with traversals, cycle and bipartiteness checks."""

from __future__ import annotations

from collections import deque


class Graph:
    """A graph on nodes 0..n (algorithms that scan all nodes use 1..n)."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n + 1)]
        self.degree = [0] * (n + 1)
        self.parent: list[int | None] = [None] * (n + 1)
        self.depth: list[int | None] = [None] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node <= self.n:
            raise IndexError(f"node {node} outside 0..{self.n}")

    def _reset(self) -> None:
        self.parent = [None] * (self.n + 1)
        self.depth = [None] * (self.n + 1)

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge u-v, or u->v when directed."""
        self._check(u)
        self._check(v)
        self.adj[u].append(v)
        self.degree[u] += 1
        if not directed:
            self.adj[v].append(u)
            self.degree[v] += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one undirected edge u-v."""
        self._check(u)
        self._check(v)
        if v not in self.adj[u] or u not in self.adj[v]:
            raise ValueError(f"no edge {u}-{v}")
        self.adj[u].remove(v)
        self.adj[v].remove(u)
        self.degree[u] -= 1
        self.degree[v] -= 1

    def dfs(self, node: int) -> list[int]:
        """Depth-first order from node; records parent and depth of reached nodes."""
        self._check(node)
        self._reset()
        self.parent[node] = None
        self.depth[node] = 0
        visited = {node}
        order = [node]
        path = [node]
        stack = [iter(self.adj[node])]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    u = path[-1]
                    self.parent[nxt] = u
                    self.depth[nxt] = self.depth[u] + 1
                    order.append(nxt)
                    path.append(nxt)
                    stack.append(iter(self.adj[nxt]))
                    break
            else:
                stack.pop()
                path.pop()
        return order

    def has_cycle(self, node: int) -> bool:
        """Whether an undirected cycle is reachable from node."""
        self._check(node)
        visited = {node}
        stack: list[tuple[int, int | None, object]] = [(node, None, iter(self.adj[node]))]
        while stack:
            u, par, it = stack[-1]
            for v in it:
                if v not in visited:
                    visited.add(v)
                    stack.append((v, u, iter(self.adj[v])))
                    break
                if v != par:
                    return True
            else:
                stack.pop()
        return False

    def path(self, node: int) -> list[int]:
        """Nodes from node up to the start of the last traversal."""
        self._check(node)
        out = []
        current: int | None = node
        while current is not None:
            out.append(current)
            current = self.parent[current]
        return out

    def topology(self) -> list[int]:
        """Order nodes 1..n by repeatedly peeling off degree-one nodes, reversed."""
        deg = list(self.degree)
        queue: deque[int] = deque()
        for i in range(1, self.n + 1):
            if deg[i] == 1:
                queue.append(i)
                deg[i] -= 1
        order = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self.adj[u]:
                deg[v] -= 1
                if deg[v] == 1:
                    queue.append(v)
        order.reverse()
        return order

    def bfs(self, start: int, target: int) -> int | None:
        """Number of edges on a shortest path; None if target is unreachable."""
        self._check(start)
        self._check(target)
        if start == target:
            return 0
        self._reset()
        self.depth[start] = 0
        visited = {start}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in self.adj[u]:
                if v not in visited:
                    visited.add(v)
                    self.parent[v] = u
                    self.depth[v] = self.depth[u] + 1
                    queue.append(v)
        return self.depth[target]

    def is_bipartite(self) -> bool:
        """Whether nodes 1..n can be two-coloured along the edges."""
        colour = [0] * (self.n + 1)
        for i in range(1, self.n + 1):
            if colour[i]:
                continue
            colour[i] = -1
            queue = deque([i])
            while queue:
                u = queue.popleft()
                for v in self.adj[u]:
                    if colour[v] == colour[u]:
                        return False
                    if colour[v] == 0:
                        colour[v] = -colour[u]
                        queue.append(v)
        return True