"""Maximum bipartite matching by Kuhn's augmenting paths."""

from __future__ import annotations

from collections.abc import Sequence


def max_matching(
    n: int, m: int, adj: Sequence[Sequence[int]], base: int = 1
) -> int:
    """Size of a maximum matching.

    Left vertices are base..base + n - 1 and ``adj[u]`` lists the right
    vertices joined to u; right vertices counted are base..base + m - 1.
    """
    matched: dict[int, int] = {}
    visited: dict[int, int] = {}

    def augment(u: int, stamp: int) -> bool:
        if visited.get(u) == stamp:
            return False
        visited[u] = stamp
        for v in adj[u]:
            if v not in matched or augment(matched[v], stamp):
                matched[v] = u
                return True
        return False

    for stamp, u in enumerate(range(base, base + n), 1):
        augment(u, stamp)
    return sum(1 for v in matched if base <= v < base + m)