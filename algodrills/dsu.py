"""Disjoint-set union (union-find) with union by size."""

from __future__ import annotations


class DisjointSetUnion:
    """A forest of disjoint sets over the elements ``0 .. n - 1``."""

    def __init__(self, n: int) -> None:
        # A negative entry marks a root and holds minus the size of its set.
        self._parents = [-1] * n
        self._count = n

    def root(self, v: int) -> int:
        """Return the representative of the set containing ``v``."""
        while self._parents[v] >= 0:
            v = self._parents[v]
        return v

    def unite(self, u: int, v: int) -> None:
        """Merge the sets containing ``u`` and ``v``."""
        u = self.root(u)
        v = self.root(v)
        if u == v:
            return
        if self._parents[u] > self._parents[v]:
            u, v = v, u
        self._parents[u] += self._parents[v]
        self._parents[v] = u
        self._count -= 1

    def is_same(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` belong to the same set."""
        return self.root(u) == self.root(v)

    def size(self, v: int) -> int:
        """Return the size of the set containing ``v``."""
        return -self._parents[self.root(v)]

    def count(self) -> int:
        """Return the number of disjoint sets."""
        return self._count