"""Disjoint-set (union-find) over integer elements."""

from __future__ import annotations

from typing import List

from graphsolve.exceptions import InvalidVertex


class DisjointSet:
    """Union-find with path compression and union by rank.

    Elements are the integers ``0 .. n-1``. Every element starts as the root
    of its own group with rank 0. Rank is an upper bound on subtree height and
    never decreases.
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"Element count must be non-negative, got {n}.")
        self._parent: List[int] = list(range(n))
        self._rank: List[int] = [0] * n
        self._groups = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def group_count(self) -> int:
        """Number of disjoint groups."""
        return self._groups

    def rank(self, x: int) -> int:
        """Return the rank stored for element ``x``."""
        self._check(x)
        return self._rank[x]

    def grow(self, n: int) -> None:
        """Extend the universe to ``n`` elements with new singleton groups."""
        size = len(self._parent)
        if n <= size:
            return
        self._parent.extend(range(size, n))
        self._rank.extend([0] * (n - size))
        self._groups += n - size

    def _check(self, x: int) -> None:
        if not isinstance(x, int) or isinstance(x, bool) or not 0 <= x < len(self):
            raise InvalidVertex(x, f"Element '{x}' is outside the disjoint set.")

    def find(self, x: int) -> int:
        """Return the root of ``x``'s group.

        Every node on the path from ``x`` is re-pointed directly at the root.
        """
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the groups containing ``x`` and ``y``.

        Returns:
            True if two groups were merged, False if already the same group.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        else:
            self._parent[root_y] = root_x
            if rank[root_x] == rank[root_y]:
                rank[root_x] += 1
        self._groups -= 1
        return True

    def is_same(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` belong to the same group."""
        return self.find(x) == self.find(y)
