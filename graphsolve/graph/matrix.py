"""Growable dense square cost matrix.

Backs the all-pairs shortest-path solver. Entry ``(i, j)`` holds the best known
cost from ``i`` to ``j``; absent entries hold the infinity sentinel and the
diagonal holds zero.
"""

from __future__ import annotations

from typing import List

from graphsolve.types.base import Cost


class CostMatrix:
    """Square matrix of costs stored as a list of row lists.

    Growth is explicit through `resize()`; indexing past the current size is an
    error rather than an implicit extension.

    Attributes:
        infinity: Sentinel stored in every entry without a known path.
    """

    def __init__(self, size: int, infinity: Cost) -> None:
        if size < 0:
            raise ValueError(f"Matrix size must be non-negative, got {size}.")
        self.infinity = infinity
        self._size = size
        self._rows: List[List[Cost]] = self._blank(size)

    def _blank(self, size: int) -> List[List[Cost]]:
        rows = [[self.infinity] * size for _ in range(size)]
        for i in range(size):
            rows[i][i] = 0
        return rows

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        """Side length of the matrix."""
        return self._size

    @property
    def rows(self) -> List[List[Cost]]:
        """Backing row lists; mutated in place by the solver."""
        return self._rows

    def __getitem__(self, index) -> Cost:
        i, j = index
        return self._rows[i][j]

    def __setitem__(self, index, value: Cost) -> None:
        i, j = index
        self._rows[i][j] = value

    def row(self, i: int) -> List[Cost]:
        """Return a copy of row ``i``."""
        return list(self._rows[i])

    def resize(self, size: int) -> None:
        """Grow the matrix to ``size`` x ``size``.

        The old block is copied into the top-left corner, new rows and columns
        are filled with the sentinel, and every diagonal entry is set to zero.
        Shrinking is not supported; a smaller or equal size is a no-op.
        """
        if size <= self._size:
            return
        old_size = self._size
        rows = self._blank(size)
        for i in range(old_size):
            rows[i][:old_size] = self._rows[i]
        for i in range(size):
            rows[i][i] = 0
        self._rows = rows
        self._size = size

    def relax_all(self) -> None:
        """Run the Warshall-Floyd triple loop in place, ``k`` outermost.

        Pairs where either leg is at or above the sentinel are skipped, so a
        finite sentinel never combines with a negative edge into a false path.
        """
        rows = self._rows
        inf = self.infinity
        n = self._size
        for k in range(n):
            row_k = rows[k]
            for i in range(n):
                row_i = rows[i]
                d_ik = row_i[k]
                if d_ik >= inf:
                    continue
                for j in range(n):
                    d_kj = row_k[j]
                    if d_kj >= inf:
                        continue
                    candidate = d_ik + d_kj
                    if candidate < row_i[j]:
                        row_i[j] = candidate
