from __future__ import annotations

from typing import List


class DisjointSets:
    """Union-find over the integers 0..n-1 (union by rank, path compression)."""

    def __init__(self, n_elements: int) -> None:
        if n_elements < 0:
            raise ValueError(f"n_elements must be >= 0 (got {n_elements})")
        self.parent: List[int] = [i for i in range(n_elements)]
        self.rank: List[int] = [0] * n_elements
        self._sets = n_elements

    def __len__(self) -> int:
        return len(self.parent)

    def count(self) -> int:
        """Number of disjoint sets."""
        return self._sets

    def find(self, index: int) -> int:
        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # Point everything on the path straight at the root.
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]
        return root

    def union(self, root1: int, root2: int) -> None:
        """Merge the sets rooted at root1 and root2 (both must be distinct roots)."""
        if root1 == root2:
            raise ValueError(f"Cannot union a set with itself (root={root1})")
        if self.parent[root1] != root1 or self.parent[root2] != root2:
            raise ValueError(f"union() expects roots (got {root1}, {root2})")

        if self.rank[root1] < self.rank[root2]:
            root1, root2 = root2, root1
        self.parent[root2] = root1
        if self.rank[root1] == self.rank[root2]:
            self.rank[root1] += 1
        self._sets -= 1
