"""
Union-Find (Disjoint Set Union) data structure.

Tracks disjoint sets of integer ids with:
- find(x): Which set contains x? - O(alpha(n)) amortized
- union(x, y): Merge sets containing x and y - O(alpha(n)) amortized
- connected(x, y): Are x and y in the same set?

Used by Kruskal's maze generator to reject edges that would close a loop.
"""

from __future__ import annotations


class UnionFind:
    """
    Union-Find with path compression and union by rank.

    Example:
        >>> uf = UnionFind(4)
        >>> uf.union(0, 1)
        True
        >>> uf.connected(0, 1)
        True
        >>> uf.connected(0, 3)
        False
    """

    def __init__(self, n: int):
        """
        Initialize union-find structure.

        Args:
            n: Number of elements, each starting in its own set
        """
        self.parent = list(range(n))
        self.rank = [0] * n
        self.num_sets = n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """
        Find root of element with path compression.

        Args:
            x: Element to find

        Returns:
            Root of element's set
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Point every node on the path directly at the root
        while self.parent[x] != root:
            next_node = self.parent[x]
            self.parent[x] = root
            x = next_node

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Union two sets by rank.

        Args:
            x: First element
            y: Second element

        Returns:
            True if sets were merged (not already connected)
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self.num_sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)
