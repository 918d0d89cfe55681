"""
Disjoint-set union (union by rank, path compression) over 0..n-1
"""

from typing import List


class DisjointSet:

    def __init__(self, n: int):
        # n == 0 is allowed but useless; callers guard against empty graphs
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """root of x; every node on the way is re-pointed at the root"""
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """merge the sets of x and y; False if they were already one set"""
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
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def count_sets(self) -> int:
        return sum(1 for i, p in enumerate(self.parent) if i == p)
