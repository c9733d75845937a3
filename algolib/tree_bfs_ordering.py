"""BFS ordering of a rooted tree with range lookups of subtree levels."""

from __future__ import annotations

from bisect import bisect_left


class TreeBfsOrdering:
    """Tree whose vertices at a given depth of a subtree form a range of the BFS order."""

    def __init__(self, n: int = 0) -> None:
        self._n = n
        self.g: list[list[int]] = [[] for _ in range(n)]
        self.tin: list[int] = []
        self.tout: list[int] = []
        self.depth: list[int] = []
        self.parent: list[int] = []
        self.order: list[int] = []
        self._depth_left: list[int] = []

    def __len__(self) -> int:
        return self._n

    def add(self, v: int, u: int) -> None:
        if not (0 <= v < self._n and 0 <= u < self._n):
            raise IndexError(f"edge ({v}, {u}) is out of range")
        self.g[v].append(u)
        self.g[u].append(v)

    def build(self, root: int) -> None:
        """Root the tree and compute the orderings; call before queries."""
        n = self._n
        self.tin = [0] * n
        self.tout = [0] * n
        self.parent = [-1] * n
        timer = 0
        self.tin[root] = timer
        timer += 1
        stack = [(root, iter(self.g[root]))]
        while stack:
            v, it = stack[-1]
            for u in it:
                if u == self.parent[v]:
                    continue
                self.parent[u] = v
                self.tin[u] = timer
                timer += 1
                stack.append((u, iter(self.g[u])))
                break
            else:
                stack.pop()
                self.tout[v] = timer

        self.depth = [-1] * n
        self.depth[root] = 0
        self.order = [root]
        for v in self.order:
            for u in self.g[v]:
                if self.depth[u] == -1:
                    self.depth[u] = self.depth[v] + 1
                    self.order.append(u)

        max_depth = self.depth[self.order[-1]]
        left = [0] * (max_depth + 2)
        for v in self.order:
            left[self.depth[v] + 1] += 1
        for d in range(max_depth + 1):
            left[d + 1] += left[d]
        self._depth_left = left

    def is_ancestor(self, v: int, u: int) -> bool:
        """Whether v == u or v is an ancestor of u."""
        return self.tin[v] <= self.tin[u] and self.tout[u] <= self.tout[v]

    def _search(self, range_depth: int, t: int) -> int:
        lo = self._depth_left[range_depth]
        hi = self._depth_left[range_depth + 1]
        return bisect_left(self.order, t, lo, hi, key=self.tin.__getitem__)

    def range(self, v: int, dist: int) -> tuple[int, int]:
        """[l, r) such that order[l:r] are the vertices of v's subtree at distance dist, or (0, 0)."""
        range_depth = self.depth[v] + dist
        if range_depth + 1 >= len(self._depth_left):
            return 0, 0
        return self._search(range_depth, self.tin[v]), self._search(range_depth, self.tout[v])

    def ranges(self, v: int, dist: int) -> list[tuple[int, int]]:
        """Disjoint ranges of order covering every vertex within dist of v."""
        result = []
        p = v
        depth, parent = self.depth, self.parent
        for d in range(depth[v] + dist, max(0, depth[v] - dist) - 1, -1):
            if parent[p] != -1 and depth[v] + d - 2 * depth[parent[p]] <= dist:
                p = parent[p]
            lo, hi = self.range(p, d - depth[p])
            if lo < hi:
                result.append((lo, hi))
        return result