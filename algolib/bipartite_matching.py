"""Maximum bipartite matching with Kuhn's algorithm and minimum vertex cover."""

from __future__ import annotations

import random


class BipartiteMatching:
    """Bipartite graph with n left and m right vertices."""

    def __init__(self, n: int = 0, m: int = 0) -> None:
        self._n = n
        self._m = m
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self.left_match = [-1] * n
        self.right_match = [-1] * m

    def shape(self) -> tuple[int, int]:
        return self._n, self._m

    def add(self, left: int, right: int) -> None:
        """Add an edge between a left and a right vertex."""
        if not (0 <= left < self._n and 0 <= right < self._m):
            raise IndexError(f"edge ({left}, {right}) is out of range")
        self._graph[left].append(right)

    def _augment(self, start: int, stamp: int, used: list[int]) -> bool:
        graph, left_match, right_match = self._graph, self.left_match, self.right_match

        def enter(v: int) -> int:
            used[v] = stamp
            for u in graph[v]:
                if right_match[u] == -1:
                    return u
            return -1

        if used[start] == stamp:
            return False
        free = enter(start)
        if free != -1:
            right_match[free] = start
            left_match[start] = free
            return True

        stack = [[start, iter(graph[start]), -1]]
        while stack:
            frame = stack[-1]
            for u in frame[1]:
                w = right_match[u]
                if used[w] == stamp:
                    continue
                frame[2] = u
                free = enter(w)
                if free != -1:
                    right_match[free] = w
                    left_match[w] = free
                    for v, _, via in stack:
                        right_match[via] = v
                        left_match[v] = via
                    return True
                stack.append([w, iter(graph[w]), -1])
                break
            else:
                stack.pop()
        return False

    def solve(self, shuffle: bool = False) -> int:
        """Size of a maximum matching; left_match and right_match hold it afterwards."""
        self.left_match = [-1] * self._n
        self.right_match = [-1] * self._m
        used = [0] * self._n
        order = list(range(self._n))
        if shuffle:
            rng = random.Random()
            rng.shuffle(order)
            for neighbours in self._graph:
                rng.shuffle(neighbours)

        pairs = 0
        for v in order:
            if self._augment(v, pairs + 1, used):
                pairs += 1
        return pairs

    def minimum_vertex_cover(self, shuffle: bool = False) -> tuple[list[int], list[int]]:
        """Left and right vertices of a minimum vertex cover."""
        pairs = self.solve(shuffle)
        left_match, right_match = self.left_match, self.right_match
        reached = [False] * self._n

        for start in range(self._n):
            if left_match[start] != -1:
                continue
            stack = [start]
            while stack:
                v = stack.pop()
                if v == -1 or reached[v]:
                    continue
                reached[v] = True
                for u in self._graph[v]:
                    if u != left_match[v]:
                        stack.append(right_match[u])

        left = [i for i in range(self._n) if not reached[i]]
        used_right = [False] * self._m
        for i in range(self._n):
            if reached[i] and left_match[i] != -1:
                for j in self._graph[i]:
                    used_right[j] = True
        right = [i for i in range(self._m) if used_right[i]]

        if len(left) + len(right) != pairs:
            raise RuntimeError("vertex cover size differs from matching size")
        return left, right