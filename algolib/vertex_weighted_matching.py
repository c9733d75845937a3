"""Maximum bipartite matching of minimum total vertex weight."""

from __future__ import annotations


def _solve_side(graph: list[list[int]], weights: list[float], other: int) -> tuple[int, float, list[int]]:
    """Greedy Kuhn over vertices sorted by weight; mate maps the other side back."""
    mate = [-1] * other
    used = [-1] * len(graph)
    pairs = 0

    def enter(v: int) -> int:
        used[v] = pairs
        for u in graph[v]:
            if mate[u] == -1:
                return u
        return -1

    def augment(start: int) -> bool:
        if used[start] == pairs:
            return False
        free = enter(start)
        if free != -1:
            mate[free] = start
            return True
        stack = [[start, iter(graph[start]), -1]]
        while stack:
            frame = stack[-1]
            for u in frame[1]:
                w = mate[u]
                if used[w] == pairs:
                    continue
                frame[2] = u
                free = enter(w)
                if free != -1:
                    mate[free] = w
                    for v, _, via in stack:
                        mate[via] = v
                    return True
                stack.append([w, iter(graph[w]), -1])
                break
            else:
                stack.pop()
        return False

    cost: float = 0
    for v in sorted(range(len(graph)), key=weights.__getitem__):
        if augment(v):
            pairs += 1
            cost += weights[v]
    return pairs, cost, mate


class VertexWeightedMatching:
    """Bipartite graph where an edge (v, u) costs left_weights[v] + right_weights[u]."""

    def __init__(self, n: int, m: int) -> None:
        self._n = n
        self._m = m
        self._left_graph: list[list[int]] = [[] for _ in range(n)]
        self._right_graph: list[list[int]] = [[] for _ in range(m)]
        self.left_weights: list[float] = [0] * n
        self.right_weights: list[float] = [0] * m
        self.left_match = [-1] * n
        self.right_match = [-1] * m

    def add(self, v: int, u: int) -> None:
        """Add an edge between left vertex v and right vertex u."""
        if not (0 <= v < self._n and 0 <= u < self._m):
            raise IndexError(f"edge ({v}, {u}) is out of range")
        self._left_graph[v].append(u)
        self._right_graph[u].append(v)

    def solve(self) -> tuple[int, float]:
        """(size, cost) of a maximum matching of minimum cost; matches are stored afterwards."""
        n, m = self._n, self._m
        left_pairs, left_cost, p_right = _solve_side(self._left_graph, self.left_weights, m)
        right_pairs, right_cost, p_left = _solve_side(self._right_graph, self.right_weights, n)
        if left_pairs != right_pairs:
            raise RuntimeError("side matchings differ in size")
        total = left_cost + right_cost

        in_deg = [0] * (n + m)
        for i in range(n):
            if p_left[i] != -1:
                in_deg[n + p_left[i]] += 1
        for i in range(m):
            if p_right[i] != -1:
                in_deg[p_right[i]] += 1

        def nxt(v: int) -> int:
            if v < n:
                return -1 if p_left[v] == -1 else n + p_left[v]
            return p_right[v - n]

        new_left = [-1] * n
        new_right = [-1] * m

        def take_edge(v: int, u: int) -> None:
            if v >= n:
                v, u = u, v
            u -= n
            if new_left[v] != -1 or new_right[u] != -1:
                raise RuntimeError("vertex matched twice")
            new_left[v] = u
            new_right[u] = v

        used = [False] * (n + m)
        for i in range(n + m):
            if used[i] or in_deg[i] != 0:
                continue
            v, step = i, 0
            while v != -1:
                used[v] = True
                if nxt(v) != -1 and step == 1:
                    take_edge(v, nxt(v))
                step ^= 1
                v = nxt(v)

        for i in range(n + m):
            if used[i]:
                continue
            v, step = i, 0
            while not used[v]:
                used[v] = True
                if step == 0:
                    take_edge(v, nxt(v))
                step ^= 1
                v = nxt(v)

        self.left_match = new_left
        self.right_match = new_right
        return left_pairs, total