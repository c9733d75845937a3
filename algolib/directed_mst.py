"""Minimum spanning arborescence of a directed graph."""

from __future__ import annotations

import heapq


class DirectedMinimumSpanningTree:
    """Directed weighted graph whose cheapest arborescence from a root can be found."""

    def __init__(self, n: int = 0) -> None:
        self._n = n
        self._edges: list[tuple[int, int, float]] = []

    def __len__(self) -> int:
        return self._n

    def add(self, from_: int, to: int, cost: float) -> None:
        """Add the directed edge from_ -> to with the given cost."""
        if not (0 <= from_ < self._n and 0 <= to < self._n):
            raise IndexError(f"edge ({from_}, {to}) is out of range")
        self._edges.append((from_, to, cost))

    def solve(self, root: int) -> tuple[float, list[int]]:
        """(total cost, parent of each vertex); the root is its own parent.

        Raises ValueError if some vertex cannot be reached from the root.
        """
        n = self._n
        if not 0 <= root < n:
            raise IndexError(f"vertex {root} is out of range")
        parent = list(range(n))

        def find(v: int) -> int:
            r = v
            while parent[r] != r:
                r = parent[r]
            while parent[v] != r:
                parent[v], v = r, parent[v]
            return r

        heaps: list[list[tuple[float, int, int]]] = [[] for _ in range(n)]
        for from_, to, cost in self._edges:
            heapq.heappush(heaps[to], (cost, from_, to))

        delta: list[float] = [0] * n
        added: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        current_layer = 0

        def unite(v: int, u: int) -> None:
            v, u = find(v), find(u)
            if v == u:
                raise RuntimeError("uniting a component with itself")
            if len(heaps[v]) < len(heaps[u]):
                v, u = u, v
            shift = delta[u] - delta[v]
            for cost, from_, to in heaps[u]:
                heapq.heappush(heaps[v], (cost + shift, from_, to))
            heaps[u] = []
            parent[u] = v

        pos_in_stack = [-1] * n
        for i in range(n):
            if find(i) == find(root):
                continue
            stack: list[tuple[float, int, int]] = []
            pos_in_stack[i] = 0
            while True:
                real_v = stack[-1][1] if stack else i
                v = find(real_v)
                heap = heaps[v]
                while heap and find(heap[0][1]) == v:
                    heapq.heappop(heap)
                if not heap:
                    raise ValueError(f"vertex {real_v} cannot be reached from the root")

                best = heap[0]
                real_u = best[1]
                u = find(real_u)
                delta[v] = -best[0]

                if u == find(root):
                    stack.append(best)
                    new_layer = current_layer + len(stack)
                    current_layer = new_layer
                    while stack:
                        _, from_, to = stack.pop()
                        new_layer -= 1
                        added[from_].append((to, new_layer))
                        unite(to, root)
                    break

                if pos_in_stack[u] == -1:
                    stack.append(best)
                    pos_in_stack[u] = len(stack)
                    continue

                added[real_u].append((best[2], current_layer))
                while len(stack) != pos_in_stack[u]:
                    _, from_, to = stack[-1]
                    added[from_].append((to, current_layer))
                    unite(from_, u)
                    stack.pop()
                pos_in_stack[find(u)] = pos_in_stack[u]
                current_layer += 1

        mst_parent = [-1] * n
        queue = [(0, -root, -root)]
        while queue:
            _, neg_v, neg_p = heapq.heappop(queue)
            v, p = -neg_v, -neg_p
            if mst_parent[v] != -1:
                continue
            mst_parent[v] = p
            for u, layer in added[v]:
                heapq.heappush(queue, (layer, -u, -v))
        return -sum(delta), mst_parent