"""Edge-list graphs with a directed graph supporting common traversals."""

from __future__ import annotations

import heapq
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import groupby


@dataclass
class Edge:
    from_: int
    to: int
    cost: float = 1


class Graph(ABC):
    """Vertices 0..n-1 with an edge list and per-vertex incident edge indices."""

    def __init__(self, n: int = 0) -> None:
        self.n = n
        self.edges: list[Edge] = []
        self.g: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self.n

    def resize(self, new_n: int) -> None:
        self.n = new_n
        del self.g[new_n:]
        self.g.extend([] for _ in range(new_n - len(self.g)))

    def another(self, index: int, v: int) -> int:
        """The endpoint of edge index other than v."""
        e = self.edges[index]
        return v ^ e.from_ ^ e.to

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < self.n:
                raise IndexError(f"vertex {v} is out of range")

    @abstractmethod
    def add(self, from_: int, to: int, cost: float = 1) -> int:
        """Add an edge and return its index."""


class DirectedGraph(Graph):
    """Directed graph."""

    def add(self, from_: int, to: int, cost: float = 1) -> int:
        self._check(from_, to)
        index = len(self.edges)
        self.g[from_].append(index)
        self.edges.append(Edge(from_, to, cost))
        return index

    def pop(self) -> Edge:
        """Remove and return the last added edge."""
        if not self.edges:
            raise IndexError("no edges to pop")
        edge = self.edges.pop()
        self.g[edge.from_].pop()
        return edge

    def reversed(self) -> DirectedGraph:
        rev = DirectedGraph(self.n)
        for e in self.edges:
            rev.add(e.to, e.from_, e.cost)
        return rev

    def reverse(self) -> None:
        rev = self.reversed()
        self.edges, self.g = rev.edges, rev.g

    def dijkstra(self, initial: list[int]) -> list[float]:
        """Shortest distances from any of initial; unreachable vertices get inf."""
        dist: list[float] = [math.inf] * self.n
        heap = []
        for v in initial:
            dist[v] = 0
            heap.append((0, v))
        heapq.heapify(heap)
        while heap:
            d, v = heapq.heappop(heap)
            if d != dist[v]:
                continue
            for i in self.g[v]:
                e = self.edges[i]
                if dist[e.to] > d + e.cost:
                    dist[e.to] = d + e.cost
                    heapq.heappush(heap, (dist[e.to], e.to))
        return dist

    def bfs(self, initial: list[int]) -> list[float]:
        """Edge-count distances from any of initial; unreachable vertices get inf."""
        dist: list[float] = [math.inf] * self.n
        queue = []
        for v in initial:
            dist[v] = 0
            queue.append(v)
        for v in queue:
            for i in self.g[v]:
                u = self.edges[i].to
                if dist[u] > dist[v] + 1:
                    dist[u] = dist[v] + 1
                    queue.append(u)
        return dist

    def topsort(self) -> list[int]:
        """Topological order, or an empty list if there is a cycle."""
        degree = [0] * self.n
        for e in self.edges:
            degree[e.to] += 1
        queue = [v for v in range(self.n) if degree[v] == 0]
        for v in queue:
            for i in self.g[v]:
                u = self.edges[i].to
                degree[u] -= 1
                if degree[u] == 0:
                    queue.append(u)
        return queue if len(queue) == self.n else []

    def order(self) -> list[int]:
        """Vertices in decreasing DFS finishing time."""
        used = [False] * self.n
        result = []
        for start in range(self.n):
            if used[start]:
                continue
            used[start] = True
            stack = [(start, iter(self.g[start]))]
            while stack:
                v, it = stack[-1]
                for i in it:
                    u = self.edges[i].to
                    if not used[u]:
                        used[u] = True
                        stack.append((u, iter(self.g[u])))
                        break
                else:
                    stack.pop()
                    result.append(v)
        result.reverse()
        return result

    def scc(self) -> list[int]:
        """Component index of each vertex, numbered in topological order."""
        where = [self.n] * self.n
        rev = self.reversed()
        current = 0
        for v in self.order():
            if where[v] != self.n:
                continue
            where[v] = current
            stack = [v]
            while stack:
                x = stack.pop()
                for i in rev.g[x]:
                    u = rev.edges[i].to
                    if where[u] == self.n:
                        where[u] = current
                        stack.append(u)
            current += 1
        return where

    def build_dag(self, where: list[int], multiply_edges: bool) -> DirectedGraph:
        """Condensation by the component labels in where; parallel edges merged unless multiply_edges."""
        if self.n == 0:
            return DirectedGraph()
        dag = DirectedGraph(max(where) + 1)
        crossing = [(where[e.from_], where[e.to], e.cost) for e in self.edges if where[e.from_] != where[e.to]]
        if multiply_edges:
            for a, b, c in crossing:
                dag.add(a, b, c)
        else:
            crossing.sort(key=lambda t: (t[0], t[1]))
            for (a, b), group in groupby(crossing, key=lambda t: (t[0], t[1])):
                dag.add(a, b, sum(c for _, _, c in group))
        return dag

    def eulerian_path(self) -> list[int]:
        """Edge indices of a path using every edge once, or an empty list."""
        n = self.n
        touched = [False] * n
        balance = [0] * n
        for e in self.edges:
            touched[e.from_] = touched[e.to] = True
            balance[e.from_] += 1
            balance[e.to] -= 1
        first = next((v for v in range(n) if touched[v]), None)
        if first is None:
            return []
        start = first
        for v in range(first + 1, n):
            if not touched[v]:
                continue
            if balance[v] > 1 or (balance[v] == 1 and balance[start] == 1):
                return []
            if balance[v] > balance[start]:
                start = v

        ptr = [0] * n
        path = []
        stack = [(start, -1)]
        while stack:
            v, prev = stack[-1]
            if ptr[v] < len(self.g[v]):
                i = self.g[v][ptr[v]]
                ptr[v] += 1
                stack.append((self.edges[i].to, i))
            else:
                stack.pop()
                if prev != -1:
                    path.append(prev)
        if len(path) != len(self.edges):
            return []
        path.reverse()
        return path

    def build_path(self, edge_indices: list[int]) -> list[int]:
        """Vertices visited along the given edges."""
        if not edge_indices:
            return []
        path = [self.edges[i].from_ for i in edge_indices]
        path.append(self.edges[edge_indices[-1]].to)
        return path