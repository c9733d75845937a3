"""Prufer codes of labelled trees."""

from __future__ import annotations

from collections import deque


def build_prufer_code(edges: list[tuple[int, int]]) -> list[int]:
    """Prufer code of the tree with the given edges on vertices 0..len(edges)."""
    vertices = len(edges) + 1
    if vertices == 1:
        return []

    graph: list[list[int]] = [[] for _ in range(vertices)]
    for v, u in edges:
        if not (0 <= v < vertices and 0 <= u < vertices):
            raise ValueError(f"edge ({v}, {u}) is out of range")
        graph[v].append(u)
        graph[u].append(v)

    root = vertices - 1
    parent = [-1] * vertices
    degree = [0] * vertices
    seen = [False] * vertices
    seen[root] = True
    queue = deque([root])
    while queue:
        v = queue.popleft()
        for u in graph[v]:
            if not seen[u]:
                seen[u] = True
                parent[u] = v
                degree[v] += 1
                queue.append(u)
    if not all(seen):
        raise ValueError("edges do not form a tree")

    code = []
    pointer, option = 0, -1
    for _ in range(vertices - 2):
        if option == -1:
            while degree[pointer] > 0:
                pointer += 1
            option = pointer
            pointer += 1
        vertex = parent[option]
        code.append(vertex)
        option = -1
        degree[vertex] -= 1
        if degree[vertex] == 0 and vertex < pointer:
            option = vertex
    return code


def decode_prufer_code(prufer: list[int]) -> list[tuple[int, int]]:
    """Edges of the tree whose Prufer code is given."""
    vertices = len(prufer) + 2
    count = [0] * vertices
    for vertex in prufer:
        if not 0 <= vertex < vertices:
            raise ValueError(f"vertex {vertex} is out of range")
        count[vertex] += 1

    edges = []
    pointer, option = 0, -1
    for vertex in prufer:
        if option == -1:
            while count[pointer] > 0:
                pointer += 1
            option = pointer
            pointer += 1
        edges.append((vertex, option))
        option = -1
        count[vertex] -= 1
        if count[vertex] == 0 and vertex < pointer:
            option = vertex

    if vertices == 2 or prufer[-1] == vertices - 1:
        while count[pointer] > 0:
            pointer += 1
        edges.append((pointer, vertices - 1))
    else:
        edges.append((prufer[-1], vertices - 1))
    return edges