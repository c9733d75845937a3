"""Chromatic numbers of all vertex subsets and an optimal colouring."""

from __future__ import annotations

MOD = 998244353


def _adjacency(n: int, edges: list[tuple[int, int]]) -> list[int]:
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    adj = [0] * n
    for v, u in edges:
        if not (0 <= v < n and 0 <= u < n):
            raise ValueError(f"edge ({v}, {u}) is out of range")
        adj[v] |= 1 << u
        adj[u] |= 1 << v
    return adj


def chromatic_number(n: int, edges: list[tuple[int, int]]) -> list[int]:
    """Chromatic number of the induced subgraph for every vertex subset, indexed by bitmask."""
    adj = _adjacency(n, edges)
    size = 1 << n

    independent = [0] * size
    independent[0] = 1
    for mask in range(1, size):
        low = mask & -mask
        v = low.bit_length() - 1
        rest = mask ^ low
        independent[mask] = (independent[rest] + independent[rest & ~adj[v]]) % MOD

    value = [1 if (n - mask.bit_count()) % 2 == 0 else MOD - 1 for mask in range(size)]
    chromatic = [n] * size
    for x in range(n):
        if chromatic[-1] != n:
            break
        subset_sum = value.copy()
        for bit in range(n):
            step = 1 << bit
            for mask in range(size):
                if mask & step:
                    subset_sum[mask] = (subset_sum[mask] + subset_sum[mask ^ step]) % MOD
        for mask, total in enumerate(subset_sum):
            if chromatic[mask] == n and total:
                chromatic[mask] = x
        value = [a * b % MOD for a, b in zip(value, independent)]
    return chromatic


def find_coloring(n: int, edges: list[tuple[int, int]]) -> list[int]:
    """A colouring with the minimum number of colours; colours are numbered from 0."""
    adj = _adjacency(n, edges)
    size = 1 << n

    independent = [True] * size
    for mask in range(1, size):
        low = mask & -mask
        v = low.bit_length() - 1
        independent[mask] = independent[mask ^ low] and not adj[v] & mask

    chromatic = chromatic_number(n, edges)
    free_color = 0
    vset = size - 1
    color = [-1] * n
    for mask in range(size - 1, -1, -1):
        if mask & vset == mask and chromatic[mask] == chromatic[vset] - 1 and independent[vset ^ mask]:
            taken = vset ^ mask
            for v in range(n):
                if taken >> v & 1:
                    color[v] = free_color
            vset = mask
            free_color += 1

    if vset:
        raise ValueError("graph has no proper colouring")
    return color