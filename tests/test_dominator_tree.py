import random

import pytest

from algolib.dominator_tree import DominatorTree


def _reachable(n, edges, s, removed=None):
    if s == removed:
        return set()
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
    seen = {s}
    stack = [s]
    while stack:
        v = stack.pop()
        for u in adj[v]:
            if u != removed and u not in seen:
                seen.add(u)
                stack.append(u)
    return seen


def _check(n, edges, s, dom):
    base = _reachable(n, edges, s)
    without = {w: _reachable(n, edges, s, removed=w) for w in range(n)}
    for v in range(n):
        if v not in base:
            assert dom[v] == -1
            continue
        if v == s:
            assert dom[v] == s
            continue
        d = dom[v]
        assert d != v
        assert v not in without[d]
        for w in base:
            if w in (v, d):
                continue
            if v not in without[w]:
                assert d not in without[w]


def _build(n, edges):
    tree = DominatorTree(n)
    for a, b in edges:
        tree.add(a, b)
    return tree


@pytest.mark.parametrize("seed", range(15))
def test_random_graphs_satisfy_definition(seed):
    rng = random.Random(seed)
    n = 8
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(rng.randrange(6, 18))]
    s = rng.randrange(n)
    dom = _build(n, edges).solve(s)
    _check(n, edges, s, dom)


def test_chain():
    edges = [(0, 1), (1, 2)]
    assert _build(3, edges).solve(0) == [0, 0, 1]


def test_diamond_with_unreachable_vertex():
    n = 5
    edges = [(0, 1), (0, 2), (1, 3), (2, 3), (4, 0), (3, 3)]
    dom = _build(n, edges).solve(0)
    assert dom[3] == 0
    assert dom[4] == -1
    _check(n, edges, 0, dom)


def test_bad_arguments():
    tree = DominatorTree(2)
    with pytest.raises(IndexError):
        tree.add(0, 5)
    with pytest.raises(IndexError):
        tree.solve(2)