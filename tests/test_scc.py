import random

import pytest

from algolib.scc import StronglyConnectedComponents


def _reach(n, edges, s):
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
    seen = {s}
    stack = [s]
    while stack:
        v = stack.pop()
        for u in adj[v]:
            if u not in seen:
                seen.add(u)
                stack.append(u)
    return seen


def _random_graph(seed, n, m):
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(m)]


@pytest.mark.parametrize("method", ["solve", "kosaraju"])
@pytest.mark.parametrize("seed", range(6))
def test_components_match_mutual_reachability(method, seed):
    n = 9
    edges = _random_graph(seed, n, 14)
    graph = StronglyConnectedComponents(n)
    for a, b in edges:
        graph.add(a, b)
    comp = getattr(graph, method)()
    reach = [_reach(n, edges, v) for v in range(n)]
    for v in range(n):
        for u in range(n):
            assert (comp[v] == comp[u]) == (u in reach[v] and v in reach[u])
    for a, b in edges:
        assert comp[a] <= comp[b]
    assert sorted(set(comp)) == list(range(len(set(comp))))


@pytest.mark.parametrize("seed", range(4))
def test_both_methods_agree_on_partition(seed):
    n = 10
    graph = StronglyConnectedComponents(n)
    for a, b in _random_graph(seed + 100, n, 18):
        graph.add(a, b)
    first, second = graph.solve(), graph.kosaraju()
    for v in range(n):
        for u in range(n):
            assert (first[v] == first[u]) == (second[v] == second[u])


def test_cycle_is_one_component():
    graph = StronglyConnectedComponents(4)
    for v in range(4):
        graph.add(v, (v + 1) % 4)
    assert len(set(graph.solve())) == 1
    assert len(graph) == 4


def test_empty_graph_and_bad_edge():
    assert StronglyConnectedComponents(0).solve() == []
    with pytest.raises(IndexError):
        StronglyConnectedComponents(2).add(0, 2)