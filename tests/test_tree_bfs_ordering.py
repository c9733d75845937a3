import random
from collections import deque

from algolib.tree_bfs_ordering import TreeBfsOrdering


def _random_tree(n, seed):
    rng = random.Random(seed)
    t = TreeBfsOrdering(n)
    edges = [(rng.randrange(i), i) for i in range(1, n)]
    for v, u in edges:
        t.add(v, u)
    return t


def _dists(t, v):
    dist = {v: 0}
    q = deque([v])
    while q:
        x = q.popleft()
        for y in t.g[x]:
            if y not in dist:
                dist[y] = dist[x] + 1
                q.append(y)
    return dist


def test_order_is_bfs():
    t = _random_tree(20, 1)
    t.build(0)
    assert t.order[0] == 0
    assert sorted(t.order) == list(range(20))
    depths = [t.depth[v] for v in t.order]
    assert depths == sorted(depths)


def test_range_matches_subtree_level():
    t = _random_tree(30, 2)
    t.build(0)
    for v in range(30):
        for d in range(6):
            lo, hi = t.range(v, d)
            expected = {u for u in range(30) if t.is_ancestor(v, u) and t.depth[u] == t.depth[v] + d}
            assert set(t.order[lo:hi]) == expected


def test_ranges_cover_ball():
    t = _random_tree(25, 3)
    t.build(0)
    for v in range(25):
        dist = _dists(t, v)
        for k in range(4):
            got = [u for lo, hi in t.ranges(v, k) for u in t.order[lo:hi]]
            assert len(got) == len(set(got))
            assert set(got) == {u for u, d in dist.items() if d <= k}


def test_out_of_depth_range_is_empty():
    t = TreeBfsOrdering(2)
    t.add(0, 1)
    t.build(0)
    assert t.range(0, 5) == (0, 0)
    assert t.is_ancestor(0, 1) and not t.is_ancestor(1, 0)