import random

import pytest

from algolib.prufer import build_prufer_code, decode_prufer_code


def _random_tree(rng, n):
    perm = list(range(n))
    rng.shuffle(perm)
    return [(perm[v], perm[rng.randrange(v)]) for v in range(1, n)]


def _normal(edges):
    return sorted(tuple(sorted(e)) for e in edges)


@pytest.mark.parametrize("seed", range(10))
def test_tree_round_trip(seed):
    rng = random.Random(seed)
    n = rng.randrange(2, 15)
    edges = _random_tree(rng, n)
    code = build_prufer_code(edges)
    assert len(code) == n - 2
    assert _normal(decode_prufer_code(code)) == _normal(edges)


@pytest.mark.parametrize("seed", range(10))
def test_code_round_trip(seed):
    rng = random.Random(seed)
    n = rng.randrange(2, 12)
    code = [rng.randrange(n) for _ in range(n - 2)]
    edges = decode_prufer_code(code)
    assert len(edges) == n - 1
    assert build_prufer_code(edges) == code


def test_small_trees():
    assert build_prufer_code([]) == []
    assert build_prufer_code([(0, 1)]) == []
    assert decode_prufer_code([]) == [(0, 1)]
    assert build_prufer_code([(0, 1), (0, 2), (0, 3)]) == [0, 0]


def test_degree_matches_occurrences():
    rng = random.Random(42)
    edges = _random_tree(rng, 12)
    code = build_prufer_code(edges)
    for v in range(12):
        degree = sum(v in e for e in edges)
        assert code.count(v) == degree - 1


def test_invalid_input():
    with pytest.raises(ValueError):
        build_prufer_code([(0, 1), (0, 1)])
    with pytest.raises(ValueError):
        build_prufer_code([(0, 5)])
    with pytest.raises(ValueError):
        decode_prufer_code([7])