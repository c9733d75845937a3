import itertools
import random

import pytest

from algolib.two_sat import TwoSat


def _satisfies(assignment, clauses):
    return all(
        assignment[c[0]] == c[1] if len(c) == 2 else assignment[c[0]] == c[1] or assignment[c[2]] == c[3]
        for c in clauses
    )


def _random_clauses(seed, n, m):
    rng = random.Random(seed)
    clauses = []
    for _ in range(m):
        if rng.random() < 0.2:
            clauses.append((rng.randrange(n), rng.random() < 0.5))
        else:
            clauses.append((rng.randrange(n), rng.random() < 0.5, rng.randrange(n), rng.random() < 0.5))
    return clauses


@pytest.mark.parametrize("seed", range(12))
def test_solution_is_valid_and_existence_is_exact(seed):
    n = 5
    clauses = _random_clauses(seed, n, 9)
    sat = TwoSat(n)
    for clause in clauses:
        sat.add(*clause)
    exists = any(_satisfies(a, clauses) for a in itertools.product([False, True], repeat=n))
    assert sat.any() == exists
    solution = sat.solve()
    if exists:
        assert len(solution) == n
        assert _satisfies(solution, clauses)
    else:
        assert solution == []


def test_contradicting_units():
    sat = TwoSat(2)
    sat.add(0, True)
    sat.add(0, False)
    assert not sat.any()
    assert sat.solve() == []


def test_unit_clause_forces_value():
    sat = TwoSat(2)
    sat.add(1, False)
    sat.add(1, True, 0, True)
    solution = sat.solve()
    assert solution[1] is False
    assert solution[0] is True


def test_bad_arguments():
    sat = TwoSat(2)
    assert len(sat) == 2
    with pytest.raises(IndexError):
        sat.add(2, True)
    with pytest.raises(ValueError):
        sat.add(0, True, 1)