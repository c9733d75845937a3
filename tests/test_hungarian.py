import itertools
import random

import pytest

from algolib.hungarian import Hungarian


def _assignment_cost(matrix, assignment):
    return sum(matrix[r][c] for r, c in enumerate(assignment))


def test_classic_example():
    matrix = [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    solver = Hungarian(matrix)
    assert solver.min_cost() == 5
    assert _assignment_cost(matrix, solver.row_match) == 5


@pytest.mark.parametrize("seed", range(8))
def test_optimal_against_all_permutations(seed):
    rng = random.Random(seed)
    n = 5
    matrix = [[rng.randint(-20, 50) for _ in range(n)] for _ in range(n)]
    solver = Hungarian(matrix)
    result = solver.min_cost()
    assert sorted(solver.row_match) == list(range(n))
    for r, c in enumerate(solver.row_match):
        assert solver.col_match[c] == r
    assert result == _assignment_cost(matrix, solver.row_match)
    assert all(result <= _assignment_cost(matrix, p) for p in itertools.permutations(range(n)))


def test_filled_matrix():
    solver = Hungarian.filled(3, 7)
    assert len(solver) == 3
    assert solver.min_cost() == 3 * 7


def test_item_assignment():
    solver = Hungarian.filled(2, 1)
    solver[0][1] = 0
    solver[1][0] = 0
    assert solver.min_cost() == 0
    assert solver.row_match == [1, 0]


def test_empty_matrix():
    assert Hungarian([]).min_cost() == 0


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Hungarian([[1, 2], [3]])