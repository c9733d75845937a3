from fractions import Fraction

import pytest

from algolib.linear_algebra import Gauss, Matrix


def _system(a, x):
    n = len(a)
    g = Gauss(n)
    for i in range(n):
        for j in range(n):
            g[i][j] = Fraction(a[i][j])
        g[i][n] = -sum(Fraction(a[i][j]) * x[j] for j in range(n))
    return g


def test_gauss_solves_diagonally_dominant_system():
    a = [[5, 1, 2], [1, 6, -1], [2, -1, 7]]
    x = [Fraction(1), Fraction(-2), Fraction(3, 4)]
    assert _system(a, x).solutions() == x


def test_gauss_handles_pivot_off_diagonal():
    a = [[0, 1, 2], [1, 0, 0], [3, 4, 1]]
    x = [Fraction(2), Fraction(-1), Fraction(5)]
    assert _system(a, x).solutions() == x


def test_gauss_leaves_free_unknown_at_zero():
    a = [[2, 0], [4, 0]]
    x = [Fraction(3), Fraction(0)]
    result = _system(a, x).solutions()
    assert result[0] == x[0]
    assert result[1] == 0


def test_gauss_float_tolerance():
    g = Gauss(2, is_zero=lambda v: abs(v) < 1e-9)
    g[0][:] = [2.0, 1.0, -5.0]
    g[1][:] = [1.0, 3.0, -10.0]
    x, y = g.solutions()
    assert abs(2 * x + y - 5) < 1e-9
    assert abs(x + 3 * y - 10) < 1e-9
    assert len(g) == 2


def test_matrix_power_matches_repeated_product():
    a = Matrix([[1, 2], [3, 4]])
    assert a.power(5) == a * a * a * a * a
    assert a.power(0) == Matrix.identity(2)
    assert a.power(1) == a


def test_matrix_fibonacci():
    assert Matrix([[1, 1], [1, 0]]).power(10)[0][1] == 55


def test_matrix_shape_and_product():
    a = Matrix([[1, 2, 3]])
    b = Matrix([[1], [1], [1]])
    assert a.shape() == (1, 3)
    assert Matrix().shape() == (0, 0)
    assert (b * a).shape() == (3, 3)
    assert (a * b)[0][0] == sum(a[0])
    assert Matrix.zeros(2, 3).shape() == (2, 3)


def test_matrix_errors():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) * Matrix([[1, 2]])
    with pytest.raises(ValueError):
        Matrix([[1, 2]]).power(2)
    with pytest.raises(ValueError):
        Matrix.identity(2).power(-1)