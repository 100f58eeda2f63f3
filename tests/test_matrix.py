from fractions import Fraction

import pytest

from contestlib.matrix import Matrix, solve_linear


def frac_matrix(rows):
    return Matrix([[Fraction(x) for x in row] for row in rows])


def identity(n):
    return Matrix([[1 if i == j else 0 for j in range(n)] for i in range(n)])


def test_add_then_subtract_round_trip():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, -1], [0, 7]])
    assert (a + b) - b == a


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) + Matrix([[1], [2]])
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) * Matrix([[1, 2]])


def test_multiply_by_identity():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    assert a * identity(3) == a
    assert identity(2) * a == a


def test_transpose_twice_and_product_rule():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    b = Matrix([[1, 0], [2, 1], [0, 3]])
    assert a.transpose().transpose() == a
    assert a.transpose().shape == (3, 2)
    assert (a * b).transpose() == b.transpose() * a.transpose()


def test_inverse_gives_identity():
    a = frac_matrix([[2, 1, 0], [1, 3, 1], [0, 1, 4]])
    inv = a.inverse()
    assert a * inv == identity(3)
    assert inv * a == identity(3)


def test_singular_inverse_raises():
    with pytest.raises(ValueError):
        frac_matrix([[1, 2], [2, 4]]).inverse()


def test_non_square_inverse_raises():
    with pytest.raises(ValueError):
        frac_matrix([[1, 2, 3], [4, 5, 6]]).inverse()


def test_gaussian_rank():
    assert frac_matrix([[1, 2, 3], [2, 4, 6], [1, 0, 1]]).gaussian(3) == 2
    assert frac_matrix([[1, 0], [0, 1]]).gaussian(2) == 2


def test_gaussian_too_many_columns_raises():
    with pytest.raises(ValueError):
        frac_matrix([[1, 2]]).gaussian(3)


def test_solve_unique_system():
    a = frac_matrix([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
    b = [Fraction(8), Fraction(-11), Fraction(-3)]
    x = solve_linear(a, b)
    assert [sum(r * v for r, v in zip(row, x)) for row in a.rows] == b


def test_solve_underdetermined_system():
    a = frac_matrix([[1, 1, 1]])
    x = solve_linear(a, [Fraction(5)])
    assert sum(x) == 5
    assert len(x) == 3


def test_solve_inconsistent_returns_none():
    a = frac_matrix([[1, 1], [1, 1]])
    assert solve_linear(a, [Fraction(1), Fraction(2)]) is None


def test_solve_with_floats():
    a = Matrix([[1.0, 2.0], [3.0, 4.0]])
    x = solve_linear(a, [5.0, 6.0])
    assert a[0][0] * x[0] + a[0][1] * x[1] == pytest.approx(5.0)
    assert a[1][0] * x[0] + a[1][1] * x[1] == pytest.approx(6.0)


def test_solve_wrong_length_raises():
    with pytest.raises(ValueError):
        solve_linear(frac_matrix([[1, 2]]), [1, 2])


def test_empty_matrix_rejected():
    with pytest.raises(ValueError):
        Matrix([])
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])