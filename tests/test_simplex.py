import itertools

import pytest

from contestlib.simplex import SimplexStatus, simplex

TOL = 1e-7


def feasible(a, b, x):
    return all(v >= -TOL for v in x) and all(
        sum(r * v for r, v in zip(row, x)) <= bound + TOL for row, bound in zip(a, b)
    )


def objective(c, x):
    return sum(p * v for p, v in zip(c, x))


def test_single_variable_bound():
    status, x = simplex([[1]], [5], [1])
    assert status is SimplexStatus.OPTIMAL
    assert x == pytest.approx([5.0])


def test_two_variable_optimum_beats_grid():
    a = [[1, 2], [3, 1]]
    b = [4, 6]
    c = [1, 1]
    status, x = simplex(a, b, c)
    assert status is SimplexStatus.OPTIMAL
    assert feasible(a, b, x)
    best = objective(c, x)
    for p in itertools.product([i / 10 for i in range(41)], repeat=2):
        if feasible(a, b, p):
            assert best >= objective(c, p) - TOL


def test_needs_phase_one():
    a = [[-1, -1], [1, 0], [0, 1]]
    b = [-2, 3, 3]
    c = [-1, -2]
    status, x = simplex(a, b, c)
    assert status is SimplexStatus.OPTIMAL
    assert feasible(a, b, x)
    assert objective(c, x) >= objective(c, [2, 0]) - TOL


def test_infeasible():
    status, x = simplex([[1]], [-1], [1])
    assert status is SimplexStatus.INFEASIBLE
    assert x is None


def test_unbounded():
    status, x = simplex([[-1]], [1], [1])
    assert status is SimplexStatus.UNBOUNDED
    assert x is None


def test_bad_dimensions_raise():
    with pytest.raises(ValueError):
        simplex([], [], [1])
    with pytest.raises(ValueError):
        simplex([[1, 2]], [1], [1])