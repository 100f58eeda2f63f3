import random

import pytest

from contestlib.modint import ModInt
from contestlib.walsh import fwt_and, fwt_eval, fwt_or, fwt_xor


def _random(seed, n):
    rng = random.Random(seed)
    return [rng.randrange(-50, 50) for _ in range(n)]


def test_or_small_example():
    assert fwt_or([1, 2, 3, 4]) == [1, 3, 4, 10]


def test_and_small_example():
    assert fwt_and([1, 2, 3, 4]) == [10, 6, 7, 4]


def test_xor_small_example():
    assert fwt_xor([1, 2, 3, 4]) == [10, -2, -4, 0]


@pytest.mark.parametrize("transform", [fwt_or, fwt_and, fwt_xor])
@pytest.mark.parametrize("n", [1, 2, 16])
def test_round_trip(transform, n):
    values = _random(n, n)
    assert transform(transform(values), inverse=True) == values


def test_totals_land_where_expected():
    values = _random(5, 8)
    assert fwt_or(values)[-1] == sum(values)
    assert fwt_and(values)[0] == sum(values)
    assert fwt_xor(values)[0] == sum(values)


def test_xor_twice_scales_by_length():
    values = _random(6, 16)
    assert fwt_xor(fwt_xor(values)) == [16 * v for v in values]


def test_or_convolution_with_empty_set_is_identity():
    b = _random(7, 8)
    delta = [1] + [0] * 7
    product = [x * y for x, y in zip(fwt_or(delta), fwt_or(b))]
    assert fwt_or(product, inverse=True) == b


def test_and_convolution_with_full_set_is_identity():
    b = _random(8, 8)
    delta = [0] * 7 + [1]
    product = [x * y for x, y in zip(fwt_and(delta), fwt_and(b))]
    assert fwt_and(product, inverse=True) == b


def test_eval_matches_full_transform():
    values = _random(9, 32)
    full = fwt_xor(values)
    assert [fwt_eval(values, i) for i in range(32)] == full


def test_xor_inverse_with_modular_values():
    values = [ModInt(v) for v in _random(10, 8)]
    assert fwt_xor(fwt_xor(values), inverse=True) == values


def test_input_not_modified():
    values = [1, 2, 3, 4]
    fwt_xor(values)
    assert values == [1, 2, 3, 4]


@pytest.mark.parametrize("transform", [fwt_or, fwt_and, fwt_xor])
def test_length_must_be_power_of_two(transform):
    with pytest.raises(ValueError):
        transform([1, 2, 3])