import math

import pytest

from contestlib.factorization import factorize, is_prime, pollard_rho


def _trial_prime(n):
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def test_is_prime_matches_trial_division():
    for n in range(0, 3000):
        assert is_prime(n) == _trial_prime(n)


def test_is_prime_large_moduli():
    assert is_prime(998244353)
    assert is_prime(1000000007)
    assert not is_prime(998244353 * 1000000007)


@pytest.mark.parametrize("n", [1, 2, 12, 360, 9973, 2**10, 3**20, 600851475143, 1000000007 * 3])
def test_factorize_invariants(n):
    factors = factorize(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(_trial_prime(p) or is_prime(p) for p in factors)


def test_factorize_one_is_empty():
    assert factorize(1) == []


def test_factorize_power_of_two():
    assert factorize(2**10) == [2] * 10


def test_factorize_semiprime():
    assert factorize(1000000007 * 998244353) == [998244353, 1000000007]


@pytest.mark.parametrize("n", [4, 9, 15, 25, 91, 561, 1000000007 * 998244353])
def test_pollard_rho_finds_proper_factor(n):
    d = pollard_rho(n)
    assert 1 < d < n
    assert n % d == 0


def test_pollard_rho_prime_returns_itself():
    assert pollard_rho(1000000007) == 1000000007


def test_invalid_inputs():
    with pytest.raises(ValueError):
        factorize(0)
    with pytest.raises(ValueError):
        pollard_rho(1)