import pytest

from contestlib.modular import mod_log, mod_sqrt

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 41, 73, 97]


@pytest.mark.parametrize("p", [3, 7, 11, 13, 17, 41])
def test_mod_log_small(p):
    for a in range(1, p):
        for b in range(1, p):
            x = mod_log(a, b, p)
            exists = any(pow(a, e, p) == b for e in range(p))
            if exists:
                assert x is not None and x >= 0
                assert pow(a, x, p) == b
            else:
                assert x is None


def test_mod_log_large_prime():
    p = 998244353
    b = pow(3, 123456789, p)
    x = mod_log(3, b, p)
    assert pow(3, x, p) == b


def test_mod_log_bad_modulus():
    with pytest.raises(ValueError):
        mod_log(2, 1, 1)


@pytest.mark.parametrize("p", SMALL_PRIMES)
def test_mod_sqrt_small(p):
    squares = {x * x % p for x in range(p)}
    for a in range(p):
        r = mod_sqrt(a, p)
        if a in squares:
            assert r is not None
            assert r * r % p == a
        else:
            assert r is None


@pytest.mark.parametrize("x", [2, 12345, 998244352, 31415926])
def test_mod_sqrt_large_prime(x):
    p = 998244353
    a = x * x % p
    r = mod_sqrt(a, p)
    assert r * r % p == a


def test_mod_sqrt_non_residue():
    assert mod_sqrt(3, 998244353) is None


def test_mod_sqrt_bad_modulus():
    with pytest.raises(ValueError):
        mod_sqrt(1, 1)