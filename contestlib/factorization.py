"""Miller-Rabin primality test and Pollard's rho factorization."""

from __future__ import annotations

import math
from itertools import count

_BASES = (2, 3, 5, 7, 11, 13, 17, 23, 29)


def _ctz(value):
    return (value & -value).bit_length() - 1


def _passes(n, a):
    if n == a:
        return True
    if n % 2 == 0:
        return False
    d = (n - 1) >> _ctz(n - 1)
    r = pow(a, d, n)
    while d < n - 1 and r != 1 and r != n - 1:
        d <<= 1
        r = r * r % n
    return r == n - 1 or bool(d & 1)


def is_prime(n):
    """Deterministic Miller-Rabin test for 64-bit sized integers."""
    if n < 2:
        return False
    if n == 2:
        return True
    return all(_passes(n, a) for a in _BASES)


def pollard_rho(n):
    """Return a nontrivial factor of ``n``, or ``n`` itself if it is prime."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if is_prime(n):
        return n
    if n % 2 == 0:
        return 2
    for c in count(1):
        x = c
        y = (x * x + c) % n
        while True:
            p = math.gcd(y - x + n, n)
            if p == n:
                break
            if p != 1:
                return p
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
    raise AssertionError("unreachable")


def factorize(n):
    """Sorted list of prime factors of ``n`` with multiplicity."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    pending = [n]
    while pending:
        x = pending.pop()
        if x == 1:
            continue
        if is_prime(x):
            factors.append(x)
        else:
            d = pollard_rho(x)
            pending.extend((d, x // d))
    factors.sort()
    return factors