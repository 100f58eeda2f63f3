"""Lagrange interpolation modulo a prime."""

from __future__ import annotations

from .modint import DEFAULT_MOD


def lagrange_interpolate(xs, ys, k, mod=DEFAULT_MOD):
    """Value at ``k`` of the polynomial through the points ``(xs[i], ys[i])``."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    xs = [x % mod for x in xs]
    k %= mod
    total = 0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        num = yi % mod
        den = 1
        for j, xj in enumerate(xs):
            if i != j:
                num = num * (k - xj) % mod
                den = den * (xi - xj) % mod
        if den == 0:
            raise ValueError("interpolation nodes must be distinct modulo mod")
        total = (total + num * pow(den, mod - 2, mod)) % mod
    return total


def lagrange_consecutive(ys, m, mod=DEFAULT_MOD):
    """Value at ``m`` of the polynomial with ``f(i) == ys[i]`` for ``i = 0..n``."""
    n = len(ys) - 1
    if n < 0:
        raise ValueError("need at least one sample")
    if 0 <= m <= n:
        return ys[m] % mod
    if n >= mod:
        raise ValueError("too many samples for this modulus")
    factorials = [1] * (n + 1)
    for i in range(1, n + 1):
        factorials[i] = factorials[i - 1] * i % mod
    terms = [(m - i) % mod for i in range(n + 1)]
    prefix = [1] * (n + 2)
    for i, t in enumerate(terms):
        prefix[i + 1] = prefix[i] * t % mod
    suffix = [1] * (n + 2)
    for i in range(n, -1, -1):
        suffix[i] = suffix[i + 1] * terms[i] % mod
    total = 0
    for i, y in enumerate(ys):
        numerator = prefix[i] * suffix[i + 1] % mod
        denominator = factorials[i] * factorials[n - i] % mod
        if (n - i) % 2:
            denominator = mod - denominator
        total = (total + y * numerator % mod * pow(denominator, mod - 2, mod)) % mod
    return total