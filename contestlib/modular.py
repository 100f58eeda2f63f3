"""Discrete logarithm and modular square root modulo a prime."""

from __future__ import annotations

import math


def mod_log(a, b, p):
    """Find ``x`` with ``a**x == b (mod p)`` by baby-step giant-step, or None."""
    if p < 2:
        raise ValueError("modulus must be at least 2")
    a %= p
    b %= p
    size = math.isqrt(p - 1) + 1
    table = {}
    c = 1
    for j in range(1, size + 1):
        c = c * a % p
        table[b * c % p] = j
    d = 1
    for i in range(1, size + 1):
        d = d * c % p
        j = table.get(d)
        if j is not None:
            return i * size - j
    return None


def mod_sqrt(a, p):
    """Tonelli-Shanks: some ``x`` with ``x*x == a (mod p)`` for prime p, or None."""
    if p < 2:
        raise ValueError("modulus must be a prime")
    a %= p
    if p == 2:
        return a
    half = (p - 1) // 2
    if pow(a, half, p) == p - 1:
        return None
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)
    b = 1
    while pow(b, half, p) == 1:
        b += 1
    d, k = half, 0
    while d % 2 == 0:
        d //= 2
        k //= 2
        if (pow(a, d, p) * pow(b, k, p) + 1) % p == 0:
            k += half
    return pow(a, (d + 1) // 2, p) * pow(b, k // 2, p) % p