"""Fast subset (zeta) transform and subset convolution."""

from __future__ import annotations


def _check_length(n):
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")


def subset_zeta(values, inverse=False):
    """Zeta transform over subsets (or its Moebius inverse)."""
    a = list(values)
    n = len(a)
    _check_length(n)
    s = 1
    while s < n:
        for i in range(n):
            if i & s:
                if inverse:
                    a[i] -= a[i ^ s]
                else:
                    a[i] += a[i ^ s]
        s <<= 1
    return a


def subset_convolution(a, b):
    """Return c with ``c[z] = sum(a[x] * b[y])`` over disjoint x, y with ``x | y == z``."""
    n = len(a)
    _check_length(n)
    if len(b) != n:
        raise ValueError("sequences must have the same length")
    k = n.bit_length() - 1
    ps = [[0] * n for _ in range(k + 1)]
    qs = [[0] * n for _ in range(k + 1)]
    for x, (u, v) in enumerate(zip(a, b)):
        ps[x.bit_count()][x] = u
        qs[x.bit_count()][x] = v
    ps = [subset_zeta(row) for row in ps]
    qs = [subset_zeta(row) for row in qs]
    rs = [[0] * n for _ in range(k + 1)]
    for i, p_row in enumerate(ps):
        for j in range(k + 1 - i):
            row = rs[i + j]
            for x, (p, q) in enumerate(zip(p_row, qs[j])):
                row[x] += p * q
    rs = [subset_zeta(row, inverse=True) for row in rs]
    return [rs[x.bit_count()][x] for x in range(n)]