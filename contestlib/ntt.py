"""Number theoretic transform and exact convolution modulo an NTT-friendly prime."""

from __future__ import annotations

from functools import lru_cache

DEFAULT_MOD = 998244353
_NAIVE_LIMIT = 128


@lru_cache(maxsize=None)
def _root(mod):
    # Not necessarily a primitive root, but its order holds the full 2-part of mod - 1.
    root = 2
    while pow(root, (mod - 1) // 2, mod) == 1:
        root += 1
    return root


def _bit_reverse_in_place(values):
    n = len(values)
    shift = n.bit_length() - 1
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (shift - 1))
        if rev[i] > i:
            values[i], values[rev[i]] = values[rev[i]], values[i]


def ntt(values, inverse=False, mod=DEFAULT_MOD):
    """Return the number theoretic transform of ``values`` modulo ``mod``.

    The length must be a power of two dividing ``mod - 1``. With ``inverse``
    the inverse transform (including the division by the length) is returned.
    """
    a = [int(v) % mod for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    if (mod - 1) % n:
        raise ValueError("transform length must divide mod - 1")
    _bit_reverse_in_place(a)
    root = _root(mod)
    step = 1
    while step < n:
        zeta = pow(root, (mod - 1) // (step << 1), mod)
        if inverse:
            zeta = pow(zeta, mod - 2, mod)
        ws = [1] * step
        for i in range(1, step):
            ws[i] = ws[i - 1] * zeta % mod
        for start in range(0, n, step << 1):
            for j, w in enumerate(ws, start):
                x = a[j]
                y = a[j + step] * w % mod
                a[j] = (x + y) % mod
                a[j + step] = (x - y) % mod
        step <<= 1
    if inverse:
        inv_n = pow(n, mod - 2, mod)
        a = [x * inv_n % mod for x in a]
    return a


def convolve(a, b, mod=DEFAULT_MOD):
    """Convolution of two integer sequences modulo ``mod``."""
    a = [int(x) % mod for x in a]
    b = [int(x) % mod for x in b]
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    if min(len(a), len(b)) <= _NAIVE_LIMIT:
        result = [0] * size
        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b, i):
                    result[j] += x * y
        return [v % mod for v in result]
    length = 1 << (size - 1).bit_length()
    fa = ntt(a + [0] * (length - len(a)), mod=mod)
    fb = fa if a == b else ntt(b + [0] * (length - len(b)), mod=mod)
    product = [x * y % mod for x, y in zip(fa, fb)]
    return ntt(product, inverse=True, mod=mod)[:size]