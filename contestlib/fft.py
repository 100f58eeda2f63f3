"""Floating point fast Fourier transform and convolutions built on it."""

from __future__ import annotations

import cmath
import math


def _check_length(n):
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")


def _padded_length(size):
    return 1 << (size - 1).bit_length()


def fft(values, inverse=False):
    """Return the discrete Fourier transform of ``values`` (length a power of two).

    With ``inverse`` the inverse transform, divided by the length, is returned.
    """
    a = [complex(v) for v in values]
    n = len(a)
    _check_length(n)
    shift = n.bit_length() - 1
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (shift - 1))
        if rev[i] > i:
            a[i], a[rev[i]] = a[rev[i]], a[i]
    sign = -1.0 if inverse else 1.0
    step = 1
    while step < n:
        # Computing each twiddle directly is more precise than powers of one root.
        ws = [cmath.rect(1.0, sign * math.pi * j / step) for j in range(step)]
        for start in range(0, n, step << 1):
            for j, w in enumerate(ws, start):
                tmp = w * a[j + step]
                a[j + step] = a[j] - tmp
                a[j] += tmp
        step <<= 1
    if inverse:
        a = [x / n for x in a]
    return a


def _transform_padded(values, length):
    return fft(list(values) + [0] * (length - len(values)))


def _complex_product(a, b):
    size = len(a) + len(b) - 1
    length = _padded_length(size)
    fa = _transform_padded(a, length)
    fb = _transform_padded(b, length)
    return fft([x * y for x, y in zip(fa, fb)], inverse=True)[:size]


def convolve_float(a, b):
    """Convolution of two real sequences as floats."""
    if not a or not b:
        return []
    return [x.real for x in _complex_product(a, b)]


def convolve_int(a, b):
    """Convolution of two integer sequences, rounded to integers."""
    if not a or not b:
        return []
    return [int(x.real + 0.5) for x in _complex_product(a, b)]


def convolve_mod(a, b, mod):
    """Convolution of integer sequences modulo an arbitrary ``mod < 2**31``."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    if not a or not b:
        return []
    a = [x % mod for x in a]
    b = [x % mod for x in b]
    split = int(math.sqrt(mod) + 0.5)
    size = len(a) + len(b) - 1
    length = _padded_length(size)
    a_hi = _transform_padded([x // split for x in a], length)
    a_lo = _transform_padded([x % split for x in a], length)
    b_hi = _transform_padded([x // split for x in b], length)
    b_lo = _transform_padded([x % split for x in b], length)
    result = [0] * size

    def accumulate(x, y, weight):
        tmp = fft([p * q for p, q in zip(x, y)], inverse=True)
        for i, v in enumerate(tmp[:size]):
            result[i] = (result[i] + int(v.real + 0.5) % mod * weight) % mod

    accumulate(a_hi, b_hi, split * split % mod)
    accumulate(a_lo, b_lo, 1)
    accumulate(a_hi, b_lo, split)
    accumulate(a_lo, b_hi, split)
    return result