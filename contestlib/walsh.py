"""Fast Walsh-Hadamard style transforms for or/and/xor convolutions."""

from __future__ import annotations


def _check_length(n):
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")


def _blocks(n):
    s = 1
    while s < n:
        for start in range(0, n, s << 1):
            yield s, range(start, start + s)
        s <<= 1


def fwt_or(values, inverse=False):
    """Subset-sum transform: result[i] sums values[j] over subsets j of i."""
    a = list(values)
    _check_length(len(a))
    for s, lows in _blocks(len(a)):
        for j in lows:
            if inverse:
                a[j + s] -= a[j]
            else:
                a[j + s] += a[j]
    return a


def fwt_and(values, inverse=False):
    """Superset-sum transform: result[i] sums values[j] over supersets j of i."""
    a = list(values)
    _check_length(len(a))
    for s, lows in _blocks(len(a)):
        for j in lows:
            if inverse:
                a[j] -= a[j + s]
            else:
                a[j] += a[j + s]
    return a


def fwt_xor(values, inverse=False):
    """Walsh-Hadamard transform; the inverse divides by the length."""
    a = list(values)
    n = len(a)
    _check_length(n)
    for s, lows in _blocks(n):
        for j in lows:
            x, y = a[j], a[j + s]
            a[j] = x + y
            a[j + s] = x - y
    if inverse:
        a = [x // n if isinstance(x, int) else x / n for x in a]
    return a


def fwt_eval(values, index):
    """Entry ``index`` of the Walsh-Hadamard transform of ``values`` in O(n)."""
    return sum(
        (-v if (i & index).bit_count() & 1 else v for i, v in enumerate(values)),
        0,
    )