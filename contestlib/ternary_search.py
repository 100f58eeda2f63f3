"""Minimisation of convex functions by nested ternary search."""

from __future__ import annotations

_ITERATIONS = 60


def recursive_ternary_search(lows, highs, f):
    """Approximate minimum of a convex ``f`` over the box ``lows``..``highs``.

    ``f`` takes a list with one coordinate per dimension; the minimum value
    found is returned.
    """
    if len(lows) != len(highs):
        raise ValueError("lows and highs must have the same length")
    dimension = len(lows)
    point = [0.0] * dimension

    def search(dep):
        if dep == dimension:
            return f(list(point))
        lo, hi = lows[dep], highs[dep]
        for _ in range(_ITERATIONS):
            m1 = (lo * 2 + hi) / 3
            m2 = (lo + hi * 2) / 3
            point[dep] = m1
            first = search(dep + 1)
            point[dep] = m2
            second = search(dep + 1)
            if first < second:
                hi = m2
            else:
                lo = m1
        point[dep] = (lo + hi) / 2
        return search(dep + 1)

    return search(0)