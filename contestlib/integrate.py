"""Numerical integration by Simpson's rule, fixed and adaptive."""

from __future__ import annotations


def simpson(f, a, b, n=1000):
    """Composite Simpson's rule on ``[a, b]`` with ``2 * n`` sub-intervals."""
    if n < 1:
        raise ValueError("n must be at least 1")
    h = (b - a) / (n * 2)
    total = f(a) + f(b)
    total += sum(f(a + h * i) * (4 if i & 1 else 2) for i in range(1, n * 2))
    return total * h / 3


def adaptive_simpson(f, a, b, eps=1e-8, depth=5):
    """Adaptive Simpson integration of ``f`` on ``[a, b]``.

    The interval is always split at least ``depth`` times before the error
    estimate is trusted.
    """

    def estimate(lo, hi):
        mid = (lo + hi) / 2
        return (f(lo) + f(mid) * 4 + f(hi)) * (hi - lo) / 6

    def refine(lo, hi, tol, whole, remaining):
        mid = (lo + hi) / 2
        left = estimate(lo, mid)
        right = estimate(mid, hi)
        combined = left + right
        if (abs(combined - whole) <= 15 * tol or hi - lo < 1e-10) and remaining <= 0:
            return combined + (combined - whole) / 15
        return refine(lo, mid, tol / 2, left, remaining - 1) + refine(
            mid, hi, tol / 2, right, remaining - 1
        )

    return refine(a, b, eps, estimate(a, b), depth)