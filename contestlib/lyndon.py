"""Duval's algorithm for the Lyndon factorisation of a string."""

from __future__ import annotations


def duval(s):
    """Lyndon factorisation of ``s`` as a list of inclusive ``(left, right)`` pairs."""
    n = len(s)
    i = 0
    factors = []
    while i < n:
        j, k = i + 1, i
        while j < n and s[k] <= s[j]:
            k = i if s[k] < s[j] else k + 1
            j += 1
        while i <= k:
            factors.append((i, i + j - k - 1))
            i += j - k
    return factors