"""Manacher's algorithm for maximal palindromes at every centre."""

from __future__ import annotations


def manacher(s):
    """Palindrome radii at all ``2n - 1`` centres of ``s``.

    ``result[2*i] = r`` means ``s[i-r+1 : i+r]`` is the maximal palindrome
    centred at ``i``; ``result[2*i+1] = r`` means ``s[i-r+1 : i+r+1]`` is the
    maximal palindrome centred between ``i`` and ``i + 1``.
    """
    n = len(s)
    if n == 0:
        return []
    radius = [1] * (n * 2 - 1)
    j = 0
    for i in range(1, n * 2 - 1):
        p = i // 2
        q = i - p
        reach = (j + 1) // 2 + radius[j] - 1
        radius[i] = 0 if reach < q else min(reach - q + 1, radius[j * 2 - i])
        while (
            p > radius[i] - 1
            and q + radius[i] < n
            and s[p - radius[i]] == s[q + radius[i]]
        ):
            radius[i] += 1
        if q + radius[i] - 1 > reach:
            j = i
    return radius