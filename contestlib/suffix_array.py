"""Suffix arrays for plain and cyclic strings, with constant-time LCP queries."""

from __future__ import annotations


def _compress(seq, offset):
    """Map every item to its rank among the distinct items, starting at ``offset``."""
    index = {value: i + offset for i, value in enumerate(sorted(set(seq)))}
    return [index[item] for item in seq]


def _cyclic_order(codes):
    """Order of the cyclic rotations of ``codes`` (values in ``0..len-1``) by doubling."""
    n = len(codes)
    sa = list(range(n))
    rank = list(codes)
    length = 0
    while length < n:
        starts = [0] * (n + 1)
        for value in rank:
            starts[value + 1] += 1
        for i in range(1, n):
            starts[i] += starts[i - 1]
        ordered = [0] * n
        for pos in sa:
            pos -= length
            if pos < 0:
                pos += n
            ordered[starts[rank[pos]]] = pos
            starts[rank[pos]] += 1
        sa = ordered

        new_rank = [0] * n
        r = 0
        prev = -1
        for p in sa:
            if prev != -1 and (
                rank[p] != rank[prev]
                or rank[(p + length) % n] != rank[(prev + length) % n]
            ):
                r += 1
            new_rank[p] = r
            prev = p
        rank = new_rank
        length = length * 2 if length else 1
    return sa


def _inverse(order):
    rank = [0] * len(order)
    for i, p in enumerate(order):
        rank[p] = i
    return rank


class SuffixArray:
    """Suffix array of a non-empty string or sequence of comparable items.

    ``sa[i]`` is the start of the ``i``-th smallest suffix, ``rank[i]`` the
    position of suffix ``i`` in that order and ``height[i]`` the longest
    common prefix of the suffixes starting at ``sa[i]`` and ``sa[i + 1]``.
    """

    def __init__(self, s):
        n = len(s)
        if n == 0:
            raise ValueError("sequence must not be empty")
        codes = _compress(s, 1)
        codes.append(0)
        self.n = n
        self.sa = _cyclic_order(codes)[1:]
        self.rank = _inverse(self.sa)
        height = [0] * (n - 1)
        length = 0
        for i in range(n):
            if length:
                length -= 1
            rk = self.rank[i]
            if rk == n - 1:
                continue
            j = self.sa[rk + 1]
            # The trailing sentinel is unique, so the scan always stops.
            while codes[i + length] == codes[j + length]:
                length += 1
            height[rk] = length
        self.height = height

    def __len__(self):
        return self.n


class SuffixArrayLCP(SuffixArray):
    """Suffix array with a sparse table answering suffix LCP queries in O(1)."""

    def __init__(self, s):
        super().__init__(s)
        level = self.height + [0]
        table = [level]
        width = 1
        while width * 2 <= self.n:
            level = [min(level[j], level[j + width]) for j in range(self.n - width * 2 + 1)]
            table.append(level)
            width *= 2
        self._table = table

    def lcp(self, i, j):
        """Longest common prefix of the suffixes at ``i`` and ``j`` (``i != j``)."""
        if i == self.n or j == self.n:
            return 0
        if i == j:
            raise ValueError("suffixes must be different")
        lo, hi = sorted((self.rank[i], self.rank[j]))
        k = (hi - lo).bit_length() - 1
        level = self._table[k]
        return min(level[lo], level[hi - (1 << k)])


class CyclicSuffixArray:
    """Sorted order of the cyclic rotations of a non-empty sequence.

    Appending a unique smallest item (such as ``"\\0"``) turns this into an
    ordinary suffix array preceded by that item's position.
    """

    def __init__(self, s):
        n = len(s)
        if n == 0:
            raise ValueError("sequence must not be empty")
        codes = _compress(s, 0)
        self.n = n
        self.sa = _cyclic_order(codes)
        self.rank = _inverse(self.sa)
        height = [0] * (n - 1)
        length = 0
        for i in range(n):
            if length:
                length -= 1
            rk = self.rank[i]
            if rk == n - 1:
                continue
            j = self.sa[rk + 1]
            while length < n and codes[(i + length) % n] == codes[(j + length) % n]:
                length += 1
            height[rk] = length
        self.height = height

    def __len__(self):
        return self.n