"""Weighted linear basis over GF(2) with vectors stored as integers."""

from __future__ import annotations


class LinearBasis:
    """Linear basis of vectors in GF(2)^dimension, each with a non-negative weight.

    Insertion keeps, for every pivot bit, the heaviest vector available, so
    queries restricted to a minimum weight stay correct. Leave all weights
    at zero for an ordinary basis.
    """

    __slots__ = ("dimension", "vectors", "weights")

    def __init__(self, dimension):
        if dimension < 1:
            raise ValueError("dimension must be positive")
        self.dimension = dimension
        self.vectors = [0] * dimension
        self.weights = [0] * dimension

    def __getitem__(self, i):
        return self.vectors[i]

    def copy(self):
        """An independent copy of this basis."""
        other = LinearBasis(self.dimension)
        other.vectors = list(self.vectors)
        other.weights = list(self.weights)
        return other

    def insert(self, x, weight=0):
        """Insert ``x``; return True if the basis grew."""
        if x < 0:
            raise ValueError("vectors must be non-negative integers")
        for i in range(self.dimension - 1, -1, -1):
            if x >> i & 1:
                if self.vectors[i] == 0:
                    self.vectors[i] = x
                    self.weights[i] = weight
                    return True
                if weight > self.weights[i]:
                    self.vectors[i], x = x, self.vectors[i]
                    self.weights[i], weight = weight, self.weights[i]
                x ^= self.vectors[i]
        return False

    def min_xor(self, x, weight=0):
        """Smallest value of ``x`` xored with vectors of weight at least ``weight``."""
        for i in range(self.dimension - 1, -1, -1):
            if x >> i & 1 and self.weights[i] >= weight:
                x ^= self.vectors[i]
        return x

    def __add__(self, other):
        if not isinstance(other, LinearBasis):
            return NotImplemented
        if other.dimension != self.dimension:
            raise ValueError("bases have different dimensions")
        result = self.copy()
        for i in range(self.dimension - 1, -1, -1):
            result.insert(other.vectors[i], other.weights[i])
        return result

    def kth(self, k, weight=0):
        """The ``k``-th smallest (from 0) value spanned by vectors of weight >= ``weight``."""
        if k < 0:
            raise ValueError("k must be non-negative")
        chosen = [
            i for i in range(self.dimension)
            if self.vectors[i] and self.weights[i] >= weight
        ]
        remaining = len(chosen)
        if k >= 1 << remaining:
            raise IndexError("k exceeds the size of the span")
        result = 0
        for i in reversed(chosen):
            remaining -= 1
            if (result >> i & 1) != (k >> remaining & 1):
                result ^= self.vectors[i]
        return result


def intersect(a, b):
    """Basis of the intersection of the spans of two unweighted bases."""
    if a.dimension != b.dimension:
        raise ValueError("bases have different dimensions")
    d = a.dimension
    work = a.copy()
    for i in range(d):
        if work.vectors[i]:
            work.vectors[i] |= 1 << (d + i)
    mask = (1 << d) - 1
    result = LinearBasis(d)
    for i in range(d):
        x = work.min_xor(b.vectors[i])
        if x & mask:
            work.insert(x)
        else:
            y = 0
            for j in range(d):
                if x >> (d + j) & 1:
                    y ^= work.vectors[j]
            result.insert(y & mask)
    return result