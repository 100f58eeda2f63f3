"""Bit-parallel vectors over the field with three elements."""

from __future__ import annotations


class Z3Vector:
    """A vector in Z_3^size stored as three bit masks, one per digit value."""

    __slots__ = ("size", "_masks")

    def __init__(self, size, values=()):
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._masks = [self._full, 0, 0]
        for pos, value in enumerate(values):
            self.set(pos, value)

    @property
    def _full(self):
        return (1 << self.size) - 1

    @classmethod
    def _from_masks(cls, size, masks):
        vec = cls(size)
        vec._masks = list(masks)
        return vec

    def _check(self, pos):
        if not 0 <= pos < self.size:
            raise IndexError("position out of range")

    def set(self, pos, value):
        """Set the digit at ``pos`` to ``value`` (taken modulo 3)."""
        self._check(pos)
        value %= 3
        bit = 1 << pos
        self._masks = [m | bit if i == value else m & ~bit for i, m in enumerate(self._masks)]

    def __getitem__(self, pos):
        self._check(pos)
        zero, one, _ = self._masks
        if zero >> pos & 1:
            return 0
        if one >> pos & 1:
            return 1
        return 2

    def __len__(self):
        return self.size

    def _same_size(self, other):
        if other.size != self.size:
            raise ValueError("vectors have different sizes")

    def __add__(self, other):
        if not isinstance(other, Z3Vector):
            return NotImplemented
        self._same_size(other)
        a0, a1, a2 = self._masks
        b0, b1, b2 = other._masks
        r0 = (a0 & b0) | (a1 & b2) | (a2 & b1)
        r1 = (a0 & b1) | (a1 & b0) | (a2 & b2)
        r2 = self._full & ~r0 & ~r1
        return self._from_masks(self.size, (r0, r1, r2))

    def __neg__(self):
        a0, a1, a2 = self._masks
        return self._from_masks(self.size, (a0, a2, a1))

    def __sub__(self, other):
        if not isinstance(other, Z3Vector):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar):
        if not isinstance(scalar, int):
            return NotImplemented
        scalar %= 3
        if scalar == 0:
            return Z3Vector(self.size)
        if scalar == 2:
            return -self
        return self._from_masks(self.size, self._masks)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar % 3 == 0:
            raise ZeroDivisionError("division by zero in Z_3")
        # 1 and 2 are their own inverses modulo 3.
        return self * scalar

    def __eq__(self, other):
        if not isinstance(other, Z3Vector):
            return NotImplemented
        return self.size == other.size and self._masks == other._masks

    __hash__ = None

    def __str__(self):
        return "".join(str(self[i]) for i in range(self.size))

    def __repr__(self):
        return f"Z3Vector({self.size}, {[self[i] for i in range(self.size)]})"