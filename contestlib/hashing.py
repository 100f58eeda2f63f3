"""Double polynomial hashing modulo two primes."""

from __future__ import annotations

from functools import total_ordering

DEFAULT_MODULI = (1000000007, 1000050131)
DEFAULT_BASE = (73, 131)


@total_ordering
class PairHash:
    """A pair of residues modulo two moduli, compared as a tuple."""

    __slots__ = ("x", "y", "moduli")

    def __init__(self, a=0, b=None, moduli=DEFAULT_MODULI):
        m1, m2 = moduli
        if b is None:
            b = a
        self.moduli = (m1, m2)
        self.x = a % m1
        self.y = b % m2

    def _other(self, other):
        if not isinstance(other, PairHash):
            return None
        if other.moduli != self.moduli:
            raise ValueError("hashes use different moduli")
        return other

    def _make(self, a, b):
        return PairHash(a, b, self.moduli)

    def __add__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return self._make(self.x + o.x, self.y + o.y)

    def __sub__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return self._make(self.x - o.x, self.y - o.y)

    def __mul__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return self._make(self.x * o.x, self.y * o.y)

    def __eq__(self, other):
        if not isinstance(other, PairHash):
            return NotImplemented
        return (self.x, self.y, self.moduli) == (other.x, other.y, other.moduli)

    def __lt__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return (self.x, self.y) < (o.x, o.y)

    def __hash__(self):
        return hash((self.x, self.y, self.moduli))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"PairHash({self.x}, {self.y})"


class StringHash:
    """Prefix hashes of a string (or integer sequence) for O(1) substring hashes."""

    def __init__(self, s, base=DEFAULT_BASE, moduli=DEFAULT_MODULI):
        self.moduli = tuple(moduli)
        b = PairHash(*base, moduli=self.moduli)
        self.prefix = [PairHash(0, moduli=self.moduli)]
        self.powers = [PairHash(1, moduli=self.moduli)]
        for ch in s:
            value = ord(ch) if isinstance(ch, str) else ch
            self.prefix.append(self.prefix[-1] * b + PairHash(value, moduli=self.moduli))
            self.powers.append(self.powers[-1] * b)

    def __len__(self):
        return len(self.prefix) - 1

    def get(self, left, right):
        """Hash of the inclusive range ``left..right``; ``right == left - 1`` is empty."""
        if not (0 <= left <= right + 1 <= len(self)):
            raise IndexError("substring range out of bounds")
        return self.prefix[right + 1] - self.prefix[left] * self.powers[right + 1 - left]