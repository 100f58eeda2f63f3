"""Integers modulo a fixed (usually prime) modulus."""

from __future__ import annotations

DEFAULT_MOD = 998244353


def power(base, exponent):
    """Raise ``base`` to a non-negative integer power by repeated squaring.

    Works for any value supporting ``*``, ``* 0`` and ``+ 1``.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = base * 0 + 1
    while exponent:
        if exponent & 1:
            result = result * base
        exponent >>= 1
        if exponent:
            base = base * base
    return result


class ModInt:
    """An integer reduced modulo ``mod``; inverses assume ``mod`` is prime."""

    __slots__ = ("value", "mod")

    def __init__(self, value=0, mod=DEFAULT_MOD):
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = value % mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _make(self, value):
        return ModInt(value, self.mod)

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(v - self.value)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * self._make(v).inverse()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(v) * self.inverse()

    def __neg__(self):
        return self._make(-self.value)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __eq__(self, other):
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.mod
        return NotImplemented

    __hash__ = None

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"ModInt({self.value}, mod={self.mod})"

    def pow(self, exponent):
        """Return this value raised to ``exponent``; negative powers invert."""
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return self._make(pow(self.value, exponent, self.mod))

    def inverse(self):
        """Multiplicative inverse by Fermat's little theorem."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.pow(self.mod - 2)