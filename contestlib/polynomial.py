"""Formal power series modulo a prime and linear recurrence evaluation."""

from __future__ import annotations

from .modint import ModInt
from .ntt import DEFAULT_MOD, convolve


class Polynomial:
    """Polynomial with coefficients modulo ``mod``, lowest degree first."""

    __slots__ = ("coeffs", "mod")

    def __init__(self, coeffs=(), mod=DEFAULT_MOD):
        self.mod = mod
        self.coeffs = [int(c) % mod for c in coeffs]

    def _new(self, coeffs):
        return Polynomial(coeffs, self.mod)

    def _resized(self, k):
        coeffs = self.coeffs[:k]
        return self._new(coeffs + [0] * (k - len(coeffs)))

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.coeffs
        if isinstance(other, (list, tuple)):
            return [int(c) % self.mod for c in other]
        return None

    def _scalar(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def __len__(self):
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def __getitem__(self, index):
        return self.coeffs[index]

    def __eq__(self, other):
        coeffs = self._coerce(other)
        if coeffs is None:
            return NotImplemented
        return self.coeffs == coeffs

    __hash__ = None

    def __repr__(self):
        return f"Polynomial({self.coeffs}, mod={self.mod})"

    def __add__(self, other):
        coeffs = self._coerce(other)
        if coeffs is None:
            return NotImplemented
        result = self.coeffs + [0] * max(0, len(coeffs) - len(self.coeffs))
        for i, c in enumerate(coeffs):
            result[i] += c
        return self._new(result)

    __radd__ = __add__

    def __neg__(self):
        return self._new(-c for c in self.coeffs)

    def __sub__(self, other):
        coeffs = self._coerce(other)
        if coeffs is None:
            return NotImplemented
        return self + self._new(coeffs).__neg__()

    def __rsub__(self, other):
        coeffs = self._coerce(other)
        if coeffs is None:
            return NotImplemented
        return self._new(coeffs) - self

    def __mul__(self, other):
        scalar = self._scalar(other)
        if scalar is not None:
            return self._new(c * scalar for c in self.coeffs)
        coeffs = self._coerce(other)
        if coeffs is None:
            return NotImplemented
        return self._new(convolve(self.coeffs, coeffs, self.mod))

    __rmul__ = __mul__

    def mod_xk(self, k):
        """The first ``k`` coefficients."""
        return self._new(self.coeffs[:k])

    def derivative(self):
        """Formal derivative; a constant gives the zero polynomial ``[0]``."""
        if not self.coeffs:
            raise ValueError("empty polynomial has no derivative")
        coeffs = [c * i for i, c in enumerate(self.coeffs[1:], 1)]
        return self._new(coeffs or [0])

    def integral(self):
        """Formal integral with zero constant term."""
        mod = self.mod
        return self._new(
            [0] + [c * pow(i, mod - 2, mod) for i, c in enumerate(self.coeffs, 1)]
        )

    def inv(self, k=0):
        """Inverse modulo ``x**k`` (``k`` defaults to the length)."""
        if not self.coeffs:
            raise ValueError("empty polynomial has no inverse")
        if self.coeffs[0] == 0:
            raise ZeroDivisionError("constant term is zero")
        k = k or len(self)
        result = self._new([pow(self.coeffs[0], self.mod - 2, self.mod)])
        m = 2
        while m < k * 2:
            result = result * 2 - (result * result * self.mod_xk(m)).mod_xk(m)
            m <<= 1
        return result._resized(k)

    def ln(self, k=0):
        """Logarithm modulo ``x**k``; the constant term must be 1."""
        p = self._resized(k) if k > 0 else self
        if not p.coeffs or p.coeffs[0] != 1:
            raise ValueError("constant term must be 1")
        return (p.derivative() * p.inv()).mod_xk(len(p) - 1).integral()

    def exp(self, k=0):
        """Exponential modulo ``x**k``; the constant term must be 0."""
        k = k or len(self)
        if k <= 0 or (self.coeffs and self.coeffs[0] != 0):
            raise ValueError("need a positive length and a zero constant term")
        result = self._new([1])
        m = 2
        while m < k * 2:
            result = result - (result * (result.ln(m) - self.mod_xk(m))).mod_xk(m)
            m <<= 1
        return result._resized(k)

    def pow(self, k):
        """``self**k`` truncated to the current length."""
        if k < 0:
            raise ValueError("exponent must be non-negative")
        size = len(self)
        lead = next((i for i, c in enumerate(self.coeffs) if c), None)
        if lead is None:
            result = [0] * size
            if k == 0 and size:
                result[0] = 1
            return self._new(result)
        if lead * k >= size:
            return self._new([0] * size)
        mod = self.mod
        co = self.coeffs[lead]
        f = self._new(self.coeffs[lead:]) * pow(co, mod - 2, mod)
        fk = (f.ln() * k).exp() * pow(co, k, mod)
        return self._new([0] * (lead * k) + fk.coeffs)._resized(size)


def fps_coeff(p, q, k, mod=DEFAULT_MOD):
    """Coefficient of ``x**k`` in the power series ``p / q``."""
    if k < 0:
        raise ValueError("k must be non-negative")
    p = Polynomial(p, mod)
    q = Polynomial(q, mod)
    if not q.coeffs or q.coeffs[0] == 0:
        raise ValueError("denominator must have a nonzero constant term")
    while k >= len(q):
        q_neg = Polynomial([-c if i & 1 else c for i, c in enumerate(q)], mod)
        pq = p * q_neg
        qq = q * q_neg
        p = Polynomial(pq.coeffs[k & 1::2], mod)
        q = Polynomial(qq.coeffs[::2], mod)
        k >>= 1
    product = p * q.inv()
    return product[k] if k < len(product) else 0


def linear_recurrence_kth(initial, coefficients, k, mod=DEFAULT_MOD):
    """Term ``k`` of ``a_i = sum(c_j * a_{i-j})`` given ``a_0..a_{d-1}`` and ``c_1..c_d``."""
    if len(initial) < len(coefficients):
        raise ValueError("need at least as many initial terms as coefficients")
    q = Polynomial([1] + [-c for c in coefficients], mod)
    p = (Polynomial(initial, mod) * q)._resized(len(q) - 1)
    return fps_coeff(p, q, k, mod)