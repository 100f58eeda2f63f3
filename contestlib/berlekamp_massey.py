"""Berlekamp-Massey: shortest linear recurrence of a sequence modulo a prime."""

from __future__ import annotations

from .modint import DEFAULT_MOD


class BerlekampMassey:
    """Shortest recurrence of ``sequence`` modulo the prime ``mod``.

    ``recurrence`` holds r[0..t] with r[0] == 1 and
    ``sum(r[j] * s[i - j]) == 0 (mod mod)`` for every t <= i < len(sequence);
    ``length`` is t.
    """

    def __init__(self, sequence, mod=DEFAULT_MOD):
        self.mod = mod
        seq = [int(x) % mod for x in sequence]
        self.sequence = seq
        n = len(seq)
        rec = [0] * (n + 1)
        old = [0] * (n + 1)
        nxt = [0] * (n + 1)
        rec[0] = old[0] = 1
        t = 0
        old_t, old_i, old_d = 0, -1, 1
        for i, value in enumerate(seq):
            d = value
            for j in range(1, t + 1):
                d = (d + rec[j] * seq[i - j]) % mod
            if d == 0:
                continue
            mult = d * pow(old_d, mod - 2, mod) % mod
            nxt[: t + 1] = rec[: t + 1]
            shift = i - old_i
            for j in range(old_t + 1):
                nxt[j + shift] = (nxt[j + shift] - old[j] * mult) % mod
            if t * 2 <= i:
                old_i, old_d, old_t = i, d, t
                t = i + 1 - t
                old, rec = rec, old
            rec, nxt = nxt, rec
        self.length = t
        self.recurrence = rec[: t + 1]

    def _mul_mod(self, a, b):
        t = self.length
        mod = self.mod
        rec = self.recurrence
        product = [0] * (2 * t - 1)
        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b, i):
                    product[j] = (product[j] + x * y) % mod
        for i in range(2 * t - 2, t - 1, -1):
            coef = product[i]
            if coef:
                for j, r in enumerate(rec):
                    product[i - j] = (product[i - j] - r * coef) % mod
        return product[:t]

    def kth_term(self, k):
        """Term ``k`` of the sequence, assuming the recurrence continues to hold."""
        if k < 0:
            raise ValueError("k must be non-negative")
        mod = self.mod
        t = self.length
        if t == 0:
            return 0
        if t == 1:
            return self.sequence[0] * pow((mod - self.recurrence[1]) % mod, k, mod) % mod
        cur = [0] * t
        cur[0] = 1
        base = [0] * t
        base[1] = 1
        while k > 0:
            if k & 1:
                cur = self._mul_mod(cur, base)
            base = self._mul_mod(base, base)
            k >>= 1
        return sum(c * s for c, s in zip(cur, self.sequence)) % mod