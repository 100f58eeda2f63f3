"""Search for the smallest fraction satisfying a monotone predicate."""

from __future__ import annotations


def continued_fraction(check, stop):
    """Walk the Stern-Brocot tree towards a threshold ``x0``.

    ``check(a, b)`` must be false for ``a/b < x0`` and true for ``a/b >= x0``;
    ``stop(a, b)`` is consulted on the mediant and ends the search when true.
    Returns ``(p, q)`` with ``check(p, q)`` true and ``p/q`` close to ``x0``.
    """
    num = [0, 1]
    den = [1, 0]

    def candidate(side, step):
        other = side ^ 1
        return num[side] + num[other] * step, den[side] + den[other] * step

    while not stop(num[0] + num[1], den[0] + den[1]):
        side = int(bool(check(num[0] + num[1], den[0] + den[1])))
        step = 1
        while int(bool(check(*candidate(side, step)))) == side:
            num[side], den[side] = candidate(side, step)
            step <<= 1
            if stop(num[0] + num[1], den[0] + den[1]):
                break
        while step:
            a, b = candidate(side, step)
            if int(bool(check(a, b))) == side:
                num[side], den[side] = a, b
            step >>= 1
    return num[1], den[1]