"""Simplex method for linear programs in standard maximisation form."""

from __future__ import annotations

import enum

_EPS = 1e-8


class SimplexStatus(enum.IntEnum):
    INFEASIBLE = 0
    OPTIMAL = 1
    UNBOUNDED = 2


def simplex(a, b, c):
    """Maximise ``c . x`` subject to ``a x <= b`` and ``x >= 0``.

    Returns ``(status, x)``; ``x`` is the optimal point when the status is
    OPTIMAL and None otherwise.
    """
    n = len(a)
    if n == 0 or not a[0]:
        raise ValueError("constraint matrix must be non-empty")
    m = len(a[0])
    if any(len(row) != m for row in a) or len(b) != n or len(c) != m:
        raise ValueError("inconsistent problem dimensions")

    table = [[0.0] * (m + 1) for _ in range(n + 1)]
    for i, (row, bound) in enumerate(zip(a, b), 1):
        table[i][0] = float(bound)
        table[i][1:] = [float(v) for v in row]
    table[0][1:] = [float(v) for v in c]

    left = list(range(m, m + n + 1))
    up = list(range(m + 1))

    def pivot(x, y):
        left[x], up[y] = up[y], left[x]
        k = table[x][y]
        table[x][y] = 1.0
        row = table[x]
        positions = []
        for j in range(m + 1):
            row[j] /= k
            if abs(row[j]) > _EPS:
                positions.append(j)
        for i in range(n + 1):
            if i == x or abs(table[i][y]) < _EPS:
                continue
            k = table[i][y]
            table[i][y] = 0.0
            target = table[i]
            for j in positions:
                target[j] -= k * row[j]

    while True:
        x = -1
        for i in range(1, n + 1):
            if table[i][0] < -_EPS and (x == -1 or table[i][0] < table[x][0]):
                x = i
        if x == -1:
            break
        y = -1
        for j in range(1, m + 1):
            if table[x][j] < -_EPS and (y == -1 or table[x][j] < table[x][y]):
                y = j
        if y == -1:
            return SimplexStatus.INFEASIBLE, None
        pivot(x, y)

    while True:
        y = -1
        for j in range(1, m + 1):
            if table[0][j] > _EPS and (y == -1 or table[0][j] > table[0][y]):
                y = j
        if y == -1:
            break
        x = -1
        for i in range(1, n + 1):
            if table[i][y] > _EPS and (
                x == -1 or table[i][0] / table[i][y] < table[x][0] / table[x][y]
            ):
                x = i
        if x == -1:
            return SimplexStatus.UNBOUNDED, None
        pivot(x, y)

    answer = [0.0] * m
    for i in range(1, n + 1):
        if 1 <= left[i] <= m:
            answer[left[i] - 1] = table[i][0]
    return SimplexStatus.OPTIMAL, answer