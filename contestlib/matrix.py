"""Dense matrices with Gauss-Jordan elimination, inversion and linear solving."""

from __future__ import annotations


def _default_is_zero(x):
    if isinstance(x, (float, complex)):
        return abs(x) <= 1e-9
    return x == 0


class Matrix:
    """A rectangular matrix stored as a list of rows.

    ``is_zero`` decides when an entry counts as zero during elimination; by
    default floats use a tolerance of 1e-9 and other values compare with 0.
    """

    __slots__ = ("rows", "is_zero")

    def __init__(self, rows, is_zero=None):
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise ValueError("matrix must have at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        self.rows = rows
        self.is_zero = is_zero or _default_is_zero

    @classmethod
    def zeros(cls, n, m, is_zero=None):
        """An ``n`` by ``m`` matrix of zeros."""
        if n <= 0 or m <= 0:
            raise ValueError("dimensions must be positive")
        return cls([[0] * m for _ in range(n)], is_zero)

    @property
    def shape(self):
        return len(self.rows), len(self.rows[0])

    def __getitem__(self, i):
        return self.rows[i]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.rows!r})"

    def _elementwise(self, other, op):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("matrices must have the same shape")
        return Matrix(
            ([op(x, y) for x, y in zip(r, s)] for r, s in zip(self.rows, other.rows)),
            self.is_zero,
        )

    def __add__(self, other):
        return self._elementwise(other, lambda x, y: x + y)

    def __sub__(self, other):
        return self._elementwise(other, lambda x, y: x - y)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError("inner dimensions do not agree")
        columns = list(zip(*other.rows))
        return Matrix(
            ([sum(x * y for x, y in zip(row, col)) for col in columns] for row in self.rows),
            self.is_zero,
        )

    def transpose(self):
        """The transposed matrix."""
        return Matrix((list(col) for col in zip(*self.rows)), self.is_zero)

    def gaussian(self, columns):
        """Reduce the first ``columns`` columns in place; return their rank."""
        n, m = self.shape
        if columns > m:
            raise ValueError("cannot eliminate more columns than the matrix has")
        rows = self.rows
        rank = 0
        for c in range(columns):
            pivot = next((i for i in range(rank, n) if not self.is_zero(rows[i][c])), None)
            if pivot is None:
                continue
            rows[pivot], rows[rank] = rows[rank], rows[pivot]
            lead = rows[rank][c]
            rows[rank] = [x / lead for x in rows[rank]]
            pivot_row = rows[rank]
            for i in range(n):
                if i != rank:
                    factor = rows[i][c]
                    rows[i] = [x - factor * y for x, y in zip(rows[i], pivot_row)]
            rank += 1
        return rank

    def inverse(self):
        """The inverse of a square matrix; raises ValueError if singular."""
        n, m = self.shape
        if n != m:
            raise ValueError("only square matrices can be inverted")
        augmented = Matrix(
            (row + [1 if i == j else 0 for j in range(n)] for i, row in enumerate(self.rows)),
            self.is_zero,
        )
        if augmented.gaussian(n) != n:
            raise ValueError("matrix is singular")
        return Matrix((row[n:] for row in augmented.rows), self.is_zero)


def solve_linear(matrix, b):
    """Solve ``matrix @ x == b``; return one solution or None if there is none.

    Free variables are set to zero when the solution is not unique.
    """
    n, m = matrix.shape
    if len(b) != n:
        raise ValueError("right-hand side length must match the number of rows")
    system = Matrix((row + [v] for row, v in zip(matrix.rows, b)), matrix.is_zero)
    rank = system.gaussian(m)
    is_zero = system.is_zero
    if any(not is_zero(system[i][m]) for i in range(rank, n)):
        return None
    result = [0] * m
    for i in range(rank - 1, -1, -1):
        row = system[i]
        x = row[m]
        last = -1
        for j in range(m - 1, -1, -1):
            if not is_zero(row[j]):
                x -= row[j] * result[j]
                last = j
        if last != -1:
            result[last] = x
    return result