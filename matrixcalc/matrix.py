"""Dense real matrices with the usual linear-algebra operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

MAX_MATRIX_SIZE = 100
_EPSILON = 1e-10


class MatrixError(ValueError):
    """Raised when an operation does not apply to the given matrices."""


_SAME_SHAPE = "Matrix a and b must have the same rows and cols."
_MUL_SHAPE = (
    "The number of cols of matrix a must be equal to the number of rows of matrix b."
)
_NOT_SQUARE = "The matrix must be a square matrix."
_SINGULAR = "The matrix is singular."


@dataclass(frozen=True)
class Matrix:
    """An immutable matrix of floats with at most MAX_MATRIX_SIZE rows and cols."""

    rows: int
    cols: int
    data: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        for dim in (self.rows, self.cols):
            if not 0 <= dim <= MAX_MATRIX_SIZE:
                raise MatrixError(
                    f"Matrix dimensions must be between 0 and {MAX_MATRIX_SIZE}."
                )
        data = tuple(tuple(float(v) for v in row) for row in self.data)
        if len(data) != self.rows or any(len(row) != self.cols for row in data):
            raise MatrixError("Matrix data does not match its dimensions.")
        object.__setattr__(self, "data", data)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a rows x cols matrix filled with zeros."""
        return cls(rows, cols, tuple((0.0,) * cols for _ in range(max(rows, 0))))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        materialised = [list(row) for row in rows]
        cols = len(materialised[0]) if materialised else 0
        return cls(len(materialised), cols, tuple(tuple(r) for r in materialised))

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self.data[i][j]
        return self.data[index]

    def _require_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise MatrixError(_SAME_SHAPE)

    def _require_square(self) -> None:
        if self.rows != self.cols:
            raise MatrixError(_NOT_SQUARE)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix(
            self.rows,
            self.cols,
            tuple(
                tuple(x + y for x, y in zip(ra, rb))
                for ra, rb in zip(self.data, other.data)
            ),
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix(
            self.rows,
            self.cols,
            tuple(
                tuple(x - y for x, y in zip(ra, rb))
                for ra, rb in zip(self.data, other.data)
            ),
        )

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise MatrixError(_MUL_SHAPE)
        columns = other.transpose().data
        return Matrix(
            self.rows,
            other.cols,
            tuple(
                tuple(sum(x * y for x, y in zip(row, col)) for col in columns)
                for row in self.data
            ),
        )

    def scale(self, k: float) -> Matrix:
        """Return the matrix with every element multiplied by k."""
        return Matrix(
            self.rows, self.cols, tuple(tuple(v * k for v in row) for row in self.data)
        )

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        if self.rows == 0:
            return Matrix(self.cols, 0, tuple(() for _ in range(self.cols)))
        return Matrix(self.cols, self.rows, tuple(zip(*self.data)))

    def minor(self, row: int, col: int) -> Matrix:
        """Return the submatrix without the given row and column."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError("row or column out of range")
        return Matrix(
            self.rows - 1,
            self.cols - 1,
            tuple(
                tuple(v for j, v in enumerate(r) if j != col)
                for i, r in enumerate(self.data)
                if i != row
            ),
        )

    def determinant(self) -> float:
        """Return the determinant by Laplace expansion along the first row."""
        self._require_square()
        if self.rows == 0:
            return 0.0
        if self.rows == 1:
            return self.data[0][0]
        if self.rows == 2:
            (a, b), (c, d) = self.data
            return a * d - b * c
        return sum(
            (-1) ** j * value * self.minor(0, j).determinant()
            for j, value in enumerate(self.data[0])
        )

    def inverse(self) -> Matrix:
        """Return the inverse, computed by Gauss-Jordan elimination."""
        self._require_square()
        n = self.rows
        aug = [
            list(row) + [1.0 if i == j else 0.0 for j in range(n)]
            for i, row in enumerate(self.data)
        ]
        for col in range(n):
            pivot = max(range(col, n), key=lambda r: abs(aug[r][col]))
            if abs(aug[pivot][col]) < _EPSILON:
                raise MatrixError(_SINGULAR)
            aug[col], aug[pivot] = aug[pivot], aug[col]
            lead = aug[col][col]
            aug[col] = [v / lead for v in aug[col]]
            for r, other in enumerate(aug):
                if r != col and other[col] != 0.0:
                    factor = other[col]
                    aug[r] = [v - factor * p for v, p in zip(other, aug[col])]
        return Matrix(n, n, tuple(tuple(row[n:]) for row in aug))

    def rank(self) -> int:
        """Return the rank, computed by reduction to row echelon form."""
        work = [list(row) for row in self.data]
        rank = 0
        for col in range(self.cols):
            if rank == self.rows:
                break
            pivot = max(range(rank, self.rows), key=lambda r: abs(work[r][col]))
            if abs(work[pivot][col]) < _EPSILON:
                continue
            work[rank], work[pivot] = work[pivot], work[rank]
            lead = work[rank][col]
            for r in range(rank + 1, self.rows):
                factor = work[r][col] / lead
                if factor:
                    work[r] = [v - factor * p for v, p in zip(work[r], work[rank])]
            rank += 1
        return rank

    def trace(self) -> float:
        """Return the sum of the main diagonal."""
        self._require_square()
        return sum((self.data[i][i] for i in range(self.rows)), 0.0)

    def format(self) -> str:
        """Render row by row, each element left aligned in 8 columns with 2 decimals."""
        return "".join(
            "".join(f"{v:<8.2f}" for v in row) + "\n" for row in self.data
        )

    def __str__(self) -> str:
        return self.format()