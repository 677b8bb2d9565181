"""
Dense matrix value type.

Matrix owns a C-ordered (row-major) float64 buffer plus its shape. Every
arithmetic method returns a NEW Matrix; the only in-place mutator is set()
(and the equivalent m[row, col] = value). Two Matrix instances never share
a buffer, so a copy can be modified without affecting the original.

Derived operations (determinant, rank, inverse, solve, rotation) live in
pyalgebra.linalg and are exposed here as thin delegating methods.
"""

from __future__ import annotations

import numbers
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import DimensionError
from pyalgebra.core.validation import (
    check_2d,
    check_array,
    check_dimensions,
    check_index,
    check_inner_dimensions,
    check_same_rows,
    check_same_shape,
)
from pyalgebra.matrix._format import format_matrix

if TYPE_CHECKING:
    from pyalgebra.linalg.solution import SolveOutcome


class Matrix:
    """
    Dense R x C matrix of real numbers, R, C >= 1.

    Construction:
        Matrix(2, 3)                     # 2x3 of zeros
        Matrix(2, 3, fill=1.5)           # 2x3 filled with 1.5
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.column([1, 2, 3])         # 3x1
        Matrix.identity(3)

    Raises on construction:
        InvalidDimensionsError: rows or cols not a positive integer
        TooLargeError: rows * cols >= 10,000,000

    Equality is exact (no tolerance). Matrices are mutable and therefore
    unhashable.
    """

    __slots__ = ('_data',)

    def __init__(self, rows: int, cols: int, fill: float = 0.0):
        rows, cols = check_dimensions(rows, cols)
        self._data: NDArray[np.float64] = np.full((rows, cols), float(fill), dtype=np.float64)

    # === Alternate constructors ===

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build a matrix from a nested sequence (or 2D array) of numbers."""
        data = check_array(rows, 'rows')
        check_2d(data, 'rows')
        check_dimensions(*data.shape)
        return cls._from_buffer(np.array(data, dtype=np.float64, order='C'))

    @classmethod
    def column(cls, values: ArrayLike) -> Matrix:
        """Build an n x 1 column matrix from a flat sequence of numbers."""
        data = check_array(values, 'values')
        if data.ndim == 2 and data.shape[1] == 1:
            data = data.ravel()
        if data.ndim != 1:
            raise DimensionError(
                f"values: expected a flat sequence or n x 1 array, got shape {data.shape}"
            )
        check_dimensions(data.shape[0], 1)
        return cls._from_buffer(np.array(data.reshape(-1, 1), dtype=np.float64, order='C'))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """
        n x n identity matrix.

        Raises:
            InvalidDimensionsError: If size <= 0
        """
        size, _ = check_dimensions(size, size)
        return cls._from_buffer(np.eye(size, dtype=np.float64))

    @classmethod
    def _from_buffer(cls, data: NDArray[np.float64]) -> Matrix:
        """
        Wrap an array the caller hands over. The array must not be used
        by the caller afterwards.
        """
        check_dimensions(*data.shape, warn_large=False)
        matrix = cls.__new__(cls)
        matrix._data = np.ascontiguousarray(data, dtype=np.float64)
        return matrix

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    @property
    def size(self) -> int:
        """Total number of elements."""
        return int(self._data.size)

    def is_square(self) -> bool:
        return self.rows == self.cols

    # === Element access ===

    def get(self, row: int, col: int) -> float:
        """
        Element at (row, col).

        Raises:
            OutOfBoundsError: If either index is outside the matrix
        """
        row, col = check_index(row, col, self.shape)
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Overwrite the element at (row, col).

        Raises:
            OutOfBoundsError: If either index is outside the matrix
        """
        row, col = check_index(row, col, self.shape)
        self._data[row, col] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    def copy(self) -> Matrix:
        """Deep copy; the result shares no storage with self."""
        return Matrix._from_buffer(self._data.copy())

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the values as a 2D numpy array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    # === Comparison ===

    def equals(self, other: Matrix) -> bool:
        """Exact equality: same shape and bit-for-bit equal values."""
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            DimensionMismatchError: If shapes differ
        """
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._from_buffer(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """
        Elementwise difference self - other.

        Raises:
            DimensionMismatchError: If shapes differ
        """
        check_same_shape(self.shape, other.shape, 'subtract')
        return Matrix._from_buffer(self._data - other._data)

    def multiply_scalar(self, scalar: float) -> Matrix:
        return Matrix._from_buffer(self._data * float(scalar))

    def negate(self) -> Matrix:
        return self.multiply_scalar(-1.0)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other, shape (self.rows, other.cols).

        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        check_inner_dimensions(self.shape, other.shape)
        return Matrix._from_buffer(self._data @ other._data)

    def transpose(self) -> Matrix:
        return Matrix._from_buffer(self._data.T.copy())

    def augment(self, other: Matrix) -> Matrix:
        """
        Horizontal concatenation [self | other].

        Raises:
            DimensionMismatchError: If row counts differ
        """
        check_same_rows(self.shape, other.shape, 'augment')
        return Matrix._from_buffer(np.hstack([self._data, other._data]))

    def swap_rows(self, first: int, second: int) -> Matrix:
        """
        Copy of self with rows `first` and `second` exchanged.

        Raises:
            OutOfBoundsError: If either row index is outside the matrix
        """
        first, _ = check_index(first, 0, self.shape)
        second, _ = check_index(second, 0, self.shape)
        data = self._data.copy()
        data[[first, second]] = data[[second, first]]
        return Matrix._from_buffer(data)

    # === Operator aliases ===

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar: object) -> Matrix:
        # Scalars only; use @ or multiply() for the matrix product
        if not _is_scalar(scalar):
            return NotImplemented
        return self.multiply_scalar(scalar)

    def __rmul__(self, scalar: object) -> Matrix:
        if not _is_scalar(scalar):
            return NotImplemented
        return self.multiply_scalar(scalar)

    def __neg__(self) -> Matrix:
        return self.negate()

    # === Derived operations ===

    def echelon_form(self) -> Matrix:
        """Forward (row-echelon) form; degenerate columns are skipped."""
        from pyalgebra.linalg.elimination import row_echelon
        return row_echelon(self)

    def reduced_echelon_form(self) -> Matrix:
        """Reduced row-echelon form; degenerate columns are skipped."""
        from pyalgebra.linalg.elimination import reduced_row_echelon
        return reduced_row_echelon(self)

    def determinant(self) -> float:
        from pyalgebra.linalg.derived import determinant
        return determinant(self)

    def rank(self) -> int:
        from pyalgebra.linalg.derived import rank
        return rank(self)

    def inverse(self) -> Matrix:
        from pyalgebra.linalg.derived import inverse
        return inverse(self)

    def solve(self, b: Matrix) -> SolveOutcome:
        """Classify and, when unique, solve self @ x = b."""
        from pyalgebra.linalg.solvers import solve
        return solve(self, b)

    def rotate3d(
        self,
        angle_x: float = 0.0,
        angle_y: float = 0.0,
        angle_z: float = 0.0,
    ) -> Matrix:
        """Rotate this 3x1 vector by Rz(angle_z) @ Ry(angle_y) @ Rx(angle_x), degrees."""
        from pyalgebra.linalg.rotation import rotate3d
        return rotate3d(self, angle_x, angle_y, angle_z)

    # === Rendering ===

    def __str__(self) -> str:
        return format_matrix(self._data)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data.tolist()!r})"


def _split_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix indices must be a (row, col) pair, got {key!r}")
    return key


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
