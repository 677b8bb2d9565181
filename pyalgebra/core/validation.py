"""
Input validation utilities for PyAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    LargeMatrixWarning,
    NotSquareError,
    OutOfBoundsError,
    TooLargeError,
    ValidationError,
)


# Hard ceiling on rows * cols; construction fails at or above it
MATRIX_LIMIT_ERROR = 10_000_000

# Construction still succeeds at or above this, with a LargeMatrixWarning
MATRIX_LIMIT_WARNING = 1_000_000


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged rows).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged rows"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_dimensions(rows: Any, cols: Any, warn_large: bool = True) -> tuple[int, int]:
    """
    Validate requested matrix dimensions.

    Emits a LargeMatrixWarning (construction still proceeds) when the
    element count reaches MATRIX_LIMIT_WARNING. The warning is attributed
    to the caller of the function that called check_dimensions.

    Args:
        rows: Requested row count
        cols: Requested column count
        warn_large: Set False for results derived from an existing matrix

    Returns:
        (rows, cols) as plain ints

    Raises:
        InvalidDimensionsError: If either count is not a positive integer
        TooLargeError: If rows * cols >= MATRIX_LIMIT_ERROR
    """
    try:
        rows = operator.index(rows)
        cols = operator.index(cols)
    except TypeError as e:
        raise InvalidDimensionsError(
            f"Matrix dimensions must be positive integers, got {rows!r} x {cols!r}",
            rows=None, cols=None,
        ) from e

    if rows <= 0 or cols <= 0:
        raise InvalidDimensionsError(
            f"Matrix dimensions must be positive integers, got {rows} x {cols}",
            rows=rows, cols=cols,
        )

    n_elements = rows * cols
    if n_elements >= MATRIX_LIMIT_ERROR:
        raise TooLargeError(
            f"Matrix too large: {rows} x {cols} = {n_elements} elements, "
            f"limit is {MATRIX_LIMIT_ERROR}",
            n_elements=n_elements, limit=MATRIX_LIMIT_ERROR,
        )

    if warn_large and n_elements >= MATRIX_LIMIT_WARNING:
        warnings.warn(
            f"Large matrix ({n_elements} elements) may slow down performance",
            LargeMatrixWarning,
            stacklevel=3,
        )

    return rows, cols


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify (row, col) lies inside a matrix of the given shape.

    Negative indices are rejected; there is no wrap-around.

    Raises:
        OutOfBoundsError: If either index is outside [0, rows) / [0, cols)
    """
    n_rows, n_cols = shape
    try:
        row = operator.index(row)
        col = operator.index(col)
    except TypeError as e:
        raise OutOfBoundsError(
            f"Indices must be integers, got ({row!r}, {col!r})",
            shape=shape,
        ) from e

    if not (0 <= row < n_rows and 0 <= col < n_cols):
        raise OutOfBoundsError(
            f"Index ({row}, {col}) out of matrix bounds. "
            f"Dimensions are {n_rows}x{n_cols}",
            row=row, col=col, shape=shape,
        )
    return row, col


def check_same_shape(
    first: tuple[int, int],
    second: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical (elementwise operations).

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if first != second:
        raise DimensionMismatchError(
            f"{operation}: sizes do not match. First matrix dimensions: "
            f"{first[0]}x{first[1]}, second matrix dimensions: {second[0]}x{second[1]}",
            first_shape=first, second_shape=second,
        )


def check_same_rows(
    first: tuple[int, int],
    second: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes have the same row count (augmentation, elimination).

    Raises:
        DimensionMismatchError: If row counts differ
    """
    if first[0] != second[0]:
        raise DimensionMismatchError(
            f"{operation}: row counts do not match. First matrix dimensions: "
            f"{first[0]}x{first[1]}, second matrix dimensions: {second[0]}x{second[1]}",
            first_shape=first, second_shape=second,
        )


def check_inner_dimensions(first: tuple[int, int], second: tuple[int, int]) -> None:
    """
    Verify first.cols == second.rows (matrix product).

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if first[1] != second[0]:
        raise DimensionMismatchError(
            f"multiply: inner dimensions do not match. First matrix dimensions: "
            f"{first[0]}x{first[1]}, second matrix dimensions: {second[0]}x{second[1]}",
            first_shape=first, second_shape=second,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: matrix must be square, got {shape[0]}x{shape[1]}",
            shape=shape,
        )
