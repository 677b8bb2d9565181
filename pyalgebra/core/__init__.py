"""
Core infrastructure for PyAlgebra.

This module provides shared abstractions and utilities used by the matrix
store, the elimination engine and the derived operations.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators and size limits
    compute: Tolerance constant, timing
"""

from pyalgebra.core.result import Result
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    InvalidDimensionsError,
    DimensionMismatchError,
    NotSquareError,
    TooLargeError,
    OutOfBoundsError,
    WorkspaceFormatError,
    NumericalError,
    SingularMatrixError,
    MatrixNotFoundError,
    LargeMatrixWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionsError",
    "DimensionMismatchError",
    "NotSquareError",
    "TooLargeError",
    "OutOfBoundsError",
    "WorkspaceFormatError",
    "NumericalError",
    "SingularMatrixError",
    "MatrixNotFoundError",
    # Warnings
    "LargeMatrixWarning",
]
