"""
Dense matrix store.

Public API:
    Matrix: the dense real matrix value type
    format_matrix: fixed-point text rendering used by str(Matrix)

Example:
    >>> from pyalgebra.matrix import Matrix
    >>> A = Matrix.from_rows([[4, 7], [2, 6]])
    >>> print(A @ Matrix.identity(2))
    |  4.000|  7.000|
    |  2.000|  6.000|
"""

from pyalgebra.matrix.dense import Matrix
from pyalgebra.matrix._format import format_matrix

__all__ = [
    "Matrix",
    "format_matrix",
]
