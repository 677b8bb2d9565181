"""
Exception hierarchy for PyAlgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyAlgebraError(Exception):
    """Base exception for all PyAlgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidDimensionsError(DimensionError):
    """
    A non-positive row or column count was requested.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(self, message: str, rows: int | None = None, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionMismatchError(DimensionError):
    """
    Two operands have incompatible shapes for the requested operation.

    Attributes:
        first_shape: (rows, cols) of the left operand
        second_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        first_shape: tuple[int, int] | None = None,
        second_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.first_shape = first_shape
        self.second_shape = second_shape


class NotSquareError(DimensionError):
    """
    A square-only operation was requested on a non-square matrix.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class TooLargeError(ValidationError):
    """
    Element count is at or above the hard construction ceiling.

    Attributes:
        n_elements: Requested element count
        limit: The ceiling that was hit
    """

    def __init__(self, message: str, n_elements: int | None = None, limit: int | None = None):
        super().__init__(message)
        self.n_elements = n_elements
        self.limit = limit


class OutOfBoundsError(ValidationError, IndexError):
    """
    Element index outside the matrix extent.

    Also an IndexError so generic sequence handling keeps working.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class WorkspaceFormatError(ValidationError):
    """
    Saved workspace text does not follow the expected layout.

    Attributes:
        matrix_name: Matrix being read when parsing failed, if known
    """

    def __init__(self, message: str, matrix_name: str | None = None):
        super().__init__(message)
        self.matrix_name = matrix_name


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination meets a pivot below tolerance in a mode where
    a degenerate pivot is not allowed (inverse, unique solve).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column in which no usable pivot was found
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column


class MatrixNotFoundError(PyAlgebraError, KeyError):
    """
    No matrix is stored in the workspace under the requested name.

    Attributes:
        name: The missing matrix name
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ''


class LargeMatrixWarning(UserWarning):
    """Matrix is large enough that dense operations may be slow."""
    pass
