"""
Generalized Gaussian elimination.

One routine serves every derived operation. Callers differ only in:
    - whether rows above each pivot are cleared too (full_reduction)
    - whether a pivot below EPSILON is an error or a skipped column
      (pivot_failure_is_fatal)
    - whether a right-hand side is carried through the same row operations
      (auxiliary)

    caller        full_reduction  pivot_failure_is_fatal  auxiliary
    determinant   False           False                   -
    rank          False           False                   -
    inverse       True            True                    I
    solve         True            True                    b

Algorithm (partial pivoting):
    For each column, left to right, while unpivoted rows remain:
        1. pick the remaining row with the largest |value| in the column
           (ties go to the lowest row index)
        2. |pivot| < EPSILON: raise SingularMatrixError if fatal, otherwise
           zero the rest of the column, skip it and try the next column
           against the same pivot row
        3. swap the pivot row into place in matrix AND auxiliary
        4. row_k += (-a[k, c] / a[p, c]) * row_p for every row below; the
           eliminated entries are stored as exact zeros
        5. full reduction: scale the pivot row to a leading 1, then clear
           every row above the same way

All work happens on private copies; the caller's matrices are never touched.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.compute.tolerances import EPSILON
from pyalgebra.core.exceptions import SingularMatrixError
from pyalgebra.core.validation import check_same_rows
from pyalgebra.matrix.dense import Matrix


@dataclass(frozen=True)
class EliminationConfig:
    """
    Behavioural switches for eliminate().

    Attributes:
        full_reduction: Produce reduced row-echelon form (leading 1s,
            zeros above and below each pivot) instead of row-echelon form
        pivot_failure_is_fatal: Raise SingularMatrixError on a degenerate
            pivot instead of skipping the column
    """
    full_reduction: bool = False
    pivot_failure_is_fatal: bool = False


FORWARD = EliminationConfig(full_reduction=False, pivot_failure_is_fatal=False)
REDUCED = EliminationConfig(full_reduction=True, pivot_failure_is_fatal=False)
STRICT_REDUCED = EliminationConfig(full_reduction=True, pivot_failure_is_fatal=True)


@dataclass(frozen=True)
class EliminationResult:
    """
    Output of eliminate().

    Attributes:
        matrix: The reduced matrix
        auxiliary: The right-hand side after identical row operations,
            or None if none was supplied
        swap_count: Number of row exchanges performed
        pivot_columns: Columns in which a pivot was taken, in order
    """
    matrix: Matrix
    auxiliary: Matrix | None
    swap_count: int
    pivot_columns: tuple[int, ...]

    @property
    def n_pivots(self) -> int:
        return len(self.pivot_columns)


def swap_rows(
    work: NDArray[np.floating[Any]],
    auxiliary: NDArray[np.floating[Any]] | None,
    first: int,
    second: int,
) -> None:
    """
    Exchange two rows in place, in the working matrix and (if present) in
    the auxiliary right-hand side together.

    Only ever applied to buffers owned by eliminate().
    """
    if first == second:
        return
    work[[first, second]] = work[[second, first]]
    if auxiliary is not None:
        auxiliary[[first, second]] = auxiliary[[second, first]]


def eliminate(
    matrix: Matrix,
    auxiliary: Matrix | None = None,
    config: EliminationConfig = FORWARD,
) -> EliminationResult:
    """
    Row-reduce `matrix`, applying every row operation to `auxiliary` too.

    Args:
        matrix: Matrix to reduce (not modified)
        auxiliary: Optional right-hand side with the same row count
            (not modified)
        config: Reduction mode and pivot-failure policy

    Returns:
        EliminationResult with the reduced matrix, reduced auxiliary,
        swap count and pivot columns

    Raises:
        DimensionMismatchError: If auxiliary.rows != matrix.rows
        SingularMatrixError: If a pivot is below EPSILON and
            config.pivot_failure_is_fatal is True
    """
    if auxiliary is not None:
        check_same_rows(matrix.shape, auxiliary.shape, 'eliminate')

    work = matrix.to_numpy()
    rhs = auxiliary.to_numpy() if auxiliary is not None else None
    n_rows, n_cols = work.shape

    swap_count = 0
    pivot_columns: list[int] = []
    pivot_row = 0

    for col in range(n_cols):
        if pivot_row >= n_rows:
            break

        # argmax returns the first maximum, so ties keep the lowest row
        candidate = pivot_row + int(np.argmax(np.abs(work[pivot_row:, col])))

        if abs(work[candidate, col]) < EPSILON:
            if config.pivot_failure_is_fatal:
                raise SingularMatrixError(
                    f"Matrix is singular: no pivot above {EPSILON:g} in column {col}",
                    pivot_column=col,
                )
            # All remaining entries are below EPSILON; store them as exact zeros
            work[pivot_row:, col] = 0.0
            continue

        if candidate != pivot_row:
            swap_rows(work, rhs, pivot_row, candidate)
            swap_count += 1

        _clear_below(work, rhs, pivot_row, col)

        if config.full_reduction:
            pivot = work[pivot_row, col]
            work[pivot_row] /= pivot
            if rhs is not None:
                rhs[pivot_row] /= pivot
            _clear_above(work, rhs, pivot_row, col)

        pivot_columns.append(col)
        pivot_row += 1

    return EliminationResult(
        matrix=Matrix._from_buffer(work),
        auxiliary=Matrix._from_buffer(rhs) if rhs is not None else None,
        swap_count=swap_count,
        pivot_columns=tuple(pivot_columns),
    )


def _clear_below(
    work: NDArray[np.floating[Any]],
    rhs: NDArray[np.floating[Any]] | None,
    pivot_row: int,
    col: int,
) -> None:
    below = slice(pivot_row + 1, None)
    factors = -work[below, col] / work[pivot_row, col]
    work[below] += np.outer(factors, work[pivot_row])
    work[below, col] = 0.0
    if rhs is not None:
        rhs[below] += np.outer(factors, rhs[pivot_row])


def _clear_above(
    work: NDArray[np.floating[Any]],
    rhs: NDArray[np.floating[Any]] | None,
    pivot_row: int,
    col: int,
) -> None:
    # Pivot is already 1
    above = slice(0, pivot_row)
    factors = -work[above, col]
    work[above] += np.outer(factors, work[pivot_row])
    if rhs is not None:
        rhs[above] += np.outer(factors, rhs[pivot_row])


def row_echelon(matrix: Matrix) -> Matrix:
    """Forward elimination only; degenerate columns are skipped."""
    return eliminate(matrix, config=FORWARD).matrix


def reduced_row_echelon(matrix: Matrix) -> Matrix:
    """Full reduction; degenerate columns are skipped."""
    return eliminate(matrix, config=REDUCED).matrix
