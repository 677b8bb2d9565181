"""
Determinant, rank and inverse.

Each is a fixed configuration of eliminate() plus a little
post-processing; none of them run their own elimination loop.
"""

import math

import numpy as np

from pyalgebra.core.compute.tolerances import EPSILON, is_negligible
from pyalgebra.core.validation import check_square
from pyalgebra.linalg.elimination import FORWARD, STRICT_REDUCED, eliminate
from pyalgebra.matrix.dense import Matrix


def determinant(matrix: Matrix) -> float:
    """
    Determinant via forward elimination.

    det = (-1)^swaps * prod(diag(echelon form)). A column without a usable
    pivot means the determinant is 0.0. Results with |det| < EPSILON are
    snapped to exactly 0.0 so no signed zero is ever returned.

    Raises:
        NotSquareError: If the matrix is not square
    """
    check_square(matrix.shape, 'determinant')

    reduced = eliminate(matrix, config=FORWARD)
    if reduced.n_pivots < matrix.rows:
        return 0.0

    det = math.prod(float(v) for v in np.diag(reduced.matrix.to_numpy()))
    if is_negligible(det):
        return 0.0
    if reduced.swap_count % 2 != 0:
        det = -det
    return det


def rank(matrix: Matrix) -> int:
    """
    Numerical rank: rows of the echelon form holding at least one entry
    with |value| >= EPSILON.

    The engine stores skipped columns and eliminated entries as exact
    zeros, so this always equals the number of pivots taken.
    """
    echelon = eliminate(matrix, config=FORWARD).matrix.to_numpy()
    return int(np.count_nonzero(np.any(np.abs(echelon) >= EPSILON, axis=1)))


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse by Gauss-Jordan reduction of [A | I].

    Raises:
        NotSquareError: If the matrix is not square (checked before any
            reduction is attempted)
        SingularMatrixError: If elimination meets a pivot below EPSILON
    """
    check_square(matrix.shape, 'inverse')
    reduced = eliminate(matrix, Matrix.identity(matrix.rows), config=STRICT_REDUCED)
    return reduced.auxiliary
