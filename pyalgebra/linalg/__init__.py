"""
Elimination-based linear algebra.

Every operation here routes through the single elimination kernel in
pyalgebra.linalg.elimination; none of them run a loop of their own.

Public API:
    eliminate(matrix, auxiliary, config) -> EliminationResult
    determinant(A) -> float
    rank(A) -> int
    inverse(A) -> Matrix
    solve(A, b) -> SolveOutcome
    solve_system(A, b) -> SystemSolution
    rotate3d(vector, angle_x, angle_y, angle_z) -> Matrix

Example:
    >>> from pyalgebra import Matrix
    >>> from pyalgebra.linalg import solve
    >>> A = Matrix.from_rows([[2, 1], [1, 1]])
    >>> solve(A, Matrix.column([1, 1])).x.tolist()
    [[0.0], [1.0]]
"""

from pyalgebra.linalg.elimination import (
    EliminationConfig,
    EliminationResult,
    eliminate,
    swap_rows,
    row_echelon,
    reduced_row_echelon,
)
from pyalgebra.linalg.derived import determinant, rank, inverse
from pyalgebra.linalg.solution import SolveOutcome, SolveStatus, SystemSolution
from pyalgebra.linalg.solvers import solve, solve_system
from pyalgebra.linalg.rotation import (
    rotation_x,
    rotation_y,
    rotation_z,
    rotation_matrix,
    rotate3d,
)

__all__ = [
    # Elimination
    "EliminationConfig",
    "EliminationResult",
    "eliminate",
    "swap_rows",
    "row_echelon",
    "reduced_row_echelon",
    # Derived
    "determinant",
    "rank",
    "inverse",
    # Solving
    "solve",
    "solve_system",
    "SolveOutcome",
    "SolveStatus",
    "SystemSolution",
    # Rotation
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "rotation_matrix",
    "rotate3d",
]
