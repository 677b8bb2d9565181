"""
PyAlgebra: dense real-matrix linear algebra for Python.

Construction, elementwise and matrix arithmetic, and the elimination-based
family of operations (rank, determinant, inverse, linear solve) plus 3D
rotation composition, all built on one Gaussian elimination kernel.

Submodules:
    matrix: Dense Matrix value type
    linalg: Elimination engine, derived operations, rotations
    workspace: Named matrices and their text persistence format
"""

__version__ = "0.1.0"

from pyalgebra.matrix import Matrix
from pyalgebra.linalg import SolveOutcome, SolveStatus
from pyalgebra.workspace import Workspace
from pyalgebra import linalg

__all__ = [
    "__version__",
    "Matrix",
    "SolveOutcome",
    "SolveStatus",
    "Workspace",
    "linalg",
]
