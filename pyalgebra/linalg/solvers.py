"""
Linear system solving.

This module provides solve() (bare outcome) and solve_system() (outcome
plus rank diagnostics and timing). Both classify A x = b by comparing
rank(A) with rank([A|b]) before any back-substitution is attempted.
"""

from pyalgebra.core.compute.timing import Timer
from pyalgebra.core.exceptions import DimensionMismatchError
from pyalgebra.core.result import Result
from pyalgebra.linalg.derived import rank
from pyalgebra.linalg.elimination import STRICT_REDUCED, eliminate
from pyalgebra.linalg.solution import SolveOutcome, SystemSolution
from pyalgebra.matrix.dense import Matrix


METHOD_NAME = 'gauss_jordan'


def solve_system(A: Matrix, b: Matrix) -> SystemSolution:
    """
    Classify and solve A x = b.

    Algorithm:
        1. rank_a = rank(A)
        2. rank_ab = rank([A | b])
        3. rank_ab > rank_a            -> NO_SOLUTION
        4. rank_a < number of unknowns -> INFINITE
        5. otherwise reduce A fully with b as auxiliary; the first
           A.cols rows of the reduced b are x -> UNIQUE

    The no-solution check always precedes the infinite-solution check.

    Args:
        A: Coefficient matrix (m x n)
        b: Right-hand side column (m x 1)

    Returns:
        SystemSolution with the outcome, ranks and timing

    Raises:
        DimensionMismatchError: If b is not a single column with A.rows rows
    """
    if b.cols != 1 or b.rows != A.rows:
        raise DimensionMismatchError(
            f"solve: b must be a {A.rows}x1 column. First matrix dimensions: "
            f"{A.rows}x{A.cols}, second matrix dimensions: {b.rows}x{b.cols}",
            first_shape=A.shape, second_shape=b.shape,
        )

    timer = Timer()
    timer.start()

    # === Rank classification ===
    with timer.section('rank'):
        rank_a = rank(A)
        rank_ab = rank(A.augment(b))

    if rank_ab > rank_a:
        outcome = SolveOutcome.no_solution()
    elif rank_a < A.cols:
        outcome = SolveOutcome.infinite()
    else:
        # === Gauss-Jordan reduction ===
        with timer.section('elimination'):
            reduced = eliminate(A, b, config=STRICT_REDUCED)
            x = Matrix._from_buffer(reduced.auxiliary.to_numpy()[:A.cols])
        outcome = SolveOutcome.unique(x)

    timer.stop()

    info = {
        'method': METHOD_NAME,
        'rank': rank_a,
        'rank_augmented': rank_ab,
        'n_unknowns': A.cols,
    }

    return SystemSolution(_result=Result(
        params=outcome,
        info=info,
        timing=timer.result(),
        method_name=METHOD_NAME,
    ))


def solve(A: Matrix, b: Matrix) -> SolveOutcome:
    """
    Classify and solve A x = b; see solve_system() for the algorithm.

    Raises:
        DimensionMismatchError: If b is not a single column with A.rows rows
    """
    return solve_system(A, b).outcome
