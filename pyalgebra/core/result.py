"""
Generic result container for multi-phase PyAlgebra computations.

The Result class is the envelope that solver-style operations return
internally. It keeps the payload separate from diagnostics (ranks, method,
timing) so that user-facing wrappers can expose both.

Design decisions:
    - Generic over payload P for type safety
    - info dict for flexible metadata (ranks, method name)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The operation-specific payload type

    Attributes:
        params: Operation payload (e.g. a SolveOutcome)
        info: Structured metadata (method, ranks, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        method_name: Identifier of the algorithm that produced this result

    Examples:
        >>> Result(
        ...     params=SolveOutcome.infinite(),
        ...     info={'method': 'gauss_jordan', 'rank': 1, 'rank_augmented': 1},
        ...     timing={'total_seconds': 0.0002},
        ...     method_name='gauss_jordan',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method_name: str
