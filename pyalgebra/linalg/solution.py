"""
Linear system solution types.

Contains the three-way outcome payload and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pyalgebra.core.result import Result
from pyalgebra.matrix.dense import Matrix


class SolveStatus(Enum):
    """Classification of A x = b."""
    UNIQUE = 'unique'
    INFINITE = 'infinite'
    NO_SOLUTION = 'no_solution'


@dataclass(frozen=True)
class SolveOutcome:
    """
    Tagged union over the three solve classifications.

    Only UNIQUE carries a payload: x, a column matrix with one row per
    unknown. Use the constructors rather than building it by hand:

        SolveOutcome.unique(x)
        SolveOutcome.infinite()
        SolveOutcome.no_solution()
    """
    status: SolveStatus
    x: Matrix | None = None

    def __post_init__(self):
        if self.status is SolveStatus.UNIQUE:
            if self.x is None:
                raise ValueError("UNIQUE outcome requires a solution vector x")
            if self.x.cols != 1:
                raise ValueError(f"x must be a column matrix, got shape {self.x.shape}")
        elif self.x is not None:
            raise ValueError(f"{self.status.name} outcome cannot carry a solution vector")

    @classmethod
    def unique(cls, x: Matrix) -> SolveOutcome:
        return cls(SolveStatus.UNIQUE, x)

    @classmethod
    def infinite(cls) -> SolveOutcome:
        return cls(SolveStatus.INFINITE)

    @classmethod
    def no_solution(cls) -> SolveOutcome:
        return cls(SolveStatus.NO_SOLUTION)

    @property
    def is_unique(self) -> bool:
        return self.status is SolveStatus.UNIQUE

    def __repr__(self) -> str:
        if self.x is None:
            return f"SolveOutcome({self.status.name})"
        return f"SolveOutcome(UNIQUE, x={self.x.to_numpy().ravel().tolist()})"


@dataclass
class SystemSolution:
    """
    User-facing result of solve_system().

    Wraps the Result envelope and exposes the outcome together with the
    rank diagnostics that decided it.
    """
    _result: Result[SolveOutcome]

    @property
    def outcome(self) -> SolveOutcome:
        return self._result.params

    @property
    def status(self) -> SolveStatus:
        return self._result.params.status

    @property
    def x(self) -> Matrix | None:
        return self._result.params.x

    @property
    def rank(self) -> int:
        return self._result.info['rank']

    @property
    def rank_augmented(self) -> int:
        return self._result.info['rank_augmented']

    @property
    def n_unknowns(self) -> int:
        return self._result.info['n_unknowns']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def method_name(self) -> str:
        return self._result.method_name

    def summary(self) -> str:
        """Human-readable report of the classification."""
        lines = [
            "Linear System Results",
            "=" * 40,
            f"Unknowns: {self.n_unknowns}",
            f"Rank(A): {self.rank}",
            f"Rank([A|b]): {self.rank_augmented}",
            f"Status: {self.status.value}",
        ]

        if self.x is not None:
            lines.append("")
            lines.append("Solution:")
            lines.append("-" * 40)
            for i, value in enumerate(self.x.to_numpy().ravel()):
                lines.append(f"  x[{i}]: {value:14.6f}")
            lines.append("-" * 40)

        lines.append(f"Method: {self.method_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SystemSolution(status={self.status.name}, rank={self.rank}, "
            f"rank_augmented={self.rank_augmented}, n_unknowns={self.n_unknowns})"
        )
