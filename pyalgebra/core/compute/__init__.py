"""
Shared numeric infrastructure for PyAlgebra.

Submodules:
    tolerances: The fixed absolute zero threshold
    timing: Execution timing utilities
"""

from pyalgebra.core.compute.tolerances import EPSILON, is_negligible
from pyalgebra.core.compute.timing import Timer

__all__ = [
    # Tolerances
    "EPSILON",
    "is_negligible",
    # Timing
    "Timer",
]
