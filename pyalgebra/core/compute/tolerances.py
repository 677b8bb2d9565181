"""
Tolerance constant for numerical zero tests.

PyAlgebra uses ONE fixed absolute threshold everywhere a value has to be
judged zero:
- pivot selection in the elimination engine
- snapping a determinant to exactly 0.0
- deciding whether an echelon row contributes to the rank

No relative or scale-aware comparison is performed. Matrices whose entries
are all very large or very small can therefore be misclassified as singular
or non-singular; this is a documented limitation of the library.
"""

EPSILON: float = 1e-10


def is_negligible(value: float, tolerance: float = EPSILON) -> bool:
    """True if |value| is below the absolute zero threshold."""
    return abs(value) < tolerance


__all__ = [
    'EPSILON',
    'is_negligible',
]
