"""
Tests for the dense Matrix value type.

Covers construction, element access, equality, value semantics, arithmetic
and its dimension checks, and operator aliases.
"""

import warnings

import numpy as np
import pytest

from pyalgebra import Matrix
from pyalgebra.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    LargeMatrixWarning,
    OutOfBoundsError,
    TooLargeError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_fill_is_zero(self):
        m = Matrix(3, 2)
        assert m.shape == (3, 2)
        assert all(m.get(i, j) == 0.0 for i in range(3) for j in range(2))

    def test_custom_fill(self):
        m = Matrix(5, 5, 5.0)
        np.testing.assert_array_equal(m.to_numpy(), np.full((5, 5), 5.0))

    def test_rows_cols_size(self):
        m = Matrix(2, 7)
        assert (m.rows, m.cols, m.size) == (2, 7, 14)
        assert not m.is_square()
        assert Matrix(3, 3).is_square()

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (-2, 3)])
    def test_invalid_dimensions(self, rows, cols):
        with pytest.raises(InvalidDimensionsError):
            Matrix(rows, cols)

    def test_too_large(self):
        with pytest.raises(TooLargeError):
            Matrix(10_000, 1_000)

    def test_large_matrix_warns_but_succeeds(self):
        with pytest.warns(LargeMatrixWarning):
            m = Matrix(1_000, 1_000)
        assert m.shape == (1_000, 1_000)

    def test_large_matrix_warns_once_at_the_call_site(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            m = Matrix(1_000, 1_000)
            m + m
            m.transpose()
            m.copy()
        large = [w for w in caught if issubclass(w.category, LargeMatrixWarning)]
        assert len(large) == 1
        assert large[0].filename.endswith("test_dense.py")

    def test_from_rows_warns_at_the_call_site(self):
        with pytest.warns(LargeMatrixWarning) as record:
            Matrix.from_rows(np.zeros((1_000, 1_000)))
        assert len(record) == 1
        assert record[0].filename.endswith("test_dense.py")

    def test_from_rows(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.get(1, 2) == 6.0

    def test_from_rows_copies_input(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_rows(source)
        source[0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_from_rows_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_rows([1, 2, 3])

    def test_from_rows_rejects_empty_row(self):
        with pytest.raises(InvalidDimensionsError):
            Matrix.from_rows([[]])

    def test_from_rows_rejects_ragged(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[1, 2], [3]])

    def test_column(self):
        b = Matrix.column([1, 2, 3])
        assert b.shape == (3, 1)
        assert b.tolist() == [[1.0], [2.0], [3.0]]

    def test_column_accepts_n_by_1(self):
        assert Matrix.column([[1], [2]]).shape == (2, 1)

    def test_column_rejects_wide(self):
        with pytest.raises(DimensionError):
            Matrix.column([[1, 2], [3, 4]])

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).to_numpy(), np.eye(3))

    @pytest.mark.parametrize("size", [0, -1])
    def test_identity_invalid(self, size):
        with pytest.raises(InvalidDimensionsError):
            Matrix.identity(size)


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_set_then_get(self):
        m = Matrix(3, 3)
        m.set(1, 2, 5.5)
        assert m.get(1, 2) == 5.5

    def test_item_syntax(self):
        m = Matrix(2, 2)
        m[0, 1] = -3.0
        assert m[0, 1] == -3.0

    def test_get_returns_python_float(self):
        assert type(Matrix(1, 1, 2.0).get(0, 0)) is float

    @pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_get_out_of_bounds(self, row, col):
        with pytest.raises(OutOfBoundsError):
            Matrix(3, 3).get(row, col)

    def test_set_out_of_bounds(self):
        m = Matrix(3, 3)
        with pytest.raises(OutOfBoundsError):
            m[3, 0] = 5.0

    def test_item_requires_pair(self):
        with pytest.raises(TypeError):
            Matrix(2, 2)[0]


# ═══════════════════════════════════════════════════════════════════════
# Equality and value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestEqualityAndCopies:

    def test_equal(self):
        assert Matrix(2, 2, 3.0) == Matrix(2, 2, 3.0)

    def test_different_values(self):
        assert Matrix(2, 2, 3.0) != Matrix(2, 2, 4.0)

    def test_different_shapes(self):
        assert Matrix(2, 3) != Matrix(3, 2)
        assert Matrix(1, 4) != Matrix(2, 2)

    def test_equality_is_exact(self):
        a = Matrix(1, 1, 1.0)
        b = Matrix(1, 1, 1.0 + 1e-15)
        assert a != b

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix(1, 1))

    def test_copy_is_independent(self):
        a = Matrix(2, 2, 3.0)
        b = a.copy()
        b[0, 0] = 9.0
        assert a[0, 0] == 3.0
        assert a != b

    def test_to_numpy_is_a_copy(self):
        a = Matrix(2, 2)
        values = a.to_numpy()
        values[0, 0] = 7.0
        assert a[0, 0] == 0.0

    def test_results_do_not_alias_operands(self):
        a = Matrix(2, 2, 1.0)
        t = a.transpose()
        t[0, 1] = 5.0
        assert a[1, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[10, 20], [30, 40]])
        assert a.add(b) == Matrix.from_rows([[11, 22], [33, 44]])

    def test_subtract(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[10, 20], [30, 40]])
        assert b.subtract(a) == Matrix.from_rows([[9, 18], [27, 36]])

    def test_add_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            Matrix(2, 3).add(Matrix(3, 2))
        assert exc_info.value.first_shape == (2, 3)
        assert exc_info.value.second_shape == (3, 2)

    def test_subtract_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 3).subtract(Matrix(3, 2))

    def test_multiply_scalar(self):
        m = Matrix(2, 2, 2.0)
        assert m.multiply_scalar(3) == Matrix(2, 2, 6.0)

    def test_negate(self):
        m = Matrix.from_rows([[1, -2]])
        assert m.negate() == Matrix.from_rows([[-1, 2]])

    def test_multiply(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
        assert a.multiply(b) == Matrix.from_rows([[58, 64], [139, 154]])

    def test_multiply_shape(self):
        assert Matrix(2, 3).multiply(Matrix(3, 5)).shape == (2, 5)

    def test_multiply_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 3).multiply(Matrix(2, 3))

    def test_multiply_by_identity(self, rng):
        a = Matrix.from_rows(rng.standard_normal((4, 3)))
        assert a.multiply(Matrix.identity(3)) == a

    def test_transpose(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert a.transpose() == Matrix.from_rows([[1, 4], [2, 5], [3, 6]])

    def test_augment(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.column([5, 6])
        assert a.augment(b) == Matrix.from_rows([[1, 2, 5], [3, 4, 6]])

    def test_augment_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 2).augment(Matrix(3, 1))

    def test_swap_rows(self):
        a = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
        swapped = a.swap_rows(0, 2)
        assert swapped == Matrix.from_rows([[5, 6], [3, 4], [1, 2]])
        assert a[0, 0] == 1.0

    def test_swap_rows_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            Matrix(2, 2).swap_rows(0, 2)


# ═══════════════════════════════════════════════════════════════════════
# Operator aliases
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_plus_minus(self):
        a = Matrix(2, 2, 1.0)
        b = Matrix(2, 2, 2.0)
        assert a + b == Matrix(2, 2, 3.0)
        assert b - a == Matrix(2, 2, 1.0)

    def test_matmul(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        assert a @ Matrix.identity(2) == a

    def test_scalar_both_sides(self):
        a = Matrix.from_rows([[1, -2]])
        assert a * 2 == Matrix.from_rows([[2, -4]])
        assert 2 * a == Matrix.from_rows([[2, -4]])
        assert 0.5 * a == a.multiply_scalar(0.5)

    def test_unary_minus(self):
        a = Matrix.from_rows([[1, -2]])
        assert -a == a.negate()

    def test_matrix_times_matrix_is_type_error(self):
        with pytest.raises(TypeError):
            Matrix(2, 2) * Matrix(2, 2)

    def test_no_implicit_scalar_addition(self):
        with pytest.raises(TypeError):
            Matrix(2, 2) + 1.0

    def test_operator_mismatch_raises(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 2) + Matrix(3, 3)
