"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype preservation, non-numeric rejection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_non_empty_grid / check_size: size arguments
    - check_same_dimension / check_same_shape / check_inner_dimension /
      check_square: operand contracts
    - check_divisor: zero divisors
    - is_scalar / is_integral_dtype: type predicates
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    DivisionByZeroError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_divisor,
    check_inner_dimension,
    check_ndim,
    check_non_empty_grid,
    check_same_dimension,
    check_same_shape,
    check_size,
    check_square,
    is_integral_dtype,
    is_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_int_list_keeps_integer_dtype(self):
        result = check_array([1, 2, 3], "values")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.integer)

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "values").dtype == np.float32

    def test_complex_accepted(self):
        result = check_array([1 + 2j, 3], "values")
        assert np.issubdtype(result.dtype, np.complexfloating)

    def test_fractions_become_object(self):
        result = check_array([Fraction(1, 2), Fraction(3)], "values")
        assert result.dtype == object
        assert result[0] == Fraction(1, 2)

    def test_decimals_accepted(self):
        result = check_array([Decimal("1.5"), Decimal("2")], "values")
        assert result.dtype == object

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "grid")
        assert result.shape == (2, 2)

    def test_rejects_homogeneous_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "values")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="boolean"):
            check_array([True, False], "values")

    def test_rejects_none_in_object_array(self):
        with pytest.raises(ValidationError, match="non-numeric element"):
            check_array([None, 1, 2.0], "values")

    def test_rejects_string_among_fractions(self):
        with pytest.raises(ValidationError, match="non-numeric element"):
            check_array([Fraction(1), "x"], "values")

    def test_rejects_ragged_grid(self):
        with pytest.raises(ValidationError, match="cannot convert"):
            check_array([[1, 2], [3]], "grid")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_matching_ndim_passes(self):
        check_ndim(np.zeros((2, 2)), 2, "grid")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_ndim(np.zeros(3), 2, "grid")

    def test_check_1d(self):
        check_1d(np.zeros(3), "values")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((1, 3)), "values")

    def test_check_2d(self):
        check_2d(np.zeros((1, 3)), "grid")
        with pytest.raises(DimensionError):
            check_2d(np.zeros((1, 3, 1)), "grid")


# ═══════════════════════════════════════════════════════════════════════
# Size arguments
# ═══════════════════════════════════════════════════════════════════════


class TestSizes:

    def test_non_empty_grid_passes(self):
        check_non_empty_grid(np.zeros((1, 1)), "grid")

    @pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
    def test_empty_grid_rejected(self, shape):
        with pytest.raises(ValidationError, match="rows >= 1 and cols >= 1"):
            check_non_empty_grid(np.zeros(shape), "grid")

    def test_size_plain_int(self):
        assert check_size(3, "n") == 3

    def test_size_numpy_int(self):
        result = check_size(np.int64(2), "n")
        assert result == 2
        assert type(result) is int

    def test_size_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be >= 0"):
            check_size(-1, "n")

    def test_size_minimum(self):
        with pytest.raises(ValidationError, match="must be >= 1"):
            check_size(0, "rows", minimum=1)

    @pytest.mark.parametrize("value", [2.5, "3", True, None])
    def test_size_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="expected an integer size"):
            check_size(value, "n")


# ═══════════════════════════════════════════════════════════════════════
# Operand contracts
# ═══════════════════════════════════════════════════════════════════════


class TestOperandContracts:

    def test_same_dimension_passes(self):
        check_same_dimension(3, 3, "add")

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="left=3, right=2") as exc_info:
            check_same_dimension(3, 2, "add")
        assert exc_info.value.operation == "add"
        assert exc_info.value.left == 3
        assert exc_info.value.right == 2

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "sub")

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="sub") as exc_info:
            check_same_shape((2, 3), (3, 2), "sub")
        assert exc_info.value.left == (2, 3)
        assert exc_info.value.right == (3, 2)

    def test_inner_dimension_matrix(self):
        check_inner_dimension((2, 3), (3, 4), "matmul")
        with pytest.raises(ShapeMismatchError, match="3 columns, right has 2 rows"):
            check_inner_dimension((2, 3), (2, 3), "matmul")

    def test_inner_dimension_vector(self):
        check_inner_dimension((2, 3), (3,), "matmul")
        with pytest.raises(ShapeMismatchError, match="2 components"):
            check_inner_dimension((2, 3), (2,), "matmul")

    def test_square(self):
        check_square((3, 3), "determinant")
        with pytest.raises(NotSquareError, match="determinant") as exc_info:
            check_square((2, 3), "determinant")
        assert exc_info.value.shape == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_divisor
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDivisor:

    @pytest.mark.parametrize("value", [0, 0.0, -0.0, 0j, Fraction(0), Decimal(0), np.float32(0)])
    def test_zero_rejected(self, value):
        with pytest.raises(DivisionByZeroError):
            check_divisor(value, "vector")

    @pytest.mark.parametrize("value", [1, -2.5, 1j, Fraction(1, 3), np.float64(1e-300)])
    def test_nonzero_passes(self, value):
        check_divisor(value, "vector")

    def test_nan_is_not_zero(self):
        check_divisor(float("nan"), "vector")


# ═══════════════════════════════════════════════════════════════════════
# Predicates
# ═══════════════════════════════════════════════════════════════════════


class TestPredicates:

    @pytest.mark.parametrize("value", [
        1, 1.5, 2j, Fraction(1, 2), Decimal("1.5"), np.float32(1), np.int8(3),
    ])
    def test_scalars(self, value):
        assert is_scalar(value)

    @pytest.mark.parametrize("value", [True, np.bool_(False), "1", [1], np.array([1]), None])
    def test_non_scalars(self, value):
        assert not is_scalar(value)

    def test_integral_dtypes(self):
        assert is_integral_dtype(np.array([1, 2], dtype=np.int32))
        assert is_integral_dtype(np.array([1, 2], dtype=np.uint8))
        assert is_integral_dtype(np.array([10**30, 1], dtype=object))

    def test_non_integral_dtypes(self):
        assert not is_integral_dtype(np.array([1.0, 2.0]))
        assert not is_integral_dtype(np.array([Fraction(1), 2], dtype=object))
