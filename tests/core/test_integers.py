"""
Tests for overflow-free integer arithmetic.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.compute.integers import (
    exact_apply,
    is_integer_operand,
    narrow,
    true_divide,
)


class TestIsIntegerOperand:

    @pytest.mark.parametrize("value", [
        1, 2**70, np.int8(3), np.uint64(5),
        np.array([1, 2]), np.array([1], dtype=np.uint8),
    ])
    def test_integers(self, value):
        assert is_integer_operand(value)

    @pytest.mark.parametrize("value", [
        True, np.bool_(False), 1.0, Fraction(1), 1j,
        np.array([1.0]), np.array([1], dtype=object),
    ])
    def test_non_integers(self, value):
        assert not is_integer_operand(value)


class TestNarrow:

    def test_fits(self):
        result = narrow(np.array([1, -1], dtype=object), np.dtype(np.int8))
        assert result.dtype == np.int8

    def test_does_not_fit(self):
        result = narrow(np.array([128], dtype=object), np.dtype(np.int8))
        assert result.dtype == object
        assert result[0] == 128

    def test_negative_into_unsigned(self):
        result = narrow(np.array([-1], dtype=object), np.dtype(np.uint32))
        assert result.dtype == object


class TestExactApply:

    def test_dot_is_python_int(self):
        a = np.array([2**62, 2**62])
        result = exact_apply(np.dot, a, np.array([4, 4]))
        assert result == 2**65
        assert type(result) is int

    def test_array_result_narrowed(self):
        result = exact_apply(np.add, np.array([1, 2]), np.array([3, 4]))
        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, [4, 6])

    def test_array_result_widened(self):
        result = exact_apply(np.multiply, np.array([2**62]), 4)
        assert result.dtype == object
        assert result[0] == 2**64

    def test_large_scalar(self):
        result = exact_apply(np.multiply, np.array([1, 2]), 2**70)
        assert result.tolist() == [2**70, 2**71]

    def test_matmul(self):
        A = np.array([[2**62, 2**62]])
        result = exact_apply(np.matmul, A, np.array([4, 4]))
        assert result.tolist() == [2**65]

    def test_mixed_operands_use_numpy(self):
        result = exact_apply(np.multiply, np.array([1, 2]), 0.5)
        assert result.dtype == np.float64

    def test_inputs_not_mutated(self):
        a = np.array([2**62, 1])
        exact_apply(np.add, a, a)
        assert a.dtype == np.int64
        np.testing.assert_array_equal(a, [2**62, 1])


class TestTrueDivide:

    def test_integer_division_is_float(self):
        result = true_divide(np.array([1, 2]), 2)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [0.5, 1.0])

    def test_large_integer_divisor(self):
        result = true_divide(np.array([2**62]), 2**70)
        assert result[0] == pytest.approx(2.0**-8)

    def test_fraction_divisor_stays_exact(self):
        result = true_divide(np.array([1, 2]), Fraction(3))
        assert result.tolist() == [Fraction(1, 3), Fraction(2, 3)]
