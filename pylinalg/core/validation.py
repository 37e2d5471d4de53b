"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (np.asarray only; dtypes are preserved)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

import numbers
import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    DivisionByZeroError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)


def is_scalar(value: Any) -> bool:
    """
    Check whether value can act as a scalar operand.

    Any numbers.Number qualifies (Python and NumPy numbers, Fraction,
    Decimal) except booleans.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Number)


def is_integral_dtype(array: NDArray[Any]) -> bool:
    """
    Check whether every element of array is an exact integer.

    True for integer dtypes, and for object arrays holding only
    numbers.Integral values.
    """
    if np.issubdtype(array.dtype, np.integer):
        return True
    if array.dtype == object:
        return all(isinstance(v, numbers.Integral) for v in array.flat)
    return False


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array without changing the
    element type. Numeric dtypes pass through. Object dtype is accepted only
    when every element is a number (Fraction, Decimal, big int), which is how
    exact scalar types are carried.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric or numeric-object dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        for value in result.flat:
            if not is_scalar(value):
                raise ValidationError(
                    f"{name}: object array contains non-numeric element {value!r}"
                )
        return result

    if result.dtype == np.bool_:
        raise ValidationError(f"{name}: boolean dtype, expected numeric data")

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_non_empty_grid(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Raises:
        ValidationError: If either dimension is zero
    """
    rows, cols = array.shape
    if rows < 1 or cols < 1:
        raise ValidationError(
            f"{name}: matrix needs rows >= 1 and cols >= 1, got shape ({rows}, {cols})"
        )


def check_size(value: Any, name: str, minimum: int = 0) -> int:
    """
    Validate a size argument (dimension, row or column count).

    Args:
        value: Candidate size; must support __index__
        name: Parameter name for error messages
        minimum: Smallest accepted value

    Returns:
        The size as a plain int

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer size, got {value!r}")
    try:
        size = operator.index(value)
    except TypeError as e:
        raise ValidationError(f"{name}: expected an integer size, got {value!r}") from e
    if size < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {size}")
    return size


def check_same_dimension(left: int, right: int, operation: str) -> None:
    """
    Verify two vector operands have the same dimension.

    Raises:
        DimensionMismatchError: If the dimensions differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: vector dimensions differ (left={left}, right={right})",
            operation=operation,
            left=left,
            right=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrix operands have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: matrix shapes differ (left={left}, right={right})",
            operation=operation,
            left=left,
            right=right,
        )


def check_inner_dimension(
    left: tuple[int, int],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify left.cols equals the leading size of the right operand.

    The right operand is a matrix shape (rows, cols) or a vector shape (n,).

    Raises:
        ShapeMismatchError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: inner dimensions differ "
            f"(left has {left[1]} columns, right has {right[0]} "
            f"{'rows' if len(right) == 2 else 'components'})",
            operation=operation,
            left=left,
            right=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got shape {shape}",
            operation=operation,
            shape=shape,
        )


def check_divisor(value: Any, operand: str) -> None:
    """
    Verify a scalar divisor is not zero.

    Applies to every scalar type, floating ones included: dividing by zero
    never yields infinities silently.

    Raises:
        DivisionByZeroError: If value == 0
    """
    if value == 0:
        raise DivisionByZeroError(
            f"cannot divide {operand} by zero scalar {value!r}",
            operand=operand,
        )
