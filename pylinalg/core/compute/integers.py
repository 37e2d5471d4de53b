"""
Overflow-free arithmetic for integer operands.

NumPy integer dtypes wrap around silently on overflow. Operations whose
operands are all integers (integer-dtype arrays, Python ints, NumPy integer
scalars) are therefore evaluated on object arrays of Python ints, which
never overflow. Array results are narrowed back to the operands' integer
dtype when every value fits; otherwise they stay object dtype and keep
the exact value.

Operations with any non-integer operand go straight to NumPy.
"""

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray


def is_integer_operand(value: Any) -> bool:
    """True for integer-dtype arrays and integer scalars (bool excluded)."""
    if isinstance(value, np.ndarray):
        return bool(np.issubdtype(value.dtype, np.integer))
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Integral)


def _lift(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.astype(object)
    return int(value)


def narrow(result: NDArray[Any], dtype: np.dtype[Any]) -> NDArray[Any]:
    """
    Cast an object array of Python ints to dtype when every value fits.

    Returns result unchanged if any value lies outside the range of dtype.
    """
    info = np.iinfo(dtype)
    if all(info.min <= v <= info.max for v in result.flat):
        return result.astype(dtype)
    return result


def exact_apply(func: Callable[..., Any], *operands: Any) -> Any:
    """
    Apply func to operands without integer overflow.

    Args:
        func: NumPy-compatible function of the operands (np.add, np.dot, ...)
        operands: Arrays and scalars

    Returns:
        func(*operands). When every operand is an integer, the result is
        computed in Python ints: array results are narrowed back to the
        integer dtype if they fit, scalar results are Python ints.
    """
    if not all(is_integer_operand(op) for op in operands):
        return func(*operands)

    arrays = [op for op in operands if isinstance(op, np.ndarray)]
    result = func(*(_lift(op) for op in operands))

    if isinstance(result, np.ndarray):
        if not arrays:
            return result
        return narrow(result, np.result_type(*arrays))
    return int(result)


def true_divide(array: NDArray[Any], scalar: Any) -> NDArray[Any]:
    """
    array / scalar with NumPy's float result for integer operands.

    An integer scalar is converted to float first so one too large for the
    array dtype does not raise OverflowError.
    """
    if is_integer_operand(array) and is_integer_operand(scalar):
        scalar = float(scalar)
    return array / scalar
