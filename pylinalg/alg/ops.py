"""
Functional API over Vector and Matrix.

Each function dispatches on operand types and forwards to the matching
method. Unsupported combinations (a Vector plus a Matrix, a Matrix
divided by a Vector) raise TypeError; size problems raise the
DimensionError subclasses from the methods themselves.
"""

from __future__ import annotations

from typing import Any

from numpy.typing import DTypeLike

from pylinalg.alg.matrix import Matrix
from pylinalg.alg.vector import Vector
from pylinalg.core.compute.tolerances import ToleranceTier
from pylinalg.core.validation import is_scalar


def _unsupported(operation: str, *operands: Any) -> TypeError:
    names = ", ".join(type(x).__name__ for x in operands)
    return TypeError(f"{operation}: unsupported operand types ({names})")


def add(a: Any, b: Any) -> Vector[Any] | Matrix[Any]:
    """Elementwise sum of two vectors or two matrices."""
    if isinstance(a, Vector) and isinstance(b, Vector):
        return a.add(b)
    if isinstance(a, Matrix) and isinstance(b, Matrix):
        return a.add(b)
    raise _unsupported('add', a, b)


def sub(a: Any, b: Any) -> Vector[Any] | Matrix[Any]:
    """Elementwise difference of two vectors or two matrices."""
    if isinstance(a, Vector) and isinstance(b, Vector):
        return a.sub(b)
    if isinstance(a, Matrix) and isinstance(b, Matrix):
        return a.sub(b)
    raise _unsupported('sub', a, b)


def mul(a: Any, b: Any) -> Any:
    """
    Product of a and b.

    Vector * scalar, scalar * Vector, Matrix * scalar and scalar * Matrix
    scale; Matrix * Matrix and Matrix * Vector are matrix products.
    """
    if is_scalar(a) and isinstance(b, (Vector, Matrix)):
        a, b = b, a
    if isinstance(a, Vector) and is_scalar(b):
        return a.mul(b)
    if isinstance(a, Matrix) and (is_scalar(b) or isinstance(b, (Vector, Matrix))):
        return a.mul(b)
    raise _unsupported('mul', a, b)


def div(a: Any, scalar: Any) -> Vector[Any] | Matrix[Any]:
    """Divide a vector or matrix by a nonzero scalar."""
    if isinstance(a, (Vector, Matrix)) and is_scalar(scalar):
        return a.div(scalar)
    raise _unsupported('div', a, scalar)


def dot(a: Vector[Any], b: Vector[Any]) -> Any:
    if isinstance(a, Vector) and isinstance(b, Vector):
        return a.dot(b)
    raise _unsupported('dot', a, b)


def norm(a: Vector[Any]) -> float:
    if isinstance(a, Vector):
        return a.norm()
    raise _unsupported('norm', a)


def matmul(a: Matrix[Any], b: Matrix[Any] | Vector[Any]) -> Matrix[Any] | Vector[Any]:
    if isinstance(a, Matrix) and isinstance(b, (Matrix, Vector)):
        return a.matmul(b)
    raise _unsupported('matmul', a, b)


def determinant(a: Matrix[Any]) -> Any:
    if isinstance(a, Matrix):
        return a.determinant()
    raise _unsupported('determinant', a)


def inverse(a: Matrix[Any], tol: ToleranceTier | float | None = None) -> Matrix[Any]:
    if isinstance(a, Matrix):
        return a.inverse(tol=tol)
    raise _unsupported('inverse', a)


def identity(n: int, value: Any = 1, dtype: DTypeLike | None = None) -> Matrix[Any]:
    return Matrix.identity(n, value=value, dtype=dtype)


def zeros(shape: int | tuple[int, int], dtype: DTypeLike = float) -> Vector[Any] | Matrix[Any]:
    """Zero Vector for an int shape, zero Matrix for a (rows, cols) shape."""
    if isinstance(shape, tuple):
        rows, cols = shape
        return Matrix.zero(rows, cols, dtype=dtype)
    return Vector.zero(shape, dtype=dtype)


det = determinant
inv = inverse
