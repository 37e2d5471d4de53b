"""
pylinalg: generic vectors and matrices for Python.

Dense, immutable Vector and Matrix types over any NumPy numeric dtype,
exact Python numbers (Fraction, big int) or Decimal, with elementwise
arithmetic, dot product, norm, matrix products, determinant and inverse.

Submodules:
    alg: Vector, Matrix and the functional API
    core: Exceptions, validation, tolerance tiers, elimination kernels
"""

__version__ = "0.1.0"

from pylinalg.alg import (
    Vector,
    Matrix,
    add,
    sub,
    mul,
    div,
    dot,
    norm,
    matmul,
    determinant,
    det,
    inverse,
    inv,
    identity,
    zeros,
)
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "add",
    "sub",
    "mul",
    "div",
    "dot",
    "norm",
    "matmul",
    "determinant",
    "det",
    "inverse",
    "inv",
    "identity",
    "zeros",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
]
