"""
Vector and matrix types.

Public API:
    Vector            - immutable n-dimensional vector
    Matrix            - immutable rows x cols matrix
    add, sub, mul, div, dot, norm, matmul,
    determinant (det), inverse (inv),
    identity, zeros   - functional forms of the methods
"""

from pylinalg.alg.vector import Vector
from pylinalg.alg.matrix import Matrix
from pylinalg.alg.ops import (
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

__all__ = [
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
]
