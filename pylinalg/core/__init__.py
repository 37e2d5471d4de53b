"""
Core infrastructure for pylinalg.

This module provides the shared abstractions used by the algebra types:

Key components:
    exceptions: Exception hierarchy (contract violations vs numerical outcomes)
    validation: Input and operand validators
    compute: Tolerance tiers and elimination kernels
"""

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
