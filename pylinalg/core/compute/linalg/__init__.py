"""
Linear algebra kernels for pylinalg.

All functions follow these conventions:
    - Inputs are plain 2D ndarrays; inputs are never mutated
    - Row manipulation happens on a private working copy
    - Structured results are returned as frozen dataclasses
    - Errors are raised immediately with clear messages

Submodules:
    elimination: Gaussian, Bareiss and Gauss-Jordan elimination
"""

from pylinalg.core.compute.linalg.elimination import (
    EliminationResult,
    bareiss_determinant,
    gauss_jordan_inverse,
    gaussian_elimination,
    pivot_ratio,
    working_copy,
)

__all__ = [
    "EliminationResult",
    "bareiss_determinant",
    "gauss_jordan_inverse",
    "gaussian_elimination",
    "pivot_ratio",
    "working_copy",
]
