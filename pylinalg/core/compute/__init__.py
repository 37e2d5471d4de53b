"""
Shared compute infrastructure for pylinalg.

This module contains the numeric machinery behind Vector and Matrix; it
knows nothing about those types and works on ndarrays only.

Submodules:
    tolerances: Zero-pivot and comparison tolerance tiers
    integers: Overflow-free arithmetic for integer operands
    linalg: Elimination kernels (determinant, inverse)
"""

from pylinalg.core.compute.integers import exact_apply
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    select_compare_tolerance,
    select_pivot_tolerance,
)

__all__ = [
    "ToleranceTier",
    "exact_apply",
    "select_compare_tolerance",
    "select_pivot_tolerance",
]
