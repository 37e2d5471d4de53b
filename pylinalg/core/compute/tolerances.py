"""
Tolerance tiers for numerical decisions and comparisons.

Defines the zero-pivot thresholds used by the inverse, and the comparison
tolerances used by allclose():
- FP64: double precision (float64, complex128, longdouble)
- FP32: single and half precision (float32, float16, complex64)
- DECIMAL: decimal.Decimal entries, scaled to the active context precision
- EXACT: integer, Fraction and big-int scalars compare exactly

A pivot is treated as zero when |pivot| <= atol + rtol * max|A|.

Every fixed value here is a module-level constant so callers can inspect it,
and each operation that uses one accepts an override argument. The Decimal
tiers depend on decimal.getcontext().prec and are built on demand.
"""

from dataclasses import dataclass
import decimal
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def threshold(self, scale: float) -> float:
        """Absolute cut-off for values measured against scale."""
        return self.atol + self.rtol * scale


# Double precision: a few hundred ulps relative to the largest entry
PIVOT_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=0.0,
    name='pivot_fp64',
    description='float64 pivot is zero below 1e-12 * max|A|',
)

# Single precision
PIVOT_FP32 = ToleranceTier(
    rtol=1e-6,
    atol=0.0,
    name='pivot_fp32',
    description='float32 pivot is zero below 1e-6 * max|A|',
)

# Exact scalar types: only a true zero is zero
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='integer / Fraction scalars, exact comparison',
)

# Decimal rounds every quotient to the context precision; allow this many
# units in the last place of accumulated error before a pivot counts as zero.
DECIMAL_PIVOT_ULPS = 1000

# Comparison tiers for allclose()
COMPARE_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='compare_fp64',
    description='float64 results equal up to accumulated rounding',
)

COMPARE_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='compare_fp32',
    description='float32 results equal up to accumulated rounding',
)

# Smallest-to-largest pivot magnitude below which inverse() warns.
# Near 1/eps(float64) the inverse has lost essentially every digit.
ILL_CONDITIONED_PIVOT_RATIO = 1e-10


def _is_single_precision(dtype: np.dtype[Any]) -> bool:
    return dtype in (np.dtype(np.float16), np.dtype(np.float32), np.dtype(np.complex64))


def is_inexact(dtype: np.dtype[Any]) -> bool:
    """True for floating and complex dtypes."""
    return bool(np.issubdtype(dtype, np.inexact))


def contains_decimal(*arrays: NDArray[Any]) -> bool:
    """True if any of arrays is an object array holding a Decimal."""
    return any(
        isinstance(v, decimal.Decimal)
        for a in arrays if a.dtype == object
        for v in a.flat
    )


def decimal_pivot_tolerance() -> ToleranceTier:
    """
    Zero-pivot tier for Decimal entries under the active decimal context.

    With the default precision of 28 digits the relative tolerance is 1e-25.
    """
    prec = decimal.getcontext().prec
    return ToleranceTier(
        rtol=DECIMAL_PIVOT_ULPS * 10.0 ** -prec,
        atol=0.0,
        name='pivot_decimal',
        description=f'Decimal pivot is zero below {DECIMAL_PIVOT_ULPS} ulps at {prec} digits',
    )


def select_pivot_tolerance(
    dtype: np.dtype[Any],
    *values: NDArray[Any],
) -> ToleranceTier:
    """
    Select the zero-pivot tier for a given element dtype.

    Object dtype is exact unless any of values holds Decimal entries,
    which round like floating point and get decimal_pivot_tolerance().
    """
    if contains_decimal(*values):
        return decimal_pivot_tolerance()
    if not is_inexact(dtype):
        return EXACT
    if _is_single_precision(dtype):
        return PIVOT_FP32
    return PIVOT_FP64


def select_compare_tolerance(
    dtype: np.dtype[Any],
    *values: NDArray[Any],
) -> ToleranceTier:
    """
    Select the allclose() tier for a given element dtype.

    Decimal entries are compared as float64 values with COMPARE_FP64.
    """
    if contains_decimal(*values):
        return COMPARE_FP64
    if not is_inexact(dtype):
        return EXACT
    if _is_single_precision(dtype):
        return COMPARE_FP32
    return COMPARE_FP64


def values_close(a: NDArray[Any], b: NDArray[Any], tier: ToleranceTier) -> bool:
    """
    Elementwise |a - b| <= atol + rtol * |b| for arrays of equal shape.

    The EXACT tier (rtol == atol == 0) compares with ==, which keeps
    Fraction and big-int comparisons exact. Otherwise object arrays are
    compared after conversion to complex128.
    """
    if tier.rtol == 0.0 and tier.atol == 0.0:
        return bool(np.array_equal(a, b))
    if a.dtype == object:
        a = a.astype(np.complex128)
    if b.dtype == object:
        b = b.astype(np.complex128)
    return bool(np.allclose(a, b, rtol=tier.rtol, atol=tier.atol))
