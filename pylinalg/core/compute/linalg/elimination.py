"""
Elimination kernels: determinant and inverse.

All kernels operate on plain 2D ndarrays, never mutate their input, and do
their row manipulation on a private working copy that is discarded when the
kernel returns.

Pivot selection is partial pivoting everywhere: at step k the remaining row
with the largest |entry| in column k becomes the pivot row (first such row
on ties).

Working element type:
    integer dtypes        -> float64 (elimination divides)
    object of Integral    -> Fraction (exact inverse)
    everything else       -> unchanged (float, complex, Fraction, Decimal)

Decimal is carried as-is but rounds like floating point, so callers pass
a nonzero atol for it.

bareiss_determinant() is the exception: it stays in Python ints throughout
and never divides inexactly.
"""

from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
import operator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.validation import is_integral_dtype


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of Gaussian elimination with partial pivoting.

    Attributes:
        upper: Row-echelon form of the input (upper triangular when square)
        pivots: Pivot values in elimination order, one per pivot column
        pivot_columns: Column index of each pivot
        n_swaps: Number of row interchanges performed
        rank: Number of pivots found
    """
    upper: NDArray[Any]
    pivots: tuple[Any, ...]
    pivot_columns: tuple[int, ...]
    n_swaps: int
    rank: int

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self.upper.shape)

    @property
    def determinant(self) -> Any:
        """
        Product of the pivots, negated once per row swap.

        Only meaningful for square input. A column without a nonzero pivot
        makes the determinant exactly zero.
        """
        if self.rank < self.upper.shape[0]:
            return self.upper.dtype.type(0)
        det = reduce(operator.mul, self.pivots)
        return -det if self.n_swaps % 2 else det


def working_copy(A: NDArray[Any]) -> NDArray[Any]:
    """Copy A into an element type on which elimination can divide."""
    if np.issubdtype(A.dtype, np.integer):
        return A.astype(np.float64)
    if A.dtype == object and is_integral_dtype(A):
        return np.array([Fraction(int(v)) for v in A.flat], dtype=object).reshape(A.shape)
    return np.array(A, copy=True)


def _pivot_row(work: NDArray[Any], start: int, col: int) -> int:
    return max(range(start, work.shape[0]), key=lambda i: abs(work[i, col]))


def _swap_rows(work: NDArray[Any], i: int, j: int) -> None:
    work[[i, j]] = work[[j, i]]


def gaussian_elimination(A: NDArray[Any]) -> EliminationResult:
    """
    Reduce A to row-echelon form with partial pivoting.

    Args:
        A: Matrix to reduce (rows x cols)

    Returns:
        EliminationResult with the echelon form, pivots and swap count

    Notes:
        A chosen pivot that is exactly zero means the column has no pivot;
        the column is skipped and the rank stays below full. No tolerance is
        applied here.
    """
    work = working_copy(A)
    rows, cols = work.shape

    pivots = []
    pivot_columns = []
    n_swaps = 0
    r = 0
    for c in range(cols):
        if r == rows:
            break
        p = _pivot_row(work, r, c)
        if work[p, c] == 0:
            continue
        if p != r:
            _swap_rows(work, r, p)
            n_swaps += 1

        pivot = work[r, c]
        if r + 1 < rows:
            factors = work[r + 1:, c] / pivot
            work[r + 1:, c:] -= np.outer(factors, work[r, c:])
            # Exact zeros below the pivot, whatever the rounding left
            work[r + 1:, c] = 0

        pivots.append(pivot)
        pivot_columns.append(c)
        r += 1

    return EliminationResult(
        upper=work,
        pivots=tuple(pivots),
        pivot_columns=tuple(pivot_columns),
        n_swaps=n_swaps,
        rank=len(pivots),
    )


def bareiss_determinant(A: NDArray[Any]) -> int:
    """
    Exact determinant of an integer matrix by fraction-free elimination.

    Every intermediate division in the Bareiss recurrence is exact, so the
    computation stays in Python ints (no overflow, no rounding).

    Args:
        A: Square matrix of integer dtype or object dtype of Integral values

    Returns:
        The determinant as a Python int
    """
    n = A.shape[0]
    work = np.array([int(v) for v in A.flat], dtype=object).reshape(A.shape)

    sign = 1
    previous = 1
    for k in range(n - 1):
        p = _pivot_row(work, k, k)
        if work[p, k] == 0:
            return 0
        if p != k:
            _swap_rows(work, k, p)
            sign = -sign

        pivot = work[k, k]
        work[k + 1:, k + 1:] = (
            work[k + 1:, k + 1:] * pivot - np.outer(work[k + 1:, k], work[k, k + 1:])
        ) // previous
        previous = pivot

    return sign * int(work[n - 1, n - 1])


def gauss_jordan_inverse(
    A: NDArray[Any],
    atol: float = 0.0,
    matrix_name: str | None = None,
) -> tuple[NDArray[Any], tuple[Any, ...]]:
    """
    Invert a square matrix by Gauss-Jordan elimination on [A | I].

    Args:
        A: Square matrix to invert
        atol: A best pivot with |pivot| <= atol counts as zero. 0.0 means
              only an exact zero is singular.
        matrix_name: Name used in the SingularMatrixError message

    Returns:
        (inverse, pivot magnitudes in elimination order)

    Raises:
        SingularMatrixError: If some column has no pivot above atol
    """
    n = A.shape[0]
    left = working_copy(A)
    work = np.concatenate([left, np.eye(n, dtype=left.dtype)], axis=1)

    magnitudes = []
    for c in range(n):
        p = _pivot_row(work, c, c)
        magnitude = abs(work[p, c])
        if magnitude <= atol:
            label = matrix_name or 'matrix'
            raise SingularMatrixError(
                f"{label} is singular: no pivot above {atol!r} in column {c} "
                f"(rank {c} < {n})",
                matrix_name=matrix_name,
                pivot_column=c,
                rank=c,
                expected_rank=n,
            )
        if p != c:
            _swap_rows(work, c, p)

        work[c] = work[c] / work[c, c]
        factors = work[:, c].copy()
        factors[c] = 0
        work -= np.outer(factors, work[c])
        magnitudes.append(magnitude)

    return work[:, n:].copy(), tuple(magnitudes)


def pivot_ratio(magnitudes: tuple[Any, ...]) -> float:
    """Ratio of smallest to largest pivot magnitude (1.0 when empty)."""
    if not magnitudes:
        return 1.0
    largest = float(max(magnitudes))
    if largest == 0.0:
        return 0.0
    return float(min(magnitudes)) / largest
