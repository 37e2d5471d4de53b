"""
Matrix[T]: rows x cols immutable matrix.

Entries live in a read-only 2D ndarray, indexed (row, col) from 0. Every
operation returns a new Matrix, Vector or scalar; operands are never
modified. Integer sums and products are computed without overflow.

Determinant and inverse run elimination kernels from
pylinalg.core.compute.linalg on a private working copy:

    determinant  integer entries  -> Bareiss (exact int)
                 anything else    -> Gaussian elimination, partial pivoting
    inverse      all entries      -> Gauss-Jordan on [A | I], partial pivoting
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar
import warnings

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.alg.vector import Vector
from pylinalg.core.compute.linalg.elimination import (
    EliminationResult,
    bareiss_determinant,
    gauss_jordan_inverse,
    gaussian_elimination,
    pivot_ratio,
)
from pylinalg.core.compute.integers import exact_apply, true_divide
from pylinalg.core.compute.tolerances import (
    ILL_CONDITIONED_PIVOT_RATIO,
    ToleranceTier,
    is_inexact,
    select_compare_tolerance,
    select_pivot_tolerance,
    values_close,
)
from pylinalg.core.exceptions import ShapeMismatchError
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_divisor,
    check_inner_dimension,
    check_non_empty_grid,
    check_same_shape,
    check_size,
    check_square,
    is_integral_dtype,
    is_scalar,
)

T = TypeVar('T')


def _require_matrix(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise TypeError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )


def _max_abs(array: NDArray[Any]) -> float:
    return float(max(abs(v) for v in array.flat))


class Matrix(Generic[T]):
    """
    Immutable rows x cols matrix over a numeric scalar type.

    Construct from a 2D array-like with at least one row and one column:

        >>> A = Matrix([[1, 2], [3, 4]])
        >>> A.determinant()
        -2
        >>> A @ Matrix([[5, 6], [7, 8]])
        Matrix([[19, 22], [43, 50]])

    Shape errors (ShapeMismatchError, NotSquareError) are contract
    violations. SingularMatrixError and DivisionByZeroError are numerical
    outcomes a caller may catch.
    """

    __slots__ = ('_data',)

    __array_ufunc__ = None

    def __init__(self, grid: ArrayLike | Matrix[T], *, name: str = 'grid'):
        if isinstance(grid, Matrix):
            data = grid._data
        else:
            data = check_array(grid, name)
            check_2d(data, name)
            check_non_empty_grid(data, name)
        data = np.array(data, copy=True)
        data.setflags(write=False)
        self._data: NDArray[Any] = data

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Matrix[Any]:
        """Adopt a freshly computed array without validating or copying it."""
        matrix = cls.__new__(cls)
        array.setflags(write=False)
        matrix._data = array
        return matrix

    # --- Construction ---

    @classmethod
    def from_function(cls, rows: int, cols: int, f: Callable[[int, int], T]) -> Matrix[T]:
        """Build a rows x cols matrix whose (i, j) entry is f(i, j)."""
        rows = check_size(rows, 'rows', minimum=1)
        cols = check_size(cols, 'cols', minimum=1)
        return cls([[f(i, j) for j in range(cols)] for i in range(rows)], name='f')

    @classmethod
    def zero(cls, rows: int, cols: int, dtype: DTypeLike = float) -> Matrix[Any]:
        rows = check_size(rows, 'rows', minimum=1)
        cols = check_size(cols, 'cols', minimum=1)
        return cls._wrap(np.zeros((rows, cols), dtype=dtype))

    @classmethod
    def identity(cls, n: int, value: Any = 1, dtype: DTypeLike | None = None) -> Matrix[Any]:
        """
        n x n matrix with value on the diagonal and zero elsewhere.

        Args:
            n: Order of the matrix (>= 1)
            value: Diagonal entry, 1 by default
            dtype: Element dtype; inferred from value when None
        """
        n = check_size(n, 'n', minimum=1)
        if not is_scalar(value):
            raise TypeError(f"identity: expected a scalar value, got {type(value).__name__}")
        if dtype is None:
            dtype = np.asarray(value).dtype
        data = np.zeros((n, n), dtype=dtype)
        np.fill_diagonal(data, value)
        return cls._wrap(data)

    @classmethod
    def diagonal(cls, values: ArrayLike | Vector[T]) -> Matrix[T]:
        """Square matrix with values on the diagonal."""
        v = values if isinstance(values, Vector) else Vector(values)
        n = check_size(v.dim, 'len(values)', minimum=1)
        data = np.zeros((n, n), dtype=v.dtype)
        np.fill_diagonal(data, v.to_numpy())
        return cls._wrap(data)

    @classmethod
    def from_row(cls, v: Vector[T]) -> Matrix[T]:
        """1 x n matrix holding the components of v."""
        return cls(v.to_numpy().reshape(1, -1), name='v')

    @classmethod
    def from_col(cls, v: Vector[T]) -> Matrix[T]:
        """n x 1 matrix holding the components of v."""
        return cls(v.to_numpy().reshape(-1, 1), name='v')

    # --- Accessors ---

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, index: tuple[int, int]) -> T:
        if not (isinstance(index, tuple) and len(index) == 2):
            raise TypeError(f"Matrix indices must be a (row, col) pair, got {index!r}")
        row, col = index
        if isinstance(row, slice) or isinstance(col, slice):
            raise TypeError("Matrix indices must be integers; use row() or col()")
        return self._data[row, col]

    def row(self, i: int) -> Vector[T]:
        return Vector._wrap(self._data[i, :].copy())

    def col(self, j: int) -> Vector[T]:
        return Vector._wrap(self._data[:, j].copy())

    def __iter__(self) -> Iterator[Vector[T]]:
        for i in range(self.rows):
            yield self.row(i)

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Writable copy of the entries."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    # --- Arithmetic ---

    def add(self, other: Matrix[T]) -> Matrix[T]:
        _require_matrix(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._wrap(exact_apply(np.add, self._data, other._data))

    def sub(self, other: Matrix[T]) -> Matrix[T]:
        _require_matrix(other, 'sub')
        check_same_shape(self.shape, other.shape, 'sub')
        return Matrix._wrap(exact_apply(np.subtract, self._data, other._data))

    def scale(self, scalar: Any) -> Matrix[Any]:
        """Multiply every entry by scalar."""
        if not is_scalar(scalar):
            raise TypeError(f"scale: expected a scalar operand, got {type(scalar).__name__}")
        return Matrix._wrap(exact_apply(np.multiply, self._data, scalar))

    def div(self, scalar: Any) -> Matrix[Any]:
        """
        Divide every entry by scalar (true division).

        Raises:
            DivisionByZeroError: If scalar == 0, for every scalar type
        """
        if not is_scalar(scalar):
            raise TypeError(f"div: expected a scalar operand, got {type(scalar).__name__}")
        check_divisor(scalar, 'matrix')
        return Matrix._wrap(true_divide(self._data, scalar))

    def matmul(self, other: Matrix[T] | Vector[T]) -> Matrix[T] | Vector[T]:
        """
        Matrix product with a Matrix or a Vector.

        A (r x k) times B (k x c) gives an r x c Matrix; A (r x k) times a
        k-dimensional Vector gives an r-dimensional Vector.

        Raises:
            ShapeMismatchError: If the inner dimensions differ
        """
        if isinstance(other, Vector):
            check_inner_dimension(self.shape, (other.dim,), 'matmul')
            return Vector._wrap(exact_apply(np.matmul, self._data, other.to_numpy()))
        _require_matrix(other, 'matmul')
        check_inner_dimension(self.shape, other.shape, 'matmul')
        return Matrix._wrap(exact_apply(np.matmul, self._data, other._data))

    def mul(self, other: Any) -> Matrix[Any] | Vector[Any]:
        """Multiply by a scalar, a Matrix or a Vector."""
        if is_scalar(other):
            return self.scale(other)
        return self.matmul(other)

    def neg(self) -> Matrix[T]:
        return Matrix._wrap(exact_apply(np.negative, self._data))

    def transpose(self) -> Matrix[T]:
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix[T]:
        return self.transpose()

    def to_vector(self) -> Vector[T]:
        """
        Flatten a single-row or single-column matrix into a Vector.

        Raises:
            ShapeMismatchError: If neither dimension is 1
        """
        if self.rows != 1 and self.cols != 1:
            raise ShapeMismatchError(
                f"to_vector: matrix is not single-row or single-column, shape {self.shape}",
                operation='to_vector',
                left=self.shape,
            )
        return Vector._wrap(self._data.ravel().copy())

    # --- Determinant and inverse ---

    def eliminate(self) -> EliminationResult:
        """Row-echelon form with partial pivoting (see gaussian_elimination)."""
        return gaussian_elimination(self._data)

    def determinant(self) -> T:
        """
        Determinant of a square matrix.

        Integer matrices use fraction-free (Bareiss) elimination and return
        an exact int. Other scalar types use Gaussian elimination with
        partial pivoting; an exactly-zero pivot gives a determinant of 0.

        Raises:
            NotSquareError: If rows != cols
        """
        check_square(self.shape, 'determinant')
        if is_integral_dtype(self._data):
            return bareiss_determinant(self._data)
        return self.eliminate().determinant

    def inverse(
        self,
        tol: ToleranceTier | float | None = None,
        name: str | None = None,
    ) -> Matrix[Any]:
        """
        Inverse of a square matrix by Gauss-Jordan elimination.

        Args:
            tol: Zero-pivot tolerance. A ToleranceTier is scaled by max|A|;
                 a float is used as an absolute threshold. Defaults to
                 select_pivot_tolerance() for the working dtype (PIVOT_FP64
                 for float64, decimal_pivot_tolerance() for Decimal entries,
                 EXACT for Fraction and integer-valued object entries).
            name: Matrix name used in error messages

        Returns:
            The inverse. Integer dtypes are promoted to float64; Fraction
            and integer object entries stay exact (integers become
            Fractions); Decimal entries round to the context precision.

        Raises:
            NotSquareError: If rows != cols
            SingularMatrixError: If a pivot column has no entry above the
                tolerance

        Warns:
            RuntimeWarning: If the smallest/largest pivot magnitude ratio
                is below ILL_CONDITIONED_PIVOT_RATIO
        """
        check_square(self.shape, 'inverse')

        if np.issubdtype(self.dtype, np.integer):
            working_dtype = np.dtype(np.float64)
        else:
            working_dtype = self.dtype

        if tol is None:
            tol = select_pivot_tolerance(working_dtype, self._data)
        if isinstance(tol, ToleranceTier):
            atol = tol.threshold(_max_abs(self._data)) if tol.rtol else tol.atol
        else:
            atol = float(tol)

        inverse, magnitudes = gauss_jordan_inverse(self._data, atol=atol, matrix_name=name)

        if is_inexact(working_dtype):
            ratio = pivot_ratio(magnitudes)
            if ratio < ILL_CONDITIONED_PIVOT_RATIO:
                warnings.warn(
                    f"Matrix is ill-conditioned: pivot magnitude ratio {ratio:.3e} "
                    f"is below {ILL_CONDITIONED_PIVOT_RATIO:.0e}; the inverse may be inaccurate",
                    RuntimeWarning,
                    stacklevel=2,
                )

        return Matrix._wrap(inverse)

    # --- Comparison ---

    def allclose(self, other: Matrix[Any], tier: ToleranceTier | None = None) -> bool:
        """Compare with another matrix of the same shape within a tolerance."""
        _require_matrix(other, 'allclose')
        check_same_shape(self.shape, other.shape, 'allclose')
        if tier is None:
            tier = select_compare_tolerance(
                np.result_type(self._data, other._data), self._data, other._data,
            )
        return values_close(self._data, other._data, tier)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self._data.ravel().tolist())))

    # --- Operators ---

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.scale(other)

    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.div(other)

    def __matmul__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.matmul(other)

    def __neg__(self):
        return self.neg()

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"

    def __str__(self) -> str:
        lines = [f"[{self.rows} x {self.cols}]"]
        for row in self._data.tolist():
            lines.append("[" + ", ".join(str(v) for v in row) + "]")
        return "\n".join(lines)
