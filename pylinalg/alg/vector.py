"""
Vector[T]: fixed-dimension immutable vector.

The components live in a read-only 1D ndarray whose dtype is the scalar
type T. Every operation returns a new Vector (or a scalar); operands are
never modified.

Integer arithmetic never wraps around: results that overflow the integer
dtype come back as object arrays of Python ints (see
pylinalg.core.compute.integers).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Generic, Iterator, TypeVar

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.compute.integers import exact_apply, true_divide
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    select_compare_tolerance,
    values_close,
)
from pylinalg.core.validation import (
    check_1d,
    check_array,
    check_divisor,
    check_same_dimension,
    check_size,
    is_scalar,
)

T = TypeVar('T')


def _require_vector(other: Any, operation: str) -> None:
    if not isinstance(other, Vector):
        raise TypeError(
            f"{operation}: expected a Vector operand, got {type(other).__name__}"
        )


def _require_scalar(value: Any, operation: str) -> None:
    if not is_scalar(value):
        raise TypeError(
            f"{operation}: expected a scalar operand, got {type(value).__name__}"
        )


class Vector(Generic[T]):
    """
    Immutable n-dimensional vector over a numeric scalar type.

    Construct from any 1D array-like:

        >>> a = Vector([1, 2, 3])
        >>> b = Vector([4, 5, 6])
        >>> a + b
        Vector([5, 7, 9])
        >>> int(a @ b)
        32

    The dimension is fixed at construction. Combining vectors of different
    dimension raises DimensionMismatchError; dividing by a zero scalar raises
    DivisionByZeroError.
    """

    __slots__ = ('_data',)

    # Make NumPy defer to our reflected operators (np.float64(2) * v)
    __array_ufunc__ = None

    def __init__(self, values: ArrayLike | Vector[T], *, name: str = 'values'):
        if isinstance(values, Vector):
            data = values._data
        else:
            data = check_array(values, name)
            check_1d(data, name)
        data = np.array(data, copy=True)
        data.setflags(write=False)
        self._data: NDArray[Any] = data

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Vector[Any]:
        """Adopt a freshly computed array without validating or copying it."""
        vector = cls.__new__(cls)
        array.setflags(write=False)
        vector._data = array
        return vector

    # --- Construction ---

    @classmethod
    def from_function(cls, n: int, f: Callable[[int], T]) -> Vector[T]:
        """Build a vector of dimension n whose i-th component is f(i)."""
        n = check_size(n, 'n')
        if n == 0:
            return cls._wrap(np.zeros(0))
        return cls([f(i) for i in range(n)], name='f')

    @classmethod
    def zero(cls, n: int, dtype: DTypeLike = float) -> Vector[Any]:
        """Zero vector of dimension n."""
        n = check_size(n, 'n')
        return cls._wrap(np.zeros(n, dtype=dtype))

    @classmethod
    def from_copies(cls, n: int, value: T) -> Vector[T]:
        """Vector of dimension n with every component equal to value."""
        n = check_size(n, 'n')
        _require_scalar(value, 'from_copies')
        if n == 0:
            return cls._wrap(np.zeros(0, dtype=np.asarray(value).dtype))
        return cls([value] * n)

    # --- Accessors ---

    @property
    def dim(self) -> int:
        """Number of components."""
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return self._data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def tolist(self) -> list[Any]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Writable copy of the components."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    # --- Arithmetic ---

    def add(self, other: Vector[T]) -> Vector[T]:
        """Elementwise sum."""
        _require_vector(other, 'add')
        check_same_dimension(self.dim, other.dim, 'add')
        return Vector._wrap(exact_apply(np.add, self._data, other._data))

    def sub(self, other: Vector[T]) -> Vector[T]:
        """Elementwise difference."""
        _require_vector(other, 'sub')
        check_same_dimension(self.dim, other.dim, 'sub')
        return Vector._wrap(exact_apply(np.subtract, self._data, other._data))

    def mul(self, scalar: Any) -> Vector[Any]:
        """Scale every component by scalar."""
        _require_scalar(scalar, 'mul')
        return Vector._wrap(exact_apply(np.multiply, self._data, scalar))

    def div(self, scalar: Any) -> Vector[Any]:
        """
        Divide every component by scalar (true division).

        Raises:
            DivisionByZeroError: If scalar == 0, for every scalar type
        """
        _require_scalar(scalar, 'div')
        check_divisor(scalar, 'vector')
        return Vector._wrap(true_divide(self._data, scalar))

    def neg(self) -> Vector[T]:
        return Vector._wrap(exact_apply(np.negative, self._data))

    def dot(self, other: Vector[T]) -> T:
        """
        Sum of elementwise products.

        Exact for integer and object (Fraction) scalars; integer results
        are Python ints. Complex components are not conjugated.
        """
        _require_vector(other, 'dot')
        check_same_dimension(self.dim, other.dim, 'dot')
        return exact_apply(np.dot, self._data, other._data)

    def norm_sq(self) -> Any:
        """Squared Euclidean norm, exact in the scalar type."""
        if np.issubdtype(self.dtype, np.complexfloating):
            return np.sum(np.abs(self._data) ** 2)
        return exact_apply(np.dot, self._data, self._data)

    def norm(self) -> float:
        """
        Euclidean norm as a float.

        Integer and exact scalar types are promoted to float before the
        square root; nothing is truncated.
        """
        return math.sqrt(float(self.norm_sq()))

    # --- Comparison ---

    def allclose(self, other: Vector[Any], tier: ToleranceTier | None = None) -> bool:
        """
        Compare with another vector of the same dimension within a tolerance.

        Args:
            other: Vector to compare with
            tier: Tolerance tier; defaults to the tier for the common dtype
        """
        _require_vector(other, 'allclose')
        check_same_dimension(self.dim, other.dim, 'allclose')
        if tier is None:
            tier = select_compare_tolerance(
                np.result_type(self._data, other._data), self._data, other._data,
            )
        return values_close(self._data, other._data, tier)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self.tolist()))

    # --- Operators ---

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.div(other)

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __neg__(self):
        return self.neg()

    def __repr__(self) -> str:
        return f"Vector({self.tolist()!r})"
