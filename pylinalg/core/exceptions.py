"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. The hierarchy has two branches that must never
be merged:

    ValidationError  - contract violations. The caller passed operands whose
                       shapes are incompatible by construction. These are
                       bugs in the calling code and are raised immediately.
    NumericalError   - domain outcomes. The inputs were valid but the
                       operation has no result (singular matrix, zero
                       divisor). Callers may catch these and branch.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    data, ragged grids, empty matrices, negative sizes).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand sizes are incorrect or inconsistent.

    Base class for the three size contract violations below.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Two vectors of different dimension were combined.

    Attributes:
        operation: Name of the operation that was attempted
        left: Dimension of the left operand
        right: Dimension of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left: int | None = None,
        right: int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left = left
        self.right = right


class ShapeMismatchError(DimensionError):
    """
    Matrix operands have incompatible shapes.

    Raised for elementwise operations on different shapes, and for products
    whose inner dimensions disagree.

    Attributes:
        operation: Name of the operation that was attempted
        left: Shape of the left operand
        right: Shape (or dimension, for a vector) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left: tuple[int, ...] | None = None,
        right: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left = left
        self.right = right


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        operation: Name of the operation that was attempted
        shape: Actual (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class NumericalError(PyLinalgError):
    """
    Numerical computation has no result.

    Base class for domain outcomes of valid inputs.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically indistinguishable from singular.

    Raised when an inverse is requested but a pivot column has no entry
    outside the zero tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column in which elimination found no usable pivot
        rank: Number of pivots found before failing
        expected_rank: Rank required for invertibility (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column
        self.rank = rank
        self.expected_rank = expected_rank


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    A vector or matrix was divided by a zero scalar.

    Also a ZeroDivisionError so that plain Python handlers catch it.

    Attributes:
        operand: Description of the dividend ('vector' or 'matrix')
    """

    def __init__(self, message: str, operand: str | None = None):
        super().__init__(message)
        self.operand = operand
