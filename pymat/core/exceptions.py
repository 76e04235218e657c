"""
Exception hierarchy for PyMat.

All exceptions inherit from PyMatError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatError(Exception):
    """Base exception for all PyMat errors."""
    pass


class ValidationError(PyMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: malformed
    constructor tables, non-numeric values, bad shapes, or an operand of
    an unsupported type.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside the matrix bounds.

    Attributes:
        index: The offending index
        bound: Size of the indexed dimension
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class DimensionError(ValidationError):
    """
    Matrix dimensions are incompatible.

    Raised when shapes don't match for element-wise arithmetic, matrix
    products, concatenation, or row/column assignment.
    """
    pass


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyMatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the
    determinant magnitude does not exceed the singularity threshold.

    Attributes:
        determinant: The computed determinant, if available
        threshold: Threshold the determinant was compared against
    """

    def __init__(
        self,
        message: str,
        determinant: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.determinant = determinant
        self.threshold = threshold
