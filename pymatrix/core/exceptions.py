"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. The three matrix error kinds are all validation
failures and inherit from ValidationError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the operation and the actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    non-numeric element value or an operand that is not a Matrix.
    """
    pass


class InvalidDimensionsError(ValidationError):
    """
    Requested matrix shape is not valid.

    Raised on construction when a row or column count is not a
    positive integer.

    Attributes:
        rows: Requested row count, as passed
        cols: Requested column count, as passed
    """

    def __init__(self, message: str, rows: object = None, cols: object = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index falls outside the matrix.

    Also an IndexError so generic sequence-handling code can catch it.

    Attributes:
        operation: Name of the rejecting operation (e.g. 'Matrix.get')
        row: Row index supplied
        col: Column index supplied
        shape: (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.row = row
        self.col = col
        self.shape = shape


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised by addition when shapes differ and by the matrix product when
    the left column count differs from the right row count.

    Attributes:
        operation: Name of the rejecting operation (e.g. 'Matrix.add')
        left_shape: Shape of the receiver
        right_shape: Shape of the other operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
