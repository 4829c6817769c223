"""
PyMatrix: dense 2-D matrices with basic arithmetic.

A small, strict matrix type: bounds-checked element access, elementwise
addition and the standard matrix product, with a three-kind error
taxonomy and no partial mutation on failure.

Submodules:
    dense: The Matrix type
    core: Exceptions, validation, configuration and tolerances
"""

__version__ = "0.1.0"

from pymatrix.dense import Matrix
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
    DimensionMismatchError,
)

__all__ = [
    "__version__",
    "Matrix",
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
]
