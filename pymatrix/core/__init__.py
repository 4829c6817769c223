"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
dense matrix domain.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    config: Storage, display and kernel-selection constants
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
    DimensionMismatchError,
)
from pymatrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
