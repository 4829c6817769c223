"""
Configuration constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for storage, display and
kernel-selection constants. Import from here, never use raw literals.

Usage:
    from pymatrix.core.config import DTYPE, DEFAULT_MULTIPLY_METHOD

    data = np.zeros((rows, cols), dtype=DTYPE)
"""

import numpy as np

# Element type of every matrix (IEEE double precision)
DTYPE = np.float64

# Separator between elements on one printed row
ELEMENT_SEPARATOR = ' '

# print() warns above this many elements; the dump is a debugging aid
DISPLAY_WARN_ELEMENTS = 10_000

# Triple-loop inner product, accumulated left to right
MULTIPLY_REFERENCE = 'reference'

# NumPy matmul (BLAS); summation order is implementation-defined
MULTIPLY_BLAS = 'blas'

MULTIPLY_METHODS = frozenset({
    MULTIPLY_REFERENCE,
    MULTIPLY_BLAS,
})

DEFAULT_MULTIPLY_METHOD = MULTIPLY_REFERENCE

__all__ = [
    'DTYPE',
    'ELEMENT_SEPARATOR',
    'DISPLAY_WARN_ELEMENTS',
    'MULTIPLY_REFERENCE',
    'MULTIPLY_BLAS',
    'MULTIPLY_METHODS',
    'DEFAULT_MULTIPLY_METHOD',
]
