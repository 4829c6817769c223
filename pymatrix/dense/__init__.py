"""
Dense matrix module.

Provides a fixed-size, mutable 2-D matrix of float64 values with
bounds-checked element access, elementwise addition and the standard
matrix product.

Public API:
    Matrix(rows, cols)   - Zero-initialized matrix
    Matrix.get / set     - Bounds-checked element access
    Matrix.add           - Elementwise sum (new matrix)
    Matrix.multiply      - Matrix product (new matrix)
    Matrix.print         - Human-readable dump
"""

from pymatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
]
