"""
Matrix: dense, fixed-size, mutable 2-D grid of float64 values.

The shape is fixed at construction. Elements change only through set()
(or item assignment). add() and multiply() always return a new,
independently owned Matrix and never modify an operand.

Usage:
    from pymatrix import Matrix

    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.identity(2)
    c = a.multiply(b)      # or a @ b
    c.set(0, 0, 7.5)       # or c[0, 0] = 7.5
    c.print()
"""

from __future__ import annotations

import sys
import warnings
from typing import Any, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.config import (
    DTYPE,
    DISPLAY_WARN_ELEMENTS,
    DEFAULT_MULTIPLY_METHOD,
)
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.tolerances import FP64, ToleranceTier
from pymatrix.core.validation import (
    check_array,
    check_index,
    check_inner_dimensions,
    check_operand,
    check_real,
    check_same_shape,
    check_shape,
)
from pymatrix.dense._format import iter_lines, render
from pymatrix.dense._kernels import add_elementwise, get_matmul_kernel


class Matrix:
    """
    Dense rectangular matrix of double-precision reals.

    Each instance exclusively owns its row-major float64 buffer. Nothing
    handed out by the public API aliases that buffer writably.

    Construction:
        Matrix(rows, cols)            all zeros
        Matrix.zeros(rows, cols)      same as above
        Matrix.identity(n)
        Matrix.from_rows(nested)      from nested sequences or a 2-D array

    Raises on construction:
        InvalidDimensionsError: If rows or cols is not a positive integer
    """

    __slots__ = ('_data',)

    def __init__(self, rows: int, cols: int):
        rows, cols = check_shape(rows, cols, 'Matrix')
        self._data = np.zeros((rows, cols), dtype=DTYPE)

    @classmethod
    def _from_buffer(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Internal builder: adopt an already validated, unshared buffer."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # === Factory Methods ===

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Matrix of the given shape with every entry 0.0."""
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Square n x n matrix with ones on the diagonal."""
        n, _ = check_shape(n, n, 'Matrix.identity')
        return cls._from_buffer(np.eye(n, dtype=DTYPE))

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a Matrix from nested sequences or any 2-D real array-like.

        The input is copied; later changes to it do not affect the matrix.

        Raises:
            ValidationError: If rows are ragged or values are not real numbers
            InvalidDimensionsError: If the input is not 2-D or has an empty axis
        """
        return cls._from_buffer(check_array(rows, 'rows'))

    # === Properties ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the element buffer, shape (rows, cols)."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    # === Element Access ===

    def get(self, r: int, c: int) -> float:
        """
        Value at zero-based position (r, c).

        Raises:
            IndexOutOfRangeError: If r is outside [0, rows) or c is
                outside [0, cols). Negative indices are not wrapped.
        """
        r, c = check_index(r, c, self.shape, 'Matrix.get')
        return float(self._data[r, c])

    def set(self, r: int, c: int, value: float) -> None:
        """
        Overwrite the value at zero-based position (r, c).

        All arguments are validated before the write, so a failed call
        leaves the matrix unchanged.

        Raises:
            IndexOutOfRangeError: Same conditions as get()
            ValidationError: If value is not a real number
        """
        r, c = check_index(r, c, self.shape, 'Matrix.set')
        value = check_real(value, 'value')
        self._data[r, c] = value

    def __getitem__(self, key: tuple[int, int]) -> float:
        r, c = self._unpack_key(key)
        return self.get(r, c)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        r, c = self._unpack_key(key)
        self.set(r, c, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix indices must be a (row, col) pair, got {key!r}"
            )
        return key

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum as a new Matrix of the same shape.

        Complexity: O(rows * cols).

        Raises:
            ValidationError: If other is not a Matrix
            DimensionMismatchError: If the shapes differ
        """
        check_operand(other, Matrix, 'Matrix.add')
        check_same_shape(self.shape, other.shape, 'Matrix.add')
        return Matrix._from_buffer(add_elementwise(self._data, other._data))

    def multiply(self, other: Matrix, *, method: str = DEFAULT_MULTIPLY_METHOD) -> Matrix:
        """
        Standard matrix product as a new (self.rows, other.cols) Matrix.

        Parameters
        ----------
        other : Matrix
            Right operand; other.rows must equal self.cols.
        method : str
            'reference' (default): triple-loop inner products accumulated
            in increasing k, reproducible bit for bit.
            'blas': NumPy matmul; faster, summation order unspecified.

        Complexity: O(rows * cols * other.cols).

        Raises
        ------
        ValidationError
            If other is not a Matrix or method is unknown.
        DimensionMismatchError
            If self.cols != other.rows.
        """
        check_operand(other, Matrix, 'Matrix.multiply')
        check_inner_dimensions(self.shape, other.shape, 'Matrix.multiply')
        kernel = get_matmul_kernel(method)
        return Matrix._from_buffer(kernel(self._data, other._data))

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        """Exact elementwise equality of same-shaped matrices (NaN != NaN)."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def allclose(self, other: Matrix, *, tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate elementwise equality.

        Matrices of different shapes are never close. NaN entries are
        never close to anything.

        Parameters
        ----------
        other : Matrix
        tolerance : ToleranceTier, optional
            Defaults to FP64 (see pymatrix.core.tolerances).
        """
        check_operand(other, Matrix, 'Matrix.allclose')
        if self.shape != other.shape:
            return False
        tier = tolerance if tolerance is not None else FP64
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    # === Conversion ===

    def copy(self) -> Matrix:
        """Independent deep copy."""
        return Matrix._from_buffer(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Writable float64 copy of the elements, shape (rows, cols)."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Elements as nested lists of Python floats, one list per row."""
        return self._data.tolist()

    # === Display ===

    def print(self, file: TextIO | None = None) -> None:
        """
        Write the matrix as text: one line per row, elements separated by
        a single space, default float formatting. Debugging aid only.

        Writes to sys.stdout unless file is given. Warns (UserWarning)
        for matrices larger than DISPLAY_WARN_ELEMENTS, but still prints.
        """
        if self._data.size > DISPLAY_WARN_ELEMENTS:
            warnings.warn(
                f"Printing a {self.rows}x{self.cols} matrix ({self._data.size} elements); "
                f"print() is meant for debugging small matrices",
                stacklevel=2,
            )
        stream = file if file is not None else sys.stdout
        for line in iter_lines(self._data):
            stream.write(line + "\n")

    def __str__(self) -> str:
        return render(self._data)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"
