"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Negative indices are out of range, never wrapped
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.config import DTYPE
from pymatrix.core.exceptions import (
    ValidationError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
    DimensionMismatchError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def check_shape(rows: Any, cols: Any, operation: str) -> tuple[int, int]:
    """
    Verify a requested (rows, cols) shape has positive integer extents.

    Args:
        rows: Requested row count
        cols: Requested column count
        operation: Operation name for error messages

    Returns:
        (rows, cols) as Python ints

    Raises:
        InvalidDimensionsError: If either count is not an integer or is <= 0
    """
    for name, value in (('rows', rows), ('cols', cols)):
        if not _is_integer(value):
            raise InvalidDimensionsError(
                f"{operation}: {name} must be a positive integer, "
                f"got {type(value).__name__} {value!r}",
                rows=rows, cols=cols,
            )
        if value <= 0:
            raise InvalidDimensionsError(
                f"{operation}: dimensions must be positive, got ({rows}, {cols})",
                rows=rows, cols=cols,
            )
    return int(rows), int(cols)


def check_index(
    row: Any,
    col: Any,
    shape: tuple[int, int],
    operation: str,
) -> tuple[int, int]:
    """
    Verify (row, col) addresses an element of a matrix of the given shape.

    Args:
        row: Zero-based row index
        col: Zero-based column index
        shape: (rows, cols) of the matrix
        operation: Operation name for error messages

    Returns:
        (row, col) as Python ints

    Raises:
        IndexOutOfRangeError: If either index is not an integer, or
            row is outside [0, rows), or col is outside [0, cols)
    """
    rows, cols = shape
    if not (_is_integer(row) and _is_integer(col)):
        raise IndexOutOfRangeError(
            f"{operation}: indices must be integers, got "
            f"({type(row).__name__}, {type(col).__name__})",
            operation=operation, row=row, col=col, shape=shape,
        )
    if row < 0 or row >= rows or col < 0 or col >= cols:
        raise IndexOutOfRangeError(
            f"{operation}: index ({row}, {col}) out of range for shape {shape}",
            operation=operation, row=int(row), col=int(col), shape=shape,
        )
    return int(row), int(col)


def check_real(value: Any, name: str) -> float:
    """
    Verify an element value is a real number.

    NaN and infinities are real floats and are accepted.

    Args:
        value: Candidate element value
        name: Parameter name for error messages

    Returns:
        value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {value!r} is not representable as float64"
        ) from e


def check_operand(other: Any, cls: type, operation: str) -> None:
    """
    Verify the second operand of a binary operation is present and a matrix.

    Args:
        other: The operand
        cls: Required type
        operation: Operation name for error messages

    Raises:
        ValidationError: If other is None or not an instance of cls
    """
    if not isinstance(other, cls):
        raise ValidationError(
            f"{operation}: operand must be a {cls.__name__}, got {type(other).__name__}"
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical (elementwise operations).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes must match, got {left} and {right}",
            operation=operation, left_shape=left, right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows (matrix product).

    Raises:
        DimensionMismatchError: If left[1] != right[0]
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: left operand has {left[1]} columns but right operand "
            f"has {right[0]} rows (shapes {left} and {right})",
            operation=operation, left_shape=left, right_shape=right,
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert a nested sequence or array-like to a matrix buffer.

    Accepts any real numeric 2-D array-like and returns an independent
    float64 copy. Rejects ragged input, object, boolean, complex and other
    non-real dtypes, and empty axes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New C-contiguous numpy.ndarray of dtype float64 and ndim 2

    Raises:
        ValidationError: If input cannot be converted to a real array
        InvalidDimensionsError: If the result is not 2-D with positive extents
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected real numeric data"
        )

    if result.ndim != 2:
        raise InvalidDimensionsError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}",
        )

    n_rows, n_cols = result.shape
    if n_rows == 0 or n_cols == 0:
        raise InvalidDimensionsError(
            f"{name}: must have at least one row and one column, got shape {result.shape}",
            rows=n_rows, cols=n_cols,
        )

    return np.array(result, dtype=DTYPE, order='C', copy=True)
