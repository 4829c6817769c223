"""
Arithmetic kernels for dense matrices.

Kernels take validated float64 buffers and return a new buffer; they
never write to their inputs. Shape checks are the caller's job.

Floating-point exceptional values (NaN, Inf, overflow) propagate
naturally and never warn.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.config import DTYPE, MULTIPLY_REFERENCE, MULTIPLY_BLAS, MULTIPLY_METHODS
from pymatrix.core.exceptions import ValidationError


def add_elementwise(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Elementwise sum a[i, j] + b[i, j] into a new buffer."""
    with np.errstate(all='ignore'):
        return np.add(a, b, dtype=DTYPE)


def matmul_reference(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Standard matrix product by the triple-loop inner-product formula.

    result[i, j] = sum over k of a[i, k] * b[k, j], accumulated from 0.0
    in increasing k. The summation order is fixed, so results are
    reproducible bit for bit.

    Operates on Python floats (IEEE double), which overflow to inf and
    propagate NaN without raising.

    Complexity: O(M * K * N) for a of shape (M, K) and b of shape (K, N).
    """
    m, k_dim = a.shape
    n = b.shape[1]

    left = a.tolist()
    right = b.tolist()
    out = [[0.0] * n for _ in range(m)]

    for i in range(m):
        row = left[i]
        out_row = out[i]
        for j in range(n):
            acc = 0.0
            for k in range(k_dim):
                acc += row[k] * right[k][j]
            out_row[j] = acc

    return np.array(out, dtype=DTYPE)


def matmul_blas(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Matrix product via NumPy matmul (BLAS-backed)."""
    with np.errstate(all='ignore'):
        return np.matmul(a, b)


_MATMUL_KERNELS = {
    MULTIPLY_REFERENCE: matmul_reference,
    MULTIPLY_BLAS: matmul_blas,
}


def get_matmul_kernel(
    method: str,
) -> Callable[[NDArray[np.floating[Any]], NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]:
    """Look up the product kernel for a method name."""
    try:
        return _MATMUL_KERNELS[method]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown multiply method: {method!r}. "
            f"Must be one of {sorted(MULTIPLY_METHODS)}."
        ) from None
