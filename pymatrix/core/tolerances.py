"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations for different compute paths:
- Exact: elementwise addition and the reference product are reproducible
- FP64: a single float64 operation per element
- FP64 accumulated: long inner products, or BLAS with its own summation order

Used by Matrix.allclose and the test suite.
"""

from dataclasses import dataclass

from pymatrix.core.config import MULTIPLY_BLAS


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Bit-for-bit reproducible results
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, same operations in the same order',
)

# One rounding step per element
FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, single rounding per element',
)

# Accumulated rounding over an inner product of unspecified order
FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64_accumulated',
    description='Double precision, accumulated rounding (inner products)',
)


def select_tolerance(
    method: str,
    is_accumulated: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given multiply method."""
    if method == MULTIPLY_BLAS or is_accumulated:
        return FP64_ACCUMULATED
    return FP64
