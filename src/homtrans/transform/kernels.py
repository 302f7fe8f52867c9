"""
Numba-optimized kernels for point transformation.

Provides JIT-compiled kernels for performance-critical per-point operations.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


@njit(parallel=True, cache=True, nogil=True)
def perspective_divide_numba(
    homogeneous: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Divide the first three rows of each column by its fourth row.

    Columns are independent, so the loop runs in parallel. The caller must
    have rejected zero scale coordinates beforehand.

    Args:
        homogeneous: Transformed homogeneous points [4, N]
        out: Cartesian output [3, N] (modified in-place)
    """
    n = homogeneous.shape[1]

    for j in prange(n):
        w = homogeneous[3, j]
        out[0, j] = homogeneous[0, j] / w
        out[1, j] = homogeneous[1, j] / w
        out[2, j] = homogeneous[2, j] / w


def warmup_transform_kernels() -> None:
    """Warm up Numba JIT compilation for transform kernels.

    Called on module import to avoid first-call overhead.
    """
    homogeneous = np.ones((4, 2), dtype=np.float64)
    out = np.empty((3, 2), dtype=np.float64)
    perspective_divide_numba(homogeneous, out)

    logger.debug("Transform Numba kernels warmed up")


# Warmup on import
warmup_transform_kernels()
