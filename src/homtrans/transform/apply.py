"""Apply homogeneous transforms to 3D point sets.

Points are stored one per column ([3, N]). Each column is homogenized,
transformed and normalized by its own scale coordinate, so a column with a
zero scale is reported individually.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from homtrans.config.tolerance import DTYPE, TOLERANCE_CONFIG
from homtrans.errors import DivideByZeroError, InvalidArgumentError
from homtrans.shared.rotation import _is_torch_tensor
from homtrans.transform.kernels import perspective_divide_numba
from homtrans.types import Matrix4x4, PointSet

if TYPE_CHECKING:
    import torch

logger = logging.getLogger(__name__)


def _as_array(value, name: str) -> np.ndarray:
    try:
        return np.asarray(value, dtype=DTYPE)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be numeric: {e}") from e


def _check_shapes(matrix_shape: tuple, points_shape: tuple) -> None:
    """Raise InvalidArgumentError unless shapes are (4, 4) and (3, N)."""
    if tuple(matrix_shape) != (4, 4):
        raise InvalidArgumentError(f"Matrix must be shape (4, 4), got {tuple(matrix_shape)}")
    if len(points_shape) != 2 or points_shape[0] != 3:
        raise InvalidArgumentError(f"Points must be shape (3, N), got {tuple(points_shape)}")


def _zero_scale_error(columns: list[int]) -> DivideByZeroError:
    return DivideByZeroError(
        f"Homogeneous scale is zero for column(s) {columns}; cannot normalize",
        columns=columns,
    )


# ============================================================================
# NumPy/CPU Implementation
# ============================================================================


def _apply_numpy(matrix: np.ndarray, points: np.ndarray, atol: float) -> np.ndarray:
    """NumPy/Numba implementation of apply.

    :param matrix: 4x4 transformation matrix
    :param points: Points [3, N]
    :param atol: Scale magnitude at or below which a column counts as zero
    :returns: Transformed points [3, N]
    """
    _check_shapes(matrix.shape, points.shape)
    n = points.shape[1]

    homogeneous = np.vstack([points, np.ones((1, n), dtype=DTYPE)])
    transformed = np.ascontiguousarray(matrix @ homogeneous)

    zero_cols = np.flatnonzero(np.abs(transformed[3]) <= atol)
    if zero_cols.size:
        raise _zero_scale_error(zero_cols.tolist())

    out = np.empty((3, n), dtype=DTYPE)
    perspective_divide_numba(transformed, out)
    return out


# ============================================================================
# PyTorch/GPU Implementation
# ============================================================================


def _apply_torch(matrix: torch.Tensor, points: torch.Tensor, atol: float) -> torch.Tensor:
    """PyTorch implementation of apply.

    :param matrix: 4x4 transformation matrix
    :param points: Points [3, N]
    :param atol: Scale magnitude at or below which a column counts as zero
    :returns: Transformed points [3, N] on the points' device
    """
    import torch

    _check_shapes(tuple(matrix.shape), tuple(points.shape))
    matrix = matrix.to(dtype=points.dtype, device=points.device)

    ones = torch.ones((1, points.shape[1]), dtype=points.dtype, device=points.device)
    transformed = matrix @ torch.cat([points, ones], dim=0)

    w = transformed[3]
    zero_cols = torch.nonzero(torch.abs(w) <= atol).flatten()
    if zero_cols.numel():
        raise _zero_scale_error(zero_cols.tolist())

    return transformed[:3] / w


# ============================================================================
# Public API
# ============================================================================


def _as_tensor(value, name: str, reference: torch.Tensor) -> torch.Tensor:
    import torch

    try:
        return torch.as_tensor(value, dtype=reference.dtype, device=reference.device)
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidArgumentError(f"{name} must be numeric: {e}") from e


def apply(matrix: Matrix4x4, points: PointSet, atol: float | None = None):
    """Transform a set of 3D points by a homogeneous matrix.

    Auto-dispatches to PyTorch when either argument is a tensor; the other
    argument is converted to match.

    :param matrix: 4x4 homogeneous transformation matrix
    :param points: Points [3, N], one point per column
    :param atol: Zero-scale tolerance (None selects the configured default,
        exact zero); must be a number
    :returns: Transformed points [3, N]
    :raises InvalidArgumentError: If matrix is not 4x4 or points not 3xN
    :raises DivideByZeroError: If any transformed column has zero scale

    Example:
        >>> from homtrans import apply, translation
        >>> apply(translation(1, 2, 3), [[0], [0], [0]])
        array([[1.],
               [2.],
               [3.]])
    """
    atol = TOLERANCE_CONFIG.zero_scale_atol.validate(atol)

    if _is_torch_tensor(matrix) or _is_torch_tensor(points):
        import torch

        reference = points if _is_torch_tensor(points) else matrix
        if not torch.is_floating_point(reference):
            reference = reference.to(torch.float64)
        matrix = _as_tensor(matrix, "Matrix", reference)
        points = _as_tensor(points, "Points", reference)
        result = _apply_torch(matrix, points, atol)
    else:
        result = _apply_numpy(_as_array(matrix, "Matrix"), _as_array(points, "Points"), atol)

    logger.debug("[Apply] Transformed %d points", result.shape[1])
    return result


def apply_to_point(matrix: Matrix4x4, x: float, y: float, z: float, atol: float | None = None):
    """Transform a single point.

    :param matrix: 4x4 homogeneous transformation matrix
    :param x: Point X
    :param y: Point Y
    :param z: Point Z
    :param atol: Zero-scale tolerance, see :func:`apply`
    :returns: Transformed point as a (3, 1) column
    """
    return apply(matrix, [[x], [y], [z]], atol)
