"""Unified axis-angle rotation utilities for NumPy and PyTorch.

This module provides the single rotation formula every rotation builder in
homtrans goes through. Functions auto-detect the input type and use the
appropriate backend.

Rodrigues' formula: R = cos(t) I + sin(t) [k]x + (1 - cos(t)) k k^T
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from homtrans.config.tolerance import DTYPE
from homtrans.errors import InvalidArgumentError

if TYPE_CHECKING:
    import torch

# Type aliases
ArrayLike = np.ndarray | list | tuple


# ============================================================================
# NumPy/CPU Implementation
# ============================================================================


def _axis_angle_matrix_numpy(axis: np.ndarray, theta: float) -> np.ndarray:
    """NumPy axis-angle to 4x4 homogeneous rotation.

    :param axis: Rotation axis [3], any non-zero length
    :param theta: Rotation angle in radians
    :returns: 4x4 rotation matrix
    :raises InvalidArgumentError: If the axis is the zero vector or not finite
    """
    axis = np.asarray(axis, dtype=DTYPE).reshape(3)
    if not np.all(np.isfinite(axis)):
        raise InvalidArgumentError(f"Rotation axis must be finite, got {tuple(axis.tolist())}")
    if not np.any(axis):
        raise InvalidArgumentError("Rotation axis must be non-zero, got (0, 0, 0)")

    # Scale by the largest component first so the norm neither overflows nor underflows
    axis = axis / np.max(np.abs(axis))
    x, y, z = axis / np.linalg.norm(axis)
    c = np.cos(theta)
    s = np.sin(theta)
    v = 1.0 - c

    R = np.eye(4, dtype=DTYPE)

    R[0, 0] = c + x * x * v
    R[0, 1] = x * y * v - z * s
    R[0, 2] = x * z * v + y * s

    R[1, 0] = y * x * v + z * s
    R[1, 1] = c + y * y * v
    R[1, 2] = y * z * v - x * s

    R[2, 0] = z * x * v - y * s
    R[2, 1] = z * y * v + x * s
    R[2, 2] = c + z * z * v

    return R


# ============================================================================
# PyTorch/GPU Implementation
# ============================================================================


def _axis_angle_matrix_torch(axis: torch.Tensor, theta) -> torch.Tensor:
    """PyTorch axis-angle to 4x4 homogeneous rotation.

    :param axis: Rotation axis [3], any non-zero length
    :param theta: Rotation angle in radians (float or 0-d tensor)
    :returns: 4x4 rotation matrix on the axis' device
    :raises InvalidArgumentError: If the axis is the zero vector or not finite
    """
    import torch

    axis = axis.reshape(3)
    if not torch.all(torch.isfinite(axis)):
        raise InvalidArgumentError(f"Rotation axis must be finite, got {tuple(axis.tolist())}")
    if not torch.any(axis):
        raise InvalidArgumentError("Rotation axis must be non-zero, got (0, 0, 0)")

    axis = axis / torch.max(torch.abs(axis))
    k = axis / torch.linalg.norm(axis)
    theta = torch.as_tensor(theta, dtype=axis.dtype, device=axis.device)
    c = torch.cos(theta)
    s = torch.sin(theta)

    K = torch.zeros((3, 3), dtype=axis.dtype, device=axis.device)
    K[0, 1] = -k[2]
    K[0, 2] = k[1]
    K[1, 0] = k[2]
    K[1, 2] = -k[0]
    K[2, 0] = -k[1]
    K[2, 1] = k[0]

    eye3 = torch.eye(3, dtype=axis.dtype, device=axis.device)
    R = torch.eye(4, dtype=axis.dtype, device=axis.device)
    R[:3, :3] = c * eye3 + s * K + (1 - c) * torch.outer(k, k)
    return R


# ============================================================================
# Public API - Auto-dispatching functions
# ============================================================================


def _is_torch_tensor(x) -> bool:
    """Check if input is a PyTorch tensor without importing torch."""
    return type(x).__module__.startswith("torch")


def axis_angle_matrix(axis, theta):
    """Convert an axis and angle to a 4x4 homogeneous rotation matrix.

    Auto-dispatches to NumPy or PyTorch based on input type. The axis is
    normalized internally.

    :param axis: Rotation axis [3]
    :param theta: Rotation angle in radians
    :returns: 4x4 rotation matrix with bottom row [0, 0, 0, 1]
    :raises InvalidArgumentError: If the axis is the zero vector

    Example:
        >>> import numpy as np
        >>> R = axis_angle_matrix([0, 0, 2], np.pi / 2)  # 90 deg Z rotation
    """
    if _is_torch_tensor(axis):
        return _axis_angle_matrix_torch(axis, theta)
    return _axis_angle_matrix_numpy(np.asarray(axis, dtype=DTYPE), theta)
