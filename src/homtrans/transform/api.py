"""
3D homogeneous transformation matrix builders.

Every builder returns a fresh 4x4 ``float64`` array whose bottom row is
exactly ``[0, 0, 0, 1]`` and whose upper-left 3x3 block is orthogonal.

Functions:

- Primitives: ``rotation()``, ``rotation_vector()``, ``rotate_x/y/z()``,
  ``translation()``, ``translation_vector()``, ``translate_x/y/z()``.
- Orientation: ``euler()`` (Z-X-Z), ``rpy()`` (Z-Y-X roll-pitch-yaw).
- Coordinate frames: ``cylindrical()``, ``spherical()``.
- Kinematics: ``dh()`` (Denavit-Hartenberg link transform).

Composite builders are plain matrix products (``@``); operand order is
significant and follows the conventions documented on each function.
"""

from __future__ import annotations

import numpy as np

from homtrans.config.tolerance import DTYPE
from homtrans.errors import InvalidArgumentError
from homtrans.shared.rotation import _axis_angle_matrix_numpy, _is_torch_tensor, axis_angle_matrix
from homtrans.types import Vector3

# Type aliases for better readability (Python 3.12+ syntax)
ArrayLike = np.ndarray | tuple | list

_UNIT_X = np.array([1.0, 0.0, 0.0], dtype=DTYPE)
_UNIT_Y = np.array([0.0, 1.0, 0.0], dtype=DTYPE)
_UNIT_Z = np.array([0.0, 0.0, 1.0], dtype=DTYPE)


def _as_column3(vector: ArrayLike, name: str) -> np.ndarray:
    """Validate a (3, 1) column vector and return it flattened to [3]."""
    try:
        arr = np.asarray(vector, dtype=DTYPE)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be a numeric (3, 1) array: {e}") from e
    if arr.shape != (3, 1):
        raise InvalidArgumentError(f"{name} must be shape (3, 1), got {arr.shape}")
    return arr[:, 0]


# ============================================================================
# 4x4 Homogeneous Transformation Matrix Building
# ============================================================================


def _build_translation_matrix_4x4_numpy(offset: np.ndarray) -> np.ndarray:
    """Build 4x4 translation matrix."""
    T = np.eye(4, dtype=DTYPE)
    T[:3, 3] = offset
    return T


# ============================================================================
# Public API - Primitives
# ============================================================================


def rotation(x: float, y: float, z: float, theta: float) -> np.ndarray:
    """
    Rotation by ``theta`` about the axis (x, y, z).

    The axis does not need to be unit length; it is normalized internally.

    :param x: Axis X component
    :param y: Axis Y component
    :param z: Axis Z component
    :param theta: Rotation angle in radians
    :return: 4x4 homogeneous rotation matrix
    :raises InvalidArgumentError: If the axis is the zero vector

    Example:
        >>> R = rotation(0, 0, 1, np.pi / 2)
        >>> np.allclose(R, rotate_z(np.pi / 2))
        True
    """
    return _axis_angle_matrix_numpy(np.array([x, y, z], dtype=DTYPE), theta)


def rotation_vector(axis: Vector3, theta: float) -> np.ndarray:
    """
    Rotation by ``theta`` about a (3, 1) axis vector.

    Same result as ``rotation(*axis.ravel(), theta)``. A torch tensor axis
    yields a torch tensor on the axis' device.

    :param axis: Rotation axis, shape (3, 1)
    :param theta: Rotation angle in radians
    :return: 4x4 homogeneous rotation matrix
    :raises InvalidArgumentError: If the axis is not (3, 1) or is the zero vector
    """
    if _is_torch_tensor(axis):
        if tuple(axis.shape) != (3, 1):
            raise InvalidArgumentError(f"axis must be shape (3, 1), got {tuple(axis.shape)}")
        return axis_angle_matrix(axis[:, 0], theta)
    return axis_angle_matrix(_as_column3(axis, "axis"), theta)


def rotate_x(angle: float) -> np.ndarray:
    """Rotation about the X axis."""
    return _axis_angle_matrix_numpy(_UNIT_X, angle)


def rotate_y(angle: float) -> np.ndarray:
    """Rotation about the Y axis."""
    return _axis_angle_matrix_numpy(_UNIT_Y, angle)


def rotate_z(angle: float) -> np.ndarray:
    """Rotation about the Z axis."""
    return _axis_angle_matrix_numpy(_UNIT_Z, angle)


def translation(a: float, b: float, c: float) -> np.ndarray:
    """
    Pure translation by (a, b, c).

    :param a: X offset
    :param b: Y offset
    :param c: Z offset
    :return: 4x4 homogeneous translation matrix
    """
    return _build_translation_matrix_4x4_numpy(np.array([a, b, c], dtype=DTYPE))


def translation_vector(offset: Vector3) -> np.ndarray:
    """
    Pure translation by a (3, 1) offset vector.

    :param offset: Translation offset, shape (3, 1)
    :return: 4x4 homogeneous translation matrix
    :raises InvalidArgumentError: If the offset is not (3, 1)
    """
    return _build_translation_matrix_4x4_numpy(_as_column3(offset, "offset"))


def translate_x(v: float) -> np.ndarray:
    return translation(v, 0.0, 0.0)


def translate_y(v: float) -> np.ndarray:
    return translation(0.0, v, 0.0)


def translate_z(v: float) -> np.ndarray:
    return translation(0.0, 0.0, v)


# ============================================================================
# Public API - Composite orientation
# ============================================================================


def euler(phi: float, theta: float, psi: float) -> np.ndarray:
    """
    Z-X-Z Euler angle orientation.

    ``rotate_z(phi) @ rotate_x(theta) @ rotate_z(psi)``

    :param phi: First rotation about Z, radians
    :param theta: Rotation about the new X, radians
    :param psi: Second rotation about the new Z, radians
    :return: 4x4 homogeneous rotation matrix
    """
    return rotate_z(phi) @ rotate_x(theta) @ rotate_z(psi)


def rpy(phi: float, theta: float, psi: float) -> np.ndarray:
    """
    Roll-Pitch-Yaw orientation.

    ``rotate_z(phi) @ rotate_y(theta) @ rotate_x(psi)``

    :param phi: Rotation about Z, radians
    :param theta: Rotation about Y, radians
    :param psi: Rotation about X, radians
    :return: 4x4 homogeneous rotation matrix
    """
    return rotate_z(phi) @ rotate_y(theta) @ rotate_x(psi)


# ============================================================================
# Public API - Coordinate frames
# ============================================================================


def cylindrical(z: float, phi: float, r: float) -> np.ndarray:
    """
    Translation to the point at cylindrical coordinates (r, phi, z).

    ``translate_z(z) @ rotate_z(phi) @ translate_x(r) @ rotate_z(-phi)``

    The trailing inverse rotation cancels the leading one, so the result
    keeps the identity orientation (within rounding).

    :param z: Height along Z
    :param phi: Azimuth in radians
    :param r: Radial distance from the Z axis
    :return: 4x4 homogeneous transform
    """
    return translate_z(z) @ rotate_z(phi) @ translate_x(r) @ rotate_z(-phi)


def spherical(alpha: float, beta: float, r: float) -> np.ndarray:
    """
    Translation to the point at spherical coordinates (r, alpha, beta).

    ``rotate_z(alpha) @ rotate_y(beta) @ translate_z(r) @ rotate_y(-beta) @ rotate_z(-alpha)``

    :param alpha: Azimuth about Z in radians
    :param beta: Polar angle from +Z in radians
    :param r: Radius
    :return: 4x4 homogeneous transform
    """
    return (
        rotate_z(alpha) @ rotate_y(beta) @ translate_z(r) @ rotate_y(-beta) @ rotate_z(-alpha)
    )


# ============================================================================
# Public API - Kinematics
# ============================================================================


def dh(theta: float, d: float, a: float, alpha: float) -> np.ndarray:
    """
    Denavit-Hartenberg link transform.

    ``rotate_z(theta) @ translate_z(d) @ translate_x(a) @ rotate_x(alpha)``

    :param theta: Joint angle about the previous Z, radians
    :param d: Offset along the previous Z
    :param a: Link length along the new X
    :param alpha: Link twist about the new X, radians
    :return: 4x4 homogeneous transform
    """
    return rotate_z(theta) @ translate_z(d) @ translate_x(a) @ rotate_x(alpha)
