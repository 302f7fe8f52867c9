"""
homtrans - 3D homogeneous transformation utilities

Build, validate and apply 4x4 homogeneous transforms.

Features:
- Rotation builders: axis-angle, X/Y/Z, Z-X-Z Euler, roll-pitch-yaw
- Translation builders, cylindrical and spherical coordinate frames
- Denavit-Hartenberg link transforms and serial kinematic chains
- Validation of externally supplied matrices as rigid-body transforms
- Batch point transformation with per-column homogeneous normalization
  (NumPy/Numba, or PyTorch tensors)

Example - Functions:
    >>> import numpy as np
    >>> from homtrans import apply, is_homogeneous_transform, rotate_y, rotate_z, translation
    >>>
    >>> H = translation(4, 0, 0) @ rotate_y(np.pi / 2) @ rotate_z(np.pi / 2)
    >>> is_homogeneous_transform(H)
    True
    >>> points = np.array([[1, -1], [0, 0], [0, 2]], dtype=float)  # one point per column
    >>> moved = apply(H, points)

Example - Fluent builder:
    >>> from homtrans import Transform
    >>>
    >>> pipeline = Transform().translate(4, 0, 0).rotate_y(np.pi / 2).rotate_z(np.pi / 2)
    >>> moved = pipeline(points)

Example - Kinematic chain:
    >>> from homtrans import DHLink, KinematicChain
    >>>
    >>> arm = KinematicChain([DHLink(d=0.12), DHLink(a=0.15), DHLink(a=0.10)])
    >>> tip = arm.with_joint_angles([0.0, 0.5, -0.5]).forward()
"""

__version__ = "0.1.0"

# Config values
from homtrans.config import DTYPE, TOLERANCE_CONFIG, DHLink, ToleranceConfig, ToleranceSpec

# Errors
from homtrans.errors import DivideByZeroError, InvalidArgumentError, TransformError

# Builders, point transformation and chains
from homtrans.transform import (
    KinematicChain,
    Transform,
    apply,
    apply_to_point,
    cylindrical,
    dh,
    euler,
    rotate_x,
    rotate_y,
    rotate_z,
    rotation,
    rotation_vector,
    rpy,
    spherical,
    translate_x,
    translate_y,
    translate_z,
    translation,
    translation_vector,
)

# Verification
from homtrans.verification import TransformVerifier, is_homogeneous_transform

__all__ = [
    # Builders
    "rotation",
    "rotation_vector",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "translation",
    "translation_vector",
    "translate_x",
    "translate_y",
    "translate_z",
    "euler",
    "rpy",
    "cylindrical",
    "spherical",
    "dh",
    # Point transformation
    "apply",
    "apply_to_point",
    # Pipelines
    "Transform",
    "KinematicChain",
    "DHLink",
    # Verification
    "is_homogeneous_transform",
    "TransformVerifier",
    # Config
    "DTYPE",
    "TOLERANCE_CONFIG",
    "ToleranceConfig",
    "ToleranceSpec",
    # Errors
    "TransformError",
    "InvalidArgumentError",
    "DivideByZeroError",
]
