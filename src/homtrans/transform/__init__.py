"""
3D transform module - homogeneous matrix builders and point transformation.

Example:
    >>> import numpy as np
    >>> from homtrans.transform import apply, rotate_y, rotate_z, translation
    >>> H = translation(4, 0, 0) @ rotate_y(np.pi / 2) @ rotate_z(np.pi / 2)
    >>> points = apply(H, [[1, -1], [0, 0], [0, 2]])
"""

from homtrans.transform.api import (
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
from homtrans.transform.apply import apply, apply_to_point
from homtrans.transform.pipeline import KinematicChain, Transform

__all__ = [
    "Transform",
    "KinematicChain",
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
    "apply",
    "apply_to_point",
]
