"""Shared utilities for homtrans.

This module contains utilities shared between CPU (NumPy) and
GPU (PyTorch) implementations to avoid code duplication.
"""

from homtrans.shared.rotation import axis_angle_matrix

__all__ = [
    "axis_angle_matrix",
]
