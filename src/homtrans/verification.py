"""Homogeneous transform verification.

This module answers "is this a valid rigid-body homogeneous transform?"
for matrices that did not come straight from a builder (loaded, edited, or
computed elsewhere).

Example:
    >>> import numpy as np
    >>> from homtrans import is_homogeneous_transform, rotate_x
    >>> is_homogeneous_transform(rotate_x(0.3))
    True
    >>> H = rotate_x(0.3)
    >>> H[0, 1] = 0.5
    >>> is_homogeneous_transform(H)
    False
"""

from __future__ import annotations

import logging

import numpy as np

from homtrans.config.tolerance import DTYPE, TOLERANCE_CONFIG
from homtrans.shared.rotation import _is_torch_tensor
from homtrans.types import Matrix4x4

logger = logging.getLogger(__name__)


def _to_numpy(H) -> np.ndarray | None:
    """Convert matrix-like input to a real float array, or None if impossible."""
    if _is_torch_tensor(H):
        H = H.detach().cpu().numpy()
    try:
        arr = np.asarray(H)
        if np.iscomplexobj(arr):
            return None
        return arr.astype(DTYPE, copy=False)
    except (TypeError, ValueError):
        return None


class TransformVerifier:
    """Utilities for checking homogeneous transforms."""

    @staticmethod
    def failure_reason(H, atol: float | None = None) -> str | None:
        """Return why H is not a homogeneous transform, or None if it is.

        Checks run in order and stop at the first failure:
        shape, scale factor, bottom row, orthogonality.

        :param H: Matrix-like value (list, numpy array, torch tensor)
        :param atol: Orthogonality tolerance (None selects the configured default)
        :return: Human-readable reason, or None
        :raises ValueError: If atol is not a number
        """
        atol = TOLERANCE_CONFIG.orthogonality_atol.validate(atol)
        M = _to_numpy(H)
        if M is None:
            return "not a real numeric array"
        if M.shape != (4, 4):
            return f"shape {M.shape} is not (4, 4)"

        scale = M[3, 3]
        if scale == 0.0:
            return "scale factor H[3, 3] is zero"
        if np.any(M[3, :3] != 0.0):
            return f"bottom row {M[3, :3].tolist()} is not [0, 0, 0]"

        error = TransformVerifier.orthogonality_error(M)
        if not TOLERANCE_CONFIG.orthogonality_atol.is_within(error, atol):
            return f"rotation block is not orthogonal (max deviation {error:.3e})"
        return None

    @staticmethod
    def orthogonality_error(H) -> float:
        """Max absolute deviation of R @ R.T and R.T @ R from identity.

        R is the upper-left 3x3 block divided by H[3, 3].

        :param H: 4x4 matrix with non-zero H[3, 3]
        :return: Max absolute entry of (R @ R.T - I) and (R.T @ R - I)
        """
        M = _to_numpy(H)
        R = M[:3, :3] / M[3, 3]
        eye = np.eye(3, dtype=DTYPE)
        return float(max(np.max(np.abs(R @ R.T - eye)), np.max(np.abs(R.T @ R - eye))))

    @staticmethod
    def is_homogeneous_transform(H, atol: float | None = None) -> bool:
        """Check whether H is a valid homogeneous transform.

        Never raises for malformed H; any structural problem (including
        complex entries) yields False. ``atol`` itself must be a number.

        :param H: Matrix-like value
        :param atol: Orthogonality tolerance (None selects the configured default)
        :return: True if H is 4x4 with non-zero scale, bottom row [0, 0, 0, s]
            and an orthogonal rotation block
        :raises ValueError: If atol is not a number
        """
        reason = TransformVerifier.failure_reason(H, atol)
        if reason is not None:
            logger.debug("[Verifier] Not a homogeneous transform: %s", reason)
            return False
        return True

    @staticmethod
    def assert_homogeneous(H, atol: float | None = None) -> None:
        """Assert H is a valid homogeneous transform.

        :param H: Matrix-like value
        :param atol: Orthogonality tolerance
        :raises AssertionError: With the failing check in the message
        """
        reason = TransformVerifier.failure_reason(H, atol)
        if reason is not None:
            raise AssertionError(f"Not a homogeneous transform: {reason}")


def is_homogeneous_transform(H: Matrix4x4, atol: float | None = None) -> bool:
    """Check whether H is a valid homogeneous transform.

    See :meth:`TransformVerifier.is_homogeneous_transform`.
    """
    return TransformVerifier.is_homogeneous_transform(H, atol)
