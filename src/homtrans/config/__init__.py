"""Configuration for homtrans.

Example:
    >>> from homtrans.config import TOLERANCE_CONFIG
    >>> TOLERANCE_CONFIG.orthogonality_atol.default
    1e-09
"""

from homtrans.config.operations import ToleranceSpec
from homtrans.config.tolerance import DTYPE, TOLERANCE_CONFIG, ToleranceConfig
from homtrans.config.values import DHLink

__all__ = [
    "DTYPE",
    "TOLERANCE_CONFIG",
    "ToleranceConfig",
    "ToleranceSpec",
    "DHLink",
]
