"""Tolerance configuration.

Floating-point builders cannot reproduce the exact cancellation of symbolic
trigonometric simplification, so orthogonality is checked against an
absolute tolerance instead of exact equality.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from homtrans.config.operations import ToleranceSpec

# dtype emitted by every matrix builder
DTYPE = np.float64


@dataclass(frozen=True)
class ToleranceConfig:
    """Configuration for all numeric comparisons.

    Note: the bottom row of a homogeneous transform is always compared
    exactly; only the rotation block and the scale coordinate use these
    tolerances.
    """

    orthogonality_atol: ToleranceSpec = ToleranceSpec(
        name="orthogonality_atol",
        min_value=0.0,
        max_value=1e-2,
        default=1e-9,
        description="Max |R @ R.T - I| entry for a rotation block to count as orthogonal",
    )

    zero_scale_atol: ToleranceSpec = ToleranceSpec(
        name="zero_scale_atol",
        min_value=0.0,
        max_value=1e-6,
        default=0.0,
        description="Homogeneous scale at or below this magnitude is treated as zero",
    )

    def get_spec(self, name: str) -> ToleranceSpec:
        """Get tolerance spec by name.

        :param name: Tolerance name
        :return: ToleranceSpec for the tolerance
        :raises AttributeError: If tolerance not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, ToleranceSpec]:
        """Get all tolerance specs as a dictionary.

        :return: Dictionary mapping tolerance names to specs
        """
        return {
            "orthogonality_atol": self.orthogonality_atol,
            "zero_scale_atol": self.zero_scale_atol,
        }


# Singleton instance for use throughout the codebase
TOLERANCE_CONFIG = ToleranceConfig()
