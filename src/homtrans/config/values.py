"""Value dataclasses for kinematic chains.

This module provides value-holding dataclasses that can be combined using
the + operator into a kinematic chain.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from homtrans.transform.pipeline import KinematicChain


@dataclass(frozen=True)
class DHLink:
    """Denavit-Hartenberg parameters of one link.

    Convention: T = Rz(theta) @ Tz(d) @ Tx(a) @ Rx(alpha). Angles in radians.

    Example:
        >>> shoulder = DHLink(d=0.12)
        >>> elbow = DHLink(a=0.15)
        >>> chain = shoulder + elbow  # shoulder first, then elbow
    """

    theta: float = 0.0
    d: float = 0.0
    a: float = 0.0
    alpha: float = 0.0

    def to_matrix(self) -> np.ndarray:
        """Convert to 4x4 homogeneous link transform.

        :returns: 4x4 numpy array
        """
        from homtrans.transform.api import dh

        return dh(self.theta, self.d, self.a, self.alpha)

    def with_theta(self, theta: float) -> DHLink:
        """Return a copy with the joint angle replaced."""
        return replace(self, theta=float(theta))

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, params: dict[str, float]) -> DHLink:
        """Create a link from a parameter dictionary.

        Missing keys fall back to 0.0.

        :param params: Mapping with any of theta, d, a, alpha
        :returns: DHLink instance
        :raises KeyError: If an unknown parameter name is given
        """
        unknown = set(params) - {"theta", "d", "a", "alpha"}
        if unknown:
            raise KeyError(f"Unknown DH parameter(s): {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in params.items()})

    def __add__(self, other: DHLink | KinematicChain) -> KinematicChain:
        """Chain links: self is the link closer to the base."""
        from homtrans.transform.pipeline import KinematicChain

        if isinstance(other, DHLink):
            return KinematicChain([self, other])
        if isinstance(other, KinematicChain):
            return KinematicChain([self, *other.links])
        return NotImplemented

    def is_neutral(self) -> bool:
        """Check if the link transform is the identity.

        :returns: True if all parameters are zero
        """
        return self.theta == 0.0 and self.d == 0.0 and self.a == 0.0 and self.alpha == 0.0
