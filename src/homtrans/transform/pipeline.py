"""Chainable transform builders.

``Transform`` records builder steps and multiplies them in the order they
were written, so ``Transform().translate(4, 0, 0).rotate_y(a)`` equals
``translation(4, 0, 0) @ rotate_y(a)``.

``KinematicChain`` composes Denavit-Hartenberg links from base to tip
(forward kinematics only).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from homtrans.config.tolerance import DTYPE
from homtrans.config.values import DHLink
from homtrans.errors import InvalidArgumentError
from homtrans.transform import api
from homtrans.transform.apply import apply

logger = logging.getLogger(__name__)


class Transform:
    """Fluent builder for composite homogeneous transforms.

    All methods return self for chaining. Arguments are validated when a
    step is added, so a bad step fails at the line that added it.

    Example:
        >>> import numpy as np
        >>> from homtrans import Transform
        >>> H = Transform().translate(4, 0, 0).rotate_y(np.pi / 2).rotate_z(np.pi / 2)
        >>> H([[1], [4], [0]])  # doctest: +SKIP
        array([[4.], [1.], [4.]])
    """

    def __init__(self):
        """Initialize an empty (identity) transform."""
        self._operations: list[tuple[str, np.ndarray]] = []

    def _push(self, name: str, matrix: np.ndarray) -> Transform:
        self._operations.append((name, matrix))
        return self

    def translate(self, x: float, y: float, z: float) -> Transform:
        """Add translation by (x, y, z)."""
        return self._push("translate", api.translation(x, y, z))

    def rotate(self, axis: Sequence[float], theta: float) -> Transform:
        """Add rotation by theta about axis.

        :param axis: Rotation axis [x, y, z], any non-zero length
        :param theta: Rotation angle in radians
        :returns: Self for chaining
        """
        if len(axis) != 3:
            raise InvalidArgumentError(f"axis must have 3 components, got {len(axis)}")
        return self._push("rotate", api.rotation(*axis, theta))

    def rotate_x(self, angle: float) -> Transform:
        return self._push("rotate_x", api.rotate_x(angle))

    def rotate_y(self, angle: float) -> Transform:
        return self._push("rotate_y", api.rotate_y(angle))

    def rotate_z(self, angle: float) -> Transform:
        return self._push("rotate_z", api.rotate_z(angle))

    def euler(self, phi: float, theta: float, psi: float) -> Transform:
        """Add Z-X-Z Euler orientation."""
        return self._push("euler", api.euler(phi, theta, psi))

    def rpy(self, phi: float, theta: float, psi: float) -> Transform:
        """Add roll-pitch-yaw orientation."""
        return self._push("rpy", api.rpy(phi, theta, psi))

    def dh(self, theta: float, d: float, a: float, alpha: float) -> Transform:
        """Add a Denavit-Hartenberg link transform."""
        return self._push("dh", api.dh(theta, d, a, alpha))

    def matrix(self, matrix) -> Transform:
        """Add an arbitrary 4x4 matrix.

        :param matrix: 4x4 transformation matrix
        :returns: Self for chaining
        :raises InvalidArgumentError: If matrix is not 4x4
        """
        arr = np.array(matrix, dtype=DTYPE)
        if arr.shape != (4, 4):
            raise InvalidArgumentError(f"Matrix must be shape (4, 4), got {arr.shape}")
        return self._push("matrix", arr)

    def to_matrix(self) -> np.ndarray:
        """Multiply the recorded steps left to right.

        :returns: 4x4 numpy array (identity if no steps)
        """
        result = np.eye(4, dtype=DTYPE)
        for _, step in self._operations:
            result = result @ step
        return result

    def __call__(self, points) -> np.ndarray:
        """Apply the composed transform to points [3, N]."""
        return apply(self.to_matrix(), points)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        steps = ", ".join(name for name, _ in self._operations)
        return f"Transform([{steps}])"


class KinematicChain:
    """Serial chain of Denavit-Hartenberg links, base first.

    Example:
        >>> from homtrans import DHLink, KinematicChain
        >>> arm = KinematicChain([DHLink(d=0.12), DHLink(a=0.15), DHLink(a=0.10)])
        >>> tip = arm.with_joint_angles([0.0, 0.5, -0.5]).forward()
    """

    def __init__(self, links: Iterable[DHLink] = ()):
        self.links: list[DHLink] = list(links)
        for link in self.links:
            if not isinstance(link, DHLink):
                raise InvalidArgumentError(f"Expected DHLink, got {type(link).__name__}")

    def __len__(self) -> int:
        return len(self.links)

    def __add__(self, other: DHLink | KinematicChain) -> KinematicChain:
        if isinstance(other, DHLink):
            return KinematicChain([*self.links, other])
        if isinstance(other, KinematicChain):
            return KinematicChain([*self.links, *other.links])
        return NotImplemented

    def with_joint_angles(self, thetas: Sequence[float]) -> KinematicChain:
        """Return a new chain with every link's theta replaced.

        :param thetas: One joint angle per link, radians
        :returns: New KinematicChain
        :raises InvalidArgumentError: If the number of angles does not match
        """
        if len(thetas) != len(self.links):
            raise InvalidArgumentError(
                f"Expected {len(self.links)} joint angles, got {len(thetas)}"
            )
        return KinematicChain(link.with_theta(t) for link, t in zip(self.links, thetas))

    def frames(self) -> list[np.ndarray]:
        """Cumulative base-to-link transforms, one per link."""
        current = np.eye(4, dtype=DTYPE)
        result = []
        for link in self.links:
            current = current @ link.to_matrix()
            result.append(current)
        return result

    def forward(self) -> np.ndarray:
        """Base-to-tip transform (identity for an empty chain).

        :returns: 4x4 numpy array
        """
        frames = self.frames()
        logger.debug("[KinematicChain] Forward kinematics over %d links", len(frames))
        return frames[-1] if frames else np.eye(4, dtype=DTYPE)

    def __repr__(self) -> str:
        return f"KinematicChain({self.links!r})"
