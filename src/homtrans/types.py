"""Type aliases for homtrans.

Provides unified type hints for array-like parameters across all modules.
"""

from collections.abc import Sequence

import numpy as np

# 3D vector given as a sequence or a (3, 1) column array
Vector3 = tuple[float, float, float] | Sequence[float] | np.ndarray

# 4x4 homogeneous matrix
Matrix4x4 = Sequence[Sequence[float]] | np.ndarray

# 3xN point set, one point per column
PointSet = Sequence[Sequence[float]] | np.ndarray

# General array-like type
ArrayLike = Sequence[float] | np.ndarray
