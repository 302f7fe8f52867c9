"""Tests for applying homogeneous transforms to point sets."""

import numpy as np
import pytest

from homtrans import (
    DivideByZeroError,
    InvalidArgumentError,
    apply,
    apply_to_point,
    rotate_y,
    rotate_z,
    translation,
)
from homtrans.transform.kernels import perspective_divide_numba


@pytest.fixture
def reference_transform():
    """Translation(4, 0, 0) . RotateY(pi/2) . RotateZ(pi/2)."""
    return translation(4, 0, 0) @ rotate_y(np.pi / 2) @ rotate_z(np.pi / 2)


@pytest.fixture
def reference_points():
    """Six points, one per column."""
    return np.array(
        [
            [1, -1, -1, 1, 1, -1],
            [0, 0, 0, 0, 4, 4],
            [0, 0, 2, 2, 0, 0],
        ],
        dtype=np.float64,
    )


class TestApply:
    """Test apply() on well-formed input."""

    def test_translation_of_origin(self):
        """Test translating the origin yields the offset."""
        result = apply(translation(1.5, -2.0, 7.0), [[0], [0], [0]])
        np.testing.assert_allclose(result, [[1.5], [-2.0], [7.0]])

    def test_reference_scenario(self, reference_transform, reference_points):
        """Test the documented six-point scenario."""
        result = apply(reference_transform, reference_points)
        expected = np.array(
            [
                [4, 4, 6, 6, 4, 4],
                [1, -1, -1, 1, 1, -1],
                [0, 0, 0, 0, 4, 4],
            ],
            dtype=np.float64,
        )
        assert result.shape == (3, 6)
        np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_single_point(self, reference_transform):
        """Test apply_to_point returns a (3, 1) column."""
        result = apply_to_point(reference_transform, 1, 4, 0)
        assert result.shape == (3, 1)
        np.testing.assert_allclose(result, [[4], [1], [4]], atol=1e-12)

    def test_single_point_matches_batch(self, reference_transform, reference_points):
        """Test each column of a batch equals its single-point result."""
        batch = apply(reference_transform, reference_points)
        for j in range(reference_points.shape[1]):
            single = apply_to_point(reference_transform, *reference_points[:, j])
            np.testing.assert_allclose(single[:, 0], batch[:, j])

    def test_input_not_modified(self, reference_transform, reference_points):
        """Test inputs are left untouched."""
        points_before = reference_points.copy()
        matrix_before = reference_transform.copy()
        apply(reference_transform, reference_points)
        np.testing.assert_array_equal(reference_points, points_before)
        np.testing.assert_array_equal(reference_transform, matrix_before)

    def test_integer_input(self):
        """Test integer lists are converted to float."""
        result = apply(np.eye(4, dtype=int).tolist(), [[1, 2], [3, 4], [5, 6]])
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1, 2], [3, 4], [5, 6]])

    def test_empty_point_set(self):
        """Test N = 0 returns an empty (3, 0) array."""
        result = apply(np.eye(4), np.zeros((3, 0)))
        assert result.shape == (3, 0)

    def test_perspective_divide_per_column(self):
        """Test every column is normalized by its own scale coordinate."""
        H = np.eye(4)
        H[3] = [0, 0, 1, 0]  # w = z
        points = np.array([[2.0, 3.0], [4.0, 6.0], [2.0, 3.0]])
        np.testing.assert_allclose(apply(H, points), [[1.0, 1.0], [2.0, 2.0], [1.0, 1.0]])

    def test_uniform_scale_coordinate(self):
        """Test a bottom-right scale factor cancels out."""
        H = translation(1, 2, 3) * 2.0
        np.testing.assert_allclose(apply(H, [[0], [0], [0]]), [[1], [2], [3]])

    def test_large_batch(self):
        """Test a random batch against a plain NumPy reference."""
        rng = np.random.default_rng(42)
        points = rng.normal(size=(3, 10_000))
        H = translation(0.5, -1.0, 2.0) @ rotate_z(0.3) @ rotate_y(-1.1)
        expected = H[:3, :3] @ points + H[:3, 3:4]
        np.testing.assert_allclose(apply(H, points), expected, atol=1e-12)


class TestApplyErrors:
    """Test apply() error handling."""

    @pytest.mark.parametrize("shape", [(3, 3), (4, 3), (3, 4), (16,), (4, 4, 1)])
    def test_bad_matrix_shape(self, shape):
        """Test non-4x4 matrices raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Matrix must be shape"):
            apply(np.ones(shape), np.zeros((3, 2)))

    @pytest.mark.parametrize("shape", [(4, 2), (2, 5), (3,), (3, 2, 1)])
    def test_bad_points_shape(self, shape):
        """Test point sets without exactly 3 rows raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Points must be shape"):
            apply(np.eye(4), np.zeros(shape))

    def test_non_numeric_input(self):
        """Test non-numeric input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            apply(np.eye(4), [["x"], ["y"], ["z"]])

    def test_zero_scale_raises(self):
        """Test zero homogeneous scale raises DivideByZeroError."""
        H = np.eye(4)
        H[3, 3] = 0.0
        with pytest.raises(DivideByZeroError):
            apply(H, [[1], [2], [3]])

    def test_zero_scale_reports_every_column(self):
        """Test each zero-scale column is detected, not just the first."""
        H = np.eye(4)
        H[3] = [0, 0, 1, 0]  # w = z
        points = np.array([[1.0, 1.0, 1.0, 1.0], [1.0, 1.0, 1.0, 1.0], [1.0, 0.0, 2.0, 0.0]])
        with pytest.raises(DivideByZeroError, match=r"\[1, 3\]") as exc_info:
            apply(H, points)
        assert exc_info.value.columns == [1, 3]

    def test_zero_scale_tolerance(self):
        """Test atol widens what counts as a zero scale coordinate."""
        H = np.eye(4)
        H[3, 3] = 1e-9
        np.testing.assert_allclose(apply(H, [[1], [2], [3]]), [[1e9], [2e9], [3e9]])
        with pytest.raises(DivideByZeroError) as exc_info:
            apply(H, [[1, 2], [2, 3], [3, 4]], atol=1e-8)
        assert exc_info.value.columns == [0, 1]
        with pytest.raises(DivideByZeroError):
            apply_to_point(H, 1, 2, 3, atol=1e-8)

    def test_zero_scale_tolerance_is_clamped(self):
        """Test atol is clamped to the configured maximum of 1e-6."""
        H = np.eye(4)
        H[3, 3] = 1e-5
        np.testing.assert_allclose(apply(H, [[1], [0], [0]], atol=1.0), [[1e5], [0], [0]])

    def test_non_numeric_atol_raises(self):
        """Test a non-numeric tolerance raises ValueError."""
        with pytest.raises(ValueError, match="expected number"):
            apply(np.eye(4), [[0], [0], [0]], atol="loose")

    def test_zero_scale_is_zero_division_error(self):
        """Test DivideByZeroError can be caught as ZeroDivisionError."""
        H = np.zeros((4, 4))
        with pytest.raises(ZeroDivisionError):
            apply(H, [[0], [0], [0]])


class TestKernels:
    """Test Numba kernel directly."""

    def test_perspective_divide(self):
        """Test kernel divides rows 0-2 by row 3 in place."""
        homogeneous = np.array(
            [[2.0, 9.0], [4.0, -3.0], [6.0, 0.0], [2.0, 3.0]], dtype=np.float64
        )
        out = np.empty((3, 2), dtype=np.float64)
        perspective_divide_numba(homogeneous, out)
        np.testing.assert_allclose(out, [[1.0, 3.0], [2.0, -1.0], [3.0, 0.0]])
