"""
Tests for knot records and rotation normalization.
"""

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from closed_spline import Knot, knots_from_positions


class TestKnot:

    def test_defaults(self):
        knot = Knot([1, 2, 3])
        assert knot.position.dtype == float
        assert np.array_equal(knot.tangent_out, np.zeros(3))
        assert np.array_equal(knot.tangent_in, np.zeros(3))
        assert knot.velocity == 1.0
        assert np.allclose(knot.rotation.as_matrix(), np.eye(3))

    def test_rejects_bad_shapes(self):
        with pytest.raises(ValueError):
            Knot([0, 0])
        with pytest.raises(ValueError):
            Knot([0, 0, 0], tangent_out=[1, 0, 0, 0])

    def test_rejects_non_rotation(self):
        with pytest.raises(ValueError):
            Knot([0, 0, 0], rotation=[0, 0, 0, 1])

    def test_rejects_rotation_stack(self):
        with pytest.raises(ValueError):
            Knot([0, 0, 0], rotation=Rotation.from_quat([[0, 0, 0, 1], [0, 0, 1, 0]]))

    def test_world_tangents(self):
        knot = Knot([0, 0, 0], Rotation.from_euler('z', 90, degrees=True),
                    tangent_out=[1, 0, 0], tangent_in=[-1, 0, 0])
        assert np.allclose(knot.world_tangent_out, [0, 1, 0])
        assert np.allclose(knot.world_tangent_in, [0, -1, 0])
        assert np.allclose(knot.rotate([0, 1, 0]), [-1, 0, 0])


class TestRotationNormalization:
    """Euler and quaternion knots share one rotation type."""

    def test_euler_yaw_turns_forward_to_right(self):
        knot = Knot.from_euler([0, 0, 0], [0, 90, 0])
        assert np.allclose(knot.rotate([0, 0, 1]), [1, 0, 0])

    def test_euler_order_is_z_then_x_then_y(self):
        euler = (30.0, 45.0, 60.0)
        expected = (Rotation.from_euler('y', euler[1], degrees=True)
                    * Rotation.from_euler('x', euler[0], degrees=True)
                    * Rotation.from_euler('z', euler[2], degrees=True))

        knot = Knot.from_euler([0, 0, 0], euler)
        for v in np.eye(3):
            assert np.allclose(knot.rotate(v), expected.apply(v))

    def test_euler_matches_quaternion(self):
        euler = (-20.0, 110.0, 35.0)
        from_euler = Knot.from_euler([1, 2, 3], euler, tangent_out=[0, 0, 2])
        quaternion = from_euler.rotation.as_quat()
        from_quat = Knot.from_quaternion([1, 2, 3], quaternion, tangent_out=[0, 0, 2])

        assert np.allclose(from_euler.world_tangent_out, from_quat.world_tangent_out)

    def test_quaternion_is_scalar_last(self):
        s = np.sqrt(0.5)
        knot = Knot.from_quaternion([0, 0, 0], [0, 0, s, s])  # 90 degrees about z
        assert np.allclose(knot.rotate([1, 0, 0]), [0, 1, 0])


class TestKnotsFromPositions:

    def test_builds_one_knot_per_row(self, square_positions):
        knots = knots_from_positions(square_positions)
        assert len(knots) == 4
        for knot, p in zip(knots, square_positions):
            assert np.array_equal(knot.position, p)

    def test_rejects_2d_positions(self):
        with pytest.raises(ValueError):
            knots_from_positions([[0, 0], [1, 1]])
