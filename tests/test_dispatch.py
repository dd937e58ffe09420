"""
Tests for curve-family dispatch.
"""

import numpy as np
import pytest

from closed_spline import (
    SplineType,
    bezier,
    catmull_rom,
    catmull_rom_matrix,
    cubic_bezier_matrix,
    evaluate,
    evaluate_loop,
    evaluate_position,
    generate_point_matrix,
    position_vector,
    rebuild_point_cache,
    velocity_vector,
)
from closed_spline.constants import PATH_EQUIVALENCE_TOL
from helpers import CUBIC_FAMILIES, make_random_knots


class TestLinearLimitation:
    """Linear splines evaluate to the zero vector (known limitation)."""

    def test_matrix_path_returns_zero(self, control_points):
        point_matrix = generate_point_matrix(*control_points)
        result = evaluate(SplineType.LINEAR, point_matrix, position_vector(0.5))
        assert np.array_equal(result, np.zeros(3))

    def test_matrix_path_batch_returns_zeros(self, control_points):
        point_matrix = generate_point_matrix(*control_points)
        result = evaluate(SplineType.LINEAR, point_matrix, position_vector(np.linspace(0, 1, 5)))
        assert np.array_equal(result, np.zeros((5, 3)))

    def test_direct_path_returns_zero(self, control_points):
        assert np.array_equal(evaluate_position(SplineType.LINEAR, *control_points, 0.25), np.zeros(3))
        assert evaluate_position(SplineType.LINEAR, *control_points, np.zeros(4)).shape == (4, 3)

    def test_loop_returns_zero(self, square_knots):
        cache = rebuild_point_cache(None, square_knots, SplineType.LINEAR)
        assert np.array_equal(evaluate_loop(cache, SplineType.LINEAR, 1.5), np.zeros(3))


class TestRouting:

    def test_bezier_matrix_path(self, control_points):
        point_matrix = generate_point_matrix(*control_points)
        t_vector = velocity_vector(0.3)
        assert np.allclose(
            evaluate(SplineType.BEZIER, point_matrix, t_vector),
            bezier.evaluate(cubic_bezier_matrix(), point_matrix, t_vector),
        )

    def test_catmull_rom_is_scaled(self, control_points):
        point_matrix = generate_point_matrix(*control_points)
        raw = (point_matrix @ catmull_rom_matrix() @ position_vector(0.6))[:3]
        assert np.allclose(evaluate(SplineType.CATMULL_ROM, point_matrix, position_vector(0.6)), raw / 2)

    def test_catmull_rom_direct_path(self, control_points):
        assert np.allclose(
            evaluate_position(SplineType.CATMULL_ROM, *control_points, 0.6),
            catmull_rom.evaluate_position_bernstein(*control_points, 0.6),
        )

    @pytest.mark.parametrize("spline_type", CUBIC_FAMILIES)
    def test_paths_agree_through_dispatcher(self, control_points, spline_type, dense_t):
        point_matrix = generate_point_matrix(*control_points)
        np.testing.assert_allclose(
            evaluate(spline_type, point_matrix, position_vector(dense_t)),
            evaluate_position(spline_type, *control_points, dense_t),
            atol=PATH_EQUIVALENCE_TOL,
        )

    def test_unknown_type(self, control_points):
        point_matrix = generate_point_matrix(*control_points)
        with pytest.raises(ValueError):
            evaluate("bezier", point_matrix, position_vector(0.5))
        with pytest.raises(ValueError):
            evaluate_position(None, *control_points, 0.5)

    def test_square_bezier_scenario(self, square_knots):
        cache = rebuild_point_cache(None, square_knots, SplineType.BEZIER)
        assert np.allclose(evaluate(SplineType.BEZIER, cache[0], position_vector(0.0)), [0, 0, 0])
        assert np.allclose(evaluate(SplineType.BEZIER, cache[0], position_vector(1.0)), [1, 0, 0])


class TestEvaluateLoop:

    def test_integer_parameters_hit_bezier_knots(self, random_knots):
        cache = rebuild_point_cache(None, random_knots, SplineType.BEZIER)
        for i, knot in enumerate(random_knots):
            assert np.allclose(evaluate_loop(cache, SplineType.BEZIER, float(i)), knot.position)

    def test_wraps_around(self, random_knots):
        n = len(random_knots)
        cache = rebuild_point_cache(None, random_knots, SplineType.CATMULL_ROM)
        assert np.allclose(
            evaluate_loop(cache, SplineType.CATMULL_ROM, n + 0.25),
            evaluate_loop(cache, SplineType.CATMULL_ROM, 0.25),
        )
        assert np.allclose(
            evaluate_loop(cache, SplineType.CATMULL_ROM, -0.5),
            evaluate_loop(cache, SplineType.CATMULL_ROM, n - 0.5),
        )

    def test_matches_segment_evaluation(self, random_knots):
        cache = rebuild_point_cache(None, random_knots, SplineType.BSPLINE)
        u = np.array([0.0, 0.3, 2.75, 6.5])
        result = evaluate_loop(cache, SplineType.BSPLINE, u)
        assert result.shape == (4, 3)
        for k, uk in enumerate(u):
            segment = int(np.floor(uk))
            expected = evaluate(SplineType.BSPLINE, cache[segment], position_vector(uk - segment))
            assert np.allclose(result[k], expected)

    @pytest.mark.parametrize("spline_type,continuous_orders", [
        (SplineType.CATMULL_ROM, (0, 1)),
        (SplineType.BSPLINE, (0, 1, 2)),
    ])
    def test_continuity_at_segment_joins(self, rng, spline_type, continuous_orders):
        knots = make_random_knots(rng, 6)
        cache = rebuild_point_cache(None, knots, spline_type)
        joins = np.arange(6, dtype=float)
        eps = 1e-9

        for derivative in continuous_orders:
            before = evaluate_loop(cache, spline_type, joins - eps, derivative)
            after = evaluate_loop(cache, spline_type, joins, derivative)
            np.testing.assert_allclose(before, after, atol=1e-6)

    def test_derivative_orders(self, random_knots):
        cache = rebuild_point_cache(None, random_knots, SplineType.BEZIER)
        for derivative in range(4):
            assert evaluate_loop(cache, SplineType.BEZIER, np.linspace(0, 7, 10), derivative).shape == (10, 3)
        with pytest.raises(ValueError):
            evaluate_loop(cache, SplineType.BEZIER, 0.5, derivative=4)

    def test_empty_cache(self):
        with pytest.raises(ValueError):
            evaluate_loop(np.zeros((0, 4, 4)), SplineType.BEZIER, 0.0)
