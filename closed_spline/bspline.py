"""
Uniform cubic B-spline segment evaluation.

The curve approximates rather than interpolates its knots; segment i is
controlled by knots i..i+3 and starts at (p0 + 4 p1 + p2) / 6.
"""

from ._common import apply_basis, evaluate_derivative, param_column, points
from .constants import BSPLINE_SCALE
from .matrices import generate_point_matrix


def evaluate(bspline_matrix, point_matrix, t_vector):
    """
    Evaluate position, velocity, acceleration or jolt depending on the T vector.

    Args:
        bspline_matrix: Cached B-spline characteristic matrix
        point_matrix: Point matrix constructed of the four control points
        t_vector: T vector (4,) or T matrix (4, m)

    Returns:
        Evaluated position, velocity, acceleration or jolt on the curve
    """
    return apply_basis(bspline_matrix, point_matrix, t_vector, BSPLINE_SCALE)


def evaluate_position_cached(bspline_matrix, point_matrix, t):
    """Position at parameter(s) t from a cached point matrix."""
    return evaluate_derivative(bspline_matrix, point_matrix, t, 0, BSPLINE_SCALE)


def evaluate_velocity_cached(bspline_matrix, point_matrix, t):
    """Velocity at parameter(s) t from a cached point matrix."""
    return evaluate_derivative(bspline_matrix, point_matrix, t, 1, BSPLINE_SCALE)


def evaluate_acceleration_cached(bspline_matrix, point_matrix, t):
    """Acceleration at parameter(s) t from a cached point matrix."""
    return evaluate_derivative(bspline_matrix, point_matrix, t, 2, BSPLINE_SCALE)


def evaluate_jolt_cached(bspline_matrix, point_matrix, t=0.0):
    """Jolt from a cached point matrix."""
    return evaluate_derivative(bspline_matrix, point_matrix, t, 3, BSPLINE_SCALE)


def evaluate_position(bspline_matrix, p0, p1, p2, p3, t):
    """Position through the matrix path, building the point matrix on the fly."""
    point_matrix = generate_point_matrix(p0, p1, p2, p3)
    return evaluate_position_cached(bspline_matrix, point_matrix, t)


def evaluate_position_bernstein(p0, p1, p2, p3, t):
    """Position from the uniform cubic B-spline blending polynomials."""
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)
    tt = t * t
    ttt = tt * t

    return (
        p0 * (-ttt + 3 * tt - 3 * t + 1) +
        p1 * (3 * ttt - 6 * tt + 4) +
        p2 * (-3 * ttt + 3 * tt + 3 * t + 1) +
        p3 * ttt
    ) * BSPLINE_SCALE
