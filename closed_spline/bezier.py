"""
Cubic Bezier segment evaluation.

Matrix path: point matrix x characteristic matrix x T vector.
Direct path: closed-form Bernstein polynomials (and repeated-lerp
De Casteljau forms) on four raw control points, for one-off evaluations
without a point cache.

Cubic Bezier in Bernstein form:
    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
"""

from ._common import apply_basis, evaluate_derivative, lerp, param_column, points
from .constants import BEZIER_SCALE
from .parameters import position_vector


def evaluate(bezier_matrix, point_matrix, t_vector):
    """
    Evaluate position, velocity, acceleration or jolt depending on the T vector.

    Args:
        bezier_matrix: Cached cubic Bezier characteristic matrix
        point_matrix: Point matrix of the segment
        t_vector: T vector (4,) or T matrix (4, m)

    Returns:
        (3,) vector, or (m, 3) for a T matrix
    """
    return apply_basis(bezier_matrix, point_matrix, t_vector, BEZIER_SCALE)


def evaluate_position_cached(bezier_matrix, point_matrix, t):
    """Position at parameter(s) t from a cached point matrix."""
    return evaluate_derivative(bezier_matrix, point_matrix, t, 0, BEZIER_SCALE)


def evaluate_velocity_cached(bezier_matrix, point_matrix, t):
    """Velocity at parameter(s) t from a cached point matrix."""
    return evaluate_derivative(bezier_matrix, point_matrix, t, 1, BEZIER_SCALE)


def evaluate_acceleration_cached(bezier_matrix, point_matrix, t):
    """Acceleration at parameter(s) t from a cached point matrix."""
    return evaluate_derivative(bezier_matrix, point_matrix, t, 2, BEZIER_SCALE)


def evaluate_jolt_cached(bezier_matrix, point_matrix, t=0.0):
    """Jolt (constant along a cubic segment) from a cached point matrix."""
    return evaluate_derivative(bezier_matrix, point_matrix, t, 3, BEZIER_SCALE)


def evaluate_velocity_precomputed(tangent_matrix, point_matrix, t):
    """
    Velocity using the precomputed tangent basis and the position T vector.

    Args:
        tangent_matrix: cubic_bezier_tangent_matrix()
        point_matrix: Point matrix of the segment
        t: Curve parameter(s)
    """
    return apply_basis(tangent_matrix, point_matrix, position_vector(t), BEZIER_SCALE)


def evaluate_acceleration_precomputed(acceleration_matrix, point_matrix, t):
    """Acceleration using the precomputed acceleration basis and the position T vector."""
    return apply_basis(acceleration_matrix, point_matrix, position_vector(t), BEZIER_SCALE)


def evaluate_position_bernstein(p0, p1, p2, p3, t):
    """
    Position from Bernstein polynomials.

    Args:
        p0, p1, p2, p3: Control points
        t: Curve parameter, scalar or array of m values

    Returns:
        Point on the curve, (m, dim) for array t
    """
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)
    tt = t * t
    ttt = tt * t

    return (
        p0 * (-ttt + 3 * tt - 3 * t + 1) +
        p1 * (3 * ttt - 6 * tt + 3 * t) +
        p2 * (-3 * ttt + 3 * tt) +
        p3 * ttt
    )


def evaluate_velocity(p0, p1, p2, p3, t):
    """
    Velocity (first derivative) from its closed-form polynomial.

    dB/dt = 3(1-t)^2 (P1-P0) + 6(1-t)t (P2-P1) + 3t^2 (P3-P2)
    """
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)
    tt = t * t

    return (
        p0 * (-3 * tt + 6 * t - 3) +
        p1 * (9 * tt - 12 * t + 3) +
        p2 * (-9 * tt + 6 * t) +
        p3 * (3 * tt)
    )


def evaluate_acceleration(p0, p1, p2, p3, t):
    """Acceleration (second derivative) from its closed-form polynomial."""
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)

    return (
        p0 * (-6 * t + 6) +
        p1 * (18 * t - 12) +
        p2 * (-18 * t + 6) +
        p3 * (6 * t)
    )


def evaluate_jolt(p0, p1, p2, p3):
    """Jolt (third derivative), constant over the segment."""
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    return 6 * (p3 - p0) + 18 * (p1 - p2)


def evaluate_position_de_casteljau(p0, p1, p2, p3, t):
    """Position by repeated linear interpolation (De Casteljau)."""
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)

    q1 = lerp(p1, p2, t)
    return lerp(lerp(lerp(p0, p1, t), q1, t), lerp(q1, lerp(p2, p3, t), t), t)


def evaluate_velocity_de_casteljau(p0, p1, p2, p3, t):
    """
    Velocity by De Casteljau on the hodograph.

    The derivative of a cubic is a quadratic Bezier over 3 * (P[i+1] - P[i]).
    """
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)

    v1 = p2 - p1
    return 3 * lerp(lerp(p1 - p0, v1, t), lerp(v1, p3 - p2, t), t)
