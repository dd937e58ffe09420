"""
Hermite segment evaluation.

Control vectors are ordered (p0, m0, p1, m1): segment endpoints and the
tangents at those endpoints.
"""

from ._common import apply_basis, evaluate_derivative, param_column, points
from .constants import HERMITE_SCALE


def evaluate(hermite_matrix, point_matrix, t_vector):
    """
    Evaluate position, velocity, acceleration or jolt depending on the T vector.

    Args:
        hermite_matrix: Hermite characteristic matrix
        point_matrix: Point matrix of the segment
        t_vector: T vector (4,) or T matrix (4, m)
    """
    return apply_basis(hermite_matrix, point_matrix, t_vector, HERMITE_SCALE)


def evaluate_position_cached(hermite_matrix, point_matrix, t):
    return evaluate_derivative(hermite_matrix, point_matrix, t, 0, HERMITE_SCALE)


def evaluate_velocity_cached(hermite_matrix, point_matrix, t):
    return evaluate_derivative(hermite_matrix, point_matrix, t, 1, HERMITE_SCALE)


def evaluate_acceleration_cached(hermite_matrix, point_matrix, t):
    return evaluate_derivative(hermite_matrix, point_matrix, t, 2, HERMITE_SCALE)


def evaluate_jolt_cached(hermite_matrix, point_matrix, t=0.0):
    return evaluate_derivative(hermite_matrix, point_matrix, t, 3, HERMITE_SCALE)


def evaluate_position_bernstein(p0, m0, p1, m1, t):
    """
    Position from the cubic Hermite blending polynomials.

        h00 = 2t^3 - 3t^2 + 1     (p0)
        h10 = t^3 - 2t^2 + t      (m0)
        h01 = -2t^3 + 3t^2        (p1)
        h11 = t^3 - t^2           (m1)
    """
    p0, m0, p1, m1 = points(p0, m0, p1, m1)
    t = param_column(t)
    tt = t * t
    ttt = tt * t

    return (
        p0 * (2 * ttt - 3 * tt + 1) +
        m0 * (ttt - 2 * tt + t) +
        p1 * (-2 * ttt + 3 * tt) +
        m1 * (ttt - tt)
    ) * HERMITE_SCALE
