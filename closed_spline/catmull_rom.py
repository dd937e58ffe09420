"""
Catmull-Rom segment evaluation.

The segment runs from p1 to p2; p0 and p3 only shape the tangents.
"""

from ._common import apply_basis, evaluate_derivative, param_column, points
from .constants import CATMULL_ROM_SCALE


def evaluate(catmull_rom_matrix, point_matrix, t_vector):
    """
    Evaluate position, velocity, acceleration or jolt depending on the T vector.

    Args:
        catmull_rom_matrix: Catmull-Rom characteristic matrix
        point_matrix: Point matrix of the segment
        t_vector: T vector (4,) or T matrix (4, m)
    """
    return apply_basis(catmull_rom_matrix, point_matrix, t_vector, CATMULL_ROM_SCALE)


def evaluate_position_cached(catmull_rom_matrix, point_matrix, t):
    return evaluate_derivative(catmull_rom_matrix, point_matrix, t, 0, CATMULL_ROM_SCALE)


def evaluate_velocity_cached(catmull_rom_matrix, point_matrix, t):
    return evaluate_derivative(catmull_rom_matrix, point_matrix, t, 1, CATMULL_ROM_SCALE)


def evaluate_acceleration_cached(catmull_rom_matrix, point_matrix, t):
    return evaluate_derivative(catmull_rom_matrix, point_matrix, t, 2, CATMULL_ROM_SCALE)


def evaluate_jolt_cached(catmull_rom_matrix, point_matrix, t=0.0):
    return evaluate_derivative(catmull_rom_matrix, point_matrix, t, 3, CATMULL_ROM_SCALE)


def evaluate_position_bernstein(p0, p1, p2, p3, t):
    """
    Position from the Catmull-Rom blending polynomials.

    Args:
        p0, p1, p2, p3: Four consecutive knot positions
        t: Curve parameter(s); t=0 gives p1, t=1 gives p2
    """
    p0, p1, p2, p3 = points(p0, p1, p2, p3)
    t = param_column(t)
    tt = t * t
    ttt = tt * t

    return (
        p0 * (-ttt + 2 * tt - t) +
        p1 * (3 * ttt - 5 * tt + 2) +
        p2 * (-3 * ttt + 4 * tt + t) +
        p3 * (ttt - tt)
    ) * CATMULL_ROM_SCALE
