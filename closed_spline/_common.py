"""
Shared arithmetic for the family evaluators.
"""

import numpy as np

from .parameters import acceleration_vector, jolt_vector, position_vector, velocity_vector


def apply_basis(basis, point_matrix, t_vector, scale=1.0):
    """
    point_matrix @ basis @ t_vector * scale, dropping the homogeneous row.

    Returns:
        (3,) for a (4,) T vector, (m, 3) for a (4, m) T matrix
    """
    result = (point_matrix @ basis @ t_vector)[:3] * scale
    if result.ndim == 2:
        return result.T
    return result


def evaluate_derivative(basis, point_matrix, t, derivative, scale=1.0):
    """Matrix-path evaluation of position (0) through jolt (3) at parameter(s) t."""
    if derivative == 0:
        t_vector = position_vector(t)
    elif derivative == 1:
        t_vector = velocity_vector(t)
    elif derivative == 2:
        t_vector = acceleration_vector(t)
    else:
        t_vector = jolt_vector(None if np.ndim(t) == 0 else np.size(t))
    return apply_basis(basis, point_matrix, t_vector, scale)


def param_column(t):
    """Scalar t as float, array t as an (m, 1) column for broadcasting against points."""
    if np.ndim(t) == 0:
        return float(t)
    return np.asarray(t, dtype=float).reshape(-1, 1)


def points(*ps):
    return [np.asarray(p, dtype=float) for p in ps]


def lerp(a, b, t):
    return a + (b - a) * t
