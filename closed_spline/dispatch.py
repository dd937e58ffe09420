"""
Curve-family dispatch.

Routes evaluation calls to the family module matching a SplineType.

Known limitation: SplineType.LINEAR always evaluates to the zero vector. It is
not linear interpolation between knots; callers relying on Linear splines get
(0, 0, 0) everywhere.
"""

import numpy as np

from . import bezier, bspline, catmull_rom, hermite
from .constants import BEZIER_SCALE, BSPLINE_SCALE, CATMULL_ROM_SCALE, HERMITE_SCALE
from .matrices import bspline_matrix, catmull_rom_matrix, cubic_bezier_matrix, hermite_matrix
from .parameters import parameter_vector
from .spline_type import SplineType

# family -> (basis factory, evaluator module, scale)
_FAMILIES = {
    SplineType.BEZIER: (cubic_bezier_matrix, bezier, BEZIER_SCALE),
    SplineType.HERMITE: (hermite_matrix, hermite, HERMITE_SCALE),
    SplineType.CATMULL_ROM: (catmull_rom_matrix, catmull_rom, CATMULL_ROM_SCALE),
    SplineType.BSPLINE: (bspline_matrix, bspline, BSPLINE_SCALE),
}


def _family(spline_type):
    try:
        return _FAMILIES[spline_type]
    except KeyError:
        raise ValueError(f"Unknown spline type {spline_type!r}") from None


def _zeros_like_result(t_vector):
    t_vector = np.asarray(t_vector)
    if t_vector.ndim == 2:
        return np.zeros((t_vector.shape[1], 3))
    return np.zeros(3)


def evaluate(spline_type: SplineType, point_matrix, t_vector) -> np.ndarray:
    """
    Matrix-path evaluation for any curve family.

    The T vector decides what is evaluated (position, velocity,
    acceleration or jolt).

    Args:
        spline_type: Curve family
        point_matrix: (4, 4) point matrix of the segment
        t_vector: (4,) T vector or (4, m) T matrix

    Returns:
        (3,) vector, (m, 3) for a T matrix; zeros for Linear
    """
    if spline_type is SplineType.LINEAR:
        return _zeros_like_result(t_vector)
    matrix_factory, module, _ = _family(spline_type)
    return module.evaluate(matrix_factory(), point_matrix, t_vector)


def evaluate_position(spline_type: SplineType, p0, p1, p2, p3, t) -> np.ndarray:
    """
    Direct-path position from four raw control vectors.

    For Hermite the vectors are (p0, m0, p1, m1).

    Returns:
        Position(s); zeros for Linear
    """
    if spline_type is SplineType.LINEAR:
        if np.ndim(t) == 0:
            return np.zeros(3)
        return np.zeros((np.size(t), 3))
    _, module, _ = _family(spline_type)
    return module.evaluate_position_bernstein(p0, p1, p2, p3, t)


def evaluate_loop(point_cache, spline_type: SplineType, u, derivative: int = 0) -> np.ndarray:
    """
    Evaluate a closed spline at global parameter(s) u.

    The integer part of u selects the segment (wrapped modulo the segment
    count), the fractional part is the local parameter t. Derivatives are taken
    with respect to u, which equals the local t.

    Args:
        point_cache: (n, 4, 4) point cache from rebuild_point_cache()
        spline_type: Curve family the cache was built for
        u: Global parameter, scalar or array of m values
        derivative: 0 position, 1 velocity, 2 acceleration, 3 jolt

    Returns:
        (3,) for scalar u, (m, 3) for array u

    Raises:
        ValueError: If the point cache is empty
    """
    point_cache = np.asarray(point_cache, dtype=float)
    count = len(point_cache)
    if count == 0:
        raise ValueError("Cannot evaluate a spline with an empty point cache")

    scalar = np.ndim(u) == 0
    u = np.atleast_1d(np.asarray(u, dtype=float))
    base = np.floor(u)
    segments = base.astype(int) % count
    t = u - base

    if spline_type is SplineType.LINEAR:
        result = np.zeros((len(u), 3))
    else:
        matrix_factory, _, scale = _family(spline_type)
        t_vector = parameter_vector(t, derivative)
        result = np.einsum('mij,jk,km->mi', point_cache[segments], matrix_factory(), t_vector)[:, :3] * scale

    if scalar:
        return result[0]
    return result
