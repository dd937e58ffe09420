"""
Characteristic (basis) matrices for cubic spline families.

Every matrix is laid out so that column k holds the coefficients of t**k:

    position = point_matrix @ basis @ [1, t, t**2, t**3] * scale

Transposing a matrix gives the familiar row-per-power listing, e.g. for the
cubic Bezier basis

    [[ 1,  0,  0, 0],
     [-3,  3,  0, 0],
     [ 3, -6,  3, 0],
     [-1,  3, -3, 1]]

Matrices are constants; they are built once, memoized and returned read-only.
"""

from typing import Callable, Dict, Tuple

import numpy as np

from .knots import as_vector3
from .spline_type import SplineType

# Memo of constant matrices, keyed by (matrix_type, variant)
_MATRIX_CACHE: Dict[Tuple[str, int], np.ndarray] = {}


def _generate_cache_key(matrix_type: str, variant: int = 0) -> Tuple[str, int]:
    """Cache key for a memoized matrix."""
    return (matrix_type, variant)


def _cached(matrix_type: str, build: Callable[[], np.ndarray]) -> np.ndarray:
    cache_key = _generate_cache_key(matrix_type)

    if cache_key in _MATRIX_CACHE:
        return _MATRIX_CACHE[cache_key]

    matrix = np.asarray(build(), dtype=float)
    matrix.flags.writeable = False
    _MATRIX_CACHE[cache_key] = matrix
    return matrix


def _from_power_rows(rows) -> np.ndarray:
    """Build a basis from rows of t-power coefficients (row k -> t**k)."""
    return np.array(rows, dtype=float).T


def cubic_bezier_matrix() -> np.ndarray:
    """
    Cubic Bezier characteristic matrix for evaluating position.

    Returns:
        (4, 4) read-only basis matrix
    """
    return _cached("bezier", lambda: _from_power_rows([
        [1, 0, 0, 0],
        [-3, 3, 0, 0],
        [3, -6, 3, 0],
        [-1, 3, -3, 1],
    ]))


def cubic_bezier_tangent_matrix() -> np.ndarray:
    """
    Cubic Bezier characteristic matrix for evaluating tangent (velocity).

    Used with the *position* parameter vector [1, t, t**2, t**3]; equivalent to
    cubic_bezier_matrix() combined with velocity_vector(t).
    """
    return _cached("bezier_tangent", lambda: _from_power_rows([
        [-3, 3, 0, 0],
        [6, -12, 6, 0],
        [-3, 9, -9, 3],
        [0, 0, 0, 0],
    ]))


def cubic_bezier_acceleration_matrix() -> np.ndarray:
    """
    Cubic Bezier characteristic matrix for evaluating acceleration.

    Used with the *position* parameter vector; equivalent to
    cubic_bezier_matrix() combined with acceleration_vector(t).
    """
    return _cached("bezier_acceleration", lambda: _from_power_rows([
        [6, -12, 6, 0],
        [-6, 18, -18, 6],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]))


def hermite_matrix() -> np.ndarray:
    """Hermite characteristic matrix (points ordered p0, m0, p1, m1)."""
    return _cached("hermite", lambda: _from_power_rows([
        [1, 0, 0, 0],
        [0, 1, 0, 0],
        [-3, -2, 3, -1],
        [2, 1, -2, 1],
    ]))


def catmull_rom_matrix() -> np.ndarray:
    """Catmull-Rom characteristic matrix, normalized by 1/2 at evaluation."""
    return _cached("catmull_rom", lambda: _from_power_rows([
        [0, 2, 0, 0],
        [-1, 0, 1, 0],
        [2, -5, 4, -1],
        [-1, 3, -3, 1],
    ]))


def bspline_matrix() -> np.ndarray:
    """Uniform cubic B-spline characteristic matrix, normalized by 1/6 at evaluation."""
    return _cached("bspline", lambda: _from_power_rows([
        [1, 4, 1, 0],
        [-3, 0, 3, 0],
        [3, -6, 3, 0],
        [-1, 3, -3, 1],
    ]))


_FAMILY_MATRICES = {
    SplineType.BEZIER: cubic_bezier_matrix,
    SplineType.HERMITE: hermite_matrix,
    SplineType.CATMULL_ROM: catmull_rom_matrix,
    SplineType.BSPLINE: bspline_matrix,
}


def characteristic_matrix(spline_type: SplineType) -> np.ndarray:
    """
    Position basis matrix for a curve family.

    Raises:
        ValueError: For Linear (no basis) or an unknown tag
    """
    try:
        return _FAMILY_MATRICES[spline_type]()
    except KeyError:
        raise ValueError(f"No characteristic matrix for spline type {spline_type!r}") from None


def generate_point_matrix(p0, p1, p2, p3) -> np.ndarray:
    """
    Pack four control vectors into a point matrix.

    Columns are the control vectors as homogeneous vectors with w = 0.

    Returns:
        (4, 4) point matrix
    """
    M = np.zeros((4, 4))
    for j, p in enumerate((p0, p1, p2, p3)):
        M[:3, j] = as_vector3(p, f"p{j}")
    return M


def clear_matrix_cache():
    """Clear the memoized matrices."""
    _MATRIX_CACHE.clear()


def get_cache_info() -> dict:
    """Memoization statistics."""
    return {
        'cached_matrices': len(_MATRIX_CACHE),
        'cache_keys': list(_MATRIX_CACHE.keys())
    }
