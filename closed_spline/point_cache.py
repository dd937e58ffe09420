"""
Point cache construction for closed splines.

A point cache holds one (4, 4) point matrix per knot. Entry i packs the control
vectors of segment i, which spans knot i to knot (i + 1) mod n; indexing wraps
modulo n everywhere so the last segments close the loop.

The cache is derived state: callers rebuild it in full after moving knots.
Nothing here tracks staleness, and a buffer must not be rebuilt from two
threads at once.
"""

import warnings
from typing import Optional, Sequence

import numpy as np

from .constants import FORWARD_AXIS, HERMITE_TANGENT_SCALE, MIN_KNOTS_FOUR_POINT, MIN_KNOTS_TWO_POINT
from .log import get_logger
from .spline_type import HermiteTangentMode, SplineType

logger = get_logger("point_cache")


class SplinePreconditionWarning(UserWarning):
    """Knot count is below the family's segment window; results wrap onto themselves."""


_MIN_KNOTS = {
    SplineType.BEZIER: MIN_KNOTS_TWO_POINT,
    SplineType.HERMITE: MIN_KNOTS_TWO_POINT,
    SplineType.CATMULL_ROM: MIN_KNOTS_FOUR_POINT,
    SplineType.BSPLINE: MIN_KNOTS_FOUR_POINT,
}


def minimum_knot_count(spline_type: SplineType) -> int:
    """Smallest knot count for which every segment window is distinct (0 for Linear)."""
    return _MIN_KNOTS.get(spline_type, 0)


def _check_knot_count(count, spline_type):
    # Called directly from the public entry points, so stacklevel 3 is their caller
    required = minimum_knot_count(spline_type)
    if 0 < count < required:
        warnings.warn(
            f"{spline_type.display_name} splines need at least {required} knots, got {count}; "
            "segment windows wrap onto repeated knots",
            SplinePreconditionWarning,
            stacklevel=3,
        )


def _prepare_buffer(point_cache: Optional[np.ndarray], count: int) -> np.ndarray:
    """Reuse the buffer when it is a writeable float64 array of the right shape, else allocate."""
    if (point_cache is not None
            and point_cache.shape == (count, 4, 4)
            and point_cache.dtype == np.float64
            and point_cache.flags.writeable):
        return point_cache
    return np.zeros((count, 4, 4))


def _fill(matrix, p0, p1, p2, p3):
    matrix[:3, 0] = p0
    matrix[:3, 1] = p1
    matrix[:3, 2] = p2
    matrix[:3, 3] = p3
    matrix[3, :] = 0.0


def _fill_bezier(point_cache, knots):
    count = len(knots)
    point_cache = _prepare_buffer(point_cache, count)

    for i in range(count):
        k0 = knots[i % count]
        k1 = knots[(i + 1) % count]

        p0 = k0.position
        p3 = k1.position

        _fill(point_cache[i],
              p0,
              p0 + k0.rotation.apply(k0.tangent_out),
              p3 + k1.rotation.apply(k1.tangent_in),
              p3)

    return point_cache


def _hermite_tangent(knot, mode: HermiteTangentMode) -> np.ndarray:
    if mode is HermiteTangentMode.TANGENT:
        return knot.rotation.apply(knot.tangent_out) * HERMITE_TANGENT_SCALE
    if mode is HermiteTangentMode.VELOCITY:
        return knot.rotation.apply(FORWARD_AXIS) * knot.velocity
    raise ValueError(f"Unknown Hermite tangent mode {mode!r}")


def _fill_hermite(point_cache, knots, mode=HermiteTangentMode.TANGENT):
    count = len(knots)
    point_cache = _prepare_buffer(point_cache, count)

    for i in range(count):
        k0 = knots[i % count]
        k1 = knots[(i + 1) % count]

        _fill(point_cache[i],
              k0.position,
              _hermite_tangent(k0, mode),
              k1.position,
              _hermite_tangent(k1, mode))

    return point_cache


def _fill_window(point_cache, knots):
    """Four-knot sliding window shared by Catmull-Rom and B-spline."""
    count = len(knots)
    point_cache = _prepare_buffer(point_cache, count)

    for i in range(count):
        _fill(point_cache[i],
              knots[i % count].position,
              knots[(i + 1) % count].position,
              knots[(i + 2) % count].position,
              knots[(i + 3) % count].position)

    return point_cache


def _fill_linear(point_cache, knots):
    point_cache = _prepare_buffer(point_cache, len(knots))
    point_cache.fill(0.0)
    return point_cache


_FILLERS = {
    SplineType.BEZIER: _fill_bezier,
    SplineType.CATMULL_ROM: _fill_window,
    SplineType.BSPLINE: _fill_window,
    SplineType.LINEAR: _fill_linear,
}


def rebuild_bezier_point_cache(point_cache: Optional[np.ndarray], knots: Sequence) -> np.ndarray:
    """
    Fill a Bezier point cache.

    Segment i uses k0 = knots[i], k1 = knots[i+1 mod n]:
        P0 = k0.position
        P1 = k0.position + rotate(k0, k0.tangent_out)
        P2 = k1.position + rotate(k1, k1.tangent_in)
        P3 = k1.position

    Args:
        point_cache: Buffer to overwrite, or None to allocate
        knots: Ordered, cyclic knot sequence

    Returns:
        (n, 4, 4) point cache (the given buffer when it could be reused)
    """
    _check_knot_count(len(knots), SplineType.BEZIER)
    return _fill_bezier(point_cache, knots)


def rebuild_hermite_point_cache(point_cache: Optional[np.ndarray], knots: Sequence,
                                mode: HermiteTangentMode = HermiteTangentMode.TANGENT) -> np.ndarray:
    """
    Fill a Hermite point cache.

    Columns are (k0.position, m0, k1.position, m1); the tangents m0, m1 follow
    the selected HermiteTangentMode.
    """
    _check_knot_count(len(knots), SplineType.HERMITE)
    return _fill_hermite(point_cache, knots, mode)


def rebuild_catmull_rom_point_cache(point_cache: Optional[np.ndarray], knots: Sequence) -> np.ndarray:
    """Fill a Catmull-Rom point cache from a sliding window of four knot positions."""
    _check_knot_count(len(knots), SplineType.CATMULL_ROM)
    return _fill_window(point_cache, knots)


def rebuild_bspline_point_cache(point_cache: Optional[np.ndarray], knots: Sequence) -> np.ndarray:
    """
    Fill a B-spline point cache.

    Same four-knot window as Catmull-Rom; the curve differs only through the
    basis matrix and its 1/6 normalization.
    """
    _check_knot_count(len(knots), SplineType.BSPLINE)
    return _fill_window(point_cache, knots)


def rebuild_point_cache(point_cache: Optional[np.ndarray], knots: Sequence, spline_type: SplineType,
                        hermite_mode: HermiteTangentMode = HermiteTangentMode.TANGENT) -> np.ndarray:
    """
    Rebuild the point cache for a curve family.

    The returned array always has length len(knots). When the given buffer is a
    writeable float64 array of shape (n, 4, 4) it is overwritten in place and
    returned; otherwise a new array is allocated, so callers should keep the
    return value. Linear splines have no control vectors and get a zero-filled
    cache.

    Args:
        point_cache: Buffer to overwrite, or None
        knots: Ordered, cyclic knot sequence
        spline_type: Curve family
        hermite_mode: Tangent convention for Hermite splines

    Returns:
        (n, 4, 4) point cache
    """
    if spline_type is SplineType.HERMITE:
        _check_knot_count(len(knots), spline_type)
        result = _fill_hermite(point_cache, knots, hermite_mode)
    elif spline_type in _FILLERS:
        _check_knot_count(len(knots), spline_type)
        result = _FILLERS[spline_type](point_cache, knots)
    else:
        raise ValueError(f"Unknown spline type {spline_type!r}")

    logger.debug("Rebuilt %d point matrices for %s spline", len(result), spline_type.display_name)
    return result
