"""
Closed cubic spline evaluation

This package evaluates points and derivatives along closed, piecewise-cubic
curves built from a cyclic sequence of knots.

Main features:
- Characteristic matrices for cubic Bezier, Hermite, Catmull-Rom and uniform B-spline
- Parameter (T) vectors for position, velocity, acceleration and jolt
- Per-segment point caches rebuilt from knot data with modulo wraparound
- Matrix-path and direct (Bernstein) evaluation that agree numerically
- Dispatch on a SplineType tag

Example:
    >>> import numpy as np
    >>> from closed_spline import SplineType, knots_from_positions, rebuild_point_cache, evaluate_loop
    >>>
    >>> knots = knots_from_positions([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]])
    >>> cache = rebuild_point_cache(None, knots, SplineType.CATMULL_ROM)
    >>>
    >>> u = np.linspace(0, len(knots), 200, endpoint=False)
    >>> points = evaluate_loop(cache, SplineType.CATMULL_ROM, u)
"""

__version__ = "1.0.0"

from .spline_type import SplineType, HermiteTangentMode
from .knots import Knot, knots_from_positions
from .matrices import (
    cubic_bezier_matrix,
    cubic_bezier_tangent_matrix,
    cubic_bezier_acceleration_matrix,
    hermite_matrix,
    catmull_rom_matrix,
    bspline_matrix,
    characteristic_matrix,
    generate_point_matrix,
    clear_matrix_cache,
    get_cache_info,
)
from .parameters import (
    position_vector,
    velocity_vector,
    acceleration_vector,
    jolt_vector,
    parameter_vector,
    set_position_vector,
    set_velocity_vector,
    set_acceleration_vector,
)
from .point_cache import (
    SplinePreconditionWarning,
    minimum_knot_count,
    rebuild_point_cache,
    rebuild_bezier_point_cache,
    rebuild_hermite_point_cache,
    rebuild_catmull_rom_point_cache,
    rebuild_bspline_point_cache,
)
from .dispatch import evaluate, evaluate_position, evaluate_loop
from .log import get_logger, setup_logging
from . import bezier, hermite, catmull_rom, bspline, constants

__all__ = [
    # Tags and knots
    'SplineType',
    'HermiteTangentMode',
    'Knot',
    'knots_from_positions',

    # Characteristic matrices
    'cubic_bezier_matrix',
    'cubic_bezier_tangent_matrix',
    'cubic_bezier_acceleration_matrix',
    'hermite_matrix',
    'catmull_rom_matrix',
    'bspline_matrix',
    'characteristic_matrix',
    'generate_point_matrix',
    'clear_matrix_cache',
    'get_cache_info',

    # Parameter vectors
    'position_vector',
    'velocity_vector',
    'acceleration_vector',
    'jolt_vector',
    'parameter_vector',
    'set_position_vector',
    'set_velocity_vector',
    'set_acceleration_vector',

    # Point cache
    'SplinePreconditionWarning',
    'minimum_knot_count',
    'rebuild_point_cache',
    'rebuild_bezier_point_cache',
    'rebuild_hermite_point_cache',
    'rebuild_catmull_rom_point_cache',
    'rebuild_bspline_point_cache',

    # Dispatch
    'evaluate',
    'evaluate_position',
    'evaluate_loop',

    # Logging
    'get_logger',
    'setup_logging',

    # Family modules
    'bezier',
    'hermite',
    'catmull_rom',
    'bspline',
    'constants',
]
