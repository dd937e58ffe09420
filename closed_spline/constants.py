"""
Basis normalization factors and conventions for closed spline evaluation.
"""

import numpy as np

# Scale applied after the (point matrix x basis x parameter vector) product
LINEAR_SCALE = 1.0  # unused, Linear evaluates to zero
BEZIER_SCALE = 1.0
HERMITE_SCALE = 1.0
CATMULL_ROM_SCALE = 1.0 / 2.0
BSPLINE_SCALE = 1.0 / 6.0

# Hermite tangent-vector convention: tangent handles are a third of the derivative
HERMITE_TANGENT_SCALE = 3.0

# Knot-local forward axis used by the Hermite velocity convention
FORWARD_AXIS = np.array([0.0, 0.0, 1.0])

# Euler angles are applied z, then x, then y about fixed axes (degrees)
EULER_SEQUENCE = "zxy"

# Smallest knot count giving a geometrically meaningful segment window
MIN_KNOTS_TWO_POINT = 2  # Bezier, Hermite
MIN_KNOTS_FOUR_POINT = 4  # Catmull-Rom, B-spline

# Matrix path and direct path must agree within this tolerance
PATH_EQUIVALENCE_TOL = 1e-4

# Logging
LOG_LEVEL_ENV = "CLOSED_SPLINE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
