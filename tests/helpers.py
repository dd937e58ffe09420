"""
Shared test data builders for the closed_spline tests.
"""

from typing import List

from scipy.spatial.transform import Rotation

from closed_spline import Knot, SplineType


CUBIC_FAMILIES = [
    SplineType.BEZIER,
    SplineType.HERMITE,
    SplineType.CATMULL_ROM,
    SplineType.BSPLINE,
]


def make_random_knots(rng, count, mirrored_tangents=False) -> List[Knot]:
    """Knots with random positions, rotations, tangents and velocities."""
    rotations = Rotation.from_quat(rng.normal(size=(count, 4)))
    knots = []
    for i in range(count):
        tangent_out = rng.normal(size=3)
        tangent_in = -tangent_out if mirrored_tangents else rng.normal(size=3)
        knots.append(Knot(
            position=rng.uniform(-5.0, 5.0, size=3),
            rotation=rotations[i],
            tangent_out=tangent_out,
            tangent_in=tangent_in,
            velocity=float(rng.uniform(0.5, 3.0)),
        ))
    return knots
