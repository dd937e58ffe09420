"""
Curve family tags.
"""

from enum import Enum


class SplineType(Enum):
    """Curve family used to build point matrices and pick a basis."""

    LINEAR = "linear"
    BEZIER = "bezier"
    HERMITE = "hermite"
    CATMULL_ROM = "catmull_rom"
    BSPLINE = "bspline"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


class HermiteTangentMode(Enum):
    """
    How Hermite point matrices derive their tangent columns.

    TANGENT: rotate(knot.rotation, knot.tangent_out) * 3
    VELOCITY: rotate(knot.rotation, FORWARD_AXIS) * knot.velocity

    The two conventions produce different curves in general.
    """

    TANGENT = "tangent"
    VELOCITY = "velocity"


_DISPLAY_NAMES = {
    SplineType.LINEAR: "Linear",
    SplineType.BEZIER: "Bézier",
    SplineType.HERMITE: "Hermite",
    SplineType.CATMULL_ROM: "Catmull-Rom",
    SplineType.BSPLINE: "B-Spline",
}
