"""
Knot records consumed by the point cache builder.

Knot data is owned by the authoring system; this module only normalizes the
two orientation representations it hands over (quaternions and Euler angles)
into a single scipy Rotation so the evaluation code never branches on them.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Union

import numpy as np
from scipy.spatial.transform import Rotation

from .constants import EULER_SEQUENCE

VectorLike = Union[Sequence[float], np.ndarray]


def as_vector3(value: VectorLike, name: str = "vector") -> np.ndarray:
    """
    Coerce a 3-component value to a float64 array.

    Raises:
        ValueError: If the value does not hold exactly three components
    """
    v = np.asarray(value, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {v.shape}")
    return v


@dataclass
class Knot:
    """
    A single control point of a closed spline.

    Attributes:
        position: World-space position
        rotation: Orientation applied to the tangents and the forward axis
        tangent_out: Outgoing tangent in knot-local space
        tangent_in: Incoming tangent in knot-local space
        velocity: Speed along the forward axis (Hermite velocity convention)
    """

    position: np.ndarray
    rotation: Rotation = field(default_factory=Rotation.identity)
    tangent_out: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tangent_in: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: float = 1.0

    def __post_init__(self):
        self.position = as_vector3(self.position, "position")
        self.tangent_out = as_vector3(self.tangent_out, "tangent_out")
        self.tangent_in = as_vector3(self.tangent_in, "tangent_in")
        if not isinstance(self.rotation, Rotation):
            raise ValueError(f"rotation must be a scipy Rotation, got {type(self.rotation).__name__}")
        if not self.rotation.single:
            raise ValueError("rotation must be a single rotation, not a stack")
        self.velocity = float(self.velocity)

    @classmethod
    def from_quaternion(cls, position, quaternion, tangent_out=(0, 0, 0), tangent_in=(0, 0, 0),
                        velocity=1.0) -> "Knot":
        """Build a knot from an (x, y, z, w) quaternion."""
        return cls(position, Rotation.from_quat(np.asarray(quaternion, dtype=float)),
                   tangent_out, tangent_in, velocity)

    @classmethod
    def from_euler(cls, position, euler_degrees, tangent_out=(0, 0, 0), tangent_in=(0, 0, 0),
                   velocity=1.0) -> "Knot":
        """
        Build a knot from Euler angles in degrees.

        Angles are given as (x, y, z) and applied z first, then x, then y,
        all about the fixed world axes.
        """
        x, y, z = as_vector3(euler_degrees, "euler_degrees")
        rotation = Rotation.from_euler(EULER_SEQUENCE, [z, x, y], degrees=True)
        return cls(position, rotation, tangent_out, tangent_in, velocity)

    def rotate(self, vector: VectorLike) -> np.ndarray:
        """Rotate a knot-local vector into world space."""
        return self.rotation.apply(as_vector3(vector))

    @property
    def world_tangent_out(self) -> np.ndarray:
        return self.rotation.apply(self.tangent_out)

    @property
    def world_tangent_in(self) -> np.ndarray:
        return self.rotation.apply(self.tangent_in)


def knots_from_positions(positions) -> List[Knot]:
    """
    Build knots with identity rotation and zero tangents.

    Args:
        positions: (n, 3) array of knot positions

    Returns:
        list of n knots
    """
    P = np.array(positions, dtype=float)
    if P.ndim != 2 or P.shape[1] != 3:
        raise ValueError(f"positions must be (n, 3), got {P.shape}")
    return [Knot(p) for p in P]
