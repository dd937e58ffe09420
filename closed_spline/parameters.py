"""
Parameter (T) vectors shared by every cubic family.

    position      [1, t, t**2, t**3]
    velocity      [0, 1, 2t,   3t**2]
    acceleration  [0, 0, 2,    6t]
    jolt          [0, 0, 0,    6]

A scalar t gives a (4,) vector; an array of m parameters gives a (4, m)
matrix whose columns are the per-parameter vectors. t is never range-checked:
values outside [0, 1] extrapolate the segment.
"""

from typing import Optional, Union

import numpy as np

ParamLike = Union[float, np.ndarray]


def _is_scalar(t) -> bool:
    return np.ndim(t) == 0


def position_vector(t: ParamLike) -> np.ndarray:
    """T vector for evaluating position."""
    if _is_scalar(t):
        t = float(t)
        tt = t * t
        return np.array([1.0, t, tt, tt * t])
    t = np.asarray(t, dtype=float)
    tt = t * t
    return np.vstack([np.ones_like(t), t, tt, tt * t])


def velocity_vector(t: ParamLike) -> np.ndarray:
    """T vector for evaluating velocity."""
    if _is_scalar(t):
        t = float(t)
        return np.array([0.0, 1.0, 2.0 * t, 3.0 * t * t])
    t = np.asarray(t, dtype=float)
    return np.vstack([np.zeros_like(t), np.ones_like(t), 2.0 * t, 3.0 * t * t])


def acceleration_vector(t: ParamLike) -> np.ndarray:
    """T vector for evaluating acceleration."""
    if _is_scalar(t):
        return np.array([0.0, 0.0, 2.0, 6.0 * float(t)])
    t = np.asarray(t, dtype=float)
    return np.vstack([np.zeros_like(t), np.zeros_like(t), np.full_like(t, 2.0), 6.0 * t])


def jolt_vector(count: Optional[int] = None) -> np.ndarray:
    """
    T vector for evaluating jolt (third derivative).

    Args:
        count: If given, return a (4, count) matrix of identical columns
    """
    v = np.array([0.0, 0.0, 0.0, 6.0])
    if count is None:
        return v
    return np.repeat(v[:, None], count, axis=1)


def parameter_vector(t: ParamLike, derivative: int = 0) -> np.ndarray:
    """
    T vector for a derivative order.

    Args:
        t: Curve parameter(s)
        derivative: 0 position, 1 velocity, 2 acceleration, 3 jolt

    Raises:
        ValueError: If derivative is not in 0..3
    """
    if derivative == 0:
        return position_vector(t)
    if derivative == 1:
        return velocity_vector(t)
    if derivative == 2:
        return acceleration_vector(t)
    if derivative == 3:
        return jolt_vector(None if _is_scalar(t) else np.size(t))
    raise ValueError(f"derivative must be 0, 1, 2 or 3, got {derivative}")


def set_position_vector(out: np.ndarray, t: float) -> np.ndarray:
    """Overwrite a (4,) T vector in place with the position form."""
    tt = t * t
    out[0], out[1], out[2], out[3] = 1.0, t, tt, tt * t
    return out


def set_velocity_vector(out: np.ndarray, t: float) -> np.ndarray:
    """Overwrite a (4,) T vector in place with the velocity form."""
    out[0], out[1], out[2], out[3] = 0.0, 1.0, 2.0 * t, 3.0 * t * t
    return out


def set_acceleration_vector(out: np.ndarray, t: float) -> np.ndarray:
    """Overwrite a (4,) T vector in place with the acceleration form."""
    out[0], out[1], out[2], out[3] = 0.0, 0.0, 2.0, 6.0 * t
    return out
