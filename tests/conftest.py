"""
Pytest fixtures shared by the closed_spline tests.
"""

from __future__ import annotations

from typing import List

import numpy as np
import pytest

from closed_spline import Knot, knots_from_positions
from helpers import make_random_knots


# =============================================================================
# Knot Fixtures
# =============================================================================


@pytest.fixture
def square_positions() -> np.ndarray:
    """Unit square in the XY plane, counter-clockwise."""
    return np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
    ])


@pytest.fixture
def square_knots(square_positions) -> List[Knot]:
    """Square knots with identity rotation and zero tangents."""
    return knots_from_positions(square_positions)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def random_knots(rng) -> List[Knot]:
    """Seven random knots."""
    return make_random_knots(rng, 7)


@pytest.fixture
def control_points(rng) -> np.ndarray:
    """Four random 3D control vectors."""
    return rng.uniform(-3.0, 3.0, size=(4, 3))


@pytest.fixture
def dense_t() -> np.ndarray:
    return np.linspace(0.0, 1.0, 201)
