#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Velocity, acceleration and jolt magnitudes along a closed spline
"""

import numpy as np
import matplotlib.pyplot as plt
import sys
import os

# Add the package root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from closed_spline import SplineType, evaluate_loop, knots_from_positions, rebuild_point_cache


def derivative_profile(spline_type=SplineType.BSPLINE, samples=600):
    """Plot |d^k p / du^k| for k = 1..3 around the loop."""
    print(f"=== {spline_type.display_name} derivative profile ===")

    angles = np.linspace(0, 2 * np.pi, 8, endpoint=False)
    radii = 3.0 + np.where(np.arange(8) % 2 == 0, 1.0, -1.0)
    positions = np.column_stack([radii * np.cos(angles), radii * np.sin(angles), 0.3 * np.sin(2 * angles)])

    cache = rebuild_point_cache(None, knots_from_positions(positions), spline_type)
    u = np.linspace(0, len(positions), samples, endpoint=False)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    points = evaluate_loop(cache, spline_type, u)
    axes[0].plot(points[:, 0], points[:, 1], color='blue', linewidth=2, label='curve')
    axes[0].plot(positions[:, 0], positions[:, 1], 'o--', color='red', label='knots')
    axes[0].set_aspect('equal')
    axes[0].set_title(f"{spline_type.display_name} loop")
    axes[0].legend()

    labels = {1: 'velocity', 2: 'acceleration', 3: 'jolt'}
    for derivative, label in labels.items():
        magnitude = np.linalg.norm(evaluate_loop(cache, spline_type, u, derivative), axis=1)
        axes[1].plot(u, magnitude, label=label)
        print(f"max |{label}| = {magnitude.max():.3f}")

    for join in range(len(positions)):
        axes[1].axvline(join, color='gray', linewidth=0.5)

    axes[1].set_xlabel("u")
    axes[1].set_ylabel("magnitude")
    axes[1].set_title("Derivative magnitudes")
    axes[1].legend()

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    derivative_profile(SplineType.CATMULL_ROM)
    derivative_profile(SplineType.BSPLINE)
