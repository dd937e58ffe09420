#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Closed spline basic usage example
"""

import numpy as np
import plotly.graph_objects as go
import sys
import os

# Add the package root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from closed_spline import Knot, SplineType, evaluate_loop, knots_from_positions, rebuild_point_cache


def closed_loop_example():
    """Same knot loop drawn with every cubic family"""
    print("=== Closed loop example ===")

    # Pentagon-ish loop of knots
    positions = np.array([
        [0.0, 0.0, 0.0],
        [3.0, -1.0, 0.0],
        [5.0, 1.5, 0.0],
        [3.0, 4.0, 0.0],
        [0.0, 3.0, 0.0],
    ])

    # Bezier/Hermite knots carry tangents pointing towards the next knot
    knots = []
    count = len(positions)
    for i, p in enumerate(positions):
        direction = positions[(i + 1) % count] - positions[i - 1]
        tangent = 0.25 * direction
        knots.append(Knot(p, tangent_out=tangent, tangent_in=-tangent))

    u = np.linspace(0, count, 400)

    fig = go.Figure()

    colors = {
        SplineType.BEZIER: 'blue',
        SplineType.HERMITE: 'orange',
        SplineType.CATMULL_ROM: 'green',
        SplineType.BSPLINE: 'purple',
    }

    for spline_type, color in colors.items():
        source = knots if spline_type in (SplineType.BEZIER, SplineType.HERMITE) else knots_from_positions(positions)
        cache = rebuild_point_cache(None, source, spline_type)
        points = evaluate_loop(cache, spline_type, u)

        print(f"{spline_type.display_name}: {len(cache)} segments")

        fig.add_trace(go.Scatter(
            x=points[:, 0],
            y=points[:, 1],
            mode='lines',
            name=spline_type.display_name,
            line=dict(color=color, width=3 if spline_type is SplineType.BEZIER else 2,
                      dash='dash' if spline_type is SplineType.HERMITE else 'solid')
        ))

    # Knots
    fig.add_trace(go.Scatter(
        x=np.append(positions[:, 0], positions[0, 0]),
        y=np.append(positions[:, 1], positions[0, 1]),
        mode='markers+lines',
        name='Knots',
        line=dict(color='red', dash='dot'),
        marker=dict(color='red', size=10)
    ))

    fig.update_layout(
        title="Closed cubic splines",
        xaxis_title="X",
        yaxis_title="Y",
        showlegend=True,
        width=700,
        height=600
    )
    fig.update_yaxes(scaleanchor="x", scaleratio=1)

    fig.show()


if __name__ == "__main__":
    closed_loop_example()
