"""
Closed spline usage examples

Scripts demonstrating the closed_spline package.

Included examples:
- basic_usage.py: one knot loop drawn with every cubic family (plotly)
- derivative_demo.py: velocity, acceleration and jolt around a loop (matplotlib)

How to run:
    python examples/basic_usage.py
    python examples/derivative_demo.py
"""

__all__ = []
