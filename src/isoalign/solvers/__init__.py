"""
Visual Midpoint Solver
======================
Bisection search for the world-space point that projects onto the
screen-space midpoint of two endpoints.

Note: This module should be pure Python/NumPy and should NOT import any
renderer or scene-graph library.
"""
