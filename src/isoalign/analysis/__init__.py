"""
Alignment Diagnostics
=====================
Compares the geometric midpoint of two endpoints with the visual midpoint
found by the solver, and reports how far apart they land on screen.

Note: This module should be pure Python/NumPy and should NOT import any
renderer or scene-graph library.
"""
