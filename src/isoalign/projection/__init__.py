"""
Projection Layer
================
Pure coordinate transforms from world space to the screen plane, and the
screen-space metrics built on top of them.

Note: This module should be pure Python/NumPy and should NOT import any
renderer or scene-graph library.
"""
