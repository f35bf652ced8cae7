"""
isoalign
========
Screen-space alignment for isometric and other tilted cameras.

The geometric midpoint of two world-space points does not, in general, project
onto the midpoint of their projections. This package finds the point that does
(`calculate_visual_midpoint`) and reports how far off the geometric midpoint is
(`analyze_alignment_error`).
"""
import logging

from isoalign.analysis.diagnostics import AlignmentDiagnostics, analyze_alignment_error
from isoalign.config import ALIGNMENT_THRESHOLD, MAX_ITERATIONS, TOLERANCE, SolverConfig
from isoalign.model.geometry_primitives import Axis, ScreenAxis, ScreenPoint, WorldPoint
from isoalign.model.results import AlignmentResult, DiagnosticsReport
from isoalign.projection.projector import CameraTransform, MatrixCamera, project
from isoalign.projection.screen_metric import is_aligned, ndc_to_pixels, screen_distance, threshold_from_pixels
from isoalign.solvers.solver import VisualMidpointSolver, calculate_visual_midpoint, check_monotonic, screen_target

__all__ = [
    "ALIGNMENT_THRESHOLD",
    "MAX_ITERATIONS",
    "TOLERANCE",
    "AlignmentDiagnostics",
    "AlignmentResult",
    "Axis",
    "CameraTransform",
    "DiagnosticsReport",
    "MatrixCamera",
    "ScreenAxis",
    "ScreenPoint",
    "SolverConfig",
    "VisualMidpointSolver",
    "WorldPoint",
    "analyze_alignment_error",
    "calculate_visual_midpoint",
    "check_monotonic",
    "is_aligned",
    "ndc_to_pixels",
    "project",
    "screen_distance",
    "screen_target",
    "threshold_from_pixels",
]


logging.getLogger(__name__).addHandler(logging.NullHandler())
