"""
Alignment Diagnostics
=====================
Compares the naive geometric midpoint with the solver's visual midpoint.

Why is this file needed?
------------------------
1. Validation: It shows how far the geometric midpoint lands from the true
   screen-space midpoint for a given camera.
2. Decision support: Callers can decide whether the correction matters
   (e.g. below the alignment threshold the geometric midpoint is good enough).

Formatting or logging the report is left to the caller.
"""
from __future__ import annotations

from typing import Optional

from isoalign.config import SolverConfig
from isoalign.model.geometry_primitives import WorldPoint
from isoalign.model.results import DiagnosticsReport
from isoalign.projection.projector import CameraTransform, project
from isoalign.solvers.solver import VisualMidpointSolver, screen_target


class AlignmentDiagnostics:
    """
    Geometric vs. visual midpoint comparison.
    """

    def __init__(
        self,
        solver: Optional[VisualMidpointSolver] = None,
    ) -> None:
        """
        Args:
            solver: Solver used for the visual midpoint. Defaults to a solver
                with the default configuration.
        """
        self.solver = solver or VisualMidpointSolver()

    def analyze(
        self,
        point_a: WorldPoint,
        point_b: WorldPoint,
        camera: CameraTransform,
    ) -> DiagnosticsReport:
        """
        Build the comparison record for two endpoints.

        Args:
            point_a: First endpoint.
            point_b: Second endpoint.
            camera: The camera snapshot to project through.

        Returns:
            DiagnosticsReport with the geometric midpoint, the solver result,
            their difference and the screen-space error of the geometric midpoint.
        """
        config = self.solver.config
        geometric = point_a.midpoint(point_b)
        visual = self.solver.solve(point_a, point_b, camera)

        target = screen_target(point_a, point_b, camera, config)
        geometric_screen = project(geometric, camera).component(config.screen_axis)

        return DiagnosticsReport(
            geometric_midpoint=geometric,
            visual_result=visual,
            difference=visual.position - geometric,
            screen_space_error=abs(geometric_screen - target),
        )


def analyze_alignment_error(
    point_a: WorldPoint,
    point_b: WorldPoint,
    camera: CameraTransform,
    config: Optional[SolverConfig] = None
) -> DiagnosticsReport:
    """Shortcut for `AlignmentDiagnostics(VisualMidpointSolver(config)).analyze(...)`."""
    return AlignmentDiagnostics(VisualMidpointSolver(config)).analyze(point_a, point_b, camera)
