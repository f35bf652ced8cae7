"""
Result Records
==============
Value objects returned by the solver and the diagnostics.

Classes:
    AlignmentResult: Outcome of a single visual-midpoint search.
    DiagnosticsReport: Geometric vs. visual midpoint comparison.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from isoalign.model.geometry_primitives import WorldPoint


@dataclass(frozen=True)
class AlignmentResult:
    """
    Outcome of the visual midpoint search.

    Attributes:
        position: The world-space point found by the search.
        iterations: Number of bisection steps taken (0 for degenerate input).
        error: Signed residual in NDC units between the candidate's projected
            coordinate and the screen-space target.
        converged: True when |error| dropped below the tolerance.
    """
    position: WorldPoint
    iterations: int
    error: float
    converged: bool


@dataclass(frozen=True)
class DiagnosticsReport:
    """
    Comparison of the naive geometric midpoint with the solver result.

    Attributes:
        geometric_midpoint: Per-axis mean of the two input points.
        visual_result: The solver outcome for the same inputs.
        difference: visual_result.position - geometric_midpoint.
        screen_space_error: Absolute NDC error of the geometric midpoint's
            projection relative to the true screen-space target.
    """
    geometric_midpoint: WorldPoint
    visual_result: AlignmentResult
    difference: WorldPoint
    screen_space_error: float

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict representation, e.g. for JSON dumps."""
        return asdict(self)
