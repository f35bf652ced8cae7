"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric defaults used by
the projection, metric and solver layers.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (tolerances, iteration caps)
   scattered throughout the code.
2. Tuning: Callers targeting other display resolutions can build a
   `SolverConfig` or pass their own threshold instead of editing the solver.

Exports:
    MAX_ITERATIONS (int): Bisection step cap.
    TOLERANCE (float): Convergence tolerance in NDC units (~0.5 px at 1920 px).
    ALIGNMENT_THRESHOLD (float): Visual alignment threshold in NDC units
        (~10 px at 1920 px).
    MONOTONIC_SAMPLES (int): Sample count for the optional monotonicity check.
    SolverConfig: Immutable settings bundle for the visual midpoint solver.
"""
from __future__ import annotations

from dataclasses import dataclass

from isoalign.model.geometry_primitives import Axis, ScreenAxis

# Global Constants
MAX_ITERATIONS: int = 20
TOLERANCE: float = 0.001
ALIGNMENT_THRESHOLD: float = 0.01
MONOTONIC_SAMPLES: int = 8


@dataclass(frozen=True)
class SolverConfig:
    """
    Settings for the visual midpoint search.

    Attributes:
        max_iterations: Upper bound on bisection steps.
        tolerance: |error| below which the search stops, in NDC units.
        search_axis: World axis whose value is searched. The remaining axes are
            fixed at the geometric mean.
        screen_axis: Screen axis on which the target midpoint is measured.
        verify_monotonic: If True, sample the projection across the search
            interval before bisecting and log a warning when it is not monotonic.
        monotonic_samples: Number of samples used by the monotonicity check.
    """
    max_iterations: int = MAX_ITERATIONS
    tolerance: float = TOLERANCE
    search_axis: Axis = Axis.Y
    screen_axis: ScreenAxis = ScreenAxis.Y
    verify_monotonic: bool = False
    monotonic_samples: int = MONOTONIC_SAMPLES

    def __post_init__(self) -> None:
        if self.max_iterations < 0:
            raise ValueError(f"'max_iterations' must be non-negative, got {self.max_iterations}.")
        if not self.tolerance > 0.0:
            raise ValueError(f"'tolerance' must be positive, got {self.tolerance}.")
        if self.monotonic_samples < 2:
            raise ValueError(f"'monotonic_samples' must be at least 2, got {self.monotonic_samples}.")
        # Accept plain ints for the axis selectors
        object.__setattr__(self, "search_axis", Axis(self.search_axis))
        object.__setattr__(self, "screen_axis", ScreenAxis(self.screen_axis))
