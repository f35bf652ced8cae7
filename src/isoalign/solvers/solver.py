from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from isoalign.config import SolverConfig
from isoalign.model.geometry_primitives import WorldPoint
from isoalign.model.results import AlignmentResult
from isoalign.projection.projector import CameraTransform, project

logger = logging.getLogger(__name__)


def screen_target(
    point_a: WorldPoint,
    point_b: WorldPoint,
    camera: CameraTransform,
    config: Optional[SolverConfig] = None
) -> float:
    """
    Midpoint of the two endpoints' projections on the configured screen axis.

    Args:
        point_a: First endpoint.
        point_b: Second endpoint.
        camera: The camera snapshot to project through.
        config: Solver settings; only `screen_axis` is used.

    Returns:
        The target screen coordinate in NDC units.
    """
    config = config or SolverConfig()
    s_a = project(point_a, camera).component(config.screen_axis)
    s_b = project(point_b, camera).component(config.screen_axis)
    return (s_a + s_b) / 2


def check_monotonic(
    point_a: WorldPoint,
    point_b: WorldPoint,
    camera: CameraTransform,
    config: Optional[SolverConfig] = None
) -> bool:
    """
    Sample the projection across the search interval and test monotonicity.

    Candidates keep the non-search axes at the geometric mean and step the
    search axis evenly from min to max. The projection is considered monotonic
    when the successive screen-coordinate differences never change sign (flat
    steps are ignored).

    Args:
        point_a: First endpoint.
        point_b: Second endpoint.
        camera: The camera snapshot to project through.
        config: Solver settings; `search_axis`, `screen_axis` and
            `monotonic_samples` are used.

    Returns:
        True if no sign change was observed.
    """
    config = config or SolverConfig()
    a = point_a.component(config.search_axis)
    b = point_b.component(config.search_axis)
    fixed = point_a.midpoint(point_b)

    samples = np.linspace(min(a, b), max(a, b), config.monotonic_samples)
    projected = np.array([
        project(fixed.with_component(config.search_axis, float(value)), camera).component(config.screen_axis)
        for value in samples
    ])
    signs = np.sign(np.diff(projected))
    signs = signs[signs != 0]
    return bool(np.all(signs == signs[0])) if signs.size else True


class VisualMidpointSolver:
    """
    Bisection solver for the visual midpoint of two world-space points.

    The non-search axes are fixed at the geometric mean of the endpoints. The
    search-axis value is bisected over [min, max] of the endpoints until the
    candidate's projection lands on the screen-space midpoint of the endpoints'
    projections.

    The projected coordinate must be monotonic in the search-axis value over
    that interval; otherwise bisection may settle on a wrong root. Set
    `verify_monotonic` on the config to have this sampled and warned about.
    """

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
    ) -> None:
        """
        Initialize the solver.

        Args:
            config: Solver settings. Defaults to `SolverConfig()`.
        """
        self.config = config or SolverConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"

    def solve(
        self,
        point_a: WorldPoint,
        point_b: WorldPoint,
        camera: CameraTransform,
    ) -> AlignmentResult:
        """
        Find the point that appears midway between `point_a` and `point_b`.

        Args:
            point_a: First endpoint.
            point_b: Second endpoint.
            camera: The camera snapshot to project through. It is only read.

        Returns:
            AlignmentResult. `converged` is False when `max_iterations` was
            exhausted or the interval collapsed to a single value (e.g. equal
            search-axis values under a perspective camera); `position` then
            holds the last bisection estimate and `iterations` the steps taken.
        """
        config = self.config
        axis = config.search_axis
        screen_axis = config.screen_axis

        if point_a == point_b:
            logger.debug(f"Degenerate input {point_a}: returning it unchanged.")
            return AlignmentResult(position=point_a, iterations=0, error=0.0, converged=True)

        if config.verify_monotonic and not check_monotonic(point_a, point_b, camera, config):
            logger.warning(
                f"Projection is not monotonic along axis {axis.name} between "
                f"{point_a} and {point_b}; the visual midpoint may be wrong."
            )

        # Only the search-axis value of this point is replaced below
        fixed = point_a.midpoint(point_b)
        target = screen_target(point_a, point_b, camera, config)

        lo = min(point_a.component(axis), point_b.component(axis))
        hi = max(point_a.component(axis), point_b.component(axis))

        # Sign of d(screen)/d(axis); a standard upward-looking rig is increasing on Y
        s_lo = project(fixed.with_component(axis, lo), camera).component(screen_axis)
        s_hi = project(fixed.with_component(axis, hi), camera).component(screen_axis)
        increasing = s_hi >= s_lo

        logger.debug(
            f"Solving visual midpoint on axis {axis.name}: interval [{lo}, {hi}], "
            f"target {target:.6f}, increasing={increasing}"
        )

        candidate = fixed.with_component(axis, (lo + hi) / 2)
        error = 0.0
        if config.max_iterations == 0:
            error = project(candidate, camera).component(screen_axis) - target

        for iteration in range(config.max_iterations):
            mid = (lo + hi) / 2
            candidate = fixed.with_component(axis, mid)
            projected = project(candidate, camera).component(screen_axis)
            error = projected - target

            if abs(error) < config.tolerance:
                logger.debug(f"Converged in {iteration + 1} iterations (error {error:.3e}).")
                return AlignmentResult(
                    position=candidate,
                    iterations=iteration + 1,
                    error=error,
                    converged=True,
                )

            # Candidate lands past the target: pull the axis value back
            if (projected > target) == increasing:
                hi = mid
            else:
                lo = mid

            # Collapsed interval: further steps would re-test the same candidate
            if (lo + hi) / 2 == mid:
                break

        iterations = iteration + 1 if config.max_iterations else 0
        logger.warning(
            f"Visual midpoint did not converge after {iterations} iterations "
            f"(error {error:.3e}, tolerance {config.tolerance})."
        )
        return AlignmentResult(
            position=candidate,
            iterations=iterations,
            error=error,
            converged=False,
        )


def calculate_visual_midpoint(
    point_a: WorldPoint,
    point_b: WorldPoint,
    camera: CameraTransform,
    config: Optional[SolverConfig] = None
) -> AlignmentResult:
    """Shortcut for `VisualMidpointSolver(config).solve(point_a, point_b, camera)`."""
    return VisualMidpointSolver(config).solve(point_a, point_b, camera)
