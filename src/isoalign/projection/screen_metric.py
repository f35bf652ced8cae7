from __future__ import annotations

from isoalign.config import ALIGNMENT_THRESHOLD
from isoalign.model.geometry_primitives import WorldPoint
from isoalign.projection.projector import CameraTransform, project


def screen_distance(
    point_a: WorldPoint,
    point_b: WorldPoint,
    camera: CameraTransform
) -> float:
    """
    Distance between two points as they appear on screen.

    Args:
        point_a: First world-space point.
        point_b: Second world-space point.
        camera: The camera snapshot to project through.

    Returns:
        2D Euclidean distance in NDC units, depth excluded.
    """
    return project(point_a, camera).planar_distance_to(project(point_b, camera))


def is_aligned(
    point_a: WorldPoint,
    point_b: WorldPoint,
    camera: CameraTransform,
    threshold: float = ALIGNMENT_THRESHOLD
) -> bool:
    """
    Check whether two points appear to coincide on screen.

    Args:
        point_a: First world-space point.
        point_b: Second world-space point.
        camera: The camera snapshot to project through.
        threshold: Maximum NDC distance (exclusive). The default is about 10 px
            on a 1920 px wide canvas; see `threshold_from_pixels`.

    Returns:
        True if the screen distance is below `threshold`.
    """
    return screen_distance(point_a, point_b, camera) < threshold


def ndc_to_pixels(
    ndc_x: float,
    ndc_y: float,
    canvas_width: float,
    canvas_height: float
) -> tuple[float, float]:
    """
    Convert NDC to canvas pixel coordinates.

    Pixel y grows downward, so NDC (-1, 1) maps to (0, 0) and NDC (1, -1)
    maps to (canvas_width, canvas_height).
    """
    width_half = canvas_width / 2
    height_half = canvas_height / 2
    return ndc_x * width_half + width_half, -(ndc_y * height_half) + height_half


def threshold_from_pixels(pixels: float, canvas_width: float) -> float:
    """NDC length corresponding to `pixels` on a canvas `canvas_width` px wide."""
    return 2.0 * pixels / canvas_width
