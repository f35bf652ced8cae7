"""Camera matrix builders and projection doubles shared by the tests."""
from __future__ import annotations

import math

import numpy as np

from isoalign import ScreenPoint, WorldPoint


def look_at(eye, target, up=(0.0, 1.0, 0.0)) -> np.ndarray:
    """World-to-view matrix; view space looks down -z with +y up."""
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    n = eye - target
    n = n / np.linalg.norm(n)
    u = np.cross(up, n)
    u = u / np.linalg.norm(u)
    v = np.cross(n, u)

    out = np.eye(4, dtype=np.float64)
    out[0, 0:3] = u
    out[1, 0:3] = v
    out[2, 0:3] = n
    out[0, 3] = -float(np.dot(u, eye))
    out[1, 3] = -float(np.dot(v, eye))
    out[2, 3] = -float(np.dot(n, eye))
    return out


def orthographic(left, right, top, bottom, near, far) -> np.ndarray:
    out = np.eye(4, dtype=np.float64)
    out[0, 0] = 2.0 / (right - left)
    out[1, 1] = 2.0 / (top - bottom)
    out[2, 2] = -2.0 / (far - near)
    out[0, 3] = -(right + left) / (right - left)
    out[1, 3] = -(top + bottom) / (top - bottom)
    out[2, 3] = -(far + near) / (far - near)
    return out


def perspective(fov_deg, aspect, near, far) -> np.ndarray:
    f = 1.0 / math.tan(math.radians(fov_deg) / 2)
    out = np.zeros((4, 4), dtype=np.float64)
    out[0, 0] = f / aspect
    out[1, 1] = f
    out[2, 2] = (far + near) / (near - far)
    out[2, 3] = 2.0 * far * near / (near - far)
    out[3, 2] = -1.0
    return out


class CurveCamera:
    """
    Camera double with a non-linear, monotonic screen-y response.

    screen_y = sign * (y / 20) ** 3, so between y = 0 and y = 20 the visual
    midpoint sits at y = 20 * 0.5 ** (1 / 3).
    """

    def __init__(self, sign: float = 1.0) -> None:
        self.sign = sign
        self.calls = 0

    def project(self, point: WorldPoint) -> ScreenPoint:
        self.calls += 1
        return ScreenPoint(point.x / 50, self.sign * (point.y / 20) ** 3, point.z / 50)


class SideCurveCamera:
    """Same response as CurveCamera, but along world x / screen x."""

    def project(self, point: WorldPoint) -> ScreenPoint:
        return ScreenPoint((point.x / 20) ** 3, point.y / 50, point.z / 50)


class WavyCamera:
    """Screen y oscillates with world y: violates the monotonic precondition."""

    def project(self, point: WorldPoint) -> ScreenPoint:
        return ScreenPoint(point.x / 50, math.sin(point.y / 3), 0.0)


class ExplodingCamera:
    def project(self, point: WorldPoint) -> ScreenPoint:
        raise AssertionError("camera should not be used")


CURVE_MIDPOINT_Y = 20 * 0.5 ** (1 / 3)
