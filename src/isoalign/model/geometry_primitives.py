"""
Geometric Primitives for Screen-Space Alignment.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class Axis(IntEnum):
    """World-space axis selector."""
    X = 0
    Y = 1
    Z = 2


class ScreenAxis(IntEnum):
    """Screen-plane axis selector (NDC)."""
    X = 0
    Y = 1


_AXIS_NAMES = ("x", "y", "z")


@dataclass(frozen=True)
class WorldPoint:
    """A position in world space (unitless)."""
    x: float
    y: float
    z: float

    def __sub__(self, other: WorldPoint) -> WorldPoint:
        return WorldPoint(self.x - other.x, self.y - other.y, self.z - other.z)

    def component(self, axis: Union[Axis, int]) -> float:
        """Coordinate on the given world axis."""
        return getattr(self, _AXIS_NAMES[Axis(axis)])

    def with_component(self, axis: Union[Axis, int], value: float) -> WorldPoint:
        """Returns a copy with a single coordinate replaced."""
        return replace(self, **{_AXIS_NAMES[Axis(axis)]: value})

    def midpoint(self, other: WorldPoint) -> WorldPoint:
        """
        Per-axis arithmetic mean of two points (the geometric midpoint).

        Written as (a + b) / 2 on each axis so that the result does not depend
        on argument order.
        """
        return WorldPoint(
            (self.x + other.x) / 2,
            (self.y + other.y) / 2,
            (self.z + other.z) / 2,
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> WorldPoint:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)


@dataclass(frozen=True)
class ScreenPoint:
    """
    A projected point in normalized device coordinates.

    `x` and `y` lie in [-1, 1] for points inside the view volume. `depth` is
    carried along for completeness but is never used for screen distances.
    """
    x: float
    y: float
    depth: float = 0.0

    def component(self, axis: Union[ScreenAxis, int]) -> float:
        """Coordinate on the given screen axis."""
        return self.x if ScreenAxis(axis) == ScreenAxis.X else self.y

    def planar_distance_to(self, other: ScreenPoint) -> float:
        """Euclidean distance on the screen plane, ignoring depth."""
        dx = other.x - self.x
        dy = other.y - self.y
        return float(np.sqrt(dx * dx + dy * dy))
