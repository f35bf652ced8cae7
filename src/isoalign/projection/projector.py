"""
World-to-Screen Projection
==========================
Maps world-space points through a camera transform into normalized device
coordinates (NDC).

The camera is a read-only snapshot: callers resolve their scene-graph camera
(view matrix, projection matrix) before calling in, and nothing here mutates
it or refreshes it.

Classes:
    CameraTransform: Structural protocol for anything that can project points.
    MatrixCamera: CameraTransform backed by a resolved 4x4 view-projection matrix.
"""
from __future__ import annotations

from typing import Protocol, Sequence, Union, runtime_checkable, TYPE_CHECKING

import numpy as np

from isoalign.model.geometry_primitives import ScreenPoint, WorldPoint

if TYPE_CHECKING:
    import numpy.typing as npt


@runtime_checkable
class CameraTransform(Protocol):
    """
    Anything exposing a pure `project(point) -> ScreenPoint`.

    Implementations must be deterministic and side-effect free for the
    duration of a solver call.
    """

    def project(self, point: WorldPoint) -> ScreenPoint:
        ...


class MatrixCamera:
    """
    Camera snapshot defined by a combined view-projection matrix.

    The matrix maps homogeneous world coordinates to clip space, i.e. it is
    `projection @ view` for a column-vector convention. Projection applies the
    perspective divide, so both orthographic (w == 1) and perspective matrices
    are supported. Points outside the frustum are not clipped.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Union[Sequence[Sequence[float]], npt.NDArray[np.float64]]) -> None:
        """
        Args:
            matrix: 4x4 view-projection matrix. It is copied and frozen.

        Raises:
            ValueError: If `matrix` is not 4x4.
        """
        mtx = np.array(matrix, dtype=np.float64)
        if mtx.shape != (4, 4):
            raise ValueError(f"View-projection matrix must be 4x4, got shape {mtx.shape}.")
        mtx.flags.writeable = False
        self._matrix = mtx

    @classmethod
    def from_view_projection(
        cls,
        view: npt.NDArray[np.float64],
        projection: npt.NDArray[np.float64],
    ) -> MatrixCamera:
        """Combine separately resolved view and projection matrices."""
        return cls(np.asarray(projection, dtype=np.float64) @ np.asarray(view, dtype=np.float64))

    @property
    def matrix(self) -> npt.NDArray[np.float64]:
        """Read-only view-projection matrix."""
        return self._matrix

    def project(self, point: WorldPoint) -> ScreenPoint:
        clip = self._matrix @ np.array([point.x, point.y, point.z, 1.0], dtype=np.float64)
        ndc = clip[:3] / clip[3]
        return ScreenPoint(float(ndc[0]), float(ndc[1]), float(ndc[2]))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(matrix={self._matrix.tolist()})"


def project(point: WorldPoint, camera: CameraTransform) -> ScreenPoint:
    """
    Project a world-space point to NDC.

    Args:
        point: The point in world coordinates.
        camera: The camera snapshot to project through.

    Returns:
        ScreenPoint where x, y are NDC (within [-1, 1] when on screen) and
        depth is the projected depth.
    """
    return camera.project(point)
