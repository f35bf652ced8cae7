import pytest

from isoalign import MatrixCamera

from helpers import CurveCamera, look_at, orthographic, perspective

ASPECT = 1920 / 1080
FRUSTUM_SIZE = 50.0


@pytest.fixture
def iso_camera() -> MatrixCamera:
    """Orthographic camera at (20, 20, 20) looking at the origin."""
    half_w = FRUSTUM_SIZE * ASPECT / 2
    half_h = FRUSTUM_SIZE / 2
    return MatrixCamera.from_view_projection(
        view=look_at((20, 20, 20), (0, 0, 0)),
        projection=orthographic(-half_w, half_w, half_h, -half_h, 0.1, 1000.0),
    )


@pytest.fixture
def perspective_camera() -> MatrixCamera:
    """Perspective camera at (20, 20, 20) looking at the origin."""
    return MatrixCamera.from_view_projection(
        view=look_at((20, 20, 20), (0, 0, 0)),
        projection=perspective(45.0, ASPECT, 0.1, 1000.0),
    )


@pytest.fixture
def curve_camera() -> CurveCamera:
    return CurveCamera()
