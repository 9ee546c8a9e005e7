"""Shared test fixtures: a small plan with one wall crossing another."""
import pytest

from wallgeom.models import Wall, Point2D, Tolerances, EngineConfig
from wallgeom.services.face_service import FaceService


def wall(x0, y0, x1, y1, thickness=0.2, height=3.0, wall_id=""):
    return Wall(
        id=wall_id,
        start=Point2D(x=x0, y=y0),
        end=Point2D(x=x1, y=y1),
        thickness=thickness,
        height=height,
    )


@pytest.fixture
def make_wall():
    """Factory: make_wall(x0, y0, x1, y1, thickness=0.2, height=3.0, wall_id="")."""
    return wall


@pytest.fixture
def wall_a():
    """4 m wall along +x through the origin."""
    return wall(0, 0, 4, 0, wall_id="A")


@pytest.fixture
def wall_b():
    """2 m wall along +y crossing wall A at x = 2, same height."""
    return wall(2, -1, 2, 1, wall_id="B")


@pytest.fixture
def wall_b_short():
    """Wall B, only 2 m tall."""
    return wall(2, -1, 2, 1, height=2.0, wall_id="B")


@pytest.fixture
def crossing(wall_a, wall_b):
    return [wall_a, wall_b]


@pytest.fixture
def tolerances():
    return Tolerances()


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def service():
    return FaceService()
