"""HTTP round trips through the FastAPI app."""
import pytest
from fastapi.testclient import TestClient

from wallgeom.api.main import create_app
from wallgeom.models import GeometryError

A = {"id": "A", "start": {"x": 0, "y": 0}, "end": {"x": 4, "y": 0}}
B = {"id": "B", "start": {"x": 2, "y": -1}, "end": {"x": 2, "y": 1}}


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_rules(client):
    r = client.get("/api/rules")
    assert r.status_code == 200
    assert {rule["id"] for rule in r.json()} == {
        "face.side_segmentation", "face.penetration_holes", "face.plain",
    }


def test_faces(client):
    r = client.post("/api/faces", json={"walls": [A, B]})
    assert r.status_code == 200
    body = r.json()
    assert body["wall_count"] == 2
    assert body["faces"]["stats"]["faces"] == 12
    fronts = [
        f for f in body["faces"]["faces"]
        if f["wall_index"] == 0 and f["face_type"] == "front"
    ]
    assert len(fronts[0]["regions"]) == 2


def test_faces_config_limits_face_types(client):
    r = client.post("/api/faces", json={"walls": [A, B], "config": {"faces": ["top"]}})
    assert r.status_code == 200
    assert r.json()["faces"]["stats"]["faces"] == 2


def test_solids(client):
    r = client.post("/api/solids", json={"walls": [A, B]})
    assert r.status_code == 200
    body = r.json()
    assert body["approximated"] == 2
    assert len(body["solids"]) == 2


def test_outlines(client):
    tri = [{"x": 0, "y": 0, "z": 0}, {"x": 1, "y": 0, "z": 0}, {"x": 1, "y": 1, "z": 0}]
    tri2 = [{"x": 0, "y": 0, "z": 0}, {"x": 1, "y": 1, "z": 0}, {"x": 0, "y": 1, "z": 0}]
    r = client.post("/api/outlines", json={"triangles": [tri, tri2]})
    assert r.status_code == 200
    body = r.json()
    assert body["approximated"] == 0
    assert body["groups"][0]["outline"]["kind"] == "closed"
    assert len(body["groups"][0]["outline"]["loop"]) == 4


def test_plan_outline(client):
    r = client.post("/api/plan-outline", json={"walls": [A, B]})
    assert r.status_code == 200
    assert len(r.json()["points"]) == 8


def test_invalid_wall_rejected(client):
    bad = dict(A, thickness=-1)
    r = client.post("/api/faces", json={"walls": [bad]})
    assert r.status_code == 422


def test_geometry_error_maps_to_422(app):
    @app.get("/boom")
    async def boom():
        raise GeometryError("clip polygon needs at least 3 points, got 2")

    r = TestClient(app).get("/boom")
    assert r.status_code == 422
    assert "at least 3 points" in r.json()["detail"]
