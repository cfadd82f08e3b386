from fastapi.testclient import TestClient

from dungeonlayout.config import LayoutConfig
from dungeonlayout.web.app import create_app


def client(seed=5):
    return TestClient(create_app(LayoutConfig(seed=seed)))


def test_layout_endpoint():
    response = client().get("/api/layout")
    assert response.status_code == 200
    data = response.json()
    assert data["size"] == 20
    assert data["seed"] == 5
    assert len(data["tiles"]) == 20


def test_layout_is_cached_until_seed_changes():
    c = client()
    first = c.get("/api/layout").json()
    assert c.get("/api/layout").json() == first
    other = c.get("/api/layout", params={"seed": 6}).json()
    assert other["seed"] == 6
    assert c.get("/api/layout").json() == other


def test_text_endpoint():
    response = client().get("/api/layout.txt")
    assert response.status_code == 200
    assert len(response.text.splitlines()) == 20


def test_render_and_stats_endpoints():
    c = client()
    stats = c.get("/api/stats").json()
    render = c.get("/api/render").json()
    assert len(render) == stats["room_cells"]
    assert all(item["bundle"] == "dungeonrooms" for item in render)


def test_tile_endpoint():
    c = client()
    assert c.get("/api/tile/0/0").json()["category"] in {"empty", "room"}
    assert c.get("/api/tile/20/0").status_code == 404


def test_index_page():
    response = client().get("/")
    assert response.status_code == 200
    assert "<pre>" in response.text
