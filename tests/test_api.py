import pytest
from src.api.main import app, service
from src.graph.edges import LANE_COLORS, lane_color
from httpx import ASGITransport, AsyncClient

import pytest_asyncio

# Fixture for async client
@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def merge_history():
    return {
        "commits": [
            {"id": "m", "parent_ids": ["p0", "p1"]},
            {"id": "p0", "parent_ids": []},
            {"id": "p1"},
        ]
    }

@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

@pytest.mark.asyncio
async def test_layout(client, merge_history):
    response = await client.post("/api/layout", json=merge_history)
    assert response.status_code == 200
    data = response.json()

    assert [n["commit_id"] for n in data["nodes"]] == ["m", "p0", "p1"]
    assert [n["lane"] for n in data["nodes"]] == [0, 0, 1]
    assert data["nodes"][2]["x"] == 20
    assert data["nodes"][2]["y"] == 64
    assert data["nodes"][0]["parent_ids"] == ["p0", "p1"]
    assert data["max_lane"] == 1
    assert data["width"] == 63
    assert data["height"] == 96

    edges = data["edges"]
    assert len(edges) == 2
    assert edges[1]["start"] == {"x": 0, "y": 0}
    assert edges[1]["end"] == {"x": 20, "y": 64}
    assert edges[1]["color"] == lane_color(1)

@pytest.mark.asyncio
async def test_layout_empty(client):
    response = await client.post("/api/layout", json={"commits": []})
    assert response.status_code == 200
    data = response.json()
    assert data["nodes"] == []
    assert data["edges"] == []
    assert data["max_lane"] == 0

@pytest.mark.asyncio
async def test_layout_limit_lays_out_prefix(client, merge_history):
    response = await client.post("/api/layout", params={"limit": 1}, json=merge_history)
    assert response.status_code == 200
    data = response.json()
    assert len(data["nodes"]) == 1
    assert data["edges"] == []
    # p1 still got a lane reserved even though its row was cut off
    assert data["max_lane"] == 1

@pytest.mark.asyncio
async def test_layout_rejects_bad_limit(client, merge_history):
    response = await client.post("/api/layout", params={"limit": 0}, json=merge_history)
    assert response.status_code == 422

@pytest.mark.asyncio
async def test_layout_rejects_malformed_body(client):
    response = await client.post("/api/layout", json={"commits": [{"parent_ids": []}]})
    assert response.status_code == 422

@pytest.mark.asyncio
async def test_layout_rejects_oversized_request(client, merge_history, monkeypatch):
    monkeypatch.setattr(service, "max_commits", 2)
    response = await client.post("/api/layout", json=merge_history)
    assert response.status_code == 413

    # A limit within bounds is accepted
    response = await client.post("/api/layout", params={"limit": 2}, json=merge_history)
    assert response.status_code == 200

@pytest.mark.asyncio
async def test_constants(client):
    response = await client.get("/api/layout/constants")
    assert response.status_code == 200
    data = response.json()
    assert data["lane_width"] == 20
    assert data["row_height"] == 32
    assert data["colors"] == list(LANE_COLORS)
    assert data["render_batch"] == 300
