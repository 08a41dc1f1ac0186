import pytest
from fastapi.testclient import TestClient

from linkgraph.api.main import app
from linkgraph.services.config import GraphConfig
from linkgraph.services.session import GraphSession, get_graph_session

DOCUMENTS = [
    {"id": "project.md", "title": "Project", "content": "Plan for [[Implementation]]."},
    {"id": "impl.md", "title": "Implementation", "content": "Part of [[Project|the project]]."},
    {"id": "notes.md", "title": "Notes", "content": "no links here", "is_pinned": True},
]


@pytest.fixture
def session() -> GraphSession:
    return GraphSession(config=GraphConfig(autostart=False, tick_interval_ms=1))


@pytest.fixture
def client(session: GraphSession):
    app.dependency_overrides[get_graph_session] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides = {}


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_graph_starts_empty(client: TestClient) -> None:
    response = client.get("/api/graph")

    assert response.status_code == 200
    data = response.json()
    assert data["nodes"] == []
    assert data["edges"] == []
    assert data["running"] is False
    assert data["stats"]["zoom_percent"] == 100


def test_replace_documents_builds_graph(client: TestClient) -> None:
    response = client.put("/api/graph/documents", json=DOCUMENTS)

    assert response.status_code == 200
    data = response.json()
    assert [node["id"] for node in data["nodes"]] == ["project.md", "impl.md"]
    assert data["nodes"][0]["neighbor_count"] == 2
    assert data["stats"] == {
        "node_count": 2,
        "edge_count": 1,
        "zoom_percent": 100,
        "tick_count": 0,
    }


def test_simulation_controls(client: TestClient) -> None:
    client.put("/api/graph/documents", json=DOCUMENTS)

    resumed = client.post("/api/graph/simulation/resume")
    assert resumed.status_code == 200
    assert resumed.json()["running"] is True

    paused = client.post("/api/graph/simulation/pause")
    assert paused.json()["running"] is False

    toggled = client.post("/api/graph/simulation/toggle").json()
    assert toggled["running"] is True
    assert toggled["node_count"] == 2

    client.post("/api/graph/simulation/pause")


def test_viewport_zoom_pan_and_reset(client: TestClient) -> None:
    for _ in range(20):
        response = client.post("/api/viewport/zoom-in")
    assert response.json()["scale"] == 3.0

    panned = client.post("/api/viewport/pan", json={"x": 12, "y": -3})
    assert panned.json()["offset"] == {"x": 12.0, "y": -3.0}

    reset = client.post("/api/viewport/reset")
    assert reset.json() == {"scale": 1.0, "offset": {"x": 0.0, "y": 0.0}}
    assert client.get("/api/viewport").json()["scale"] == 1.0


def test_select_returns_node_and_highlighted_edges(client: TestClient) -> None:
    snapshot = client.put("/api/graph/documents", json=DOCUMENTS).json()
    position = snapshot["nodes"][1]["position"]

    hit = client.post("/api/viewport/select", json=position)
    miss = client.post("/api/viewport/select", json={"x": 0, "y": 0})

    assert hit.status_code == 200
    assert hit.json()["node_id"] == "impl.md"
    assert hit.json()["highlighted_edges"] == [
        {"source_id": "project.md", "target_id": "impl.md"}
    ]
    assert miss.json() == {"node_id": None, "highlighted_edges": []}


def test_reload_without_source_is_conflict(client: TestClient) -> None:
    response = client.post("/api/graph/reload")

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "no_document_source"
    assert "LINKGRAPH_DOCUMENTS_PATH" in body["message"]
    assert body["detail"] is None


def test_invalid_documents_payload_uses_error_envelope(client: TestClient) -> None:
    response = client.put("/api/graph/documents", json=[{"title": "No id"}])

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "invalid_documents"
    assert body["detail"]["errors"][0]["loc"] == ["body", 0, "id"]


def test_rebuild_is_logged(client: TestClient) -> None:
    client.put("/api/graph/documents", json=DOCUMENTS)

    logs = client.get("/api/system/logs").json()

    rebuilt = [entry for entry in logs if entry["message"] == "Graph rebuilt"]
    assert rebuilt
    assert rebuilt[-1]["extra"]["nodes"] == 2


def test_invalid_point_uses_viewport_error_code(client: TestClient) -> None:
    response = client.post("/api/viewport/pan", json={"x": "left", "y": 0})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "invalid_point"
    assert body["detail"]["errors"][0]["loc"] == ["body", "x"]


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/api/nodes")

    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "message": "Not Found", "detail": None}
