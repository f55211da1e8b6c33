"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from authorcheck.checklist import CHECKLIST_ITEMS
from authorcheck.detector import ComponentDetector
from authorcheck.github.content import ContentFetcher
from authorcheck.service import create_app


@pytest.fixture
def client(settings, contents, transport_factory) -> TestClient:
    transport = transport_factory(
        {
            "src/Avatar.tsx": contents("function Avatar() { return <img/>; }\n"),
            "src/util.js": contents("function add(a, b) { return a + b; }\n"),
        }
    )
    app = create_app(lambda: ComponentDetector(ContentFetcher(settings, transport=transport)))
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_checklist_endpoint(client: TestClient) -> None:
    response = client.get("/checklist")
    assert response.status_code == 200
    assert response.json() == {"items": list(CHECKLIST_ITEMS)}


def test_detect_endpoint_returns_checklist_on_match(client: TestClient) -> None:
    response = client.post(
        "/detect",
        json={
            "head_ref": "feature/avatar",
            "files": [
                {"filename": "src/util.js", "status": "added"},
                {"filename": "src/Avatar.tsx", "status": "added"},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["matched"] is True
    assert data["matched_file"] == "src/Avatar.tsx"
    assert data["checklist"] == list(CHECKLIST_ITEMS)


def test_detect_endpoint_without_match(client: TestClient) -> None:
    response = client.post(
        "/detect",
        json={"head_ref": "main", "files": [{"filename": "src/util.js", "status": "added"}]},
    )

    assert response.status_code == 200
    assert response.json() == {"matched": False, "matched_file": None, "checklist": []}


def test_detect_endpoint_requires_head_ref(client: TestClient) -> None:
    response = client.post("/detect", json={"files": [{"filename": "src/Avatar.tsx", "status": "added"}]})

    assert response.status_code == 400
    assert "head ref" in response.json()["detail"]


def test_default_app_loads_settings_once(monkeypatch, settings) -> None:
    calls = []

    def fake_load_settings():
        calls.append(1)
        return settings

    monkeypatch.setattr("authorcheck.service.app.load_settings", fake_load_settings)
    client = TestClient(create_app())
    payload = {"head_ref": "main", "files": [{"filename": "a.py", "status": "added"}]}

    first = client.post("/detect", json=payload)
    second = client.post("/detect", json=payload)

    assert first.json()["matched"] is False
    assert second.json()["matched"] is False
    assert len(calls) == 1
