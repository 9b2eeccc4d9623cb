"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from dcgen.orchestrator import Orchestrator
from dcgen.service import create_app


@pytest.fixture
def client() -> TestClient:
    app = create_app(Orchestrator)
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_templates_endpoint(client: TestClient) -> None:
    response = client.get("/templates", params={"category": "backend"})
    assert response.status_code == 200
    data = response.json()
    assert "python" in [template["name"] for template in data["templates"]]
    assert all(template["category"] == "backend" for template in data["templates"])
    assert data["categories"] == ["backend", "frontend", "fullstack", "universal"]


def test_template_detail_endpoint(client: TestClient) -> None:
    response = client.get("/templates/rust")
    assert response.status_code == 200
    data = response.json()
    assert data["config"]["image"] == "mcr.microsoft.com/devcontainers/rust:1"
    assert data["config"]["forwardPorts"] == [8000]


def test_unknown_template_is_404(client: TestClient) -> None:
    response = client.get("/templates/nope")
    assert response.status_code == 404
    assert response.json() == {"detail": "Template 'nope' not found"}


def test_generate_endpoint(client: TestClient, workspace) -> None:
    response = client.post(
        "/generate",
        json={"prompt": "Python Django with Redis", "workspace": str(workspace.path())},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["template"] == "python"
    assert data["features"]["databases"] == ["redis"]
    assert data["dry_run"] is False
    assert workspace.read_document() == data["document"]


def test_generate_unknown_template_is_404(client: TestClient, workspace) -> None:
    response = client.post(
        "/generate",
        json={"prompt": "x", "workspace": str(workspace.path()), "template": "nope"},
    )
    assert response.status_code == 404


def test_modify_endpoint(client: TestClient, workspace, basic_document) -> None:
    workspace.write_document(basic_document)

    response = client.post(
        "/modify",
        json={"request": "expose port 9000", "workspace": str(workspace.path()), "dry_run": True},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["template"] == "modified"
    assert data["document"]["forwardPorts"] == [9000]
    assert workspace.read_document()["forwardPorts"] == []


def test_modify_without_document_is_404(client: TestClient, workspace) -> None:
    response = client.post("/modify", json={"request": "Add Redis", "workspace": str(workspace.path())})
    assert response.status_code == 404


def test_modify_malformed_document_is_422(client: TestClient, workspace) -> None:
    workspace.write({".devcontainer/devcontainer.json": "{"})

    response = client.post("/modify", json={"request": "Add Redis", "workspace": str(workspace.path())})
    assert response.status_code == 422


def test_status_endpoint(client: TestClient, workspace) -> None:
    response = client.get("/status", params={"workspace": str(workspace.path())})
    assert response.status_code == 200
    assert response.json()["config_exists"] is False


def test_templates_with_missing_seed_is_500(client: TestClient, workspace) -> None:
    workspace.write({".dcgen.yml": "catalog:\n  seed: missing.yml\n"})

    response = client.get("/templates", params={"workspace": str(workspace.path())})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Catalog seed file not found")
