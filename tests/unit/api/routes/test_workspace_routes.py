"""Unit tests for project, connection, settings and waitlist routes."""

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from localmemory.api.server import create_app


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


def test_projects_lists_default_project(client):
    body = client.get("/v3/projects").json()
    assert len(body["projects"]) == 1
    project = body["projects"][0]
    assert project["id"] == "default"
    assert project["containerTag"] == "default"
    assert project["isExperimental"] is False
    assert project["documentCount"] == 0


def test_connections_are_empty(client):
    assert client.get("/v3/connections").json() == []


def test_settings_are_empty(client):
    assert client.get("/v3/settings").json() == {"settings": {}}


def test_waitlist_grants_access(client):
    body = client.get("/v3/waitlist/status").json()
    assert body["inWaitlist"] is False
    assert body["accessGranted"] is True
    assert "createdAt" in body


def test_cors_allows_local_frontend(client):
    response = client.options(
        "/v3/projects",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"
