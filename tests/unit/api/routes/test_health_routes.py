"""Unit tests for the health check routes."""

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from localmemory import __version__
from localmemory.api.server import create_app


def test_liveness_returns_healthy(settings):
    client = TestClient(create_app(settings))
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": __version__,
        "checks": None,
    }


def test_readiness_after_startup_creates_directories(settings):
    with TestClient(create_app(settings)) as client:
        response = client.get("/health/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"] == {"data_dir": "ok", "files_dir": "ok"}
    assert settings.data_dir.is_dir()
    assert settings.files_dir.is_dir()


def test_readiness_fails_without_directories(settings):
    client = TestClient(create_app(settings))
    response = client.get("/health/ready")
    assert response.status_code == 503
    body = response.json()
    assert body["code"] == "not_ready"
    assert body["details"]["data_dir"] == "missing"
