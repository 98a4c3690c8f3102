"""Tests for the documents and config CLI commands."""

import asyncio
import json

import pytest
from typer.testing import CliRunner

from localmemory.api.cli.main import app
from localmemory.application.infrastructure_builder import InfrastructureBuilder

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path, settings, monkeypatch):
    for name in ("LOCALMEMORY_CONFIG", "LOCALMEMORY_MEMORY_DIR", "LOGLEVEL"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "server.yaml"
    path.write_text(f"memory_dir: {settings.memory_dir}\n")
    return str(path)


@pytest.fixture
def service(settings):
    return InfrastructureBuilder(settings).build_document_service()


def test_list_shows_documents(config_file, service):
    asyncio.run(service.create("hello world", container_tags=["x"]))
    result = runner.invoke(app, ["--config", config_file, "documents", "list"])
    assert result.exit_code == 0
    assert "Page 1/1 (1 documents)" in result.output


def test_list_rejects_invalid_page(config_file):
    result = runner.invoke(
        app, ["--config", config_file, "documents", "list", "--page", "0"]
    )
    assert result.exit_code == 1


def test_show_prints_json(config_file, service):
    doc = asyncio.run(service.create("http://example.com"))
    result = runner.invoke(app, ["--config", config_file, "documents", "show", doc.id])
    assert result.exit_code == 0
    assert json.loads(result.output)["type"] == "link"


def test_show_missing_exits_with_error(config_file):
    result = runner.invoke(app, ["--config", config_file, "documents", "show", "nope"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_delete_removes_document(config_file, service, settings):
    doc = asyncio.run(service.create("bye"))
    result = runner.invoke(app, ["--config", config_file, "documents", "delete", doc.id])
    assert result.exit_code == 0
    assert not (settings.data_dir / f"{doc.id}.json").exists()

    again = runner.invoke(app, ["--config", config_file, "documents", "delete", doc.id])
    assert again.exit_code == 1


def test_config_show(config_file, settings):
    result = runner.invoke(app, ["--config", config_file, "config", "show"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["memory_dir"] == str(settings.memory_dir)
    assert data["data_dir"] == str(settings.data_dir)


def test_config_show_missing_file(tmp_path):
    result = runner.invoke(
        app, ["--config", str(tmp_path / "missing.yaml"), "config", "show"]
    )
    assert result.exit_code == 1
