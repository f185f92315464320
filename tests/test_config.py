import json

import pytest
from fastapi.testclient import TestClient

from showcase.catalog.store import SEED_PROJECTS
from showcase.config import Settings
from showcase.main import create_app


def test_defaults(monkeypatch):
    for name in ("PROJECT_NAME", "LOG_FILE", "CATALOG_FILE", "METRICS_SEED", "PORT", "HOST"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.project_name == "Project Showcase API"
    assert settings.catalog_file is None
    assert settings.metrics_seed is None
    assert settings.port == 4000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("METRICS_SEED", "7")
    monkeypatch.setenv("CATALOG_FILE", "/tmp/projects.json")
    settings = Settings()
    assert settings.port == 8080
    assert settings.metrics_seed == 7
    assert settings.catalog_file == "/tmp/projects.json"


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValueError):
        Settings()


def test_app_uses_catalog_file_and_seed(monkeypatch, tmp_path):
    path = tmp_path / "projects.json"
    path.write_text(json.dumps(SEED_PROJECTS[1:]), encoding="utf-8")
    monkeypatch.setenv("CATALOG_FILE", str(path))
    monkeypatch.setenv("METRICS_SEED", "3")

    def metrics():
        with TestClient(create_app(settings=Settings())) as c:
            assert c.get("/api/v1/projects").json()["meta"]["total"] == 2
            return c.get("/api/v1/metrics").json()["data"]

    first = metrics()
    assert first["total_projects"] == 2
    assert metrics() == first
