"""
Tests for the REST API endpoints
"""

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.config import APIConfig, get_audit_config
from content_audit.config import AuditConfig


@pytest.fixture
def client(content_tree):
    app.dependency_overrides[get_audit_config] = lambda: AuditConfig(data_root=str(content_tree))
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestInfoEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Velo-Altitude Content API"

    def test_health(self, client):
        data = client.get("/api/v1/health").json()
        assert data["status"] == "ok"
        assert data["content_types"] == ["cols", "training", "recipes", "plans"]

    def test_version(self, client):
        assert client.get("/api/v1/version").json() == {"version": "1.0.0"}


class TestAuditEndpoint:
    def test_audit(self, client):
        response = client.get("/api/v1/audit")
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["summary"] == {"records": 8, "errors": 6, "warnings": 3, "infos": 0}
        assert data["references"]["invalid_col_references"][0]["invalid_refs"] == ["mont-ventoux"]

    def test_audit_reads_environment(self, content_tree, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VELO_CONTENT_DATA_ROOT", str(content_tree))
        data = TestClient(app).get("/api/v1/audit").json()
        assert data["data_root"] == str(content_tree)

    def test_configuration_error(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VELO_CONTENT_SIMILARITY_THRESHOLD", "7")
        response = TestClient(app).get("/api/v1/audit")
        assert response.status_code == 500
        assert "Configuration error" in response.json()["detail"]


class TestColsEndpoints:
    def test_list(self, client):
        data = client.get("/api/v1/cols").json()
        assert data["total"] == 4
        assert data["count"] == 4
        galibier = next(c for c in data["cols"] if c["slug"] == "col-du-galibier")
        assert galibier["altitude"] == 2642
        assert galibier["country"] == "France"

    def test_filters(self, client):
        data = client.get("/api/v1/cols", params={"region": "Alpes", "min_altitude": 2000}).json()
        assert [c["slug"] for c in data["cols"]] == ["col-du-galibier"]
        assert data["total"] == 4

    def test_search(self, client):
        data = client.get("/api/v1/cols", params={"q": "tourmalet"}).json()
        assert data["count"] == 2

    def test_get_col(self, client):
        response = client.get("/api/v1/cols/alpe-d-huez")
        assert response.status_code == 200
        assert response.json()["name"] == "L'Alpe d'Huez"

    def test_unknown_col(self, client):
        response = client.get("/api/v1/cols/mont-ventoux")
        assert response.status_code == 404
        assert response.json()["detail"] == "Col not found: mont-ventoux"


class TestAPIConfig:
    def test_environment(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "9000")
        monkeypatch.setenv("API_CORS_ORIGINS", "https://a.example,https://b.example")
        monkeypatch.setenv("API_DEBUG", "true")
        config = APIConfig.load()
        assert config.port == 9000
        assert config.cors_origins == ["https://a.example", "https://b.example"]
        assert config.debug


class TestOddValues:
    @pytest.fixture
    def odd_client(self, content_tree, record_writer):
        record_writer(
            content_tree / "cols" / "enriched", "col-nan.json",
            '{"name": "Col NaN", "slug": "col-nan", "difficulty": NaN, "altitude": Infinity,'
            ' "gradient": {"max": NaN}}',
        )
        app.dependency_overrides[get_audit_config] = lambda: AuditConfig(data_root=str(content_tree))
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_list_with_non_finite_values(self, odd_client):
        response = odd_client.get("/api/v1/cols", params={"q": "nan"})
        assert response.status_code == 200
        col = response.json()["cols"][0]
        assert col["altitude"] is None
        assert col["difficulty"] is None

    def test_detail_with_non_finite_values(self, odd_client):
        response = odd_client.get("/api/v1/cols/col-nan")
        assert response.status_code == 200
        assert response.json()["gradient"] == {"max": None}

    def test_audit_with_non_finite_values(self, odd_client):
        response = odd_client.get("/api/v1/audit")
        assert response.status_code == 200
        assert response.json()["summary"]["records"] == 9
