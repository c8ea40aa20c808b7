"""Tests for API endpoints via FastAPI TestClient."""
import sys
import os
import json
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'webapp'))

from fastapi.testclient import TestClient

SAVANNA_TEXT = {"id": "a", "content": "acacia baobab zebra", "timestamp": 1850}
FOREST_TEXT = {"id": "b", "content": "the forest trees", "timestamp": 1900}


@pytest.fixture
def client(tmp_path, monkeypatch):
    # Must import after path setup
    from webapp import api
    monkeypatch.setattr(api, "MODEL_DIR", str(tmp_path))
    with TestClient(api.app) as test_client:
        yield test_client


class TestHealthEndpoint:
    def test_health_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["model_loaded"] is True
        assert "timestamp" in data


class TestLabelsEndpoint:
    def test_labels_returns_200(self, client):
        response = client.get("/labels")
        assert response.status_code == 200
        data = response.json()
        assert len(data["labels"]) == 7
        assert {"key", "name", "emoji", "color"} <= set(data["labels"][0])


class TestAnalyzeEndpoint:
    def test_keyword_analysis(self, client):
        response = client.post("/api/analyze", json={"texts": [SAVANNA_TEXT, FOREST_TEXT]})
        assert response.status_code == 200
        data = response.json()
        assert data["strategy"] == "keyword"
        assert [r["ecosystem_type"] for r in data["results"]] == ["savanna", "forest"]
        assert data["results"][0]["confidence_level"] == "high"
        assert data["results"][0]["display_name"] == "Savanna"
        assert data["temporal"] is None

    def test_temporal_and_comparison(self, client):
        response = client.post("/api/analyze", json={
            "texts": [SAVANNA_TEXT, FOREST_TEXT],
            "config": {"include_temporal_analysis": True, "include_comparative_analysis": True},
            "modern_text": "zebra and acacia on fenced ranches",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["temporal"]["total_analyses"] == 2
        assert len(data["comparison"]["matches"]) == 1
        assert len(data["comparison"]["discrepancies"]) == 1

    def test_comparison_without_modern_text(self, client):
        response = client.post("/api/analyze", json={
            "texts": [SAVANNA_TEXT],
            "config": {"include_comparative_analysis": True},
        })
        assert response.status_code == 400

    def test_trained_model_strategy(self, client):
        response = client.post("/api/analyze", json={
            "texts": [{"id": "f", "content": "dense forest with thick canopy", "timestamp": 1900}],
            "config": {"strategy": "trained_model"},
        })
        assert response.status_code == 200
        assert response.json()["results"][0]["strategy"] == "trained_model"

    def test_rejects_unknown_strategy(self, client):
        response = client.post("/api/analyze", json={
            "texts": [SAVANNA_TEXT], "config": {"strategy": "hybrid"},
        })
        assert response.status_code == 422

    def test_bad_record_is_skipped(self, client):
        response = client.post("/api/analyze", json={
            "texts": [SAVANNA_TEXT, {"content": "forest trees", "timestamp": 1900}, FOREST_TEXT],
        })
        assert response.status_code == 200
        data = response.json()
        assert [r["ecosystem_type"] for r in data["results"]] == ["savanna", "forest"]
        assert len(data["skipped"]) == 1
        assert data["skipped"][0]["index"] == 1
        assert "without id" in data["skipped"][0]["error"]


class TestAnalyzeFileEndpoint:
    def test_text_upload(self, client):
        response = client.post(
            "/api/analyze-file",
            files={"file": ("journal.txt", b"Thorn scrub and bush everywhere", "text/plain")},
            params={"timestamp": 1880},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["result"]["ecosystem_type"] == "thorn_scrub"
        assert data["result"]["text_id"] == "journal"

    def test_invalid_pdf(self, client):
        response = client.post(
            "/api/analyze-file",
            files={"file": ("broken.pdf", b"not a pdf", "application/pdf")},
        )
        assert response.status_code == 400

    def test_unknown_strategy(self, client):
        response = client.post(
            "/api/analyze-file",
            files={"file": ("a.txt", b"grass", "text/plain")},
            params={"strategy": "hybrid"},
        )
        assert response.status_code == 400


class TestCompareEndpoint:
    def _historical(self):
        return json.dumps([{
            "text_id": "a", "ecosystem_type": "savanna", "confidence": 1.0,
            "extracted_features": ["acacia"], "timestamp": 1850,
            "description": "acacia baobab zebra", "strategy": "keyword",
        }])

    def test_compare(self, client):
        response = client.post(
            "/api/compare",
            data={"historical": self._historical()},
            files={"file": ("modern.txt", b"acacia and zebra", "text/plain")},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["matches"][0]["confidence"] == pytest.approx(2 / 3)

    def test_rejects_non_utf8(self, client):
        response = client.post(
            "/api/compare",
            data={"historical": self._historical()},
            files={"file": ("modern.txt", b"\xff\xfe\xfa", "text/plain")},
        )
        assert response.status_code == 400

    def test_rejects_bad_historical_json(self, client):
        response = client.post(
            "/api/compare",
            data={"historical": "[{\"text_id\": 1}]"},
            files={"file": ("modern.txt", b"acacia", "text/plain")},
        )
        assert response.status_code == 400

    def test_rejects_oversized_file(self, client, monkeypatch):
        monkeypatch.setattr("webapp.api.MAX_UPLOAD_SIZE", 10)
        response = client.post(
            "/api/compare",
            data={"historical": self._historical()},
            files={"file": ("modern.txt", b"x" * 11, "text/plain")},
        )
        assert response.status_code == 413


class TestRecommendEndpoint:
    def test_empty(self, client):
        response = client.post("/api/recommend", json={"results": []})
        assert response.status_code == 200
        assert response.json()["recommendation"] == "No analysis data available for recommendation."


class TestParseEndpoint:
    def test_parse(self, client):
        response = client.post("/api/parse", json={
            "id": "p", "content": "Old accounts tell of acacia and giraffe", "timestamp": 1700,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["indicators"] == ["acacia", "giraffe"]
        assert data["ecosystem_type"] == "savanna"
        assert data["temporal_context"] == "historical"
