"""
Tests for the FastAPI surface, with a stubbed orchestrator behind it.

Usage:
    pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from brandsnap.errors import AggregateFailure, AnalysisError, ConfigurationError
from brandsnap.models import BrandSummary, Dimensions, GeneratedAsset, GenerationResult, Platform
from server.app import FALLBACK_ERROR, create_app

from conftest import make_brand


class StubOrchestrator:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.requests = []

    def run(self, request, on_progress=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


def ok_result() -> GenerationResult:
    return GenerationResult(
        success=True,
        assets=[GeneratedAsset(
            platform=Platform.TWITTER,
            dimensions=Dimensions(width=1500, height=500),
            base64="data:image/png;base64,AAAA",
        )],
        brand_analysis=BrandSummary.from_brand(make_brand()),
    )


@pytest.fixture
def stub():
    return StubOrchestrator(result=ok_result())


@pytest.fixture
def client(stub):
    return TestClient(create_app(orchestrator=stub))


class TestInfoEndpoints:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "ok"
        assert body["service"] == "brandsnap-api"
        assert "timestamp" in body

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestGenerateValidation:

    def test_missing_input(self, client, stub):
        response = client.post("/api/generate", json={"platforms": ["twitter"]})
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "URL, description, or brandAnalysis required",
        }
        assert stub.requests == []

    def test_missing_platforms(self, client):
        response = client.post("/api/generate", json={"description": "Acme"})
        assert response.status_code == 400
        assert response.json()["error"] == "At least one platform required"

    def test_empty_platforms(self, client):
        response = client.post("/api/generate", json={"url": "https://acme.dev", "platforms": []})
        assert response.status_code == 400
        assert response.json()["error"] == "At least one platform required"

    def test_unknown_platform(self, client):
        response = client.post("/api/generate", json={"description": "Acme", "platforms": ["myspace"]})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid request body"}

    def test_variants_out_of_range(self, client):
        response = client.post(
            "/api/generate", json={"description": "Acme", "platforms": ["og"], "variants": 9},
        )
        assert response.status_code == 400

    def test_unnamed_brand_analysis_is_not_input(self, client, stub):
        response = client.post(
            "/api/generate", json={"brandAnalysis": {"brandName": "  "}, "platforms": ["og"]},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "URL, description, or brandAnalysis required"
        assert stub.requests == []

    def test_malformed_json(self, client):
        response = client.post(
            "/api/generate", content=b"{not json", headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400


class TestGenerate:

    def test_success_shape(self, client, stub):
        response = client.post("/api/generate", json={
            "description": "Acme Rockets, a space logistics startup",
            "platforms": ["twitter"],
            "style": "retro",
            "customColors": ["#112233"],
            "includeFavicon": True,
        })
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["assets"][0] == {
            "platform": "twitter",
            "dimensions": {"width": 1500, "height": 500},
            "base64": "data:image/png;base64,AAAA",
        }
        assert body["brandAnalysis"]["brandName"] == "Acme Rockets"
        assert body["brandAnalysis"]["brandColors"] == ["#112233", "#ffcc00"]

        request = stub.requests[0]
        assert request.style == "retro"
        assert request.custom_colors == ["#112233"]
        assert request.include_favicon is True

    def test_brand_analysis_passthrough(self, client, stub):
        response = client.post("/api/generate", json={
            "brandAnalysis": {"brandName": "Preset Co", "brandColors": ["#000000"]},
            "platforms": ["og"],
        })
        assert response.status_code == 200
        assert stub.requests[0].brand_analysis.brand_name == "Preset Co"

    def test_unknown_style_is_accepted(self, client, stub):
        response = client.post(
            "/api/generate", json={"description": "Acme", "platforms": ["og"], "style": "vaporwave"},
        )
        assert response.status_code == 200

    @pytest.mark.parametrize("style", [None, 7, ["retro"], "VaporWave"])
    def test_unusable_style_falls_back_to_minimal(self, client, stub, style):
        response = client.post(
            "/api/generate", json={"description": "Acme", "platforms": ["og"], "style": style},
        )
        assert response.status_code == 200
        assert stub.requests[0].style == "minimal"

    @pytest.mark.parametrize("error,message", [
        (AggregateFailure("All 2 image generation(s) failed"), "Failed to generate any images. Please try again."),
        (AnalysisError("Failed to parse brand analysis: junk"), "Could not analyze the brand. Please try again."),
        (ConfigurationError("GEMINI_API_KEY not configured"),
         "Service is not configured. Please contact the administrator."),
    ])
    def test_pipeline_errors_map_to_500(self, error, message):
        client = TestClient(create_app(orchestrator=StubOrchestrator(error=error)))
        response = client.post("/api/generate", json={"description": "Acme", "platforms": ["og"]})
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": message}

    def test_internal_detail_not_leaked(self):
        client = TestClient(create_app(orchestrator=StubOrchestrator(error=RuntimeError("key=sk-secret"))))
        response = client.post("/api/generate", json={"description": "Acme", "platforms": ["og"]})
        assert response.status_code == 500
        assert response.json()["error"] == FALLBACK_ERROR
        assert "sk-secret" not in response.text
