import pytest
from fastapi.testclient import TestClient

from resume_ai.errors import (
    MissingCredentialError,
    UpstreamDecodeError,
    UpstreamTransportError,
)
from resume_ai.main import app
from resume_ai.utils.dependencies import get_gateway


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _use_gateway(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway


def test_analyze_returns_normalized_document(client, fake_gateway):
    _use_gateway(fake_gateway(reply='{"summary": "Dev", "projects": [{"technologiesUsed": "React, Go"}], "extra": 1}'))

    response = client.post("/analyze", json={"userDescription": "I build web apps"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "summary": "Dev",
        "projects": [{"technologiesUsed": ["React", "Go"]}],
        "extra": 1,
    }


@pytest.mark.parametrize("body", [{"userDescription": "   "}, {}])
def test_analyze_rejects_blank_description(client, fake_gateway, body):
    gateway = fake_gateway()
    _use_gateway(gateway)

    response = client.post("/analyze", json=body)

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "ValidationError"
    assert response.json()["detail"]["category"] == "client"
    assert gateway.calls == []


def test_analyze_rejects_invalid_json_body(client, fake_gateway):
    gateway = fake_gateway()
    _use_gateway(gateway)

    response = client.post("/analyze", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert gateway.calls == []


@pytest.mark.parametrize(
    "error, status, category",
    [
        (MissingCredentialError("no key"), 500, "configuration"),
        (UpstreamTransportError("refused"), 502, "upstream"),
        (UpstreamDecodeError("no choices"), 502, "upstream"),
    ],
)
def test_analyze_maps_pipeline_errors(client, fake_gateway, error, status, category):
    _use_gateway(fake_gateway(error=error))

    response = client.post("/analyze", json={"userDescription": "hello"})

    assert response.status_code == status
    assert response.json()["detail"] == {
        "error": type(error).__name__,
        "category": category,
        "message": str(error),
    }


@pytest.mark.parametrize(
    "reply",
    [
        "not json",
        '{"summary": NaN}',
        '{"a": ' + "[" * 100000 + "]" * 100000 + "}",
    ],
)
def test_analyze_reports_malformed_model_output(client, fake_gateway, reply):
    _use_gateway(fake_gateway(reply=reply))

    response = client.post("/analyze", json={"userDescription": "hello"})

    assert response.status_code == 502
    assert response.json()["detail"]["error"] == "MalformedModelOutputError"


def test_analyze_without_credential_never_calls_provider(client, monkeypatch):
    from resume_ai.services import llm_service
    from resume_ai.services.llm_service import OpenRouterGateway

    async def fail_acompletion(**kwargs):
        raise AssertionError("provider must not be called")

    monkeypatch.setattr(llm_service, "acompletion", fail_acompletion)
    _use_gateway(OpenRouterGateway(api_key=None))

    response = client.post("/analyze", json={"userDescription": "hello"})

    assert response.status_code == 500
    assert response.json()["detail"]["error"] == "MissingCredentialError"


def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
