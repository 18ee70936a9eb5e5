from fastapi.testclient import TestClient

from apps.api.main import app
from apps.api.middleware import TRACE_HEADER

client = TestClient(app)


def test_health_ok() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "environment" in body


def test_trace_id_is_echoed() -> None:
    response = client.get("/health", headers={TRACE_HEADER: "trace-123"})
    assert response.headers[TRACE_HEADER] == "trace-123"


def test_trace_id_is_generated_when_absent() -> None:
    response = client.get("/health")
    assert response.headers[TRACE_HEADER]
