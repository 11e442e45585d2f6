import pytest
from fastapi.testclient import TestClient

from backend.app.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_api_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_compare_success(client):
    response = client.post("/api/v1/compare/", json={
        "expected": {"email": "{{compare:endsWith:@example.com}}"},
        "actual": {"email": "john@example.com"}
    })

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["errors"] == []
    assert data["stats"]["passedChecks"] == 1


def test_compare_failure_is_not_an_http_error(client):
    response = client.post("/api/v1/compare/", json={
        "expected": {"total": "{{compare:number:range:0:100}}"},
        "actual": {"total": 150}
    })

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["errors"][0]["type"] == "RANGE_EXCEEDED"
    assert data["errors"][0]["path"] == "total"


def test_missing_actual_is_undefined(client):
    response = client.post("/api/v1/compare/", json={"expected": {"a": 1}})

    data = response.json()
    assert data["success"] is False
    assert data["errors"][0]["path"] == "root"
    assert data["errors"][0]["type"] == "MISSING_PROPERTY"
    assert data["errors"][0]["actual"] is None


def test_null_actual_is_a_value(client):
    response = client.post("/api/v1/compare/", json={"expected": None, "actual": None})
    assert response.json()["success"] is True


def test_context_and_options(client):
    response = client.post("/api/v1/compare/", json={
        "expected": {
            "abfahrt": "{{compare:time:exact:630:seconds}}",
            "items": [{"richtung": "Nord"}]
        },
        "actual": {
            "abfahrt": "2025-11-05T15:40:30+01:00",
            "items": [{"richtung": "Süd"}],
            "extra": 1
        },
        "context": {"startTimeTest": "2025-11-05T15:30:00+01:00", "testcaseId": "TC-1"},
        "options": {"ignorePaths": [{"path": ["items", "*", "richtung"]}]}
    })

    assert response.json()["success"] is True


def test_strict_mode_option(client):
    response = client.post("/api/v1/compare/", json={
        "expected": {"a": 1},
        "actual": {"a": 1, "b": 2},
        "options": {"strictMode": True}
    })

    data = response.json()
    assert [error["type"] for error in data["errors"]] == ["EXTRA_PROPERTY"]


@pytest.mark.parametrize("options", [{"maxDepth": 0}, {"format": "yaml"}])
def test_invalid_options(client, options):
    response = client.post("/api/v1/compare/", json={"expected": 1, "actual": 1, "options": options})
    assert response.status_code == 422


def test_report_csv(client):
    response = client.post("/api/v1/compare/report?report_format=csv", json={
        "expected": {"a": 1},
        "actual": {"a": 2}
    })

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.text.splitlines()[0] == "ruta,resultado,tipo,mensaje,valor_esperado,valor_actual"


def test_report_summary(client):
    response = client.post("/api/v1/compare/report?report_format=summary", json={
        "expected": {"a": 1},
        "actual": {"a": 1}
    })

    assert response.status_code == 200
    assert response.text.startswith("Comparación OK")


def test_report_unknown_format(client):
    response = client.post("/api/v1/compare/report?report_format=pdf", json={"expected": 1, "actual": 1})

    assert response.status_code == 400
    assert "pdf" in response.json()["detail"]


def test_list_directives(client):
    response = client.get("/api/v1/compare/directives")

    assert response.status_code == 200
    data = response.json()
    assert [item["name"] for item in data] == ["startsWith", "endsWith", "contains", "regex", "number", "time"]
    assert data[-1]["class"] == "TimeDirective"
