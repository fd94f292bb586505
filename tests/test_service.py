"""Test the HTTP service with FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from fourbar.core.config import default_config
from fourbar.service import app as app_module
from fourbar.service.app import INTERNAL_ERROR_MESSAGE, create_app


@pytest.fixture
def client():
    return TestClient(create_app(default_config()))


def test_status(client):
    response = client.get("/status")
    assert response.status_code == 200
    assert response.json() == {"status": "operational"}


def test_compute_success(client):
    response = client.post("/compute", json={"a": 1, "b": 1, "c": 1, "d": 1, "theta2": 90})

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"grashof", "theta31", "theta32", "theta41", "theta42"}
    assert body["grashof"] == "SpecialGrashof"
    assert body["theta41"] == pytest.approx(90.0)
    assert body["theta42"] == pytest.approx(180.0)


def test_compute_debug_adds_discriminants(client):
    response = client.post(
        "/compute?debug=true", json={"a": 2, "b": 7, "c": 9, "d": 6, "theta2": 30}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["inversion"] == "crank-rocker"
    assert "discriminant" in body and "discriminant1" in body


def test_compute_no_solution_is_null(client):
    response = client.post("/compute", json={"a": 3, "b": 1, "c": 1, "d": 3.5, "theta2": 180})

    assert response.status_code == 200
    body = response.json()
    assert body["grashof"] == "NonGrashof"
    assert body["theta41"] is None and body["theta42"] is None
    assert body["theta31"] is None and body["theta32"] is None


def test_compute_missing_field(client):
    response = client.post("/compute", json={"a": 1, "b": 1, "c": 1, "d": 1})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing one of the required fields: a, b, c, d, theta2"}


def test_compute_non_numeric_field(client):
    response = client.post("/compute", json={"a": 1, "b": "x", "c": 1, "d": 1, "theta2": 0})

    assert response.status_code == 400
    assert "'b' must be a number" in response.json()["error"]


def test_compute_invalid_json(client):
    response = client.post(
        "/compute", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_compute_empty_body_reports_missing_fields(client):
    response = client.post("/compute")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing one of the required fields: a, b, c, d, theta2"}


def test_compute_huge_integer_is_400(client):
    body = b'{"a": 1' + b"0" * 400 + b', "b": 1, "c": 1, "d": 1, "theta2": 0}'
    response = client.post("/compute", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert "'a' is too large" in response.json()["error"]


def test_compute_zero_link_is_422(client):
    response = client.post("/compute", json={"a": 1, "b": 0, "c": 1, "d": 1, "theta2": 45})

    assert response.status_code == 422
    assert response.json() == {"error": "degenerate linkage: link length zero"}


def test_compute_unexpected_fault_is_generic_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("secret internal detail")

    monkeypatch.setattr(app_module, "compute_linkage", boom)
    response = client.post("/compute", json={"a": 1, "b": 1, "c": 1, "d": 1, "theta2": 0})

    assert response.status_code == 500
    assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}
    assert "secret" not in response.text
