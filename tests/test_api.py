"""Tests for the HTTP transport."""

import pytest
from fastapi.testclient import TestClient

import api.index as api_module


@pytest.fixture
def client():
    return TestClient(api_module.app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "color-match"}


def test_match_color_exact(client):
    response = client.post(
        "/match-color",
        json={"ourColor": "NavyBlazer", "theirColors": ["Navy Blazer", "Navy Blue", "Black"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["matched"] is True
    assert body["matchedColor"] == "Navy Blazer"
    assert body["confidence"] == 100
    assert body["method"] == "exact"
    assert body["needsReview"] is False


def test_match_color_no_match(client):
    response = client.post(
        "/match-color",
        json={"ourColor": "Xyzzy123", "theirColors": ["Red", "Green", "Blue"], "threshold": 80},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["method"] == "none"
    assert body["matchedColor"] is None
    assert body["alternatives"] == []


@pytest.mark.parametrize(
    "payload",
    [
        {"theirColors": ["Black"]},
        {"ourColor": "Black"},
        {"ourColor": "Black", "theirColors": "Black"},
        {"ourColor": "Black", "theirColors": ["Black"], "threshold": 500},
    ],
)
def test_match_color_rejects_invalid_body(client, payload):
    response = client.post("/match-color", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"]


def test_match_color_internal_error(client, mocker):
    mocker.patch.object(api_module, "match", side_effect=RuntimeError("boom"))

    response = client.post("/match-color", json={"ourColor": "Navy", "theirColors": ["Black"]})

    assert response.status_code == 500
    assert response.json()["detail"] == "internal_error"


def test_fixture_route(client):
    response = client.post("/test")

    assert response.status_code == 200
    results = response.json()["testResults"]
    assert {item["input"] for item in results} >= {"NavyBlazer", "TNFBlack", "JetBlack"}
