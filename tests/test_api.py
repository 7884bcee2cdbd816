"""Tests for the HTTP API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from snap_nutrition.api.app import create_app
from tests.conftest import PNG_BYTES

APPLE_PAYLOAD = {
    "food": "Apple",
    "confidence": 0.87,
    "nutrition": {"calories": 52, "protein": 0.3, "carbs": 14, "fats": 0.2},
}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.json() == {"status": "ok"}


def test_analyze_returns_nutrition_record(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/analyze", content=PNG_BYTES, headers={"Content-Type": "image/png"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["food"] == "Apple"
    assert data["confidence"] == 0.87
    assert data["nutrition"] == {"calories": 52, "protein": 0.3, "carbs": 14, "fats": 0.2}
    assert data["recognized"] is True
    assert data["label"] == "Granny Smith apple"


def test_analyze_returns_fallback_on_failure(container, fake_classifier) -> None:
    fake_classifier.error = RuntimeError("model crashed")
    client = TestClient(create_app(container))

    response = client.post("/analyze", content=PNG_BYTES)

    assert response.status_code == 200
    data = response.json()
    assert data["food"] == "Unknown Food"
    assert data["confidence"] == 0.9
    assert data["nutrition"] == {"calories": 150, "protein": 5, "carbs": 20, "fats": 5}
    assert data["recognized"] is False
    assert data["error"] == "classifier_unavailable"


def test_analyze_rejects_non_image(container, fake_classifier) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/analyze", content=b"hello", headers={"Content-Type": "text/plain"}
    )

    assert response.status_code == 400
    assert fake_classifier.calls == []


def test_meal_log_lifecycle(container) -> None:
    client = TestClient(create_app(container))

    created = client.post("/meals", json=APPLE_PAYLOAD)
    assert created.status_code == 201
    entry = created.json()
    assert entry["meal_time"] == "Lunch"
    assert entry["data"] == APPLE_PAYLOAD

    listed = client.get("/meals").json()
    assert [item["id"] for item in listed] == [entry["id"]]

    fetched = client.get(f"/meals/{entry['id']}")
    assert fetched.status_code == 200

    today = client.get("/meals/today").json()
    assert today["count"] == 1
    assert today["calories"] == 52
    assert today["progress"]["calories"] == 52 / 2000 * 100

    removed = client.delete(f"/meals/{entry['id']}")
    assert removed.json() == {"removed": True}
    assert client.delete(f"/meals/{entry['id']}").json() == {"removed": False}
    assert client.get(f"/meals/{entry['id']}").status_code == 404
    assert client.get("/meals/today").json()["count"] == 0


def test_log_meal_validates_payload(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals", json={**APPLE_PAYLOAD, "confidence": 1.5}
    )

    assert response.status_code == 422


def test_get_unknown_meal_returns_404(container) -> None:
    client = TestClient(create_app(container))

    assert client.get(f"/meals/{uuid4()}").status_code == 404
