from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import search as search_router
from services.location_search import LocationSearch
from services.places_types import AutocompleteResponse, PlaceDetails, PlaceDetailsResponse, Prediction


def _client():
    app = FastAPI()
    app.include_router(search_router.router, prefix="/search")
    return TestClient(app)


def test_search_places_uses_sample_data_without_provider():
    with patch.object(search_router, "_location_search", LocationSearch(provider=None)):
        resp = _client().get("/search/places", params={"q": "Louvre"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["query"] == "Louvre"
    assert data["degraded"] is False
    assert data["results"] == [
        {
            "id": 2,
            "name": "Louvre Museum",
            "category": "museum",
            "lat": 48.8606,
            "lng": 2.3376,
            "external_ref": None,
        }
    ]


def test_search_places_reports_degraded_mode(fake_provider):
    fake_provider.autocomplete_response = AutocompleteResponse(status="UNKNOWN_ERROR")
    with patch.object(search_router, "_location_search", LocationSearch(provider=fake_provider)):
        resp = _client().get("/search/places", params={"q": "tour"})

    data = resp.json()
    assert data["degraded"] is True
    assert "UNKNOWN_ERROR" in data["error"]
    assert len(data["results"]) == 4


def test_search_places_live_predictions(fake_provider):
    fake_provider.autocomplete_response = AutocompleteResponse(
        status="OK",
        predictions=[Prediction(place_id="abc", main_text="Montmartre", types=["neighborhood", "political"])],
    )
    with patch.object(search_router, "_location_search", LocationSearch(provider=fake_provider)):
        resp = _client().get("/search/places", params={"q": "Montm"})

    result = resp.json()["results"][0]
    assert result["category"] == "city"
    assert result["external_ref"] == "abc"
    assert result["lat"] == 0.0


def test_selection_endpoint_resolves_details(fake_provider):
    fake_provider.details_response = PlaceDetailsResponse(
        status="OK",
        result=PlaceDetails(name="Montmartre", lat=48.8867, lng=2.3431, types=["neighborhood"]),
    )
    with patch.object(search_router, "_location_search", LocationSearch(provider=fake_provider)):
        resp = _client().post(
            "/search/selection",
            json={"id": 1, "name": "Montmartre", "category": "city", "lat": 0, "lng": 0, "external_ref": "abc"},
        )

    assert resp.status_code == 200
    data = resp.json()
    assert data["lat"] == 48.8867
    assert data["id"] == int("abc", 16) % 1000


def test_selection_endpoint_failure_statuses(fake_provider):
    body = {"id": 1, "name": "X", "category": "landmark", "lat": 0, "lng": 0, "external_ref": "abc"}
    with patch.object(search_router, "_location_search", LocationSearch(provider=None)):
        assert _client().post("/search/selection", json=body).status_code == 503

    fake_provider.details_response = PlaceDetailsResponse(status="NOT_FOUND")
    with patch.object(search_router, "_location_search", LocationSearch(provider=fake_provider)):
        resp = _client().post("/search/selection", json=body)
    assert resp.status_code == 502
    assert "NOT_FOUND" in resp.json()["detail"]


def test_points_endpoints():
    with patch.object(search_router, "_location_search", LocationSearch(provider=None)):
        client = _client()
        points = client.get("/search/points").json()
        one = client.get("/search/points/3")
        missing = client.get("/search/points/42")
        reset = client.post("/search/session/reset")

    assert len(points) == 10
    assert one.json()["name"] == "Notre-Dame Cathedral"
    assert missing.status_code == 404
    assert reset.json() == {"status": "ok"}
