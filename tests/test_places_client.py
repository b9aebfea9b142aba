from unittest.mock import MagicMock, patch

import pytest

from gplaces import PlacesApiError, fetch_place_details, search_by_text
from gplaces.schemas import PriceLevel


def _response(status_code=200, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload or {}
    resp.text = text
    return resp


@patch("config.settings.GOOGLE_PLACES_API_KEY", "test-key")
@patch("gplaces.text_search.requests.post")
def test_search_by_text_parses_places(mock_post):
    mock_post.return_value = _response(
        payload={
            "places": [
                {
                    "id": "p1",
                    "displayName": {"text": "Cafe One"},
                    "priceLevel": "PRICE_LEVEL_INEXPENSIVE",
                },
                {"id": "p2", "displayName": {"text": "Cafe Two"}},
            ]
        }
    )

    places = search_by_text("coffee", lat=1.0, lng=2.0, radius_m=300, language="en")

    assert [p.name for p in places] == ["Cafe One", "Cafe Two"]
    assert places[0].price_level == PriceLevel.INEXPENSIVE

    args, kwargs = mock_post.call_args
    assert args[0].endswith("/places:searchText")
    assert kwargs["headers"]["X-Goog-Api-Key"] == "test-key"
    assert "places.currentOpeningHours" in kwargs["headers"]["X-Goog-FieldMask"]
    body = kwargs["json"]
    assert body["textQuery"] == "coffee"
    assert body["languageCode"] == "en"
    assert body["locationBias"]["circle"] == {
        "center": {"latitude": 1.0, "longitude": 2.0},
        "radius": 300,
    }


@patch("gplaces.text_search.requests.post")
def test_search_by_text_uses_default_location(mock_post):
    mock_post.return_value = _response(payload={})

    assert search_by_text("sushi") == []

    body = mock_post.call_args.kwargs["json"]
    assert body["locationBias"]["circle"]["center"] == {"latitude": 37.4220, "longitude": -122.0841}
    assert body["locationBias"]["circle"]["radius"] == 5000.0
    assert "languageCode" not in body


@patch("gplaces.text_search.requests.post")
def test_search_by_text_blank_query_skips_request(mock_post):
    assert search_by_text("   ") == []
    mock_post.assert_not_called()


@patch("gplaces.text_search.requests.post")
def test_search_by_text_raises_on_http_error(mock_post):
    mock_post.return_value = _response(status_code=403, text="PERMISSION_DENIED")

    with pytest.raises(PlacesApiError) as exc:
        search_by_text("coffee")
    assert exc.value.status_code == 403


@patch("gplaces.place_details.requests.get")
def test_fetch_place_details(mock_get):
    mock_get.return_value = _response(
        payload={
            "id": "p1",
            "displayName": {"text": "Cafe One"},
            "rating": 4.2,
            "userRatingCount": 10,
            "regularOpeningHours": {"weekdayDescriptions": ["Monday: 9:00 AM – 5:00 PM"]},
        }
    )

    place = fetch_place_details("p1", language="ko")

    assert place.id == "p1"
    assert place.rating == 4.2
    assert place.opening_hours.weekday_descriptions == ["Monday: 9:00 AM – 5:00 PM"]
    args, kwargs = mock_get.call_args
    assert args[0].endswith("/places/p1")
    assert kwargs["params"] == {"languageCode": "ko"}
    assert not kwargs["headers"]["X-Goog-FieldMask"].startswith("places.")


@patch("gplaces.place_details.requests.get")
def test_fetch_place_details_not_found(mock_get):
    mock_get.return_value = _response(status_code=404, text="NOT_FOUND")

    with pytest.raises(PlacesApiError) as exc:
        fetch_place_details("missing")
    assert exc.value.status_code == 404


def test_fetch_place_details_requires_id():
    with pytest.raises(ValueError):
        fetch_place_details("")


@patch("gplaces.place_details.requests.get")
def test_fetch_place_details_rejects_unknown_payload(mock_get):
    mock_get.return_value = _response(payload={"id": "p1", "priceLevel": "PRICE_LEVEL_SOMETHING_NEW"})

    with pytest.raises(PlacesApiError) as exc:
        fetch_place_details("p1")
    assert exc.value.status_code == 502


@patch("gplaces.text_search.requests.post")
def test_search_by_text_rejects_place_without_id(mock_post):
    mock_post.return_value = _response(payload={"places": [{"displayName": {"text": "No Id"}}]})

    with pytest.raises(PlacesApiError):
        search_by_text("coffee")
