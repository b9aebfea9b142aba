from datetime import datetime, timezone

import pytest

from gplaces.schemas import Place, PriceLevel
from parser.place_card import (
    build_place_card,
    build_text_place_row,
    format_rating,
    price_dollars,
    rating_stars,
    type_display_string,
)

RAW_PLACE = {
    "id": "ChIJj61dQgK6j4AR4GeTYWZsKWw",
    "displayName": {"text": "Blue Bottle Coffee", "languageCode": "en"},
    "formattedAddress": "1 Ferry Building, San Francisco, CA 94111, USA",
    "rating": 4.46,
    "userRatingCount": 1234,
    "priceLevel": "PRICE_LEVEL_MODERATE",
    "types": ["coffee_shop", "cafe", "food"],
    "currentOpeningHours": {
        "openNow": True,
        "weekdayDescriptions": [
            "Monday: 7:00 AM – 6:00 PM",
            "Tuesday: 7:00 AM – 6:00 PM",
            "Wednesday: 7:00 AM – 6:00 PM",
            "Thursday: 7:00 AM – 6:00 PM",
            "Friday: 7:00 AM – 6:00 PM",
            "Saturday: 8:00 AM – 6:00 PM",
            "Sunday: 8:00 AM – 4:00 PM",
        ],
    },
    "utcOffsetMinutes": -420,
    "someNewField": {"ignored": True},
}


def test_format_rating():
    assert format_rating(4.46) == "4.5"
    assert format_rating(3.0) == "3.0"
    assert format_rating(None) is None


@pytest.mark.parametrize(
    "rating, expected",
    [
        (5.0, ["full"] * 5),
        (4.5, ["full"] * 4 + ["half"]),
        (4.2, ["full"] * 4 + ["empty"]),
        (3.8, ["full"] * 4 + ["empty"]),
        (0.0, ["empty"] * 5),
        (None, ["empty"] * 5),
    ],
)
def test_rating_stars(rating, expected):
    assert rating_stars(rating) == expected


def test_price_dollars():
    assert price_dollars(PriceLevel.UNSPECIFIED) == ""
    assert price_dollars(PriceLevel.FREE) == ""
    assert price_dollars(PriceLevel.INEXPENSIVE) == "$"
    assert price_dollars(PriceLevel.VERY_EXPENSIVE) == "$$$$"


def test_type_display_string_prefers_display_name():
    place = Place.model_validate(
        {"id": "x", "types": ["coffee_shop"], "primaryTypeDisplayName": {"text": "Café"}}
    )
    assert type_display_string(place) == "Café"


def test_type_display_string_from_first_type():
    place = Place.model_validate({"id": "x", "types": ["coffee_shop", "cafe"]})
    assert type_display_string(place) == "Coffee Shop"
    assert type_display_string(Place(id="y")) is None


def test_build_place_card():
    place = Place.model_validate(RAW_PLACE)
    now = datetime(2024, 6, 3, 19, 0, tzinfo=timezone.utc)  # Monday 12:00 PDT

    card = build_place_card(place, now)

    assert card["place_id"] == RAW_PLACE["id"]
    assert card["name"] == "Blue Bottle Coffee"
    assert card["rating"] == "4.5"
    assert card["rating_stars"] == ["full"] * 4 + ["half"]
    assert card["user_rating_count"] == 1234
    assert card["type"] == "Coffee Shop"
    assert card["price"] == "$$"
    assert card["opening"]["display_text"] == "Open Now • Closes at 6:00 PM"


def test_build_place_card_minimal_place():
    card = build_place_card(Place(id="bare"), datetime(2024, 6, 3, tzinfo=timezone.utc))
    assert card["name"] == ""
    assert card["rating"] is None
    assert card["rating_stars"] == []
    assert card["price"] == ""
    assert card["opening"]["display_text"] is None


def test_build_text_place_row():
    row = build_text_place_row(Place.model_validate(RAW_PLACE))
    assert row == {
        "place_id": RAW_PLACE["id"],
        "name": "Blue Bottle Coffee",
        "address": RAW_PLACE["formattedAddress"],
        "rating": "4.5",
        "user_rating_count": 1234,
        "price": "$$",
    }


def test_build_text_place_row_hides_unspecified_price_and_missing_rating():
    row = build_text_place_row(Place(id="bare", formattedAddress="Somewhere"))
    assert row["price"] is None
    assert row["rating"] is None
    assert row["user_rating_count"] is None
