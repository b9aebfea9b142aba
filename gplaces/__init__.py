from .common import PlacesApiError
from .place_details import fetch_place_details
from .schemas import OpeningHours, Place, PriceLevel
from .text_search import search_by_text

__all__ = [
    "PlacesApiError",
    "fetch_place_details",
    "search_by_text",
    "OpeningHours",
    "Place",
    "PriceLevel",
]
