import logging
from typing import List, Optional

import requests

from config.settings import DEFAULT_LAT, DEFAULT_LNG, DEFAULT_RADIUS_M, HTTP_TIMEOUT_SEC
from gplaces.common import PLACE_FIELDS, check_response, parse_place, places_headers, places_url
from gplaces.schemas import Place

logger = logging.getLogger(__name__)

FIELD_MASK = ",".join(f"places.{f}" for f in PLACE_FIELDS)


def search_by_text(query: str, lat: Optional[float] = None, lng: Optional[float] = None,
                   radius_m: Optional[float] = None, language: Optional[str] = None) -> List[Place]:
    """
    POST places:searchText
    - (lat, lng, radius_m) 원 안쪽 결과를 우선 (locationBias)
    - 빈 검색어면 요청하지 않고 빈 리스트
    """
    query = (query or "").strip()
    if not query:
        return []

    body = {
        "textQuery": query,
        "locationBias": {
            "circle": {
                "center": {
                    "latitude": DEFAULT_LAT if lat is None else lat,
                    "longitude": DEFAULT_LNG if lng is None else lng,
                },
                "radius": DEFAULT_RADIUS_M if radius_m is None else radius_m,
            }
        },
    }
    if language:
        body["languageCode"] = language

    r = requests.post(
        places_url("places:searchText"),
        headers=places_headers(FIELD_MASK),
        json=body,
        timeout=HTTP_TIMEOUT_SEC,
    )
    data = check_response(r)

    places = [parse_place(p) for p in data.get("places", [])]
    logger.debug("search_by_text q=%r -> %d places", query, len(places))
    return places
