import logging
from typing import Optional

import requests

from config.settings import HTTP_TIMEOUT_SEC
from gplaces.common import PLACE_FIELDS, check_response, parse_place, places_headers, places_url
from gplaces.schemas import Place

logger = logging.getLogger(__name__)

FIELD_MASK = ",".join(PLACE_FIELDS)


def fetch_place_details(place_id: str, language: Optional[str] = None) -> Place:
    if not place_id:
        raise ValueError("place_id is required")

    params = {"languageCode": language} if language else None
    r = requests.get(
        places_url(f"places/{place_id}"),
        headers=places_headers(FIELD_MASK),
        params=params,
        timeout=HTTP_TIMEOUT_SEC,
    )
    data = check_response(r)

    logger.debug("fetch_place_details %s ok", place_id)
    return parse_place(data)
