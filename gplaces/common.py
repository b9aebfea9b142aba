import requests
from pydantic import ValidationError

from config.settings import PLACES_BASE_URL
from gplaces.schemas import Place

# Place 카드/검색 행에 필요한 필드만 요청 (과금 SKU 최소화)
PLACE_FIELDS = [
    "id",
    "displayName",
    "formattedAddress",
    "location",
    "rating",
    "userRatingCount",
    "priceLevel",
    "types",
    "primaryTypeDisplayName",
    "currentOpeningHours",
    "regularOpeningHours",
    "utcOffsetMinutes",
]


class PlacesApiError(requests.HTTPError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code} {body}")


def places_url(path: str) -> str:
    return f"{PLACES_BASE_URL}/{path.lstrip('/')}"


def places_headers(field_mask: str) -> dict:
    from config.settings import GOOGLE_PLACES_API_KEY

    return {
        "Content-Type": "application/json",
        "X-Goog-Api-Key": GOOGLE_PLACES_API_KEY,
        "X-Goog-FieldMask": field_mask,
    }


def check_response(r: requests.Response) -> dict:
    # 키 만료/필드마스크 오류 등 디버그 도움
    if r.status_code != 200:
        raise PlacesApiError(r.status_code, r.text[:200])
    return r.json()


def parse_place(data: dict) -> Place:
    # 모르는 priceLevel 값, id 누락 등 스키마와 안 맞는 응답은 upstream 오류로 취급
    try:
        return Place.model_validate(data)
    except ValidationError as e:
        raise PlacesApiError(502, f"unexpected place payload: {e}"[:200])
