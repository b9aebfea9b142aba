from datetime import datetime
from typing import List, Optional

from gplaces.schemas import Place, PriceLevel
from parser.status_calculator import compute_open_status_for_place

MAX_STARS = 5


def format_rating(rating: Optional[float]) -> Optional[str]:
    if rating is None:
        return None
    return f"{rating:.1f}"


def rating_stars(rating: Optional[float]) -> List[str]:
    """
    4.3 -> full 4개 + empty 1개, 4.5 -> full 4개 + half 1개
    (0.25 미만 버림, 0.75 이상 올림)
    """
    value = max(0.0, min(float(rating or 0.0), float(MAX_STARS)))
    full = int(value)
    frac = value - full
    half = False
    if frac >= 0.75:
        full += 1
    elif frac >= 0.25:
        half = True

    stars = ["full"] * full
    if half:
        stars.append("half")
    stars.extend(["empty"] * (MAX_STARS - len(stars)))
    return stars


def type_display_string(place: Place) -> Optional[str]:
    if place.primary_type_display_name and place.primary_type_display_name.text:
        return place.primary_type_display_name.text
    if not place.types:
        return None
    return place.types[0].replace("_", " ").title()


def price_dollars(price_level: PriceLevel) -> str:
    return "$" * price_level.dollar_sign_count()


def build_place_card(place: Place, now: datetime, locale: str = "en") -> dict:
    """
    상세 카드: 이름 / 평점(별) / 리뷰 수 / 업종 / 가격대 / 오늘 영업 상태
    now는 UTC 기준, 장소 현지 시각으로 바꿔서 '오늘'을 계산한다.
    """
    return {
        "place_id": place.id,
        "name": place.name,
        "rating": format_rating(place.rating),
        "rating_stars": rating_stars(place.rating) if place.rating is not None else [],
        "user_rating_count": place.user_rating_count,
        "type": type_display_string(place),
        "price": price_dollars(place.price_level),
        "address": place.formatted_address,
        "opening": compute_open_status_for_place(place, now, locale),
    }


def build_text_place_row(place: Place) -> dict:
    """
    텍스트 검색 결과 한 줄: 이름 / 주소 / 평점 / 가격대(지정된 경우만)
    """
    row = {
        "place_id": place.id,
        "name": place.name,
        "address": place.formatted_address,
        "rating": format_rating(place.rating),
        "user_rating_count": place.user_rating_count if place.rating is not None else None,
        "price": None,
    }
    if place.price_level != PriceLevel.UNSPECIFIED:
        row["price"] = price_dollars(place.price_level)
    return row
