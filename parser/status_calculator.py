from datetime import datetime, timedelta, timezone
from typing import Optional

from gplaces.schemas import OpeningHours, Place
from parser.opening_hours import extract_closing_time, find_today_hours_text


def venue_local_time(now_utc: datetime, utc_offset_minutes: Optional[int]) -> datetime:
    """
    Places API의 utcOffsetMinutes로 장소 현지 시각을 만든다.
    offset이 없으면 now_utc 그대로
    """
    if utc_offset_minutes is None:
        return now_utc
    if now_utc.tzinfo is None:
        now_utc = now_utc.replace(tzinfo=timezone.utc)
    return now_utc.astimezone(timezone(timedelta(minutes=utc_offset_minutes)))


def compute_opening_status(opening_hours: Optional[OpeningHours], now: datetime, locale: str = "en"):
    """
    OpeningHours에서 오늘 영업시간/마감 시각을 읽어
    카드에 표시할 'Open Now • Closes at 5:00 PM' 같은 상태 문구를 만든다.
    """
    out = {
        "is_open": None,
        "status_text": None,    # 'Open Now' / 'Closed'
        "today_hours": None,    # 'Monday: 9:00 AM – 5:00 PM'
        "closes_at": None,      # '5:00 PM'
        "display_text": None,
    }

    if opening_hours is None:
        return out

    today_hours = find_today_hours_text(opening_hours.weekday_descriptions, now, locale)
    out["today_hours"] = today_hours

    is_open = opening_hours.open_now
    if is_open is None:
        # 영업 여부를 모르면 상태 문구 없음
        return out

    out["is_open"] = is_open
    out["status_text"] = "Open Now" if is_open else "Closed"
    parts = [out["status_text"]]

    if is_open and today_hours:
        closes_at = extract_closing_time(today_hours)
        out["closes_at"] = closes_at
        if closes_at:
            parts.append(f"Closes at {closes_at}")
    elif today_hours:
        parts.append(today_hours)

    out["display_text"] = " • ".join(parts)
    return out


def compute_open_status_for_place(place: Place, now_utc: datetime, locale: str = "en"):
    local_now = venue_local_time(now_utc, place.utc_offset_minutes)
    return compute_opening_status(place.opening_hours, local_now, locale)
