# parser/opening_hours.py
from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

# datetime.weekday() 순서 (월=0 ... 일=6)
WEEKDAY_NAMES = {
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "ko": ["월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"],
    "ja": ["月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日"],
    "es": ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
    "fr": ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"],
    "de": ["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"],
}

EN_DASH = "–"
HYPHEN = "-"


def weekday_name(reference_time: datetime, locale: str = "en") -> Optional[str]:
    """
    'en_US', 'en-GB', 'en' -> 'en' 테이블에서 reference_time의 요일 이름
    지원하지 않는 locale이면 None
    """
    if not locale:
        return None
    lang = locale.replace("-", "_").split("_", 1)[0].lower()
    names = WEEKDAY_NAMES.get(lang)
    if names is None:
        return None
    return names[reference_time.weekday()]


def find_today_hours_text(
    weekly_hours: Optional[Sequence[str]],
    reference_time: datetime,
    locale: str = "en",
) -> Optional[str]:
    """
    weekdayDescriptions 중 reference_time 요일 이름으로 시작하는 첫 항목을 반환한다.
    (대소문자 무시, 못 찾으면 None)
    """
    name = weekday_name(reference_time, locale)
    if not name or not weekly_hours:
        return None

    prefix = name.casefold()
    for day_text in weekly_hours:
        if isinstance(day_text, str) and day_text.casefold().startswith(prefix):
            return day_text
    return None


def extract_closing_time(day_text: Optional[str]) -> Optional[str]:
    """
    'Monday: 9:00 AM – 1:00 PM, 2:00 PM – 6:00 PM' -> '6:00 PM'

    마지막 구간의 종료 시각 (전체 구간 중 최댓값이 아님)
    en dash가 없으면 hyphen으로 대체, 둘 다 없으면 None
    """
    if not day_text:
        return None

    periods = [p for p in day_text.split(",") if p]
    if not periods:
        return None

    last_period = periods[-1]
    idx = last_period.rfind(EN_DASH)
    if idx < 0:
        idx = last_period.rfind(HYPHEN)
    if idx < 0:
        return None

    closing_time = last_period[idx + 1:].strip()
    return closing_time or None
