from .opening_hours import (
    weekday_name,
    find_today_hours_text,
    extract_closing_time,
)

from .status_calculator import compute_opening_status, compute_open_status_for_place
from .place_card import build_place_card, build_text_place_row

__all__ = [
    "weekday_name",
    "find_today_hours_text",
    "extract_closing_time",
    "compute_opening_status",
    "compute_open_status_for_place",
    "build_place_card",
    "build_text_place_row",
]
