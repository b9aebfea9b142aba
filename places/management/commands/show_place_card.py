from datetime import datetime, timezone

import requests
from django.core.management.base import BaseCommand, CommandError

from config import settings as app_settings
from gplaces import PlacesApiError, fetch_place_details
from parser.place_card import build_place_card


class Command(BaseCommand):
    help = "Places API로 장소 상세를 조회해 카드 형태(이름/평점/가격대/오늘 영업 상태)로 출력합니다."

    def add_arguments(self, parser):
        parser.add_argument("place_id")
        parser.add_argument("--locale", default=None, help="요일 이름/응답 언어 (기본: PLACES_LANGUAGE)")

    def handle(self, *args, **options):
        place_id = options["place_id"]
        locale = options["locale"] or app_settings.PLACES_LANGUAGE

        if not app_settings.GOOGLE_PLACES_API_KEY:
            raise CommandError("GOOGLE_PLACES_API_KEY가 없습니다. .env에 GOOGLE_PLACES_API_KEY=... 설정하세요.")

        try:
            place = fetch_place_details(place_id, language=locale)
        except (PlacesApiError, requests.RequestException) as e:
            raise CommandError(f"Places API FAIL {place_id} | {e}")

        card = build_place_card(place, datetime.now(timezone.utc), locale)

        self.stdout.write(card["name"] or place_id)

        rating_line = []
        if card["rating"]:
            rating_line.append(f"{card['rating']} ({card['user_rating_count']})")
        if card["type"]:
            rating_line.append(card["type"])
        if card["price"]:
            rating_line.append(card["price"])
        if rating_line:
            self.stdout.write("  " + "  ".join(rating_line))

        if card["address"]:
            self.stdout.write(f"  {card['address']}")

        opening = card["opening"]["display_text"]
        if opening:
            self.stdout.write(f"  {opening}")
