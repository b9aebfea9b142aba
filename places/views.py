# places/views.py
import logging
from datetime import datetime, timezone

import requests
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from config import settings as app_settings
from gplaces import PlacesApiError, fetch_place_details, search_by_text
from parser.place_card import build_place_card, build_text_place_row

from .samples import SAMPLE_PLACES, SAMPLE_PROMPTS
from .serializers import (
    PlaceCardQuerySerializer,
    PlaceCardSerializer,
    SamplePlaceSerializer,
    TextPlaceRowSerializer,
    TextSearchQuerySerializer,
)

logger = logging.getLogger(__name__)


def _missing_key_response():
    return Response({"error": "GOOGLE_PLACES_API_KEY missing"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _upstream_error_response(e: Exception):
    return Response({"error": f"Places API request failed: {e}"}, status=status.HTTP_502_BAD_GATEWAY)


@extend_schema(
    parameters=[TextSearchQuerySerializer],
    responses={
        200: TextPlaceRowSerializer(many=True),
        400: OpenApiResponse(description="잘못된 쿼리 파라미터"),
        502: OpenApiResponse(description="Places API 호출 실패"),
    },
)
@api_view(["GET"])
def text_search(request):
    """
    GET /api/places/search/?q=...&lat=...&lng=...&radius_m=...
    - q가 비어 있으면 빈 리스트 (검색창을 비우면 결과도 비움)
    """
    qs = TextSearchQuerySerializer(data=request.query_params)
    if not qs.is_valid():
        return Response(qs.errors, status=status.HTTP_400_BAD_REQUEST)
    params = qs.validated_data

    query = params["q"].strip()
    if not query:
        return Response([])

    if not app_settings.GOOGLE_PLACES_API_KEY:
        return _missing_key_response()

    try:
        places = search_by_text(
            query,
            lat=params.get("lat"),
            lng=params.get("lng"),
            radius_m=params.get("radius_m"),
            language=params.get("locale") or app_settings.PLACES_LANGUAGE,
        )
    except (PlacesApiError, requests.RequestException) as e:
        logger.warning("text_search failed q=%r: %s", query, e)
        return _upstream_error_response(e)

    return Response([build_text_place_row(p) for p in places])


@extend_schema(responses={200: {"type": "array", "items": {"type": "string"}}})
@api_view(["GET"])
def search_prompts(request):
    return Response(SAMPLE_PROMPTS)


@extend_schema(responses={200: SamplePlaceSerializer(many=True)})
@api_view(["GET"])
def sample_places(request):
    return Response(SamplePlaceSerializer(SAMPLE_PLACES, many=True).data)


@extend_schema(
    parameters=[
        PlaceCardQuerySerializer,
        OpenApiParameter("place_id", str, OpenApiParameter.PATH),
    ],
    responses={
        200: PlaceCardSerializer,
        404: OpenApiResponse(description="해당 place_id 없음"),
        502: OpenApiResponse(description="Places API 호출 실패"),
    },
)
@api_view(["GET"])
def place_card(request, place_id: str):
    """
    GET /api/places/{place_id}/card/?locale=en
    - 상세 조회 후 카드 데이터 + 오늘 영업 상태('Open Now • Closes at ...')
    """
    qs = PlaceCardQuerySerializer(data=request.query_params)
    if not qs.is_valid():
        return Response(qs.errors, status=status.HTTP_400_BAD_REQUEST)
    locale = qs.validated_data.get("locale") or app_settings.PLACES_LANGUAGE

    if not app_settings.GOOGLE_PLACES_API_KEY:
        return _missing_key_response()

    try:
        place = fetch_place_details(place_id, language=locale)
    except PlacesApiError as e:
        if e.status_code == status.HTTP_404_NOT_FOUND:
            return Response({"detail": "해당 place_id의 장소를 찾을 수 없습니다."}, status=status.HTTP_404_NOT_FOUND)
        logger.warning("place_card failed %s: %s", place_id, e)
        return _upstream_error_response(e)
    except requests.RequestException as e:
        logger.warning("place_card failed %s: %s", place_id, e)
        return _upstream_error_response(e)

    now = datetime.now(timezone.utc)
    return Response(build_place_card(place, now, locale))
