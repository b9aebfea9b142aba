# 텍스트 검색 화면 추천 프롬프트
SAMPLE_PROMPTS = [
    "Find me a cozy coffee shop near Central Park",
    "What's a good Italian restaurant that's open now?",
    "Where's an affordable gym in downtown?",
    "Show me highly rated sushi places under $30",
]

# Place 카드 목록 화면 (place_id는 Places API 문서 예제)
SAMPLE_PLACES = [
    {
        "place_id": "ChIJj61dQgK6j4AR4GeTYWZsKWw",
        "name": "Googleplex",
        "description": "Mountain View, CA",
    },
    {
        "place_id": "ChIJN1t_tDeuEmsRUsoyG83frY4",
        "name": "Google Sydney",
        "description": "Pyrmont, NSW",
    },
]
