import os
from dotenv import load_dotenv

load_dotenv()

# ---------- Google Places API (New) ----------
# 키가 없어도 import는 되게 하고, 실제 API 호출 시점에 에러를 낸다
GOOGLE_PLACES_API_KEY = os.getenv("GOOGLE_PLACES_API_KEY", "").strip().strip('"').strip("'")
PLACES_BASE_URL = os.getenv("PLACES_BASE_URL", "https://places.googleapis.com/v1").rstrip("/")
PLACES_LANGUAGE = os.getenv("PLACES_LANGUAGE", "en")

# ---------- Text search location bias (Googleplex) ----------
DEFAULT_LAT = float(os.getenv("DEFAULT_LAT", "37.4220"))
DEFAULT_LNG = float(os.getenv("DEFAULT_LNG", "-122.0841"))
DEFAULT_RADIUS_M = float(os.getenv("DEFAULT_RADIUS_M", "5000"))

# ---------- HTTP common ----------
HTTP_TIMEOUT_SEC = int(os.getenv("HTTP_TIMEOUT_SEC", "20"))
