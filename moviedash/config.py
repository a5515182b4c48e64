"""Constants and paths for the movie dashboard."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ────────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.getenv("MOVIEDASH_DATA_DIR", PROJECT_ROOT / "data"))
CACHE_DIR = DATA_DIR / "cache"
PREFERENCES_PATH = DATA_DIR / "preferences.json"

for d in [DATA_DIR, CACHE_DIR]:
    d.mkdir(parents=True, exist_ok=True)

# ── TMDB ─────────────────────────────────────────────────────────────────────
TMDB_API_KEY = os.getenv("TMDB_API_KEY", "")
TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_CACHE_PATH = CACHE_DIR / "tmdb_cache.json"
TMDB_TIMEOUT = 30

# Cached responses older than this are stale and get refetched in the background
CACHE_TTL_SECONDS = int(os.getenv("MOVIEDASH_CACHE_TTL", "300"))

# ── Preferences ──────────────────────────────────────────────────────────────
LANGUAGES = ("en-US", "zh-TW")
DEFAULT_LANGUAGE = "en-US"
THEMES = ("light", "dark")
DEFAULT_THEME = "light"

# ── View ─────────────────────────────────────────────────────────────────────
ALL_GENRES = "all"
SORT_KEYS = ("title", "year", "rating")
SORT_DIRECTIONS = ("asc", "desc")
UNKNOWN_GENRE = "Unknown"
RESIZE_DEBOUNCE_SECONDS = 0.1
DEFAULT_DISPLAY_WIDTH = 100
