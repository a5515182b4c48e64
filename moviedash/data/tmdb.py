"""TMDB API client for the popular movie list and genre list."""

from __future__ import annotations

import json
import threading
import time

import requests

from moviedash.config import TMDB_API_KEY, TMDB_BASE_URL, TMDB_CACHE_PATH, TMDB_TIMEOUT

# Both collections may be fetched at once and share one cache file
_cache_lock = threading.Lock()


class FetchError(RuntimeError):
    """A TMDB collection could not be fetched."""


def _load_cache() -> dict:
    """Load TMDB response cache from disk."""
    if TMDB_CACHE_PATH.exists():
        try:
            with open(TMDB_CACHE_PATH, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError:
            print(f"  TMDB cache at {TMDB_CACHE_PATH} is unreadable, ignoring it")
    return {}


def _save_cache(cache: dict) -> None:
    """Save TMDB response cache to disk."""
    with open(TMDB_CACHE_PATH, "w", encoding="utf-8") as f:
        json.dump(cache, f, indent=2, ensure_ascii=False)


def _cache_key(kind: str, language: str) -> str:
    return f"{kind}|{language}"


def _tmdb_get(endpoint: str, params: dict | None = None) -> dict:
    """Make a GET request to TMDB API.

    Raises FetchError for a missing API key and for any transport, HTTP
    status or JSON decoding failure.
    """
    if not TMDB_API_KEY:
        raise FetchError("TMDB_API_KEY is not set. Add it to your environment or .env file.")

    url = f"{TMDB_BASE_URL}{endpoint}"
    default_params = {"api_key": TMDB_API_KEY}
    if params:
        default_params.update(params)
    try:
        resp = requests.get(url, params=default_params, timeout=TMDB_TIMEOUT)
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as e:
        raise FetchError(f"TMDB request to {endpoint} failed: {e}") from e


def _movie_record(movie: dict) -> dict:
    """Keep the fields the dashboard renders from a /movie/popular result."""
    return {
        "id": movie["id"],
        "title": movie.get("title") or "",
        "release_date": movie.get("release_date") or "",
        "vote_average": float(movie.get("vote_average") or 0.0),
        "popularity": float(movie.get("popularity") or 0.0),
        "genre_ids": [int(g) for g in movie.get("genre_ids") or []],
    }


def _store(kind: str, language: str, data: list[dict]) -> None:
    try:
        with _cache_lock:
            cache = _load_cache()
            cache[_cache_key(kind, language)] = {"fetched_at": time.time(), "data": data}
            _save_cache(cache)
    except OSError as e:
        raise FetchError(f"Could not write TMDB cache {TMDB_CACHE_PATH}: {e}") from e


def load_cached(kind: str, language: str) -> tuple[list[dict], float] | None:
    """Return (data, fetched_at) for a cached collection, or None."""
    with _cache_lock:
        entry = _load_cache().get(_cache_key(kind, language))
    if not entry or "data" not in entry:
        return None
    return entry["data"], float(entry.get("fetched_at", 0.0))


def fetch_movies(language: str) -> list[dict]:
    """Fetch the first page of popular movies for a locale.

    Returns list of movie dicts with id, title, release_date,
    vote_average, popularity and genre_ids.
    """
    data = _tmdb_get("/movie/popular", {"language": language, "page": "1"})
    try:
        movies = [_movie_record(m) for m in data.get("results", []) if "id" in m]
    except (TypeError, ValueError, AttributeError) as e:
        raise FetchError(f"Malformed movie in TMDB response: {e}") from e
    _store("movies", language, movies)
    print(f"Fetched {len(movies)} popular movies ({language})")
    return movies


def fetch_genres(language: str) -> list[dict]:
    """Fetch the movie genre list with display names for a locale."""
    data = _tmdb_get("/genre/movie/list", {"language": language})
    try:
        genres = [
            {"id": int(g["id"]), "name": g.get("name") or ""}
            for g in data.get("genres", [])
            if "id" in g
        ]
    except (TypeError, ValueError, AttributeError) as e:
        raise FetchError(f"Malformed genre in TMDB response: {e}") from e
    _store("genres", language, genres)
    print(f"Fetched {len(genres)} genres ({language})")
    return genres


FETCHERS = {
    "movies": fetch_movies,
    "genres": fetch_genres,
}
