"""Derived view: genre filter -> sort -> title search, plus per-genre ratings.

Every stage takes a movies DataFrame and returns a new one (or the same
object when the stage is a no-op). Nothing is cached; the view is rebuilt
from the full movie list whenever an input changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import pandas as pd
from pyuca import Collator

from moviedash.config import ALL_GENRES, SORT_DIRECTIONS, SORT_KEYS
from moviedash.features.view_state import ViewPreferences

MOVIE_COLUMNS = ["id", "title", "release_date", "vote_average", "popularity", "genre_ids"]


def _safe_list(val) -> list:
    """Convert a value to a Python list (handles numpy arrays, None, NaN, etc.)."""
    if val is None:
        return []
    if isinstance(val, list):
        return val
    try:
        return list(val)
    except TypeError:
        return []


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the DUCET table is slow, build it once
    return Collator()


def movies_frame(records) -> pd.DataFrame:
    """Build the movies DataFrame from TMDB movie dicts.

    Missing columns are created and missing values filled so every stage
    can rely on them.
    """
    df = pd.DataFrame(list(records or []))

    for col in MOVIE_COLUMNS:
        if col not in df.columns:
            df[col] = pd.Series([None] * len(df), index=df.index, dtype=object)

    df["title"] = df["title"].fillna("").astype(str)
    df["release_date"] = df["release_date"].apply(lambda d: d if isinstance(d, str) else "")
    for col in ["vote_average", "popularity"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0.0).astype(float)
    # A repeated id still means one genre membership
    df["genre_ids"] = df["genre_ids"].apply(lambda ids: list(dict.fromkeys(int(g) for g in _safe_list(ids))))

    extra = [c for c in df.columns if c not in MOVIE_COLUMNS]
    return df[MOVIE_COLUMNS + extra].reset_index(drop=True)


# ── Stages ───────────────────────────────────────────────────────────────────

def filter_by_genre(movies: pd.DataFrame, genre) -> pd.DataFrame:
    """Keep movies tagged with `genre`; "all" returns the input unchanged."""
    if genre == ALL_GENRES:
        return movies
    try:
        genre_id = int(genre)
    except (TypeError, ValueError):
        return movies.iloc[0:0]
    mask = movies["genre_ids"].map(lambda ids: genre_id in ids).astype(bool)
    return movies[mask]


def search_titles(movies: pd.DataFrame, query: str) -> pd.DataFrame:
    """Case-insensitive substring match on the title.

    Uses Unicode case folding, so cased scripts match regardless of case and
    uncased scripts (CJK) are compared as-is. The query is literal text.
    """
    needle = (query or "").casefold()
    if not needle:
        return movies
    mask = movies["title"].astype(str).str.casefold().str.contains(needle, regex=False).astype(bool)
    return movies[mask]


def _sort_values(movies: pd.DataFrame, key: str) -> list:
    if key == "title":
        collator = _collator()
        return [collator.sort_key(t) for t in movies["title"].astype(str)]
    if key == "year":
        # ISO dates are fixed-width, so string order is chronological; missing sorts first
        return [d if isinstance(d, str) else "" for d in movies["release_date"]]
    return [float(r) for r in movies["vote_average"]]


def sort_movies(movies: pd.DataFrame, key: str = "title", direction: str = "asc") -> pd.DataFrame:
    """Stable sort by title (collation order), year (release date) or rating.

    Descending is the exact reverse of the ascending result.
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key!r}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort direction: {direction!r}")

    values = _sort_values(movies, key)
    order = sorted(range(len(values)), key=values.__getitem__)
    if direction == "desc":
        order.reverse()
    return movies.iloc[order]


@dataclass(frozen=True)
class GenreRating:
    genre_id: int
    genre: str
    rating: float
    count: int


def genre_rating_aggregate(movies: pd.DataFrame, genres: list[dict]) -> list[GenreRating]:
    """Mean vote_average per genre, in genre-list order.

    Genres without any movie are left out rather than reported as zero.
    Pass the full movie list here, not the filtered or searched one.
    """
    if movies.empty or not genres:
        return []

    exploded = movies[["genre_ids", "vote_average"]].explode("genre_ids")
    exploded = exploded.dropna(subset=["genre_ids"])
    if exploded.empty:
        return []
    stats = exploded.groupby(exploded["genre_ids"].astype(int))["vote_average"].agg(["sum", "count"])

    result = []
    for genre in genres:
        genre_id = int(genre["id"])
        if genre_id not in stats.index:
            continue
        row = stats.loc[genre_id]
        count = int(row["count"])
        result.append(GenreRating(
            genre_id=genre_id,
            genre=genre["name"],
            rating=float(row["sum"]) / count,
            count=count,
        ))
    return result


# ── Composition ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DerivedView:
    filtered: pd.DataFrame
    sorted: pd.DataFrame
    searched: pd.DataFrame
    genre_ratings: list[GenreRating] = field(default_factory=list)

    @property
    def movies(self) -> pd.DataFrame:
        """The list the table, cards and scatter chart render."""
        return self.searched


def compose_view(movies: pd.DataFrame, genres: list[dict], prefs: ViewPreferences) -> DerivedView:
    """Run filter -> sort -> search and the independent genre aggregate."""
    filtered = filter_by_genre(movies, prefs.genre)
    ordered = sort_movies(filtered, prefs.sort_key, prefs.sort_dir)
    searched = search_titles(ordered, prefs.query)
    return DerivedView(
        filtered=filtered,
        sorted=ordered,
        searched=searched,
        genre_ratings=genre_rating_aggregate(movies, genres),
    )
