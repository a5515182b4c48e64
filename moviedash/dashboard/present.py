"""Turn the derived view into rows, cards, chart points and select options."""

from __future__ import annotations

import pandas as pd

from moviedash.config import ALL_GENRES
from moviedash.dashboard.i18n import t
from moviedash.features.genres import genre_names
from moviedash.features.pipeline import GenreRating
from moviedash.features.view_state import ViewPreferences


def release_year(release_date) -> str:
    """First four characters of an ISO date; empty when the date is missing."""
    if not isinstance(release_date, str):
        return ""
    return release_date[:4]


def movie_rows(movies: pd.DataFrame, genre_index: dict[int, str], unknown: str) -> list[dict]:
    """One dict per movie for the table and card views, in view order."""
    return [
        {
            "id": int(row["id"]),
            "title": row["title"],
            "year": release_year(row["release_date"]),
            "rating": float(row["vote_average"]),
            "genres": genre_names(genre_index, row["genre_ids"], unknown),
        }
        for _, row in movies.iterrows()
    ]


def scatter_points(movies: pd.DataFrame) -> list[tuple[float, float]]:
    return list(zip(movies["vote_average"].astype(float), movies["popularity"].astype(float)))


def genre_rating_table(genre_ratings: list[GenreRating]) -> pd.DataFrame:
    """Tabular fallback for the genre bar chart."""
    return pd.DataFrame(
        [{"genre": r.genre, "rating": round(r.rating, 2)} for r in genre_ratings],
        columns=["genre", "rating"],
    )


def genre_options(genres: list[dict], language: str) -> list[tuple[str, str]]:
    """(value, label) pairs for the genre select, "all" first."""
    options = [(ALL_GENRES, t("all_genres", language))]
    options += [(str(g["id"]), g["name"]) for g in genres]
    return options


def sort_indicator(prefs: ViewPreferences, key: str) -> str:
    """Arrow shown next to the active sort column header."""
    if prefs.sort_key != key:
        return ""
    return "▲" if prefs.sort_dir == "asc" else "▼"
