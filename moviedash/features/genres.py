"""Genre id -> display name lookup."""

from __future__ import annotations

from typing import Iterable

from moviedash.config import UNKNOWN_GENRE


def build_genre_index(genres: Iterable[dict]) -> dict[int, str]:
    """Map each genre id to its display name."""
    return {int(g["id"]): g["name"] for g in genres}


def genre_name(index: dict[int, str], genre_id, unknown: str = UNKNOWN_GENRE) -> str:
    """Look up a genre name; ids missing from the index resolve to `unknown`."""
    try:
        return index.get(int(genre_id), unknown)
    except (TypeError, ValueError):
        return unknown


def genre_names(index: dict[int, str], genre_ids, unknown: str = UNKNOWN_GENRE) -> list[str]:
    return [genre_name(index, g, unknown) for g in genre_ids or []]
