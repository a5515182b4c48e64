"""Immutable view preferences and dashboard settings."""

from __future__ import annotations

from dataclasses import dataclass, replace

from moviedash.config import (
    ALL_GENRES,
    DEFAULT_LANGUAGE,
    DEFAULT_THEME,
    LANGUAGES,
    SORT_DIRECTIONS,
    SORT_KEYS,
    THEMES,
)


@dataclass(frozen=True)
class ViewPreferences:
    """Genre filter, search query and the single active sort.

    `genre` is either "all" or an int genre id.
    """

    genre: int | str = ALL_GENRES
    query: str = ""
    sort_key: str = "title"
    sort_dir: str = "asc"

    def __post_init__(self):
        if self.sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {self.sort_key!r}")
        if self.sort_dir not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction: {self.sort_dir!r}")

    def with_genre(self, genre) -> "ViewPreferences":
        return replace(self, genre=normalize_genre(genre))

    def with_query(self, query: str) -> "ViewPreferences":
        return replace(self, query=query or "")

    def toggle_sort(self, key: str) -> "ViewPreferences":
        """Same key flips the direction; a new key starts ascending."""
        if key == self.sort_key:
            return replace(self, sort_dir="desc" if self.sort_dir == "asc" else "asc")
        return replace(self, sort_key=key, sort_dir="asc")


def normalize_genre(genre) -> int | str:
    """Coerce a select-widget value ("all", "28", 28) to "all" or an int id."""
    if genre is None or genre == ALL_GENRES:
        return ALL_GENRES
    try:
        return int(genre)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid genre filter: {genre!r}") from None


@dataclass(frozen=True)
class DashboardSettings:
    theme: str = DEFAULT_THEME
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_store(cls, store) -> "DashboardSettings":
        """Read persisted settings, falling back to defaults for unknown values."""
        theme = store.get("theme", DEFAULT_THEME)
        language = store.get("language", DEFAULT_LANGUAGE)
        return cls(
            theme=theme if theme in THEMES else DEFAULT_THEME,
            language=language if language in LANGUAGES else DEFAULT_LANGUAGE,
        )

    def toggle_theme(self) -> "DashboardSettings":
        return replace(self, theme="dark" if self.theme == "light" else "light")

    def toggle_language(self) -> "DashboardSettings":
        return replace(self, language="zh-TW" if self.language == "en-US" else "en-US")
