"""Owns the dashboard state and rebuilds the derived view on every change."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from moviedash.config import DEFAULT_DISPLAY_WIDTH, RESIZE_DEBOUNCE_SECONDS
from moviedash.dashboard.debounce import Debouncer
from moviedash.data.preferences import PreferenceStore
from moviedash.data.source import MovieSource
from moviedash.features.genres import build_genre_index
from moviedash.features.pipeline import DerivedView, compose_view, movies_frame
from moviedash.features.view_state import DashboardSettings, ViewPreferences

LOADING = "loading"
ERROR = "error"
EMPTY = "empty"
READY = "ready"


@dataclass(frozen=True)
class DashboardSnapshot:
    status: str
    settings: DashboardSettings
    prefs: ViewPreferences
    width: int
    view: DerivedView | None = None
    genres: list[dict] = field(default_factory=list)
    genre_index: dict[int, str] = field(default_factory=dict)
    error: str | None = None


class DashboardController:
    """Single owner of settings, view preferences and display width.

    State objects are immutable; each update swaps in a new one and
    notifies subscribers, who pull a fresh snapshot().
    """

    def __init__(
        self,
        source: MovieSource | None = None,
        store: PreferenceStore | None = None,
        width: int = DEFAULT_DISPLAY_WIDTH,
        resize_wait: float = RESIZE_DEBOUNCE_SECONDS,
    ) -> None:
        self.store = store or PreferenceStore()
        self.source = source or MovieSource()
        self.settings = DashboardSettings.from_store(self.store)
        self.prefs = ViewPreferences()
        self.width = width
        self._resize = Debouncer(resize_wait, self._apply_width)
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()

    # ── View preferences ─────────────────────────────────────────────────────

    def _set_prefs(self, prefs: ViewPreferences) -> None:
        if prefs != self.prefs:
            self.prefs = prefs
            self._notify()

    def set_genre(self, genre) -> None:
        self._set_prefs(self.prefs.with_genre(genre))

    def set_query(self, query: str) -> None:
        self._set_prefs(self.prefs.with_query(query))

    def toggle_sort(self, key: str) -> None:
        self._set_prefs(self.prefs.toggle_sort(key))

    # ── Persisted settings ───────────────────────────────────────────────────

    def toggle_theme(self) -> None:
        self.settings = self.settings.toggle_theme()
        self.store.set("theme", self.settings.theme)
        self._notify()

    def toggle_language(self) -> None:
        self.settings = self.settings.toggle_language()
        self.store.set("language", self.settings.language)
        self.load()
        self._notify()

    # ── Display width ────────────────────────────────────────────────────────

    def resize(self, width: int) -> None:
        """Record a new display width; bursts collapse into one update."""
        self._resize(width)

    def _apply_width(self, width: int) -> None:
        if width != self.width:
            self.width = width
            self._notify()

    # ── Data ─────────────────────────────────────────────────────────────────

    def load(self) -> None:
        """Start (or reuse) the fetches for the current language."""
        self.source.load(self.settings.language)

    def refresh(self) -> None:
        language = self.settings.language
        self.source.refetch("movies", language)
        self.source.refetch("genres", language)

    def snapshot(self) -> DashboardSnapshot:
        """Current status plus the derived view recomputed from scratch."""
        movies_state, genres_state = self.source.load(self.settings.language)
        base = dict(settings=self.settings, prefs=self.prefs, width=self.width)

        if movies_state.is_error or genres_state.is_error:
            error = movies_state.error or genres_state.error
            return DashboardSnapshot(status=ERROR, error=error, **base)
        if movies_state.is_loading or genres_state.is_loading:
            return DashboardSnapshot(status=LOADING, **base)

        genres = genres_state.data or []
        movies = movies_frame(movies_state.data or [])
        view = compose_view(movies, genres, self.prefs)
        return DashboardSnapshot(
            status=EMPTY if view.movies.empty else READY,
            view=view,
            genres=genres,
            genre_index=build_genre_index(genres),
            **base,
        )
