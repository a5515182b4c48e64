"""Plain-text rendering of the dashboard for the terminal browser."""

from __future__ import annotations

import unicodedata

from moviedash.dashboard.i18n import t
from moviedash.dashboard.present import sort_indicator
from moviedash.features.pipeline import GenreRating
from moviedash.features.view_state import ViewPreferences

YEAR_WIDTH = 6
RATING_WIDTH = 8
BAR_SCALE = 10.0


def text_width(text: str) -> int:
    """Terminal columns taken by `text`; wide (CJK) characters count as two."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def fit(text: str, width: int) -> str:
    """Truncate with an ellipsis and pad so the cell is exactly `width` columns."""
    if width <= 0:
        return ""
    if text_width(text) > width:
        out, used = "", 0
        for ch in text:
            w = text_width(ch)
            if used + w > width - 1:
                break
            out += ch
            used += w
        text = out + "…"
    return text + " " * (width - text_width(text))


def _column_widths(width: int) -> tuple[int, int]:
    flexible = max(width - YEAR_WIDTH - RATING_WIDTH - 3, 20)
    title_width = flexible * 3 // 5
    return title_width, flexible - title_width


def render_table(rows: list[dict], prefs: ViewPreferences, language: str, width: int) -> str:
    title_w, genres_w = _column_widths(width)
    headers = [
        (f"{t('col_title', language)} {sort_indicator(prefs, 'title')}", title_w),
        (f"{t('col_year', language)} {sort_indicator(prefs, 'year')}", YEAR_WIDTH),
        (f"{t('col_rating', language)} {sort_indicator(prefs, 'rating')}", RATING_WIDTH),
        (t("col_genres", language), genres_w),
    ]
    lines = [" ".join(fit(h.strip(), w) for h, w in headers).rstrip()]
    lines.append("─" * min(width, title_w + genres_w + YEAR_WIDTH + RATING_WIDTH + 3))
    for r in rows:
        lines.append(" ".join([
            fit(r["title"], title_w),
            fit(r["year"], YEAR_WIDTH),
            fit(f"{r['rating']:.1f}", RATING_WIDTH),
            fit(", ".join(r["genres"]), genres_w),
        ]).rstrip())
    return "\n".join(lines)


def render_cards(rows: list[dict], width: int) -> str:
    blocks = []
    for r in rows:
        blocks.append("\n".join([
            fit(r["title"], width).rstrip(),
            f"  {r['year']}  ★ {r['rating']:.1f}",
            "  " + fit(", ".join(r["genres"]), max(width - 2, 1)).rstrip(),
        ]))
    return "\n\n".join(blocks)


def render_genre_ratings(genre_ratings: list[GenreRating], language: str, width: int) -> str:
    """Bar chart as text: one line per genre with its mean rating."""
    if not genre_ratings:
        return t("no_results", language)
    label_w = min(max(text_width(r.genre) for r in genre_ratings), 16)
    bar_w = max(width - label_w - 8, 10)
    lines = [t("genre_chart", language)]
    for r in genre_ratings:
        filled = round(bar_w * min(max(r.rating, 0.0), BAR_SCALE) / BAR_SCALE)
        lines.append(f"{fit(r.genre, label_w)} {'█' * filled:<{bar_w}} {r.rating:.2f}".rstrip())
    return "\n".join(lines)
