"""Plotly figures for the genre rating bars and the rating/popularity scatter."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from moviedash.dashboard.i18n import t
from moviedash.dashboard.present import scatter_points
from moviedash.features.pipeline import GenreRating

# ── Theme tokens ─────────────────────────────────────────────────────────────
THEMES = {
    "light": {
        "template": "plotly_white",
        "background": "#F5F5F5",
        "text": "#374151",
        "panel": "#FFFFFF",
        "tooltip": "#FFFFFF",
        "bar": "#F9A8D4",
        "scatter": "#C4B5FD",
    },
    "dark": {
        "template": "plotly_dark",
        "background": "#1F2937",
        "text": "#D1D5DB",
        "panel": "#1F2937",
        "tooltip": "#1F2937",
        "bar": "#DB2777",
        "scatter": "#7C3AED",
    },
}
PRIMARY = "#F9A8D4"
GRID_COLOR = "#E5E7EB"
AXIS_COLOR = "#6B7280"
CHART_HEIGHT = 300


def palette(theme: str) -> dict[str, str]:
    return THEMES.get(theme, THEMES["light"])


def apply_theme(fig: go.Figure, theme: str) -> go.Figure:
    p = palette(theme)
    fig.update_layout(
        template=p["template"],
        paper_bgcolor=p["panel"],
        plot_bgcolor=p["panel"],
        font_color=p["text"],
        hoverlabel=dict(bgcolor=p["tooltip"], bordercolor=p["tooltip"], font=dict(color=p["text"])),
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=45, b=10),
    )
    fig.update_xaxes(gridcolor=GRID_COLOR, linecolor=AXIS_COLOR, tickfont=dict(color=AXIS_COLOR))
    fig.update_yaxes(gridcolor=GRID_COLOR, linecolor=AXIS_COLOR, tickfont=dict(color=AXIS_COLOR))
    return fig


def genre_rating_chart(
    genre_ratings: list[GenreRating],
    theme: str,
    language: str,
) -> go.Figure:
    """Bar chart of mean rating per genre."""
    fig = go.Figure(go.Bar(
        x=[r.genre for r in genre_ratings],
        y=[r.rating for r in genre_ratings],
        marker_color=palette(theme)["bar"],
        name=t("col_rating", language),
        hovertemplate="%{x}: %{y:.2f}<extra></extra>",
    ))
    fig.update_layout(title=t("genre_chart", language))
    fig.update_yaxes(range=[0, 10])
    return apply_theme(fig, theme)


def rating_popularity_chart(
    movies: pd.DataFrame,
    theme: str,
    language: str,
) -> go.Figure:
    """Scatter of vote_average (x) against popularity (y) for the visible movies."""
    points = scatter_points(movies)
    fig = go.Figure(go.Scatter(
        x=[x for x, _ in points],
        y=[y for _, y in points],
        text=movies["title"].tolist(),
        mode="markers",
        marker=dict(color=palette(theme)["scatter"], size=9),
        name=t("movies", language),
        hovertemplate="%{text}<br>%{x} / %{y:.1f}<extra></extra>",
    ))
    fig.update_layout(
        title=t("scatter_chart", language),
        xaxis_title=t("col_rating", language),
        yaxis_title=t("col_popularity", language),
    )
    return apply_theme(fig, theme)
