"""
Tests for the presentation helpers: rows, labels, text rendering and charts.
"""
import plotly.graph_objects as go

from moviedash.dashboard.charts import genre_rating_chart, palette, rating_popularity_chart
from moviedash.dashboard.i18n import LABELS, html_lang, t, theme_button_label
from moviedash.dashboard.present import (
    genre_options,
    genre_rating_table,
    movie_rows,
    release_year,
    scatter_points,
    sort_indicator,
)
from moviedash.dashboard.text_view import fit, render_cards, render_genre_ratings, render_table, text_width
from moviedash.features.genres import build_genre_index
from moviedash.features.pipeline import GenreRating, genre_rating_aggregate
from moviedash.features.view_state import ViewPreferences


# ── Rows and chart data ──────────────────────────────────────────────────────

class TestMovieRows:
    def test_row_fields(self, scenario_df, scenario_genres):
        rows = movie_rows(scenario_df, build_genre_index(scenario_genres), "Unknown")
        assert rows[1] == {"id": 2, "title": "Alpha", "year": "2019", "rating": 8.5,
                           "genres": ["Action", "Drama"]}

    def test_unknown_genre_placeholder(self, catalog_df, catalog_genres):
        rows = movie_rows(catalog_df, build_genre_index(catalog_genres), "未知")
        dune = next(r for r in rows if r["id"] == 14)
        assert dune["genres"] == ["Science Fiction", "未知"]

    def test_missing_release_date(self, catalog_df, catalog_genres):
        rows = movie_rows(catalog_df, build_genre_index(catalog_genres), "Unknown")
        eclair = next(r for r in rows if r["id"] == 13)
        assert eclair["year"] == ""
        assert eclair["genres"] == []

    def test_release_year(self):
        assert release_year("1999-03-31") == "1999"
        assert release_year("") == ""
        assert release_year(None) == ""

    def test_scatter_points(self, scenario_df):
        assert scatter_points(scenario_df) == [(7.0, 120.5), (8.5, 80.0)]

    def test_genre_rating_table(self, scenario_df, scenario_genres):
        table = genre_rating_table(genre_rating_aggregate(scenario_df, scenario_genres))
        assert table.to_dict("records") == [
            {"genre": "Action", "rating": 7.75},
            {"genre": "Drama", "rating": 8.5},
        ]

    def test_empty_genre_rating_table_keeps_columns(self):
        assert list(genre_rating_table([]).columns) == ["genre", "rating"]

    def test_genre_options(self, scenario_genres):
        assert genre_options(scenario_genres, "zh-TW") == [
            ("all", "所有類型"), ("1", "Action"), ("2", "Drama"),
        ]

    def test_sort_indicator(self):
        prefs = ViewPreferences(sort_key="year", sort_dir="desc")
        assert sort_indicator(prefs, "year") == "▼"
        assert sort_indicator(prefs, "title") == ""
        assert sort_indicator(ViewPreferences(), "title") == "▲"


# ── Labels ───────────────────────────────────────────────────────────────────

class TestLabels:
    def test_both_locales_have_same_keys(self):
        assert set(LABELS["en-US"]) == set(LABELS["zh-TW"])

    def test_translate(self):
        assert t("loading", "en-US") == "Loading..."
        assert t("loading", "zh-TW") == "載入中..."

    def test_unknown_language_falls_back_to_english(self):
        assert t("title", "fr-FR") == "Movie Dashboard"

    def test_html_lang(self):
        assert html_lang("en-US") == "en"
        assert html_lang("zh-TW") == "zh-TW"

    def test_theme_button_names_target_mode(self):
        assert theme_button_label("light", "en-US") == "Dark Mode"
        assert theme_button_label("dark", "zh-TW") == "淺色模式"


# ── Text rendering ───────────────────────────────────────────────────────────

class TestTextView:
    def test_wide_characters_count_double(self):
        assert text_width("abc") == 3
        assert text_width("電影") == 4

    def test_fit_pads_and_truncates(self):
        assert fit("abc", 5) == "abc  "
        assert fit("abcdefgh", 5) == "abcd…"
        assert text_width(fit("臥虎藏龍臥虎藏龍", 7)) == 7

    def test_table_lists_rows_in_order(self, scenario_df, scenario_genres):
        rows = movie_rows(scenario_df, build_genre_index(scenario_genres), "Unknown")
        lines = render_table(rows, ViewPreferences(), "en-US", 80).splitlines()
        assert lines[0].startswith("Title ▲")
        assert "Zeta" in lines[2] and "Alpha" in lines[3]
        assert all(text_width(line) <= 80 for line in lines)

    def test_cards(self, scenario_df, scenario_genres):
        rows = movie_rows(scenario_df, build_genre_index(scenario_genres), "Unknown")
        text = render_cards(rows, 40)
        assert "Alpha" in text and "Action, Drama" in text

    def test_genre_ratings_text(self):
        text = render_genre_ratings([GenreRating(1, "Action", 7.75, 2)], "en-US", 60)
        assert text.splitlines()[0] == "Average Rating by Genre"
        assert text.rstrip().endswith("7.75")

    def test_genre_ratings_empty(self):
        assert render_genre_ratings([], "zh-TW", 60) == "找不到電影。"


# ── Charts ───────────────────────────────────────────────────────────────────

class TestCharts:
    def test_bar_chart(self, scenario_df, scenario_genres):
        fig = genre_rating_chart(genre_rating_aggregate(scenario_df, scenario_genres), "dark", "en-US")
        assert isinstance(fig, go.Figure)
        bar = fig.data[0]
        assert list(bar.x) == ["Action", "Drama"]
        assert list(bar.y) == [7.75, 8.5]
        assert bar.marker.color == "#DB2777"
        assert fig.layout.title.text == "Average Rating by Genre"

    def test_scatter_chart(self, scenario_df):
        fig = rating_popularity_chart(scenario_df, "light", "zh-TW")
        scatter = fig.data[0]
        assert list(scatter.x) == [7.0, 8.5]
        assert list(scatter.y) == [120.5, 80.0]
        assert scatter.marker.color == "#C4B5FD"
        assert fig.layout.xaxis.title.text == "評分"

    def test_unknown_theme_uses_light(self):
        assert palette("sepia") == palette("light")
