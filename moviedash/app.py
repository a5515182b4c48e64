"""Streamlit movie dashboard.

Run with: streamlit run moviedash/app.py
"""

from __future__ import annotations

import streamlit as st
import streamlit.components.v1 as components

from moviedash.config import SORT_KEYS
from moviedash.dashboard import controller as ctl
from moviedash.dashboard.charts import PRIMARY, genre_rating_chart, palette, rating_popularity_chart
from moviedash.dashboard.controller import DashboardController
from moviedash.dashboard.i18n import SORT_LABEL_KEYS, html_lang, t, theme_button_label
from moviedash.dashboard.present import (
    genre_options,
    genre_rating_table,
    movie_rows,
    sort_indicator,
)
from moviedash.data.source import MovieSource


@st.cache_resource
def get_source() -> MovieSource:
    """One fetch cache shared by every browser session."""
    return MovieSource()


def get_controller() -> DashboardController:
    if "controller" not in st.session_state:
        st.session_state.controller = DashboardController(source=get_source())
    return st.session_state.controller


def inject_theme(theme: str, language: str) -> None:
    p = palette(theme)
    st.markdown(
        f"<style>"
        f".stApp {{ background-color: {p['background']}; color: {p['text']}; }}"
        f"h1, h2, h3 {{ color: {PRIMARY}; }}"
        f"</style>",
        unsafe_allow_html=True,
    )
    # Markdown drops scripts; the component iframe sets lang on the parent page
    components.html(
        f"<script>window.parent.document.documentElement.setAttribute('lang', '{html_lang(language)}');</script>",
        height=0,
    )


def render_header(controller: DashboardController, language: str, theme: str) -> None:
    col_title, col_theme, col_lang = st.columns([6, 2, 2])
    with col_title:
        st.title(t("title", language))
    with col_theme:
        st.button(theme_button_label(theme, language), on_click=controller.toggle_theme, use_container_width=True)
    with col_lang:
        st.button(t("switch_language", language), on_click=controller.toggle_language, use_container_width=True)


def render_controls(controller: DashboardController, snap: ctl.DashboardSnapshot) -> str:
    language = snap.settings.language
    options = genre_options(snap.genres, language)
    labels = dict(options)
    values = [value for value, _ in options]
    current = str(snap.prefs.genre)

    col_genre, col_search, col_mode = st.columns([3, 4, 2])
    with col_genre:
        selected = st.selectbox(
            t("filter_by_genre", language),
            values,
            index=values.index(current) if current in values else 0,
            format_func=labels.get,
            key="genre_filter",
        )
        controller.set_genre(selected)
    with col_search:
        query = st.text_input(t("search", language), value=snap.prefs.query, key="title_search")
        controller.set_query(query)
    with col_mode:
        mode = st.radio(
            " ",
            ["table", "cards"],
            format_func=lambda m: t("table_view" if m == "table" else "card_view", language),
            horizontal=True,
            key="view_mode",
        )

    st.caption(t("sort_by", language))
    for col, key in zip(st.columns(len(SORT_KEYS)), SORT_KEYS):
        with col:
            label = f"{t(SORT_LABEL_KEYS[key], language)} {sort_indicator(controller.prefs, key)}".strip()
            st.button(label, key=f"sort_{key}", on_click=controller.toggle_sort, args=(key,), use_container_width=True)
    return mode


def render_movies(snap: ctl.DashboardSnapshot, mode: str) -> None:
    language = snap.settings.language
    rows = movie_rows(snap.view.movies, snap.genre_index, t("unknown_genre", language))
    if not rows:
        st.info(t("no_results", language))
        return

    if mode == "table":
        st.dataframe(
            [
                {
                    t("col_title", language): r["title"],
                    t("col_year", language): r["year"],
                    t("col_rating", language): r["rating"],
                    t("col_genres", language): ", ".join(r["genres"]),
                }
                for r in rows
            ],
            hide_index=True,
            use_container_width=True,
        )
        return

    for start in range(0, len(rows), 3):
        for col, r in zip(st.columns(3), rows[start:start + 3]):
            with col, st.container(border=True):
                st.markdown(f"**{r['title']}**")
                st.caption(f"{r['year']} · ⭐ {r['rating']}")
                st.caption(", ".join(r["genres"]))


def render_charts(snap: ctl.DashboardSnapshot) -> None:
    language, theme = snap.settings.language, snap.settings.theme
    st.plotly_chart(genre_rating_chart(snap.view.genre_ratings, theme, language), use_container_width=True)
    with st.expander(t("show_data", language)):
        table = genre_rating_table(snap.view.genre_ratings)
        table.columns = [t("col_genres", language), t("col_rating", language)]
        st.dataframe(table, hide_index=True, use_container_width=True)
    st.plotly_chart(rating_popularity_chart(snap.view.movies, theme, language), use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Movie Dashboard", layout="wide")
    controller = get_controller()
    snap = controller.snapshot()
    language, theme = snap.settings.language, snap.settings.theme
    inject_theme(theme, language)

    if snap.status == ctl.LOADING:
        with st.spinner(t("loading", language)):
            controller.source.wait()
        snap = controller.snapshot()

    render_header(controller, language, theme)

    if snap.status == ctl.ERROR:
        st.error(t("error", language))
        st.caption(snap.error or "")
        return
    if snap.status == ctl.LOADING:
        st.info(t("loading", language))
        return

    mode = render_controls(controller, snap)
    # Widgets may have changed the preferences; rebuild from the latest state
    snap = controller.snapshot()
    render_movies(snap, mode)
    render_charts(snap)


main()
