"""UI labels for the two supported locales."""

from __future__ import annotations

LABELS: dict[str, dict[str, str]] = {
    "en-US": {
        "title": "Movie Dashboard",
        "loading": "Loading...",
        "error": "Error loading data. Please try again later.",
        "no_results": "No movies found.",
        "filter_by_genre": "Filter by Genre",
        "select_genre": "Select genre",
        "all_genres": "All Genres",
        "search": "Search by title",
        "sort_by": "Sort by",
        "col_title": "Title",
        "col_year": "Year",
        "col_rating": "Rating",
        "col_genres": "Genres",
        "col_popularity": "Popularity",
        "genre_chart": "Average Rating by Genre",
        "scatter_chart": "Rating vs Popularity",
        "movies": "Movies",
        "dark_mode": "Dark Mode",
        "light_mode": "Light Mode",
        "switch_language": "中文",
        "table_view": "Table",
        "card_view": "Cards",
        "unknown_genre": "Unknown",
        "show_data": "Show data table",
    },
    "zh-TW": {
        "title": "電影儀表板",
        "loading": "載入中...",
        "error": "載入資料時發生錯誤，請稍後再試。",
        "no_results": "找不到電影。",
        "filter_by_genre": "按類型篩選",
        "select_genre": "選擇類型",
        "all_genres": "所有類型",
        "search": "按標題搜尋",
        "sort_by": "排序方式",
        "col_title": "標題",
        "col_year": "年份",
        "col_rating": "評分",
        "col_genres": "類型",
        "col_popularity": "熱門度",
        "genre_chart": "類型平均評分",
        "scatter_chart": "評分與熱門度比較",
        "movies": "電影",
        "dark_mode": "深色模式",
        "light_mode": "淺色模式",
        "switch_language": "English",
        "table_view": "表格",
        "card_view": "卡片",
        "unknown_genre": "未知",
        "show_data": "顯示資料表",
    },
}

SORT_LABEL_KEYS = {"title": "col_title", "year": "col_year", "rating": "col_rating"}


def t(key: str, language: str) -> str:
    """Translate a label key; unknown languages use English."""
    labels = LABELS.get(language, LABELS["en-US"])
    return labels.get(key, LABELS["en-US"][key])


def html_lang(language: str) -> str:
    """Value for the document lang attribute."""
    return "en" if language == "en-US" else "zh-TW"


def theme_button_label(theme: str, language: str) -> str:
    """The theme button names the mode it switches to."""
    return t("dark_mode" if theme == "light" else "light_mode", language)
