"""Browse popular TMDB movies in the terminal.

Commands:
    genre <id|all>      filter by genre
    search [text]       filter titles (no text clears the search)
    sort <title|year|rating>
                        sort; repeating the same key flips the direction
    table | cards       switch the movie view
    chart               show average rating by genre
    genres              list genre ids
    lang | theme        toggle language / theme (saved for next time)
    refresh             refetch from TMDB
    quit
"""

from __future__ import annotations

import argparse
import shutil
import signal

from moviedash.config import LANGUAGES, SORT_KEYS
from moviedash.dashboard import controller as ctl
from moviedash.dashboard.controller import DashboardController
from moviedash.dashboard.i18n import t
from moviedash.dashboard.present import movie_rows
from moviedash.dashboard.text_view import render_cards, render_genre_ratings, render_table


def terminal_width() -> int:
    return shutil.get_terminal_size((100, 24)).columns


class Browser:
    def __init__(self, controller: DashboardController) -> None:
        self.controller = controller
        self.mode = "table"

    def draw(self) -> None:
        snap = self.controller.snapshot()
        language = snap.settings.language
        if snap.status == ctl.LOADING:
            print(t("loading", language))
            self.controller.source.wait()
            snap = self.controller.snapshot()

        print(f"\n{t('title', language)}  [{snap.settings.theme} / {language}]")
        if snap.status == ctl.ERROR:
            print(t("error", language))
            print(f"  {snap.error}")
            return
        if snap.status == ctl.LOADING:
            print(t("loading", language))
            return

        rows = movie_rows(snap.view.movies, snap.genre_index, t("unknown_genre", language))
        if not rows:
            print(t("no_results", language))
        elif self.mode == "cards":
            print(render_cards(rows, snap.width))
        else:
            print(render_table(rows, snap.prefs, language, snap.width))
        print(f"({len(rows)} {t('movies', language)})")

    def draw_chart(self) -> None:
        snap = self.controller.snapshot()
        if snap.view is None:
            self.draw()
            return
        print(render_genre_ratings(snap.view.genre_ratings, snap.settings.language, snap.width))

    def draw_genres(self) -> None:
        snap = self.controller.snapshot()
        for genre in snap.genres:
            print(f"  {genre['id']:>6}  {genre['name']}")

    def handle(self, line: str) -> bool:
        """Apply one command; returns False to quit."""
        command, _, arg = line.strip().partition(" ")
        arg = arg.strip()

        if command in ("quit", "exit", "q"):
            return False
        if command == "genre":
            try:
                self.controller.set_genre(arg or "all")
            except ValueError as e:
                print(e)
        elif command == "search":
            self.controller.set_query(arg)
        elif command == "sort":
            if arg not in SORT_KEYS:
                print(f"Sort by one of: {', '.join(SORT_KEYS)}")
            else:
                self.controller.toggle_sort(arg)
        elif command in ("table", "cards"):
            self.mode = command
            self.draw()
        elif command == "chart":
            self.draw_chart()
        elif command == "genres":
            self.draw_genres()
        elif command == "lang":
            self.controller.toggle_language()
        elif command == "theme":
            self.controller.toggle_theme()
        elif command == "refresh":
            self.controller.refresh()
            self.draw()
        elif command:
            print(__doc__)
        return True


def main():
    parser = argparse.ArgumentParser(description="Browse popular TMDB movies in the terminal.")
    parser.add_argument("--language", choices=LANGUAGES, help="override the saved language")
    args = parser.parse_args()

    controller = DashboardController(width=terminal_width())
    if args.language and args.language != controller.settings.language:
        controller.toggle_language()

    browser = Browser(controller)
    controller.subscribe(browser.draw)
    if hasattr(signal, "SIGWINCH"):
        signal.signal(signal.SIGWINCH, lambda *_: controller.resize(terminal_width()))

    controller.load()
    browser.draw()
    try:
        while True:
            try:
                line = input("> ")
            except EOFError:
                break
            if not browser.handle(line):
                break
    except KeyboardInterrupt:
        print()
    finally:
        controller.source.shutdown()


if __name__ == "__main__":
    main()
