"""Shared fixtures for moviedash tests.

Points the data directory at a temp dir before any moviedash module is
imported, so tests never touch the real cache or preferences.
"""

import os
import sys
import tempfile
from concurrent.futures import Future
from pathlib import Path

import pytest

os.environ["MOVIEDASH_DATA_DIR"] = tempfile.mkdtemp(prefix="moviedash-tests-")
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from moviedash.data.preferences import PreferenceStore  # noqa: E402
from moviedash.features.pipeline import movies_frame  # noqa: E402


ZETA = {"id": 1, "title": "Zeta", "release_date": "2020-05-01", "vote_average": 7.0,
        "popularity": 120.5, "genre_ids": [1]}
ALPHA = {"id": 2, "title": "Alpha", "release_date": "2019-03-12", "vote_average": 8.5,
         "popularity": 80.0, "genre_ids": [1, 2]}


@pytest.fixture
def scenario_movies():
    return [dict(ZETA), dict(ALPHA)]


@pytest.fixture
def scenario_genres():
    return [{"id": 1, "name": "Action"}, {"id": 2, "name": "Drama"}]


@pytest.fixture
def scenario_df(scenario_movies):
    return movies_frame(scenario_movies)


@pytest.fixture
def catalog_df():
    """A mixed English/Chinese page with ties, missing dates and unknown genres."""
    return movies_frame([
        {"id": 10, "title": "The Matrix", "release_date": "1999-03-31", "vote_average": 8.2,
         "popularity": 90.0, "genre_ids": [28, 878]},
        {"id": 11, "title": "臥虎藏龍", "release_date": "2000-07-06", "vote_average": 7.9,
         "popularity": 40.0, "genre_ids": [28, 18]},
        {"id": 12, "title": "alien", "release_date": "1979-05-25", "vote_average": 8.2,
         "popularity": 60.0, "genre_ids": [27, 878]},
        {"id": 13, "title": "Éclair", "release_date": "", "vote_average": 6.1,
         "popularity": 5.0, "genre_ids": []},
        {"id": 14, "title": "Dune", "release_date": "2021-09-15", "vote_average": 7.9,
         "popularity": 150.0, "genre_ids": [878, 9999]},
        {"id": 15, "title": "MATRIX Reloaded", "release_date": "2003-05-15", "vote_average": 7.0,
         "popularity": 70.0, "genre_ids": [28, 878]},
    ])


@pytest.fixture
def catalog_genres():
    return [
        {"id": 28, "name": "Action"},
        {"id": 18, "name": "Drama"},
        {"id": 27, "name": "Horror"},
        {"id": 878, "name": "Science Fiction"},
        {"id": 35, "name": "Comedy"},
    ]


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(tmp_path / "preferences.json")


class ImmediateExecutor:
    """Runs submitted work on the calling thread."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:  # handed to the future like a real executor would
            future.set_exception(e)
        return future

    def shutdown(self, wait=True):
        pass


class ManualExecutor:
    """Holds submitted work until run_all() is called."""

    def __init__(self):
        self.pending = []

    def submit(self, fn, *args, **kwargs):
        future = Future()
        self.pending.append((future, fn, args, kwargs))
        return future

    def run_all(self):
        pending, self.pending = self.pending, []
        for future, fn, args, kwargs in pending:
            try:
                future.set_result(fn(*args, **kwargs))
            except Exception as e:
                future.set_exception(e)

    def shutdown(self, wait=True):
        pass


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def immediate_executor():
    return ImmediateExecutor()


@pytest.fixture
def manual_executor():
    return ManualExecutor()


@pytest.fixture
def clock():
    return FakeClock()
