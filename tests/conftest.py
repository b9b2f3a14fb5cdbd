"""
Pytest configuration and shared fixtures for Movie Search tests.

Provides OMDb payloads, a fake client that records every call, and job
runners that either run inline or hold jobs until the test releases them.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Tuple

import pytest

# Set environment variables BEFORE any imports (for CI without secret.env)
os.environ.setdefault("OMDB_API_KEY", "test_api_key")  # pragma: allowlist secret
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from movieSearch import settings
from movieSearch.metadata.core.models import MovieDetails, ResultPage
from movieSearch.gui.workers import run_inline


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    """Keep log_debug() output out of the package directory."""
    monkeypatch.setattr(settings, "LOG_PATH", tmp_path / "debug.log")


# ── payloads ──────────────────────────────────────────────────────────────
def search_entry(n: int, **over: Any) -> Dict[str, Any]:
    entry = {
        "Title": f"Batman {n}",
        "Year": str(1989 + n),
        "imdbID": f"tt{n:07d}",
        "Type": "movie",
        "Poster": f"https://img.example/{n}.jpg",
    }
    entry.update(over)
    return entry


def search_payload(start: int, count: int, total: int) -> Dict[str, Any]:
    return {
        "Search": [search_entry(n) for n in range(start, start + count)],
        "totalResults": str(total),
        "Response": "True",
    }


def make_page(start: int, count: int, total: int, page: int = 1) -> ResultPage:
    return ResultPage.from_omdb(search_payload(start, count, total), page)


@pytest.fixture
def details_payload() -> Dict[str, Any]:
    return {
        "Title": "Batman Begins",
        "Year": "2005",
        "Rated": "PG-13",
        "Released": "15 Jun 2005",
        "Runtime": "140 min",
        "Genre": "Action, Crime, Drama",
        "Director": "Christopher Nolan",
        "Writer": "Bob Kane, David S. Goyer, Christopher Nolan",
        "Actors": "Christian Bale, Michael Caine, Ken Watanabe",
        "Plot": "After witnessing his parents' death, Bruce learns the art of fighting.",
        "Language": "English, Mandarin",
        "Country": "United States, United Kingdom",
        "Awards": "Nominated for 1 Oscar.",
        "Poster": "https://img.example/begins.jpg",
        "Ratings": [
            {"Source": "Internet Movie Database", "Value": "8.2/10"},
            {"Source": "Rotten Tomatoes", "Value": "85%"},
            {"Source": "Metacritic", "Value": "70/100"},
        ],
        "Metascore": "70",
        "imdbRating": "8.2",
        "imdbVotes": "1,600,000",
        "imdbID": "tt0372784",
        "Type": "movie",
        "DVD": "N/A",
        "BoxOffice": "$206,863,479",
        "Production": "N/A",
        "Website": "N/A",
        "Response": "True",
    }


# ── fake client ───────────────────────────────────────────────────────────
class FakeClient:
    """Stands in for OMDBClient; answers come from dicts keyed by request."""

    def __init__(self) -> None:
        self.pages: Dict[Tuple[str, int], Any] = {}
        self.records: Dict[str, Any] = {}
        self.calls: List[Tuple] = []
        self.poster_calls: List[str] = []

    def search(self, query: str, page: int = 1) -> ResultPage:
        self.calls.append(("search", query, page))
        out = self.pages[(query, page)]
        if isinstance(out, BaseException):
            raise out
        return out

    def details(self, imdb_id: str) -> MovieDetails:
        self.calls.append(("details", imdb_id))
        out = self.records[imdb_id]
        if isinstance(out, BaseException):
            raise out
        return out

    def fetch_poster(self, url: str) -> bytes:
        self.poster_calls.append(url)
        return b""


@pytest.fixture
def fake_client() -> FakeClient:
    client = FakeClient()
    client.pages[("batman", 1)] = make_page(1, 10, 15, page=1)
    client.pages[("batman", 2)] = make_page(11, 5, 15, page=2)
    return client


# ── runners ───────────────────────────────────────────────────────────────
class DeferredRunner:
    """Holds jobs until `complete(i)` so tests can reorder completions."""

    def __init__(self) -> None:
        self.jobs: List[Tuple[Callable, Callable, Callable]] = []

    def __call__(self, job, on_success, on_failure) -> None:
        self.jobs.append((job, on_success, on_failure))

    def complete(self, index: int) -> None:
        job, ok, err = self.jobs[index]
        run_inline(job, ok, err)


@pytest.fixture
def inline_runner():
    return run_inline


@pytest.fixture
def deferred_runner() -> DeferredRunner:
    return DeferredRunner()

