"""
Tests for SearchController / DetailsController with a fake OMDb client.

Jobs run inline (or deferred, to reorder completions); no threads are started.
"""

import pytest

from conftest import make_page
from movieSearch import settings
from movieSearch.settings import MSG_EMPTY_QUERY, MSG_NO_ID, MSG_SEARCH_CONNECTION
from movieSearch.metadata.core.errors import OMDbConnectionError, OMDbResponseError
from movieSearch.metadata.core.models import MovieDetails
from movieSearch.gui.controller import DetailsController, SearchController


@pytest.fixture
def search(qapp, fake_client, inline_runner):
    return SearchController(fake_client, inline_runner)


@pytest.fixture
def details(qapp, fake_client, inline_runner):
    return DetailsController(fake_client, inline_runner)


def _search_calls(client):
    return [c for c in client.calls if c[0] == "search"]


# ── search ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("query", ["", "    "])
def test_blank_query_never_hits_network(search, fake_client, query):
    search.submit_query(query)

    assert fake_client.calls == []
    assert search.state.error == MSG_EMPTY_QUERY


def test_batman_scenario(search, fake_client):
    search.submit_query("batman")
    assert len(search.state.items) == 10
    assert search.state.current_page == 1
    assert search.state.total_count == 15

    search.load_more()
    assert len(search.state.items) == 15
    assert search.state.current_page == 2
    assert [it.imdb_id for it in search.state.items] == [f"tt{n:07d}" for n in range(1, 16)]

    state_before = search.state
    search.load_more()
    assert search.state is state_before
    assert _search_calls(fake_client) == [("search", "batman", 1), ("search", "batman", 2)]


def test_not_found_scenario(search, fake_client):
    fake_client.pages[("zzxyqq123", 1)] = OMDbResponseError("Movie not found!")

    search.submit_query("zzxyqq123")

    assert search.state.items == ()
    assert search.state.error == "Movie not found!"
    assert not search.state.is_loading


def test_new_query_replaces_previous_results(search, fake_client):
    fake_client.pages[("alien", 1)] = make_page(40, 3, 3)
    search.submit_query("batman")
    search.load_more()

    search.submit_query("alien")

    assert [it.title for it in search.state.items] == ["Batman 40", "Batman 41", "Batman 42"]
    assert search.state.current_page == 1
    assert search.state.total_count == 3


def test_failed_load_more_keeps_items(search, fake_client):
    fake_client.pages[("batman", 2)] = OMDbConnectionError("offline")
    search.submit_query("batman")
    first_page = search.state.items

    search.load_more()

    assert search.state.items == first_page
    assert search.state.error == MSG_SEARCH_CONNECTION
    assert search.state.current_page == 1


def test_unexpected_exception_becomes_connection_error(search, fake_client):
    fake_client.pages[("boom", 1)] = ValueError("unexpected")
    search.submit_query("boom")
    assert search.state.error == MSG_SEARCH_CONNECTION


def test_changed_signal_carries_state(search):
    seen = []
    search.changed.connect(seen.append)

    search.submit_query("batman")

    assert seen[0].is_loading
    assert seen[-1] == search.state
    assert not seen[-1].is_loading


def test_load_more_ignored_while_loading(qapp, fake_client, deferred_runner):
    search = SearchController(fake_client, deferred_runner)
    search.submit_query("batman")
    deferred_runner.complete(0)
    search.load_more()

    search.load_more()                 # page 2 still in flight

    assert len(deferred_runner.jobs) == 2


def test_last_submit_wins(qapp, fake_client, deferred_runner):
    fake_client.pages[("alien", 1)] = make_page(40, 3, 3)
    search = SearchController(fake_client, deferred_runner)

    search.submit_query("batman")
    search.submit_query("alien")
    deferred_runner.complete(1)        # alien answers first
    deferred_runner.complete(0)        # stale batman response arrives late

    assert search.state.query == "alien"
    assert len(search.state.items) == 3
    assert search.state.total_count == 3


def test_submit_during_load_more_discards_append(qapp, fake_client, deferred_runner):
    fake_client.pages[("alien", 1)] = make_page(40, 3, 3)
    search = SearchController(fake_client, deferred_runner)
    search.submit_query("batman")
    deferred_runner.complete(0)
    search.load_more()                 # job 1: batman page 2
    search.submit_query("alien")       # job 2

    deferred_runner.complete(2)
    deferred_runner.complete(1)

    assert [it.title for it in search.state.items] == ["Batman 40", "Batman 41", "Batman 42"]


def test_stale_failure_is_dropped_and_logged(qapp, fake_client, deferred_runner):
    fake_client.pages[("alien", 1)] = make_page(40, 3, 3)
    fake_client.pages[("batman", 1)] = OMDbConnectionError("offline")
    search = SearchController(fake_client, deferred_runner)
    search.submit_query("batman")
    search.submit_query("alien")

    deferred_runner.complete(1)
    deferred_runner.complete(0)

    assert search.state.error is None
    assert len(search.state.items) == 3
    log = settings.LOG_PATH.read_text(encoding="utf-8")
    assert "stale search failure dropped (token 1)" in log


# ── details ───────────────────────────────────────────────────────────────
def test_fetch_details_without_id(details, fake_client):
    details.fetch_details(None)

    assert fake_client.calls == []
    assert details.state.error == MSG_NO_ID


def test_fetch_details_success(details, fake_client):
    record = MovieDetails(imdb_id="tt0372784", title="Batman Begins")
    fake_client.records["tt0372784"] = record

    details.fetch_details("tt0372784")

    assert details.state.details == record
    assert fake_client.calls == [("details", "tt0372784")]


def test_fetch_details_api_error(details, fake_client):
    fake_client.records["tt404"] = OMDbResponseError("Incorrect IMDb ID.")
    details.fetch_details("tt404")
    assert details.state.error == "Incorrect IMDb ID."
    assert details.state.details is None


def test_details_reopen_drops_stale_response(qapp, fake_client, deferred_runner):
    fake_client.records["tt1"] = MovieDetails(imdb_id="tt1", title="First")
    fake_client.records["tt2"] = MovieDetails(imdb_id="tt2", title="Second")
    details = DetailsController(fake_client, deferred_runner)

    details.fetch_details("tt1")
    details.fetch_details("tt2")
    deferred_runner.complete(1)
    deferred_runner.complete(0)

    assert details.state.details.title == "Second"


def test_load_poster_failure_is_quiet(details, fake_client):
    def broken(url):
        raise OMDbConnectionError("404")

    fake_client.fetch_poster = broken
    received = []
    details.load_poster("https://img.example/x.jpg", received.append)
    assert received == []


def test_stale_details_failure_is_logged(qapp, fake_client, deferred_runner):
    fake_client.records["tt1"] = OMDbConnectionError("offline")
    fake_client.records["tt2"] = MovieDetails(imdb_id="tt2", title="Second")
    details = DetailsController(fake_client, deferred_runner)

    details.fetch_details("tt1")
    details.fetch_details("tt2")
    deferred_runner.complete(1)
    deferred_runner.complete(0)

    assert details.state.error is None
    assert details.state.details.title == "Second"
    assert "stale details failure dropped" in settings.LOG_PATH.read_text(encoding="utf-8")
