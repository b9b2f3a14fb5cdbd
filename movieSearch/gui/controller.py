from __future__ import annotations
from typing import Callable

from PySide6.QtCore import QObject, Signal

from movieSearch.utils import log_debug
from movieSearch.metadata.core import state as st
from movieSearch.metadata.core.models import MovieDetails, ResultPage
from movieSearch.metadata.api_clients.omdb_client import OMDBClient
from movieSearch.gui.workers import Runner, start_job


class _ScreenController(QObject):
    """Shared plumbing: one client, one job runner, poster downloads."""

    def __init__(self, client: OMDBClient, runner: Runner = start_job, parent: QObject | None = None):
        super().__init__(parent)
        self.client = client
        self._run   = runner

    def load_poster(self, url: str, on_loaded: Callable[[bytes], None]) -> None:
        """Download *url* off-thread; failures leave the placeholder in place."""
        self._run(
            lambda: self.client.fetch_poster(url),
            on_loaded,
            lambda exc: log_debug(f"poster not loaded: {url} ({exc})"),
        )


class SearchController(_ScreenController):
    """
    Owns the Search page's `SearchState`.

    Every mutation goes through a pure transition in `metadata.core.state`;
    `changed` fires with the new state whenever it differs from the old one.
    """
    changed = Signal(object)          # SearchState

    def __init__(self, client: OMDBClient, runner: Runner = start_job, parent: QObject | None = None):
        super().__init__(client, runner, parent)
        self.state = st.SearchState()

    # ------------------------------------------------------------------
    def submit_query(self, query: str | None) -> None:
        """Start a fresh search (page 1); blank *query* only sets an error."""
        new = st.submit(self.state, query)
        self._set(new)
        if not new.is_loading:
            return
        self._request(new.query, 1, append=False)

    def load_more(self) -> None:
        """Fetch and append the next page; no-op while loading or on the last page."""
        new = st.next_page(self.state)
        if new is self.state:
            return
        self._set(new)
        self._request(new.query, new.current_page, append=True)

    # ------------------------------------------------------------------
    def _request(self, query: str, page: int, *, append: bool) -> None:
        token = self.state.request_token
        self._run(
            lambda: self.client.search(query, page),
            lambda result: self._loaded(token, result, append),
            lambda exc: self._failed(token, exc, append),
        )

    def _loaded(self, token: int, page: ResultPage, append: bool) -> None:
        if token != self.state.request_token:
            log_debug(f"stale search response dropped (token {token})")
        self._set(st.page_loaded(self.state, token, page, append))

    def _failed(self, token: int, exc: BaseException, append: bool) -> None:
        if token != self.state.request_token:
            log_debug(f"stale search failure dropped (token {token}): {exc!r}")
        self._set(st.page_failed(self.state, token, exc, append))

    def _set(self, new: st.SearchState) -> None:
        if new == self.state:
            return
        self.state = new
        self.changed.emit(new)


class DetailsController(_ScreenController):
    """Owns the Details page's `DetailsState`; one fetch per navigation."""
    changed = Signal(object)          # DetailsState

    def __init__(self, client: OMDBClient, runner: Runner = start_job, parent: QObject | None = None):
        super().__init__(client, runner, parent)
        self.state = st.DetailsState()

    def fetch_details(self, imdb_id: str | None) -> None:
        """Reset and fetch *imdb_id*; a missing id errors without a request."""
        new = st.open_details(imdb_id, self.state.request_token + 1)
        self._set(new)
        if not new.is_loading:
            return
        token, target = new.request_token, new.imdb_id
        self._run(
            lambda: self.client.details(target),
            lambda details: self._loaded(token, details),
            lambda exc: self._failed(token, exc),
        )

    def _loaded(self, token: int, details: MovieDetails) -> None:
        if token != self.state.request_token:
            log_debug(f"stale details response dropped (token {token})")
        self._set(st.details_loaded(self.state, token, details))

    def _failed(self, token: int, exc: BaseException) -> None:
        if token != self.state.request_token:
            log_debug(f"stale details failure dropped (token {token}): {exc!r}")
        self._set(st.details_failed(self.state, token, exc))

    def _set(self, new: st.DetailsState) -> None:
        if new == self.state:
            return
        self.state = new
        self.changed.emit(new)
