"""metadata.core.state
Immutable screen states and the pure transitions that move between them.

Controllers own one state value each and replace it with whatever these
functions return; nothing here touches Qt or the network.  Every request
carries the ``request_token`` that was current when it was issued, and a
completion with any other token is ignored (last submit wins).
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Iterable, List

from movieSearch.settings import (
    PAGE_SIZE,
    MSG_EMPTY_QUERY, MSG_NOT_FOUND, MSG_SEARCH_CONNECTION,
    MSG_NO_ID, MSG_DETAILS_FALLBACK, MSG_DETAILS_CONNECTION,
)
from movieSearch.metadata.core.errors import OMDbResponseError
from movieSearch.metadata.core.models import MovieDetails, ResultPage, SearchResultItem


@dataclass(slots=True, frozen=True)
class SearchState:
    query: str = ""
    items: tuple[SearchResultItem, ...] = ()
    total_count: int = 0
    current_page: int = 1
    is_loading: bool = False
    error: str | None = None
    request_token: int = 0


@dataclass(slots=True, frozen=True)
class DetailsState:
    imdb_id: str | None = None
    details: MovieDetails | None = None
    is_loading: bool = False
    error: str | None = None
    request_token: int = 0


# ───────────────────────────── helpers ──────────────────────────────
def total_pages(total_count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(max(total_count, 0) / page_size)


def can_load_more(state: SearchState) -> bool:
    return not state.is_loading and state.current_page < total_pages(state.total_count)


def renderable_items(items: Iterable[SearchResultItem]) -> List[SearchResultItem]:
    """Drop every entry without an IMDb id; it cannot be opened anyway."""
    return [it for it in items if it is not None and it.imdb_id]


def error_message(exc: BaseException, fallback: str, connection: str) -> str:
    """Map a failed fetch to the text shown to the user."""
    if isinstance(exc, OMDbResponseError):
        return exc.message or fallback
    return connection


# ───────────────────────────── search ───────────────────────────────
def submit(state: SearchState, query: str | None) -> SearchState:
    """New query → page 1, empty list, loading.  Blank query → error only."""
    text = (query or "").strip()
    if not text:
        return replace(state, error=MSG_EMPTY_QUERY)
    return SearchState(
        query=text,
        is_loading=True,
        request_token=state.request_token + 1,
    )


def next_page(state: SearchState) -> SearchState:
    """Advance to the following page; returns *state* itself when nothing to do."""
    if not can_load_more(state):
        return state
    return replace(
        state,
        current_page=state.current_page + 1,
        is_loading=True,
        error=None,
        request_token=state.request_token + 1,
    )


def page_loaded(state: SearchState, token: int, page: ResultPage, append: bool) -> SearchState:
    if token != state.request_token:
        return state
    if append:
        return replace(state, items=state.items + page.items, is_loading=False, error=None)
    return replace(
        state,
        items=page.items,
        total_count=page.total_count,
        current_page=1,
        is_loading=False,
        error=None,
    )


def page_failed(state: SearchState, token: int, exc: BaseException, append: bool) -> SearchState:
    if token != state.request_token:
        return state
    msg = error_message(exc, MSG_NOT_FOUND, MSG_SEARCH_CONNECTION)
    if append:
        # keep what we have; step back so the next scroll retries this page
        return replace(
            state,
            current_page=max(state.current_page - 1, 1),
            is_loading=False,
            error=msg,
        )
    return replace(state, items=(), total_count=0, current_page=1, is_loading=False, error=msg)


# ───────────────────────────── details ──────────────────────────────
def open_details(imdb_id: str | None, token: int) -> DetailsState:
    if imdb_id is None or not str(imdb_id).strip():
        return DetailsState(imdb_id=None, error=MSG_NO_ID, request_token=token)
    return DetailsState(imdb_id=str(imdb_id).strip(), is_loading=True, request_token=token)


def details_loaded(state: DetailsState, token: int, details: MovieDetails) -> DetailsState:
    if token != state.request_token:
        return state
    return replace(state, details=details, is_loading=False, error=None)


def details_failed(state: DetailsState, token: int, exc: BaseException) -> DetailsState:
    if token != state.request_token:
        return state
    msg = error_message(exc, MSG_DETAILS_FALLBACK, MSG_DETAILS_CONNECTION)
    return replace(state, details=None, is_loading=False, error=msg)
