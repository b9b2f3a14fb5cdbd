"""metadata.display
Pure formatting helpers for the pages.

Nothing here renders; each helper returns ordered ``(label, value)`` pairs
or plain strings with unavailable ("N/A", empty, None) values already
removed, so widgets only lay out what they are given.
"""

from __future__ import annotations
from typing import Any, List, Sequence, Tuple

from movieSearch.settings import (
    SEARCH_POSTER_PLACEHOLDER, DETAILS_POSTER_PLACEHOLDER, IMDB_TITLE_URL,
)
from movieSearch.metadata.core.models import MovieDetails, Rating, available

Field = Tuple[str, str]

# (label, attribute) in display order
INFO_FIELDS: Sequence[Tuple[str, str]] = (
    ("Director", "director"),
    ("Actors",   "actors"),
    ("Genre",    "genre"),
    ("Country",  "country"),
    ("Language", "language"),
)
EXTRA_FIELDS: Sequence[Tuple[str, str]] = (
    ("Awards",     "awards"),
    ("Box office", "box_office"),
    ("Production", "production"),
)
META_FIELDS: Sequence[Tuple[str, str]] = (
    ("Year",    "year"),
    ("Runtime", "runtime"),
    ("Rated",   "rated"),
)


def display_fields_of(record: Any, fields: Sequence[Tuple[str, str]] = INFO_FIELDS) -> List[Field]:
    """Ordered ``(label, value)`` pairs of *record*, skipping unavailable ones."""
    out: List[Field] = []
    for label, attr in fields:
        value = available(getattr(record, attr, None))
        if value is not None:
            out.append((label, value))
    return out


def meta_chips_of(details: MovieDetails) -> List[str]:
    return [value for _label, value in display_fields_of(details, META_FIELDS)]


def plot_of(details: MovieDetails) -> str | None:
    return available(details.plot)


def ratings_of(details: MovieDetails) -> List[Rating]:
    return [r for r in details.ratings if available(r.source) and available(r.value)]


def poster_url(poster: str | None, placeholder: str = SEARCH_POSTER_PLACEHOLDER) -> str:
    """Poster URL or the fixed placeholder when OMDb has none."""
    return available(poster) or placeholder


def details_poster_url(details: MovieDetails) -> str:
    return poster_url(details.poster, DETAILS_POSTER_PLACEHOLDER)


def imdb_url(imdb_id: str) -> str:
    return IMDB_TITLE_URL.format(imdb_id=imdb_id)


def results_caption(total_count: int) -> str:
    """'Found: 1 movie' / 'Found: 27 movies'."""
    noun = "movie" if total_count == 1 else "movies"
    return f"Found: {total_count} {noun}"
