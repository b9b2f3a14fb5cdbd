"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses, errors and the pure screen-state transitions
* api_clients – the OMDb client
* display     – "N/A"-aware formatting helpers used by the pages
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieSearch.metadata.core.models import (
    MovieDetails, Rating, ResultPage, SearchResultItem,
)
from movieSearch.metadata.core.errors import (
    OMDbError, OMDbResponseError, OMDbConnectionError,
)
from movieSearch.metadata.core.state  import SearchState, DetailsState

# ── shared API client ────────────────────────────────────────────────────
from movieSearch.metadata.api_clients.omdb_client import OMDBClient, default_client

# ── helpers used by GUI ---------------------------------------------------
from movieSearch.metadata.display import display_fields_of

__all__ = [
    "MovieDetails", "Rating", "ResultPage", "SearchResultItem",
    "OMDbError", "OMDbResponseError", "OMDbConnectionError",
    "SearchState", "DetailsState",
    "OMDBClient", "default_client",
    "display_fields_of",
]
