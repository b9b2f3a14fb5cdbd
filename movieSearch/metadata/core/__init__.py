from movieSearch.metadata.core.models import (
    MovieDetails, Rating, ResultPage, SearchResultItem,
)
from movieSearch.metadata.core.errors import (
    OMDbError, OMDbResponseError, OMDbConnectionError,
)
from movieSearch.metadata.core.state import SearchState, DetailsState

__all__ = [
    "MovieDetails", "Rating", "ResultPage", "SearchResultItem",
    "OMDbError", "OMDbResponseError", "OMDbConnectionError",
    "SearchState", "DetailsState",
]
