# Movie dataclasses built straight from OMDb payloads
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

NOT_AVAILABLE = "N/A"


def available(value: Any) -> str | None:
    """Return *value* as text, or None for missing / empty / "N/A"."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == NOT_AVAILABLE:
        return None
    return text


@dataclass(slots=True, frozen=True)
class SearchResultItem:
    imdb_id: str | None
    title: str = ""
    year: str = ""
    media_type: str = ""
    poster: str | None = None

    @classmethod
    def from_omdb(cls, d: Dict[str, Any]) -> "SearchResultItem":
        raw_id = d.get("imdbID")
        return cls(
            imdb_id=str(raw_id) if raw_id else None,
            title=d.get("Title") or "",
            year=d.get("Year") or "",
            media_type=d.get("Type") or "",
            poster=available(d.get("Poster")),
        )


@dataclass(slots=True, frozen=True)
class ResultPage:
    items: tuple[SearchResultItem, ...]
    total_count: int
    page: int = 1

    @classmethod
    def from_omdb(cls, d: Dict[str, Any], page: int) -> "ResultPage":
        entries = d.get("Search") or []
        try:
            total = int(d.get("totalResults") or 0)
        except (TypeError, ValueError):
            total = 0
        return cls(
            items=tuple(SearchResultItem.from_omdb(e) for e in entries if isinstance(e, dict)),
            total_count=total,
            page=page,
        )


@dataclass(slots=True, frozen=True)
class Rating:
    source: str
    value: str


# OMDb key → MovieDetails attribute
_DETAIL_KEYS: Dict[str, str] = {
    "Title":      "title",
    "Year":       "year",
    "Rated":      "rated",
    "Released":   "released",
    "Runtime":    "runtime",
    "Genre":      "genre",
    "Director":   "director",
    "Writer":     "writer",
    "Actors":     "actors",
    "Plot":       "plot",
    "Language":   "language",
    "Country":    "country",
    "Awards":     "awards",
    "Poster":     "poster",
    "Metascore":  "metascore",
    "imdbRating": "imdb_rating",
    "imdbVotes":  "imdb_votes",
    "Type":       "media_type",
    "BoxOffice":  "box_office",
    "Production": "production",
    "Website":    "website",
}


@dataclass(slots=True, frozen=True)
class MovieDetails:
    imdb_id: str
    title: str | None = None
    year: str | None = None
    rated: str | None = None
    released: str | None = None
    runtime: str | None = None
    genre: str | None = None
    director: str | None = None
    writer: str | None = None
    actors: str | None = None
    plot: str | None = None
    language: str | None = None
    country: str | None = None
    awards: str | None = None
    poster: str | None = None
    metascore: str | None = None
    imdb_rating: str | None = None
    imdb_votes: str | None = None
    media_type: str | None = None
    box_office: str | None = None
    production: str | None = None
    website: str | None = None
    ratings: tuple[Rating, ...] = field(default_factory=tuple)

    @classmethod
    def from_omdb(cls, d: Dict[str, Any], imdb_id: str | None = None) -> "MovieDetails":
        """Map an OMDb ``i=`` payload; every "N/A" becomes None."""
        fields = {attr: available(d.get(key)) for key, attr in _DETAIL_KEYS.items()}
        ratings = tuple(
            Rating(source=str(r.get("Source")), value=str(r.get("Value")))
            for r in d.get("Ratings") or []
            if isinstance(r, dict) and available(r.get("Source")) and available(r.get("Value"))
        )
        return cls(
            imdb_id=available(d.get("imdbID")) or imdb_id or "",
            ratings=ratings,
            **fields,
        )
