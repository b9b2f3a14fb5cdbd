# movieSearch/metadata/api_clients/omdb_client.py
from __future__ import annotations

import functools
from typing import Any, Dict

import requests

from movieSearch import settings
from movieSearch.utils import log_debug
from movieSearch.metadata.core.errors import OMDbConnectionError, OMDbResponseError
from movieSearch.metadata.core.models import MovieDetails, ResultPage


class OMDBClient:
    """
    Thin wrapper around omdbapi.com.

    Every call is one HTTP GET.  Success returns a model object; an OMDb
    ``"Response": "False"`` payload raises `OMDbResponseError` with the
    API's message, anything that keeps us from reading a JSON object raises
    `OMDbConnectionError`.  Nothing is cached.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(self, api_key: str | None = None, *, url: str | None = None,
                 timeout: float | None = None, session: requests.Session | None = None):
        self.api_key = api_key or settings.OMDB_API_KEY
        if not self.api_key:
            raise RuntimeError("OMDB_API_KEY not set and no api_key passed")
        self.url = url or settings.OMDB_URL
        self.timeout = timeout or settings.OMDB_TIMEOUT
        self.http = session or requests

    # ────────────────────────────────────────────────────────────────
    # Public
    # ────────────────────────────────────────────────────────────────
    def search(self, query: str, page: int = 1) -> ResultPage:
        """One page (≤ 10 items) of title matches for *query*."""
        data = self._payload(s=query, page=page)
        return ResultPage.from_omdb(data, page)

    def details(self, imdb_id: str) -> MovieDetails:
        """Full record for one IMDb id (long plot)."""
        data = self._payload(i=imdb_id, plot="full")
        return MovieDetails.from_omdb(data, imdb_id)

    def fetch_poster(self, url: str) -> bytes:
        """Raw image bytes for a poster URL."""
        try:
            resp = self.http.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            log_debug(f"poster fetch error: {url} ({exc})")
            raise OMDbConnectionError(str(exc)) from exc
        return resp.content

    # ────────────────────────────────────────────────────────────────
    # Internal – one JSON payload per call
    # ────────────────────────────────────────────────────────────────
    def _payload(self, **query: Any) -> Dict[str, Any]:
        params = {"apikey": self.api_key, **query}
        log_debug(f"OMDb GET {query}")

        try:
            resp = self.http.get(self.url, params=params, timeout=self.timeout)
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            log_debug(f"OMDb fetch error: {exc}")
            raise OMDbConnectionError(str(exc)) from exc

        if not isinstance(data, dict):
            log_debug(f"OMDb malformed body: {type(data).__name__}")
            raise OMDbConnectionError("OMDb response is not a JSON object")

        if str(data.get("Response")).lower() != "true":
            message = data.get("Error")
            log_debug(f"OMDb error for {query}: {message}")
            raise OMDbResponseError(message)
        return data


@functools.lru_cache(maxsize=1)
def default_client() -> OMDBClient:
    """Process-wide client built from settings (raises if the key is missing)."""
    return OMDBClient()
