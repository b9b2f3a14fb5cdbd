"""
navigator
~~~~~~~~~
Two-screen routing.  Search → Details carries the selected IMDb id and
nothing else; Details always re-fetches from that id.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Screen(Enum):
    SEARCH  = "search"
    DETAILS = "details"


@dataclass(slots=True, frozen=True)
class Route:
    screen: Screen
    imdb_id: str | None = None


SEARCH_ROUTE = Route(Screen.SEARCH)


class Navigator:
    """Current route of one window; no global router."""

    def __init__(self) -> None:
        self.current = SEARCH_ROUTE

    def open_details(self, item_id: Any) -> Route:
        self.current = Route(Screen.DETAILS, None if item_id is None else str(item_id))
        return self.current

    def back(self) -> Route:
        self.current = SEARCH_ROUTE
        return self.current
