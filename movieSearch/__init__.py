"""
movieSearch
~~~~~~~~~~~

Top-level package for the Movie Search application: search OMDb by title,
page through the matches and open one title's details.

Exports:
  - OMDB_API_KEY, PAGE_SIZE
  - Utility functions: log_debug, apply_dark_palette
  - OMDBClient and the MainWindow GUI entrypoint
"""

# settings
from movieSearch.settings import OMDB_API_KEY, PAGE_SIZE

# utils
from movieSearch.utils import log_debug, apply_dark_palette

# network client
from movieSearch.metadata.api_clients import OMDBClient

# GUI entrypoint
from movieSearch.gui.main_window import MainWindow

__all__ = [
    # settings
    "OMDB_API_KEY",
    "PAGE_SIZE",
    # utils
    "log_debug",
    "apply_dark_palette",
    # client
    "OMDBClient",
    # GUI
    "MainWindow",
]
