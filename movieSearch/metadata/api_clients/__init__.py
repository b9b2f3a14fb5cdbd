"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
Use `default_client()` if you only need one global instance.
"""

from movieSearch.metadata.api_clients.omdb_client import OMDBClient, default_client

__all__ = ["OMDBClient", "default_client"]
