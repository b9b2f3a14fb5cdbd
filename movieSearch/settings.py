from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

OMDB_API_KEY = os.getenv("OMDB_API_KEY")

# OMDb
OMDB_URL        = "https://www.omdbapi.com/"
OMDB_TIMEOUT    = 8
PAGE_SIZE       = 10          # fixed by OMDb, never configurable
IMDB_TITLE_URL  = "https://www.imdb.com/title/{imdb_id}/"

# File paths
LOG_PATH = BASE_DIR / "movie_search_debug.log"

# Posters
SEARCH_POSTER_PLACEHOLDER  = "https://via.placeholder.com/100x150?text=No+Image"
DETAILS_POSTER_PLACEHOLDER = "https://via.placeholder.com/300x450?text=No+Image"

# UI constants
ACCENT_COLOR        = "#007AFF"
ERROR_COLOR         = "#ff3b30"
MUTED_COLOR         = "#999999"   # years, types, placeholders
SEARCH_TITLE        = "Movie Search"
DETAILS_TITLE       = "Movie Details"
LOAD_MORE_THRESHOLD = 0.5     # fraction of a viewport left before load_more()

# User-visible messages
MSG_EMPTY_QUERY        = "Please enter a movie title."
MSG_NOT_FOUND          = "No movies found."
MSG_SEARCH_CONNECTION  = "Search failed. Check your internet connection."
MSG_NO_ID              = "No movie ID provided."
MSG_DETAILS_FALLBACK   = "Could not load movie information."
MSG_DETAILS_CONNECTION = "Loading failed. Check your internet connection."
MSG_EMPTY_LIST         = "No movies found"
MSG_LOADING            = "Loading…"
MSG_DETAILS_MISSING    = "Movie not found"
