"""
gui
~~~
All Qt widgets, pages and controllers.

•  No HTTP here – every request goes through `metadata.api_clients`.
•  Re-export the high-level symbols so the app can simply:

    from movieSearch.gui import MainWindow
"""

from movieSearch.gui.controller   import SearchController, DetailsController
from movieSearch.gui.navigator    import Navigator, Route, Screen
from movieSearch.gui.main_window  import MainWindow
from movieSearch.gui.search_page  import SearchPage
from movieSearch.gui.details_page import DetailsPage
from movieSearch.gui.movie_card   import MovieCard

__all__ = [
    "SearchController", "DetailsController",
    "Navigator", "Route", "Screen",
    "MainWindow", "SearchPage", "DetailsPage", "MovieCard",
]
