# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Slot
from PySide6.QtGui     import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QStyle

from movieSearch.settings             import SEARCH_TITLE, DETAILS_TITLE
from movieSearch.metadata.api_clients import OMDBClient
from movieSearch.gui.controller       import SearchController, DetailsController
from movieSearch.gui.navigator        import Navigator, Route, Screen
from movieSearch.gui.search_page      import SearchPage
from movieSearch.gui.details_page     import DetailsPage
from movieSearch.gui.workers          import Runner, start_job, wait_for_jobs


class MainWindow(QMainWindow):
    def __init__(self, client: OMDBClient, runner: Runner = start_job):
        super().__init__()
        self.resize(720, 820)

        # ── controllers ─────────────────────────────────────────────────
        self.navigator          = Navigator()
        self.search_controller  = SearchController(client, runner, self)
        self.details_controller = DetailsController(client, runner, self)

        # ── pages ───────────────────────────────────────────────────────
        self.search_page  = SearchPage(self.search_controller)
        self.details_page = DetailsPage(self.details_controller)

        self.pages = QStackedWidget()
        self.pages.addWidget(self.search_page)
        self.pages.addWidget(self.details_page)
        self.setCentralWidget(self.pages)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        tb.setMovable(False)
        self.back_action = QAction(self.style().standardIcon(QStyle.SP_ArrowBack), "Back", self)
        self.back_action.setShortcuts([QKeySequence("Alt+Left"), QKeySequence("Esc")])
        self.back_action.triggered.connect(self._on_back)
        tb.addAction(self.back_action)

        self.search_page.movie_selected.connect(self._on_movie_selected)
        self._show(self.navigator.current)

    # ───────────────────────────────────────────────────────────────────
    @Slot(str)
    def _on_movie_selected(self, imdb_id: str) -> None:
        # click + activate on the same row must not fetch twice
        if self.navigator.current == Route(Screen.DETAILS, imdb_id):
            return
        route = self.navigator.open_details(imdb_id)
        self.details_controller.fetch_details(route.imdb_id)
        self._show(route)

    @Slot()
    def _on_back(self) -> None:
        self._show(self.navigator.back())

    def _show(self, route: Route) -> None:
        on_details = route.screen is Screen.DETAILS
        self.pages.setCurrentWidget(self.details_page if on_details else self.search_page)
        self.setWindowTitle(DETAILS_TITLE if on_details else SEARCH_TITLE)
        self.back_action.setEnabled(on_details)

    def closeEvent(self, event):
        wait_for_jobs()
        super().closeEvent(event)
