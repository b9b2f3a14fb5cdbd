from __future__ import annotations
from PySide6.QtCore    import Qt, QSignalBlocker, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton, QLabel,
    QListWidget, QListWidgetItem, QProgressBar, QAbstractItemView
)
from shiboken6 import isValid

from ..settings import ERROR_COLOR, ACCENT_COLOR, LOAD_MORE_THRESHOLD, MSG_EMPTY_LIST
from ..metadata.core.models import SearchResultItem
from ..metadata.core.state import SearchState, renderable_items
from ..metadata.display import poster_url, results_caption
from .controller import SearchController
from .movie_card import MovieCard

ID_ROLE = Qt.UserRole


class SearchPage(QWidget):
    """Query box + paged result list.  Emits the IMDb id of a clicked row."""
    movie_selected = Signal(str)

    def __init__(self, controller: SearchController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._shown: tuple[SearchResultItem, ...] = ()
        self._build_ui()
        self._connect()
        self.render(controller.state)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        # ── search row ───────────────────────────────────────────────────
        row = QHBoxLayout()
        self.query_input = QLineEdit()
        self.query_input.setPlaceholderText("Enter a movie title…")
        self.query_input.setClearButtonEnabled(True)
        self.search_btn = QPushButton("Search")
        self.search_btn.setAutoDefault(False)
        self.search_btn.setStyleSheet(f"background:{ACCENT_COLOR}; color:#fff; padding:6px 14px;")
        row.addWidget(self.query_input, 1)
        row.addWidget(self.search_btn)
        root.addLayout(row)

        # ── status labels ────────────────────────────────────────────────
        self.error_lbl = QLabel()
        self.error_lbl.setObjectName("searchError")
        self.error_lbl.setWordWrap(True)
        self.error_lbl.setStyleSheet(f"color:{ERROR_COLOR}; background:#ffe5e5; padding:8px; border-radius:8px;")
        self.caption_lbl = QLabel()
        self.caption_lbl.setObjectName("resultsCaption")
        self.caption_lbl.setStyleSheet("color:#666; font-weight:600;")
        root.addWidget(self.error_lbl)
        root.addWidget(self.caption_lbl)

        # ── results ─────────────────────────────────────────────────────
        self.results = QListWidget()
        self.results.setVerticalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.results.setSpacing(4)
        root.addWidget(self.results, 1)

        self.empty_lbl = QLabel(MSG_EMPTY_LIST, alignment=Qt.AlignCenter)
        self.empty_lbl.setObjectName("emptyLabel")
        self.empty_lbl.setStyleSheet("color:#999; font-size:16px; padding:40px;")
        root.addWidget(self.empty_lbl)

        # footer spinner while the next page is on its way
        self.footer = QProgressBar()
        self.footer.setRange(0, 0)
        self.footer.setTextVisible(False)
        self.footer.setFixedHeight(6)
        root.addWidget(self.footer)

    def _connect(self) -> None:
        self.search_btn.clicked.connect(self._on_submit)
        self.query_input.returnPressed.connect(self._on_submit)
        self.results.itemClicked.connect(self._on_item)
        self.results.itemActivated.connect(self._on_item)
        self.results.verticalScrollBar().valueChanged.connect(self._maybe_load_more)
        self.controller.changed.connect(self.render)

    # ------------------------------------------------------------------
    @Slot()
    def _on_submit(self) -> None:
        self.controller.submit_query(self.query_input.text())

    @Slot(QListWidgetItem)
    def _on_item(self, item: QListWidgetItem) -> None:
        imdb_id = item.data(ID_ROLE)
        if imdb_id:
            self.movie_selected.emit(str(imdb_id))

    def _maybe_load_more(self, *_args) -> None:
        """Ask for the next page once less than half a viewport is left below."""
        bar = self.results.verticalScrollBar()
        remaining = bar.maximum() - bar.value()
        if remaining <= bar.pageStep() * LOAD_MORE_THRESHOLD:
            self.controller.load_more()

    # ------------------------------------------------------------------
    @Slot(object)
    def render(self, state: SearchState) -> None:
        visible = renderable_items(state.items)

        self.search_btn.setEnabled(not state.is_loading)
        self.error_lbl.setText(state.error or "")
        self.error_lbl.setVisible(bool(state.error))
        self.caption_lbl.setText(results_caption(state.total_count))
        self.caption_lbl.setVisible(bool(visible))
        self.empty_lbl.setVisible(not state.is_loading and bool(state.query) and not visible)
        self.footer.setVisible(state.is_loading and bool(visible))

        self._sync_rows(visible)

        # keep filling a tall viewport, but never hammer a failing page
        if not state.is_loading and not state.error and visible:
            self.results.doItemsLayout()      # scroll range must reflect the new rows
            self._maybe_load_more()

    def _sync_rows(self, visible: list[SearchResultItem]) -> None:
        n = len(self._shown)
        if tuple(visible[:n]) == self._shown and len(visible) >= n:
            fresh = visible[n:]
        else:
            with QSignalBlocker(self.results.verticalScrollBar()):
                self.results.clear()
            fresh = visible
        for it in fresh:
            self._add_row(it)
        self._shown = tuple(visible)

    def _add_row(self, it: SearchResultItem) -> None:
        card = MovieCard(it)
        row = QListWidgetItem(self.results)
        row.setData(ID_ROLE, it.imdb_id)
        row.setSizeHint(card.sizeHint())
        self.results.setItemWidget(row, card)
        self.controller.load_poster(
            poster_url(it.poster),
            lambda data, c=card: c.set_poster_data(data) if isValid(c) else None,
        )
