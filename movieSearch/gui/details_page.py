from __future__ import annotations
from typing import List, Tuple

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QGroupBox,
    QScrollArea, QProgressBar, QFrame
)
from shiboken6 import isValid

from ..settings import ERROR_COLOR, MSG_DETAILS_MISSING, MSG_LOADING
from ..utils import open_url_host_browser
from ..metadata.core.models import MovieDetails
from ..metadata.core.state import DetailsState
from ..metadata.display import (
    EXTRA_FIELDS, INFO_FIELDS, details_poster_url, display_fields_of,
    imdb_url, meta_chips_of, plot_of, ratings_of,
)
from .controller import DetailsController

POSTER_W, POSTER_H = 250, 375


class DetailsPage(QScrollArea):
    """Read-only view of one title; rebuilt from scratch on every state change."""

    def __init__(self, controller: DetailsController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.NoFrame)

        self._body = QWidget()
        self._box  = QVBoxLayout(self._body)
        self._box.setAlignment(Qt.AlignTop)
        self.setWidget(self._body)

        controller.changed.connect(self.render)
        self.render(controller.state)

    # ------------------------------------------------------------------
    @Slot(object)
    def render(self, state: DetailsState) -> None:
        self._clear()
        if state.is_loading:
            self._show_loading()
        elif state.error or state.details is None:
            self._show_error(state.error or MSG_DETAILS_MISSING)
        else:
            self._show_details(state.details)

    def _clear(self) -> None:
        while (item := self._box.takeAt(0)) is not None:
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()

    def _show_loading(self) -> None:
        bar = QProgressBar()
        bar.setRange(0, 0)
        bar.setTextVisible(False)
        lbl = QLabel(MSG_LOADING, alignment=Qt.AlignCenter)
        lbl.setObjectName("detailsLoading")
        self._box.addWidget(bar)
        self._box.addWidget(lbl)

    def _show_error(self, message: str) -> None:
        lbl = QLabel(message, alignment=Qt.AlignCenter)
        lbl.setObjectName("detailsError")
        lbl.setWordWrap(True)
        lbl.setStyleSheet(f"color:{ERROR_COLOR}; font-size:16px; padding:20px;")
        self._box.addWidget(lbl)

    def _show_details(self, d: MovieDetails) -> None:
        # ── poster ──────────────────────────────────────────────────────
        poster = QLabel("No Image", alignment=Qt.AlignCenter)
        poster.setObjectName("detailsPoster")
        poster.setFixedSize(POSTER_W, POSTER_H)
        poster.setStyleSheet("background:#e0e0e0; color:#666; border-radius:12px;")
        holder = QHBoxLayout()
        holder.addWidget(poster)
        self._add_layout(holder)
        self.controller.load_poster(
            details_poster_url(d),
            lambda data, p=poster: _set_pixmap(p, data) if isValid(p) else None,
        )

        # ── title + meta chips ──────────────────────────────────────────
        title = QLabel(d.title or d.imdb_id, alignment=Qt.AlignCenter)
        title.setObjectName("detailsTitle")
        title.setWordWrap(True)
        title.setStyleSheet("font-size:28px; font-weight:bold;")
        self._box.addWidget(title)

        chips = meta_chips_of(d)
        if chips:
            row = QHBoxLayout()
            row.addStretch()
            for text in chips:
                chip = QLabel(text)
                chip.setObjectName("metaChip")
                chip.setStyleSheet("background:#fff; color:#666; border-radius:12px; padding:4px 12px;")
                row.addWidget(chip)
            row.addStretch()
            self._add_layout(row)

        # ── plot ────────────────────────────────────────────────────────
        plot = plot_of(d)
        if plot:
            box = QGroupBox("Plot")
            box.setObjectName("plotSection")
            lay = QVBoxLayout(box)
            text = QLabel(plot)
            text.setWordWrap(True)
            lay.addWidget(text)
            self._box.addWidget(box)

        # ── credits / facts ─────────────────────────────────────────────
        self._add_fields("infoSection", "", display_fields_of(d, INFO_FIELDS))

        # ── ratings ─────────────────────────────────────────────────────
        ratings = ratings_of(d)
        if ratings:
            self._add_fields("ratingsSection", "Ratings", [(r.source, r.value) for r in ratings])

        self._add_fields("extraSection", "", display_fields_of(d, EXTRA_FIELDS))

        # ── external link ───────────────────────────────────────────────
        if d.imdb_id:
            url = imdb_url(d.imdb_id)
            link = QLabel(f'<a href="{url}">Open on IMDb</a>', alignment=Qt.AlignCenter)
            link.setObjectName("imdbLink")
            link.setTextFormat(Qt.RichText)
            link.setTextInteractionFlags(Qt.TextBrowserInteraction)
            link.setOpenExternalLinks(False)
            link.linkActivated.connect(open_url_host_browser)
            self._box.addWidget(link)

    # ------------------------------------------------------------------
    def _add_fields(self, name: str, title: str, rows: List[Tuple[str, str]]) -> None:
        """Group box of ``label: value`` rows; skipped entirely when empty."""
        if not rows:
            return
        box = QGroupBox(title)
        box.setObjectName(name)
        form = QFormLayout(box)
        for label, value in rows:
            val = QLabel(value)
            val.setWordWrap(True)
            val.setTextInteractionFlags(Qt.TextSelectableByMouse)
            form.addRow(f"{label}:", val)
        self._box.addWidget(box)

    def _add_layout(self, layout) -> None:
        # wrap so _clear() can drop it like any other widget
        wrapper = QWidget()
        wrapper.setLayout(layout)
        self._box.addWidget(wrapper)


def _set_pixmap(label: QLabel, data: bytes) -> None:
    pix = QPixmap()
    if data and pix.loadFromData(data):
        label.setPixmap(pix.scaled(POSTER_W, POSTER_H, Qt.KeepAspectRatio, Qt.SmoothTransformation))
