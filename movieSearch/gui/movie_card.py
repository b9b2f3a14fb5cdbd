from __future__ import annotations
from PySide6.QtCore    import Qt, QPropertyAnimation # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect
)

from ..settings import MUTED_COLOR
from ..metadata.core.models import SearchResultItem

POSTER_W, POSTER_H = 60, 90


class MovieCard(QFrame):
    """One search-result row: poster thumb, title, year, type, chevron."""

    def __init__(self, item: SearchResultItem, parent=None):
        super().__init__(parent)
        self.item = item
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setCursor(Qt.PointingHandCursor)

        root = QHBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── poster (placeholder text until the image arrives) ───────────
        self.poster = QLabel("No Image", alignment=Qt.AlignCenter)
        self.poster.setFixedSize(POSTER_W, POSTER_H)
        self.poster.setStyleSheet("background:#e0e0e0; color:#666; border-radius:8px;")
        root.addWidget(self.poster)

        # ── text column ────────────────────────────────────────────────
        info = QVBoxLayout()
        self.title_lbl = QLabel(item.title)
        self.title_lbl.setObjectName("cardTitle")
        self.title_lbl.setWordWrap(True)
        self.title_lbl.setStyleSheet("font-size:16px; font-weight:600;")
        self.year_lbl = QLabel(item.year)
        self.year_lbl.setStyleSheet(f"color:{MUTED_COLOR};")
        self.type_lbl = QLabel(item.media_type.capitalize())
        self.type_lbl.setStyleSheet(f"color:{MUTED_COLOR}; font-size:12px;")
        for w in (self.title_lbl, self.year_lbl, self.type_lbl):
            info.addWidget(w)
        info.addStretch()
        root.addLayout(info, 1)

        chevron = QLabel("›", alignment=Qt.AlignCenter)
        chevron.setStyleSheet("font-size:24px; color:#666;")
        root.addWidget(chevron)

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def set_poster_data(self, data: bytes) -> None:
        pix = QPixmap()
        if data and pix.loadFromData(data):
            self.poster.setPixmap(
                pix.scaled(POSTER_W, POSTER_H, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
            )

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
