from datetime import datetime
import os
import subprocess
from sys import platform
import webbrowser

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieSearch import settings
from movieSearch.settings import ACCENT_COLOR, ERROR_COLOR, MUTED_COLOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    log_path = settings.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with log_path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def apply_dark_palette(app: QApplication) -> None:
    """Dark Fusion palette; links and selection use the accent, BrightText the error red."""
    palette = QPalette()
    for role, color in (
        (QPalette.Window,          "#1c1c1e"),
        (QPalette.Base,            "#2c2c2e"),
        (QPalette.AlternateBase,   "#3a3a3c"),
        (QPalette.Button,          "#2c2c2e"),
        (QPalette.ToolTipBase,     "#3a3a3c"),
        (QPalette.Link,            ACCENT_COLOR),
        (QPalette.LinkVisited,     ACCENT_COLOR),
        (QPalette.Highlight,       ACCENT_COLOR),
        (QPalette.BrightText,      ERROR_COLOR),
        (QPalette.PlaceholderText, MUTED_COLOR),
    ):
        palette.setColor(role, QColor(color))
    for role in (QPalette.WindowText, QPalette.ButtonText, QPalette.Text,
                 QPalette.ToolTipText, QPalette.HighlightedText):
        palette.setColor(role, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)


def open_url_host_browser(url: str) -> None:
    """Opens *url* with host OS default browser (WSL-aware)."""
    if platform == "linux" and "microsoft-standard" in _kernel_release():
        subprocess.Popen(["powershell.exe", "-c", f"Start-Process '{url}'"])
    else:
        webbrowser.open(url)


def _kernel_release() -> str:
    return os.uname().release.lower() if hasattr(os, "uname") else ""
