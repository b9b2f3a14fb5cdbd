import sys
from PySide6.QtWidgets import QApplication, QMessageBox

from movieSearch.utils                import apply_dark_palette, log_debug
from movieSearch.metadata.api_clients import default_client
from movieSearch.gui.main_window      import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    # -------- the API key is the only required configuration ----------
    try:
        client = default_client()
    except RuntimeError as e:
        log_debug(f"startup aborted: {e}")
        QMessageBox.critical(
            None,
            "Configuration",
            "OMDB_API_KEY is not set.\n"
            "Export it or add it to movieSearch/secret.env.",
        )
        sys.exit(1)

    window = MainWindow(client)
    window.show()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
