"""Main entry point for the TuneStream application."""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from tunestream.core.catalog import CatalogStore
from tunestream.core.config import TABS, THEMES, ConfigManager
from tunestream.core.home import HomeController
from tunestream.core.library import LibraryController
from tunestream.core.playlists import PlaylistStore
from tunestream.ui.main_window import MainWindow
from tunestream.ui.theme import palette_for, theme_manager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="tunestream",
        description="TuneStream - music streaming demo",
    )
    parser.add_argument(
        "--theme", choices=THEMES, default=None, help="color theme (default: saved preference)",
    )
    parser.add_argument(
        "--tab", choices=TABS, default=None, help="tab to open on start (default: last used)",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def log_song_selected(catalog: CatalogStore, song_id: str) -> None:
    """Log a song click using its display name."""
    song = catalog.find_song_by_id(song_id)
    if song is None:
        logger.warning("Selected song not in catalog: %s", song_id)
        return
    logger.info("Song selected: %s", song.display_name)


def main() -> int:
    """Run the TuneStream application.

    Returns:
        Exit code (0 for success).
    """
    QApplication.setApplicationName("TuneStream")
    QApplication.setApplicationDisplayName("TuneStream")
    QApplication.setOrganizationName("TuneStream")

    app = QApplication(sys.argv)
    parsed = build_parser().parse_args(app.arguments()[1:])

    logging.basicConfig(
        level=logging.DEBUG if parsed.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager()
    theme = parsed.theme or config.get_theme()
    if parsed.theme:
        config.set_theme(parsed.theme)
    theme_manager.apply_theme(palette_for(theme))

    # Core components: one catalog shared by both tabs
    catalog = CatalogStore()
    playlists = PlaylistStore()
    home = HomeController(catalog)
    library = LibraryController(catalog, playlists)

    window = MainWindow(home, library, config, initial_tab=parsed.tab)

    window.home_panel.song_clicked.connect(lambda song_id: log_song_selected(catalog, song_id))
    window.library_panel.song_clicked.connect(lambda song_id: log_song_selected(catalog, song_id))
    window.library_panel.playlist_clicked.connect(
        lambda playlist_id: logger.info("Playlist selected: %s", playlists.get_playlist(playlist_id))
    )

    window.show()
    logger.info("TuneStream started with %d songs", len(catalog.list_all_songs()))
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
