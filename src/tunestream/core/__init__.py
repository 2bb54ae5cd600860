"""Core application logic.

This module contains the stores and state controllers that sit between
the in-memory data and the Qt UI layer.

Classes:
    CatalogStore: Categorized songs with favorite toggling.
    PlaylistStore: Static list of saved playlists.
    HomeController: Publishes Home tab state.
    LibraryController: Publishes Library tab state.
    ConfigManager: QSettings wrapper for configuration.
"""

from tunestream.core.catalog import CatalogStore
from tunestream.core.config import ConfigManager
from tunestream.core.home import HomeController
from tunestream.core.library import LibraryController
from tunestream.core.playlists import PlaylistStore

__all__ = [
    "CatalogStore",
    "ConfigManager",
    "HomeController",
    "LibraryController",
    "PlaylistStore",
]
