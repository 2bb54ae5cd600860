"""Catalog store holding the categorized song snapshot.

The CatalogStore owns the only copy of song favorite status. Every
mutation builds a complete new snapshot and swaps the reference in one
step, so readers always see either the old or the new catalog.

Subscribers are notified through the ``catalog_changed`` Qt signal.
"""

import logging
import threading
from collections.abc import Iterable

from PySide6.QtCore import QObject, Signal

from tunestream.core.seed import initial_categories
from tunestream.models.category import Category
from tunestream.models.song import Song

logger = logging.getLogger(__name__)


class CatalogStore(QObject):
    """In-memory catalog of categories and songs.

    Example:
        catalog = CatalogStore()
        catalog.catalog_changed.connect(lambda cats: print(len(cats)))
        catalog.toggle_favorite("rock_1")
    """

    catalog_changed = Signal(object)  # tuple[Category, ...]

    def __init__(self, categories: Iterable[Category] | None = None) -> None:
        """Initialize the store.

        Args:
            categories: Initial catalog. Defaults to the seed data.

        Raises:
            ValueError: If a song ID appears more than once.
        """
        super().__init__()
        snapshot = tuple(categories) if categories is not None else initial_categories()
        self._check_unique_ids(snapshot)
        self._lock = threading.Lock()
        self._categories: tuple[Category, ...] = snapshot

    @staticmethod
    def _check_unique_ids(categories: tuple[Category, ...]) -> None:
        """Reject catalogs where a song ID is shared by two entries."""
        seen: set[str] = set()
        for category in categories:
            for song in category.songs:
                if song.id in seen:
                    raise ValueError(f"Duplicate song id in catalog: {song.id!r}")
                seen.add(song.id)

    def list_categories(self) -> tuple[Category, ...]:
        """Return the current catalog snapshot."""
        return self._categories

    def list_all_songs(self) -> tuple[Song, ...]:
        """Return every song, category order first, then song order."""
        return tuple(song for category in self._categories for song in category.songs)

    def find_song_by_id(self, song_id: str) -> Song | None:
        """Find a song by ID.

        Args:
            song_id: The song ID to look up.

        Returns:
            The Song if found, else None.
        """
        for song in self.list_all_songs():
            if song.id == song_id:
                return song
        return None

    @property
    def favorite_count(self) -> int:
        """Return the number of songs currently marked as favorite."""
        return sum(1 for song in self.list_all_songs() if song.is_favorite)

    def toggle_favorite(self, song_id: str) -> bool:
        """Invert the favorite flag of the song with the given ID.

        The flip is mapped over all categories and songs and the result
        replaces the snapshot atomically.

        Args:
            song_id: The song ID to toggle.

        Returns:
            True if a song matched, False if the ID is unknown (no change).
        """
        with self._lock:
            current = self._categories
            if not any(category.get_song(song_id) for category in current):
                logger.debug("Cannot toggle favorite: song '%s' not found", song_id)
                return False
            updated = tuple(category.with_favorite_toggled(song_id) for category in current)
            self._categories = updated

        logger.debug("Toggled favorite for song '%s'", song_id)
        self.catalog_changed.emit(updated)
        return True
