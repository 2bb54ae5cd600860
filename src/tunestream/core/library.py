"""Library tab state controller.

Combines the user's playlists with the songs marked as favorite into a
single published state.

State flow:
    LibraryLoading -> LibrarySuccess(playlists, favorite_songs) | LibraryError(message)
"""

import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, Signal, Slot

from tunestream.core.catalog import CatalogStore
from tunestream.core.home import UNKNOWN_LOAD_ERROR
from tunestream.core.playlists import PlaylistStore
from tunestream.models.playlist import Playlist
from tunestream.models.song import Song

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LibraryLoading:
    """Library data is being loaded."""


@dataclass(frozen=True, slots=True)
class LibrarySuccess:
    """Library data loaded.

    Attributes:
        playlists: The user's playlists.
        favorite_songs: Favorited songs in catalog order.
    """

    playlists: tuple[Playlist, ...]
    favorite_songs: tuple[Song, ...]

    @property
    def has_favorites(self) -> bool:
        """Return True if at least one song is favorited."""
        return len(self.favorite_songs) > 0


@dataclass(frozen=True, slots=True)
class LibraryError:
    """Loading failed.

    Attributes:
        message: Human-readable error shown instead of content.
    """

    message: str


LibraryState = LibraryLoading | LibrarySuccess | LibraryError


class LibraryController(QObject):
    """Publishes Library tab state.

    The controller only reads from its stores. Call ``refresh`` to pick
    up favorites toggled elsewhere.
    """

    state_changed = Signal(object)  # LibraryState

    def __init__(self, catalog: CatalogStore, playlists: PlaylistStore) -> None:
        """Initialize the controller and load library data.

        Args:
            catalog: Catalog store used to derive favorites.
            playlists: Playlist store.
        """
        super().__init__()
        self._catalog = catalog
        self._playlists = playlists
        self._state: LibraryState = LibraryLoading()
        self.load()

    @property
    def state(self) -> LibraryState:
        """Return the most recently published state."""
        return self._state

    def _publish(self, state: LibraryState) -> None:
        self._state = state
        self.state_changed.emit(state)

    def load(self) -> None:
        """Load favorites and playlists and publish them together."""
        self._publish(LibraryLoading())
        try:
            favorites = tuple(song for song in self._catalog.list_all_songs() if song.is_favorite)
            playlists = self._playlists.list_playlists()
        except Exception as e:
            logger.warning("Failed to load library: %s", e)
            self._publish(LibraryError(str(e) or UNKNOWN_LOAD_ERROR))
            return

        logger.debug(
            "Library loaded: %d playlists, %d favorites", len(playlists), len(favorites)
        )
        self._publish(LibrarySuccess(playlists=playlists, favorite_songs=favorites))

    @Slot()
    def refresh(self) -> None:
        """Reload library data."""
        self.load()
