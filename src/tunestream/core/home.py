"""Home tab state controller.

Loads categories from the CatalogStore and publishes them as view state.
Favorite toggles from the UI flow back through ``toggle_favorite``, which
mutates the store and republishes the refreshed catalog.

State flow:
    HomeLoading -> HomeSuccess(categories) | HomeError(message)
"""

import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, Signal, Slot

from tunestream.core.catalog import CatalogStore
from tunestream.models.category import Category

logger = logging.getLogger(__name__)

UNKNOWN_LOAD_ERROR = "Unknown error while loading data"


@dataclass(frozen=True, slots=True)
class HomeLoading:
    """Categories have not been loaded yet."""


@dataclass(frozen=True, slots=True)
class HomeSuccess:
    """Categories loaded.

    Attributes:
        categories: Catalog snapshot to render.
    """

    categories: tuple[Category, ...]


@dataclass(frozen=True, slots=True)
class HomeError:
    """Loading failed.

    Attributes:
        message: Human-readable error shown instead of content.
    """

    message: str


HomeState = HomeLoading | HomeSuccess | HomeError


class HomeController(QObject):
    """Publishes Home tab state and relays favorite toggles.

    Example:
        home = HomeController(catalog)
        home.state_changed.connect(panel.set_state)
        panel.favorite_toggled.connect(home.toggle_favorite)
    """

    state_changed = Signal(object)  # HomeState

    def __init__(self, catalog: CatalogStore) -> None:
        """Initialize the controller and load categories immediately.

        Args:
            catalog: The catalog store to read and mutate.
        """
        super().__init__()
        self._catalog = catalog
        self._state: HomeState = HomeLoading()
        self._refresh()

    @property
    def state(self) -> HomeState:
        """Return the most recently published state."""
        return self._state

    @property
    def favorite_count(self) -> int:
        """Return how many songs in the catalog are favorited."""
        return self._catalog.favorite_count

    def _publish(self, state: HomeState) -> None:
        self._state = state
        self.state_changed.emit(state)

    def _refresh(self) -> None:
        """Read the catalog and publish Success, or Error on failure."""
        try:
            categories = self._catalog.list_categories()
        except Exception as e:
            logger.warning("Failed to load categories: %s", e)
            self._publish(HomeError(str(e) or UNKNOWN_LOAD_ERROR))
            return
        self._publish(HomeSuccess(categories=categories))

    @Slot()
    def reload(self) -> None:
        """Reload categories, e.g. after an error."""
        self._refresh()

    @Slot(str)
    def toggle_favorite(self, song_id: str) -> bool:
        """Toggle a song's favorite flag and republish the catalog.

        Args:
            song_id: ID of the song whose heart was clicked.

        Returns:
            True if the song exists, False otherwise.
        """
        found = self._catalog.toggle_favorite(song_id)
        if not found:
            logger.warning("Favorite toggle for unknown song: %s", song_id)
        self._refresh()
        return found
