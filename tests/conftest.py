"""Test fixtures for tunestream tests."""

import os

import pytest

# Widgets must render without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tunestream.core.catalog import CatalogStore  # noqa: E402
from tunestream.core.config import ConfigManager  # noqa: E402
from tunestream.core.home import HomeController  # noqa: E402
from tunestream.core.library import LibraryController  # noqa: E402
from tunestream.core.playlists import PlaylistStore  # noqa: E402
from tunestream.models.category import Category  # noqa: E402
from tunestream.models.song import Song  # noqa: E402


@pytest.fixture
def catalog() -> CatalogStore:
    """Return a CatalogStore seeded with the default catalog."""
    return CatalogStore()


@pytest.fixture
def playlists() -> PlaylistStore:
    """Return a PlaylistStore seeded with the default playlists."""
    return PlaylistStore()


@pytest.fixture
def home(catalog: CatalogStore) -> HomeController:
    """Return a HomeController bound to the catalog fixture."""
    return HomeController(catalog)


@pytest.fixture
def library(catalog: CatalogStore, playlists: PlaylistStore) -> LibraryController:
    """Return a LibraryController bound to the store fixtures."""
    return LibraryController(catalog, playlists)


@pytest.fixture
def config() -> ConfigManager:
    """Return a fresh ConfigManager for each test."""
    # Use unique organization/app to avoid touching real user settings
    config = ConfigManager("TuneStreamTest", "TestConfig")
    config.clear()
    return config


@pytest.fixture
def small_catalog() -> CatalogStore:
    """Return a two-category catalog for focused tests."""
    return CatalogStore(
        [
            Category(
                name="Morning",
                songs=(
                    Song(id="m1", title="Sunrise", artist="Band A", color_seed=0xFF112233),
                    Song(id="m2", title="Coffee", artist="Band B", color_seed=0xFF445566),
                ),
            ),
            Category(
                name="Night",
                songs=(Song(id="n1", title="Moon", artist="Band C", color_seed=0xFF778899),),
            ),
        ]
    )
