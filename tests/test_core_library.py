"""Tests for LibraryController."""

from unittest.mock import MagicMock

from tunestream.core.catalog import CatalogStore
from tunestream.core.home import UNKNOWN_LOAD_ERROR, HomeController
from tunestream.core.library import (
    LibraryController,
    LibraryError,
    LibraryLoading,
    LibraryState,
    LibrarySuccess,
)
from tunestream.core.playlists import PlaylistStore


class TestLibraryControllerLoad:
    """Test loading favorites and playlists."""

    def test_initial_state(self, library: LibraryController) -> None:
        """Test the controller loads on construction with no favorites."""
        state = library.state
        assert isinstance(state, LibrarySuccess)
        assert state.favorite_songs == ()
        assert not state.has_favorites

    def test_real_playlists_are_listed(
        self, library: LibraryController, playlists: PlaylistStore
    ) -> None:
        """Test the full playlist listing is published, not an empty placeholder."""
        state = library.state
        assert isinstance(state, LibrarySuccess)
        assert state.playlists == playlists.list_playlists()
        assert len(state.playlists) == 6

    def test_load_publishes_loading_then_success(self, library: LibraryController) -> None:
        """Test load emits Loading before Success."""
        published: list[LibraryState] = []
        library.state_changed.connect(published.append)

        library.load()

        assert len(published) == 2
        assert published[0] == LibraryLoading()
        assert isinstance(published[1], LibrarySuccess)

    def test_error_state_on_failure(self, playlists: PlaylistStore) -> None:
        """Test a failing catalog yields an Error state."""
        broken = MagicMock()
        broken.list_all_songs.side_effect = RuntimeError("catalog unavailable")

        library = LibraryController(broken, playlists)

        assert library.state == LibraryError("catalog unavailable")

    def test_error_state_default_message(self, catalog: CatalogStore) -> None:
        """Test a message-less failure falls back to a generic message."""
        broken = MagicMock()
        broken.list_playlists.side_effect = RuntimeError()

        library = LibraryController(catalog, broken)

        assert library.state == LibraryError(UNKNOWN_LOAD_ERROR)


class TestLibraryControllerFavorites:
    """Test the favorites view derived from the catalog."""

    def test_favorites_match_catalog_subset(
        self, library: LibraryController, catalog: CatalogStore
    ) -> None:
        """Test favorite_songs equals the favorite subset in flattened order."""
        for song_id in ("latin_2", "rock_7", "chill_1", "code_10"):
            catalog.toggle_favorite(song_id)

        library.refresh()

        state = library.state
        assert isinstance(state, LibrarySuccess)
        expected = tuple(s for s in catalog.list_all_songs() if s.is_favorite)
        assert state.favorite_songs == expected
        assert [s.id for s in state.favorite_songs] == ["rock_7", "code_10", "chill_1", "latin_2"]

    def test_refresh_needed_to_see_changes(
        self, library: LibraryController, catalog: CatalogStore
    ) -> None:
        """Test state is only re-derived on refresh."""
        catalog.toggle_favorite("rock_1")
        state = library.state
        assert isinstance(state, LibrarySuccess)
        assert state.favorite_songs == ()

        library.refresh()
        state = library.state
        assert isinstance(state, LibrarySuccess)
        assert [s.id for s in state.favorite_songs] == ["rock_1"]

    def test_toggle_through_home_controller(
        self, catalog: CatalogStore, playlists: PlaylistStore
    ) -> None:
        """Test both controllers share one catalog."""
        home = HomeController(catalog)
        library = LibraryController(catalog, playlists)

        home.toggle_favorite("gym_1")
        library.refresh()
        state = library.state
        assert isinstance(state, LibrarySuccess)
        assert [s.id for s in state.favorite_songs] == ["gym_1"]

        home.toggle_favorite("gym_1")
        library.refresh()
        state = library.state
        assert isinstance(state, LibrarySuccess)
        assert not state.has_favorites

    def test_refresh_is_idempotent(self, library: LibraryController, catalog: CatalogStore) -> None:
        """Test two refreshes without mutation publish equal states."""
        catalog.toggle_favorite("chill_5")
        published: list[LibraryState] = []
        library.state_changed.connect(published.append)

        library.refresh()
        library.refresh()

        successes = [s for s in published if isinstance(s, LibrarySuccess)]
        assert len(successes) == 2
        assert successes[0] == successes[1]
