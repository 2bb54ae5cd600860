"""Tests for MainWindow."""

from pytestqt.qtbot import QtBot

from tunestream.core.catalog import CatalogStore
from tunestream.core.config import ConfigManager
from tunestream.core.home import HomeController
from tunestream.core.library import LibraryController
from tunestream.core.playlists import PlaylistStore
from tunestream.ui.main_window import TAB_HOME, TAB_LIBRARY, MainWindow


def _window(
    qtbot: QtBot, catalog: CatalogStore, playlists: PlaylistStore, config: ConfigManager
) -> MainWindow:
    window = MainWindow(HomeController(catalog), LibraryController(catalog, playlists), config)
    qtbot.addWidget(window)
    return window


class TestMainWindowBasics:
    """Test MainWindow creation and layout."""

    def test_creation_without_controllers(self, qtbot: QtBot) -> None:
        """Test that the window can be created standalone."""
        window = MainWindow()
        qtbot.addWidget(window)
        assert window.windowTitle() == "TuneStream"
        assert window.tabs.count() == 2
        assert window.tabs.tabText(TAB_HOME) == "Home"
        assert window.tabs.tabText(TAB_LIBRARY) == "Library"

    def test_panels_receive_initial_state(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test both panels render the controllers' current state."""
        window = _window(qtbot, catalog, playlists, config)
        assert window.home_panel.is_showing_content
        assert window.library_panel.is_showing_content
        assert window.favorites_text == "0 favorites"


class TestMainWindowFlow:
    """Test the toggle -> library refresh flow."""

    def test_library_refreshes_on_show(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test favorites toggled on Home appear when Library is opened."""
        window = _window(qtbot, catalog, playlists, config)

        window.home_panel.favorite_toggled.emit("rock_1")
        assert window.favorites_text == "1 favorite"
        assert window.library_panel.favorite_song_ids == []

        window.tabs.setCurrentIndex(TAB_LIBRARY)

        assert window.library_panel.favorite_song_ids == ["rock_1"]
        assert config.get_last_tab() == "library"

    def test_no_refresh_when_disabled(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test the refresh-on-show preference is honored."""
        config.set_refresh_library_on_show(False)
        window = _window(qtbot, catalog, playlists, config)

        window.home_panel.favorite_toggled.emit("rock_1")
        window.tabs.setCurrentIndex(TAB_LIBRARY)

        assert window.library_panel.favorite_song_ids == []

    def test_restores_last_tab(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test the window opens on the remembered tab."""
        config.set_last_tab("library")
        window = _window(qtbot, catalog, playlists, config)
        assert window.tabs.currentIndex() == TAB_LIBRARY

    def test_close_saves_tab(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test closing the window persists the current tab."""
        window = _window(qtbot, catalog, playlists, config)
        window.tabs.setCurrentIndex(TAB_LIBRARY)
        window.tabs.setCurrentIndex(TAB_HOME)
        window.close()
        assert config.get_last_tab() == "home"


class TestMainWindowAutoRefresh:
    """Test the library auto-refresh preference and the initial tab argument."""

    def test_auto_refresh_updates_library_without_tab_switch(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test favorites reach the Library panel on toggle when auto-refresh is on."""
        config.set_library_auto_refresh(True)
        window = _window(qtbot, catalog, playlists, config)

        window.home_panel.favorite_toggled.emit("rock_1")

        assert window.tabs.currentIndex() == TAB_HOME
        assert window.library_panel.favorite_song_ids == ["rock_1"]

        window.home_panel.favorite_toggled.emit("rock_1")
        assert window.library_panel.favorite_song_ids == []
        assert window.library_panel.is_showing_empty_favorites

    def test_auto_refresh_off_by_default(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test the Library stays stale on Home toggles by default."""
        window = _window(qtbot, catalog, playlists, config)
        window.home_panel.favorite_toggled.emit("rock_1")
        assert window.library_panel.favorite_song_ids == []

    def test_initial_tab_overrides_config(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test an explicit initial tab wins over the saved one."""
        config.set_last_tab("home")
        catalog.toggle_favorite("latin_3")
        window = MainWindow(
            HomeController(catalog),
            LibraryController(catalog, playlists),
            config,
            initial_tab="library",
        )
        qtbot.addWidget(window)

        assert window.tabs.currentIndex() == TAB_LIBRARY
        assert window.library_panel.favorite_song_ids == ["latin_3"]
        assert config.get_last_tab() == "library"

    def test_initial_tab_home_overrides_saved_library(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test initial_tab='home' ignores a saved Library tab."""
        config.set_last_tab("library")
        window = MainWindow(
            HomeController(catalog),
            LibraryController(catalog, playlists),
            config,
            initial_tab="home",
        )
        qtbot.addWidget(window)
        assert window.tabs.currentIndex() == TAB_HOME

    def test_favorites_label_tracks_store_count(
        self,
        qtbot: QtBot,
        catalog: CatalogStore,
        playlists: PlaylistStore,
        config: ConfigManager,
    ) -> None:
        """Test the status bar count follows the catalog."""
        window = _window(qtbot, catalog, playlists, config)
        window.home_panel.favorite_toggled.emit("gym_1")
        window.home_panel.favorite_toggled.emit("gym_2")
        assert window.favorites_text == f"{catalog.favorite_count} favorites" == "2 favorites"
