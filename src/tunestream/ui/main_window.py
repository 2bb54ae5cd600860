"""Main application window with Home and Library tabs.

Layout:
+----------------------------------+
|  [ Home ]  [ Library ]           |
+----------------------------------+
|                                  |
|  current tab panel               |
|                                  |
+----------------------------------+
| status bar                       |
+----------------------------------+
"""

import logging

from PySide6.QtCore import Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QTabWidget

from tunestream.core.config import ConfigManager
from tunestream.core.home import HomeController, HomeState, HomeSuccess
from tunestream.core.library import LibraryController
from tunestream.ui.panels.home import HomePanel
from tunestream.ui.panels.library import LibraryPanel
from tunestream.ui.theme import theme_manager
from tunestream.ui.tokens import spacing, typography

logger = logging.getLogger(__name__)

TAB_HOME = 0
TAB_LIBRARY = 1
_TAB_NAMES = {TAB_HOME: "home", TAB_LIBRARY: "library"}


class MainWindow(QMainWindow):
    """Main application window.

    Connects the panels to their controllers: state flows from the
    controllers into the panels, user events flow back as signals.

    Example:
        catalog = CatalogStore()
        home = HomeController(catalog)
        library = LibraryController(catalog, PlaylistStore())
        window = MainWindow(home, library, ConfigManager())
        window.show()
    """

    def __init__(
        self,
        home: HomeController | None = None,
        library: LibraryController | None = None,
        config: ConfigManager | None = None,
        initial_tab: str | None = None,
    ) -> None:
        """Initialize the main window.

        Args:
            home: Optional Home tab controller.
            library: Optional Library tab controller.
            config: Optional ConfigManager for preferences.
            initial_tab: "home" or "library" to open on start. Defaults to
                the last tab saved in the config.
        """
        super().__init__()
        self._home = home
        self._library = library
        self._config = config

        self._setup_ui()
        self._setup_style()
        self._connect_signals()

        theme_manager.theme_changed.connect(self._setup_style)

        if initial_tab is None and config is not None:
            initial_tab = config.get_last_tab()
        if initial_tab == "library":
            self._tabs.setCurrentIndex(TAB_LIBRARY)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("TuneStream")
        self.setMinimumSize(480, 640)

        self._home_panel = HomePanel()
        self._library_panel = LibraryPanel()

        self._tabs = QTabWidget()
        self._tabs.addTab(self._home_panel, "Home")
        self._tabs.addTab(self._library_panel, "Library")
        self.setCentralWidget(self._tabs)

        self._favorites_label = QLabel()
        self.statusBar().addPermanentWidget(self._favorites_label)

    def _setup_style(self) -> None:
        """Apply palette colors to the window and tab bar."""
        p = theme_manager.palette
        self.setStyleSheet(f"""
            QMainWindow {{
                background-color: {p.background};
            }}
            QWidget {{
                background-color: {p.background};
                color: {p.text};
                font-family: {typography.font_family};
                font-size: {typography.body}pt;
            }}
            QTabBar::tab {{
                padding: {spacing.md}px {spacing.xl}px;
                color: {p.text_secondary};
            }}
            QTabBar::tab:selected {{
                color: {p.accent};
                border-bottom: 2px solid {p.accent};
            }}
        """)
        self._favorites_label.setStyleSheet(
            f"color: {p.text_secondary}; padding: {spacing.xs}px {spacing.sm}px;"
        )

    def _connect_signals(self) -> None:
        """Wire panels to controllers."""
        self._tabs.currentChanged.connect(self._on_tab_changed)

        if self._home is not None:
            self._home.state_changed.connect(self._home_panel.set_state)
            self._home.state_changed.connect(self._update_favorites_label)
            self._home_panel.favorite_toggled.connect(self._home.toggle_favorite)
            self._home_panel.set_state(self._home.state)
            self._update_favorites_label(self._home.state)

        if self._library is not None:
            self._library.state_changed.connect(self._library_panel.set_state)
            self._library_panel.set_state(self._library.state)

        auto_refresh = self._config.get_library_auto_refresh() if self._config else False
        if self._home is not None and self._library is not None and auto_refresh:
            self._home.state_changed.connect(self._refresh_library_after_change)

    @property
    def home_panel(self) -> HomePanel:
        """Return the Home tab panel."""
        return self._home_panel

    @property
    def library_panel(self) -> LibraryPanel:
        """Return the Library tab panel."""
        return self._library_panel

    @property
    def tabs(self) -> QTabWidget:
        """Return the tab widget."""
        return self._tabs

    @Slot(int)
    def _on_tab_changed(self, index: int) -> None:
        """Refresh the Library when it becomes visible and remember the tab."""
        tab = _TAB_NAMES.get(index, "home")
        logger.debug("Switched to %s tab", tab)

        refresh_on_show = self._config.get_refresh_library_on_show() if self._config else True
        if index == TAB_LIBRARY and self._library is not None and refresh_on_show:
            self._library.refresh()

        if self._config is not None:
            self._config.set_last_tab(tab)

    @Slot(object)
    def _refresh_library_after_change(self, state: HomeState) -> None:
        """Keep the Library in step with every published catalog."""
        if isinstance(state, HomeSuccess) and self._library is not None:
            self._library.refresh()

    @Slot(object)
    def _update_favorites_label(self, state: HomeState) -> None:
        if not isinstance(state, HomeSuccess):
            self._favorites_label.setText("")
            return
        count = self._home.favorite_count if self._home is not None else 0
        self._favorites_label.setText("1 favorite" if count == 1 else f"{count} favorites")

    @property
    def favorites_text(self) -> str:
        """Return the status bar favorites summary."""
        return self._favorites_label.text()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        """Persist the current tab on close."""
        if self._config is not None:
            self._config.set_last_tab(_TAB_NAMES.get(self._tabs.currentIndex(), "home"))
            self._config.sync()
        super().closeEvent(event)
