"""Configuration manager using QSettings for persistent storage."""

import logging

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Appearance
_KEY_THEME = "appearance/theme"

# UI
_KEY_LAST_TAB = "ui/last_tab"

# Library
_KEY_REFRESH_ON_SHOW = "library/refresh_on_show"
_KEY_AUTO_REFRESH = "library/auto_refresh"

THEMES = ("system", "dark", "light")
TABS = ("home", "library")


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\TuneStream\\TuneStream
    - macOS: ~/Library/Preferences/com.TuneStream.TuneStream.plist
    - Linux: ~/.config/TuneStream/TuneStream.conf

    Example:
        config = ConfigManager()
        if config.get_refresh_library_on_show():
            library.refresh()
    """

    def __init__(self, organization: str = "TuneStream", application: str = "TuneStream") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Appearance settings ---------------------------------------------------

    def get_theme(self) -> str:
        """Return the theme preference.

        Returns:
            One of "system", "dark", "light". Default "system".
        """
        value = self._settings.value(_KEY_THEME, "system", str)
        return str(value) if value in THEMES else "system"

    def set_theme(self, theme: str) -> None:
        """Set the theme preference.

        Args:
            theme: One of "system", "dark", "light".
        """
        if theme not in THEMES:
            logger.warning("Ignoring unknown theme '%s'", theme)
            return
        self._settings.setValue(_KEY_THEME, theme)

    # -- UI settings -----------------------------------------------------------

    def get_last_tab(self) -> str:
        """Return the tab that was open when the app last closed.

        Returns:
            "home" or "library". Default "home".
        """
        value = self._settings.value(_KEY_LAST_TAB, "home", str)
        return str(value) if value in TABS else "home"

    def set_last_tab(self, tab: str) -> None:
        """Remember the currently open tab.

        Args:
            tab: "home" or "library".
        """
        if tab not in TABS:
            logger.warning("Ignoring unknown tab '%s'", tab)
            return
        self._settings.setValue(_KEY_LAST_TAB, tab)

    # -- Library settings ------------------------------------------------------

    def get_refresh_library_on_show(self) -> bool:
        """Return whether the Library tab refreshes each time it is shown.

        Returns:
            True if enabled (default True).
        """
        return bool(self._settings.value(_KEY_REFRESH_ON_SHOW, True, bool))

    def set_refresh_library_on_show(self, enabled: bool) -> None:
        """Enable or disable refresh when the Library tab is shown.

        Args:
            enabled: Whether to refresh on show.
        """
        self._settings.setValue(_KEY_REFRESH_ON_SHOW, enabled)

    def get_library_auto_refresh(self) -> bool:
        """Return whether the Library refreshes on every catalog change.

        Returns:
            True if enabled (default False).
        """
        return bool(self._settings.value(_KEY_AUTO_REFRESH, False, bool))

    def set_library_auto_refresh(self, enabled: bool) -> None:
        """Enable or disable refresh on catalog changes.

        Args:
            enabled: Whether to refresh on every favorite toggle.
        """
        self._settings.setValue(_KEY_AUTO_REFRESH, enabled)

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
