"""Centralized theme system with dark/light mode detection.

Provides a ThemeManager singleton that detects the system color scheme,
exposes named color palettes, and emits signals on theme changes.

Usage:
    from tunestream.ui.theme import theme_manager

    palette = theme_manager.palette
    widget.setStyleSheet(f"background-color: {palette.background};")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from tunestream.ui.tokens import sizing, spacing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemePalette:
    """Named color palette for UI theming.

    All values are CSS color strings (e.g. '#121212').
    """

    # Backgrounds
    background: str  # App/window background
    surface: str  # Card background
    surface_hover: str  # Card hover state

    # Borders
    border: str

    # Text
    text: str  # Primary text
    text_secondary: str  # Artist, descriptions
    text_disabled: str  # Empty-state hints

    # Status colors
    error: str  # Load error message
    accent: str  # Brand accent, selected tab
    favorite: str  # Filled heart

    # Semantic
    scrollbar: str
    scrollbar_hover: str

    @property
    def name(self) -> str:
        """Return 'dark' or 'light' based on background luminance."""
        _luminance_threshold = 128
        if self.background.startswith("#"):
            r = int(self.background[1:3], 16)
            return "dark" if r < _luminance_threshold else "light"
        return "dark"


DARK_PALETTE = ThemePalette(
    background="#121212",
    surface="#1e1e1e",
    surface_hover="#2a2a2a",
    border="#2f2f2f",
    text="#ffffff",
    text_secondary="#b3b3b3",
    text_disabled="#6a6a6a",
    error="#F44336",
    accent="#1DB954",
    favorite="#E91E63",
    scrollbar="#555555",
    scrollbar_hover="#777777",
)

LIGHT_PALETTE = ThemePalette(
    background="#f5f5f5",
    surface="#ffffff",
    surface_hover="#ececec",
    border="#dddddd",
    text="#121212",
    text_secondary="#555555",
    text_disabled="#999999",
    error="#D32F2F",
    accent="#168D40",
    favorite="#C2185B",
    scrollbar="#bbbbbb",
    scrollbar_hover="#999999",
)


def palette_for(theme: str) -> ThemePalette | None:
    """Map a theme preference to a palette.

    Args:
        theme: "dark", "light", or "system".

    Returns:
        The fixed palette, or None to auto-detect for "system".
    """
    if theme == "dark":
        return DARK_PALETTE
    if theme == "light":
        return LIGHT_PALETTE
    return None


class ThemeManager(QObject):
    """Manages the application theme and reacts to system changes.

    Emits ``theme_changed`` when the palette switches.

    Example:
        theme_manager.apply_theme()
        theme_manager.theme_changed.connect(my_widget.refresh_style)
    """

    theme_changed = Signal()

    def __init__(self) -> None:
        super().__init__()
        self._palette = DARK_PALETTE

    @property
    def palette(self) -> ThemePalette:
        """Return the current color palette."""
        return self._palette

    @property
    def is_dark(self) -> bool:
        """Return True if the current theme is dark."""
        return self._palette.name == "dark"

    def detect_system_theme(self) -> ThemePalette:
        """Detect the system color scheme and return the matching palette.

        Falls back to dark theme if detection fails.
        """
        try:
            raw_app = QGuiApplication.instance()
            if raw_app is None:
                return DARK_PALETTE
            app = cast(QGuiApplication, raw_app)
            from PySide6.QtCore import Qt  # noqa: PLC0415

            if app.styleHints().colorScheme() == Qt.ColorScheme.Light:
                return LIGHT_PALETTE
            return DARK_PALETTE
        except AttributeError:
            logger.debug("System theme detection not available, using dark theme")
            return DARK_PALETTE

    def apply_theme(self, palette: ThemePalette | None = None) -> None:
        """Apply a theme palette to the application.

        Args:
            palette: Palette to apply. If None, auto-detects from system.
        """
        if palette is None:
            palette = self.detect_system_theme()

        old_name = self._palette.name
        self._palette = palette
        logger.info("Theme applied: %s", palette.name)

        raw_app = QApplication.instance()
        if raw_app is not None:
            qapp = cast(QApplication, raw_app)
            qapp.setStyleSheet(self._global_stylesheet())

        if palette.name != old_name:
            self.theme_changed.emit()

    def _global_stylesheet(self) -> str:
        """Generate a global stylesheet for QApplication."""
        p = self._palette
        return f"""
            QToolTip {{
                background-color: {p.surface};
                color: {p.text};
                border: 1px solid {p.border};
                padding: {spacing.xs}px;
            }}
            QScrollBar:vertical, QScrollBar:horizontal {{
                background: {p.background};
                width: {sizing.scrollbar_width}px;
                height: {sizing.scrollbar_width}px;
            }}
            QScrollBar::handle:vertical, QScrollBar::handle:horizontal {{
                background: {p.scrollbar};
                min-height: {sizing.scrollbar_min_handle}px;
                min-width: {sizing.scrollbar_min_handle}px;
                border-radius: {sizing.border_radius_sm}px;
            }}
            QScrollBar::handle:hover {{
                background: {p.scrollbar_hover};
            }}
            QScrollBar::add-line, QScrollBar::sub-line {{
                width: 0px;
                height: 0px;
            }}
        """


# Module-level singleton - import this in widgets
theme_manager = ThemeManager()
