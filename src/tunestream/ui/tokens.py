"""Design tokens for spacing, sizing, and typography.

Color tokens live in theme.py (ThemePalette). Layout tokens live here.

Usage:
    from tunestream.ui.tokens import spacing, typography, sizing

    layout.setContentsMargins(spacing.md, spacing.md, spacing.md, spacing.md)
    cover.setFixedSize(sizing.song_cover, sizing.song_cover)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpacingTokens:
    """Spacing scale based on a 4px base unit."""

    xs: int = 2  # Tight: inner padding
    sm: int = 4  # Card padding, label gaps
    md: int = 8  # Between cards in a row
    lg: int = 12  # Panel padding
    xl: int = 16  # Between category sections


@dataclass(frozen=True)
class TypographyTokens:
    """Font size scale in points and font family stack."""

    font_family: str = "'SF Pro Text', 'Segoe UI', 'Helvetica Neue', sans-serif"
    caption: int = 9  # Artist, song counts
    body: int = 11  # Song titles
    title: int = 13  # Section headers
    heading: int = 16  # Tab headers


@dataclass(frozen=True)
class SizingTokens:
    """Widget sizing constants in pixels."""

    border_radius_sm: int = 4  # Covers
    border_radius_md: int = 8  # Cards
    song_cover: int = 120  # Square cover on Home song cards
    song_card_width: int = 136  # Song card incl. padding
    row_cover: int = 48  # Cover in Library list rows
    heart_button: int = 28  # Favorite toggle button
    scrollbar_width: int = 8  # Scrollbar track width/height
    scrollbar_min_handle: int = 20  # Min scrollbar handle dimension


# Module-level singletons - import these in widgets
spacing = SpacingTokens()
typography = TypographyTokens()
sizing = SizingTokens()
