"""Placeholder cover art drawn from a color seed."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from tunestream.ui.tokens import sizing


def seed_to_hex(color_seed: int) -> str:
    """Convert an ARGB color seed to a '#RRGGBB' string (alpha dropped)."""
    return f"#{color_seed & 0xFFFFFF:06X}"


class CoverArt(QLabel):
    """Square colored tile standing in for album artwork.

    Example:
        cover = CoverArt(0xFF1E88E5, size=64)
    """

    def __init__(self, color_seed: int, size: int = sizing.song_cover, glyph: str = "♪") -> None:
        """Initialize the cover.

        Args:
            color_seed: ARGB color for the background.
            size: Edge length in pixels.
            glyph: Character drawn in the middle.
        """
        super().__init__(glyph)
        self._color = seed_to_hex(color_seed)
        self.setFixedSize(size, size)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setStyleSheet(
            f"background-color: {self._color};"
            " color: rgba(255, 255, 255, 180);"
            f" font-size: {max(10, size // 3)}px;"
            f" border-radius: {sizing.border_radius_sm}px;"
        )

    @property
    def color(self) -> str:
        """Return the background color as '#RRGGBB'."""
        return self._color
