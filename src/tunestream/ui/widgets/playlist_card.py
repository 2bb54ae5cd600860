"""Playlist card widget for the Library tab."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout

from tunestream.models.playlist import Playlist
from tunestream.ui.theme import theme_manager
from tunestream.ui.tokens import spacing, typography
from tunestream.ui.widgets.cover_art import CoverArt

_PLAYLIST_COVER = 64


class PlaylistCard(QFrame):
    """Row showing a playlist's cover, name, description and song count.

    Signals:
        clicked: Emitted when the card is clicked (playlist_id).
    """

    clicked = Signal(str)  # playlist_id

    def __init__(self, playlist: Playlist) -> None:
        """Initialize the playlist card.

        Args:
            playlist: The playlist to display.
        """
        super().__init__()
        self._playlist_id = playlist.id
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        p = theme_manager.palette
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, spacing.md, 0, spacing.md)
        layout.setSpacing(spacing.xl)

        layout.addWidget(CoverArt(playlist.color_seed, size=_PLAYLIST_COVER, glyph="≡"))

        info = QVBoxLayout()
        info.setSpacing(spacing.xs)

        self._name_label = QLabel(playlist.name)
        self._name_label.setStyleSheet(
            f"font-size: {typography.body}pt; font-weight: bold; color: {p.text};"
        )
        info.addWidget(self._name_label)

        self._description_label = QLabel(playlist.description)
        self._description_label.setStyleSheet(
            f"font-size: {typography.caption}pt; color: {p.text_secondary};"
        )
        info.addWidget(self._description_label)

        self._count_label = QLabel(playlist.display_song_count)
        self._count_label.setStyleSheet(
            f"font-size: {typography.caption}pt; color: {p.text_secondary};"
        )
        info.addWidget(self._count_label)

        layout.addLayout(info, 1)

    @property
    def playlist_id(self) -> str:
        """Return the playlist ID."""
        return self._playlist_id

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Emit clicked on left-click."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self._playlist_id)
        super().mousePressEvent(event)
