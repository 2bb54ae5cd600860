"""Song widgets - a Home tab card and a Library list row.

SongCard shows a cover, title, artist and a heart button that requests a
favorite toggle. FavoriteSongRow is the compact Library variant.
"""

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from tunestream.models.song import Song
from tunestream.ui.theme import theme_manager
from tunestream.ui.tokens import sizing, spacing, typography
from tunestream.ui.widgets.cover_art import CoverArt

HEART_FILLED = "♥"
HEART_OUTLINE = "♡"


def _text_label(text: str, font_size: int, color: str, bold: bool = False) -> QLabel:
    label = QLabel(text)
    label.setToolTip(text)
    weight = "bold" if bold else "normal"
    label.setStyleSheet(f"font-size: {font_size}pt; font-weight: {weight}; color: {color};")
    return label


class SongCard(QFrame):
    """Card widget for a song in a category row.

    The card never flips its own heart; the controller republishes state
    and the panel calls ``set_song`` with the new value.

    Signals:
        favorite_toggled: Emitted when the heart is clicked (song_id).
        clicked: Emitted when the card body is clicked (song_id).

    Example:
        card = SongCard(song)
        card.favorite_toggled.connect(home.toggle_favorite)
    """

    favorite_toggled = Signal(str)  # song_id
    clicked = Signal(str)  # song_id

    def __init__(self, song: Song) -> None:
        """Initialize the song card.

        Args:
            song: The song to display.
        """
        super().__init__()
        self._song = song
        self._setup_ui()

    def _setup_ui(self) -> None:
        p = theme_manager.palette
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setFixedWidth(sizing.song_card_width)
        self.setStyleSheet(f"""
            SongCard {{
                background-color: {p.surface};
                border-radius: {sizing.border_radius_md}px;
            }}
            SongCard:hover {{
                background-color: {p.surface_hover};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(spacing.md, spacing.md, spacing.md, spacing.md)
        layout.setSpacing(spacing.sm)

        self._cover = CoverArt(self._song.color_seed, size=sizing.song_cover)
        layout.addWidget(self._cover)

        self._title_label = _text_label(self._song.title, typography.body, p.text, bold=True)
        layout.addWidget(self._title_label)

        footer = QHBoxLayout()
        footer.setSpacing(spacing.sm)
        self._artist_label = _text_label(self._song.artist, typography.caption, p.text_secondary)
        footer.addWidget(self._artist_label, 1)

        self._heart_btn = QPushButton()
        self._heart_btn.setFlat(True)
        self._heart_btn.setFixedSize(sizing.heart_button, sizing.heart_button)
        self._heart_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._heart_btn.clicked.connect(self._on_heart_clicked)
        footer.addWidget(self._heart_btn)
        layout.addLayout(footer)

        self._update_heart()

    def _update_heart(self) -> None:
        p = theme_manager.palette
        if self._song.is_favorite:
            self._heart_btn.setText(HEART_FILLED)
            self._heart_btn.setToolTip("Remove from favorites")
            color = p.favorite
        else:
            self._heart_btn.setText(HEART_OUTLINE)
            self._heart_btn.setToolTip("Add to favorites")
            color = p.text_secondary
        self._heart_btn.setStyleSheet(
            f"QPushButton {{ color: {color}; font-size: {typography.title}pt;"
            f" border: none; background: transparent; }}"
        )

    def _on_heart_clicked(self) -> None:
        self.favorite_toggled.emit(self._song.id)

    @property
    def song_id(self) -> str:
        """Return the song ID."""
        return self._song.id

    @property
    def is_favorite(self) -> bool:
        """Return the favorite flag currently displayed."""
        return self._song.is_favorite

    @property
    def heart_button(self) -> QPushButton:
        """Return the favorite toggle button."""
        return self._heart_btn

    def set_song(self, song: Song) -> None:
        """Update the card in place from a newer song snapshot.

        Args:
            song: Song with the same ID as the current one.
        """
        if song == self._song:
            return
        self._song = song
        self._title_label.setText(song.title)
        self._artist_label.setText(song.artist)
        self._update_heart()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Emit clicked on left-click anywhere outside the heart."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self._song.id)
        super().mousePressEvent(event)


class FavoriteSongRow(QFrame):
    """Row widget for a favorited song in the Library tab.

    Signals:
        clicked: Emitted when the row is clicked (song_id).
    """

    clicked = Signal(str)  # song_id

    def __init__(self, song: Song) -> None:
        super().__init__()
        self._song_id = song.id

        p = theme_manager.palette
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, spacing.md, 0, spacing.md)
        layout.setSpacing(spacing.xl)

        layout.addWidget(CoverArt(song.color_seed, size=sizing.row_cover))

        text_col = QVBoxLayout()
        text_col.setSpacing(spacing.xs)
        text_col.addWidget(_text_label(song.title, typography.body, p.text, bold=True))
        text_col.addWidget(_text_label(song.artist, typography.caption, p.text_secondary))
        layout.addLayout(text_col, 1)

        heart = QLabel(HEART_FILLED)
        heart.setStyleSheet(f"color: {p.favorite}; font-size: {typography.title}pt;")
        layout.addWidget(heart)

    @property
    def song_id(self) -> str:
        """Return the song ID."""
        return self._song_id

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Emit clicked on left-click."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self._song_id)
        super().mousePressEvent(event)
