"""Library panel - favorite songs and saved playlists."""

import logging

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import QLabel, QScrollArea, QStackedWidget, QVBoxLayout, QWidget

from tunestream.core.library import LibraryError, LibraryLoading, LibraryState, LibrarySuccess
from tunestream.ui.theme import theme_manager
from tunestream.ui.tokens import spacing, typography
from tunestream.ui.widgets.playlist_card import PlaylistCard
from tunestream.ui.widgets.song_card import FavoriteSongRow

logger = logging.getLogger(__name__)

EMPTY_FAVORITES_TEXT = "No favorites yet. Go to Home and tap some ♥!"

_PAGE_STATUS = 0
_PAGE_CONTENT = 1


class LibraryPanel(QWidget):
    """Library tab listing favorite songs followed by playlists.

    Example:
        panel = LibraryPanel()
        library.state_changed.connect(panel.set_state)
        panel.set_state(library.state)
    """

    playlist_clicked = Signal(str)  # playlist_id
    song_clicked = Signal(str)  # song_id

    def __init__(self) -> None:
        """Initialize the library panel."""
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(spacing.lg, spacing.lg, spacing.lg, spacing.lg)

        p = theme_manager.palette
        self._stack = QStackedWidget()

        self._status_label = QLabel("Loading...")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setWordWrap(True)
        self._status_label.setStyleSheet(f"color: {p.text_secondary};")
        self._stack.addWidget(self._status_label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background-color: transparent; border: none; }")

        self._container = QWidget()
        self._container.setStyleSheet("background-color: transparent;")
        self._container_layout = QVBoxLayout(self._container)
        self._container_layout.setContentsMargins(0, 0, 0, 0)
        self._container_layout.setSpacing(spacing.sm)
        scroll.setWidget(self._container)
        self._stack.addWidget(scroll)

        layout.addWidget(self._stack)

        self._favorite_rows: list[FavoriteSongRow] = []
        self._playlist_cards: list[PlaylistCard] = []
        self._empty_label: QLabel | None = None
        self._last_state: LibrarySuccess | None = None
        self._state: LibraryState = LibraryLoading()

        theme_manager.theme_changed.connect(self._refresh_theme)

    @property
    def status_text(self) -> str:
        """Return the loading/error text (empty when showing content)."""
        if self._stack.currentIndex() == _PAGE_CONTENT:
            return ""
        return self._status_label.text()

    @property
    def is_showing_content(self) -> bool:
        """Return True if library content is displayed."""
        return self._stack.currentIndex() == _PAGE_CONTENT

    @property
    def is_showing_empty_favorites(self) -> bool:
        """Return True if the 'no favorites yet' hint is displayed."""
        return self._empty_label is not None

    @property
    def favorite_song_ids(self) -> list[str]:
        """Return the IDs of the displayed favorite songs, in order."""
        return [row.song_id for row in self._favorite_rows]

    @property
    def playlist_ids(self) -> list[str]:
        """Return the IDs of the displayed playlists, in order."""
        return [card.playlist_id for card in self._playlist_cards]

    @Slot(object)
    def set_state(self, state: LibraryState) -> None:
        """Render a published LibraryState.

        A Loading state that follows a Success keeps the old content on
        screen so a refresh does not flicker.

        Args:
            state: The controller's latest state.
        """
        self._state = state
        p = theme_manager.palette
        if isinstance(state, LibraryLoading):
            if self._last_state is None:
                self._status_label.setText("Loading...")
                self._status_label.setStyleSheet(f"color: {p.text_secondary};")
                self._stack.setCurrentIndex(_PAGE_STATUS)
        elif isinstance(state, LibraryError):
            self._last_state = None
            self._status_label.setText(f"Error: {state.message}")
            self._status_label.setStyleSheet(f"color: {p.error};")
            self._stack.setCurrentIndex(_PAGE_STATUS)
        elif isinstance(state, LibrarySuccess):
            if state != self._last_state:
                self._rebuild(state)
                self._last_state = state
            self._stack.setCurrentIndex(_PAGE_CONTENT)
        else:
            logger.warning("Unknown library state: %r", state)

    @Slot()
    def _refresh_theme(self) -> None:
        """Rebuild the content or status label with the new palette."""
        if self._last_state is not None:
            self._rebuild(self._last_state)
        else:
            self.set_state(self._state)

    def _clear(self) -> None:
        while self._container_layout.count():
            item = self._container_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._favorite_rows.clear()
        self._playlist_cards.clear()
        self._empty_label = None

    def _header(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(
            f"font-weight: bold; font-size: {typography.heading}pt;"
            f" color: {theme_manager.palette.text}; padding: {spacing.lg}px 0px;"
        )
        return label

    def _rebuild(self, state: LibrarySuccess) -> None:
        self._clear()
        p = theme_manager.palette

        self._container_layout.addWidget(self._header("Highlights"))
        if not state.has_favorites:
            self._empty_label = QLabel(EMPTY_FAVORITES_TEXT)
            self._empty_label.setStyleSheet(
                f"font-size: {typography.body}pt; color: {p.text_disabled};"
            )
            self._container_layout.addWidget(self._empty_label)
        else:
            for song in state.favorite_songs:
                row = FavoriteSongRow(song)
                row.clicked.connect(self.song_clicked.emit)
                self._container_layout.addWidget(row)
                self._favorite_rows.append(row)

        self._container_layout.addWidget(self._header("Playlists"))
        for playlist in state.playlists:
            card = PlaylistCard(playlist)
            card.clicked.connect(self.playlist_clicked.emit)
            self._container_layout.addWidget(card)
            self._playlist_cards.append(card)

        self._container_layout.addStretch()
