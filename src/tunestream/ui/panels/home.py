"""Home panel - category sections with horizontally scrolling song cards."""

import logging

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from tunestream.core.home import HomeError, HomeLoading, HomeState, HomeSuccess
from tunestream.models.category import Category
from tunestream.ui.theme import theme_manager
from tunestream.ui.tokens import sizing, spacing, typography
from tunestream.ui.widgets.song_card import SongCard

logger = logging.getLogger(__name__)

_PAGE_STATUS = 0
_PAGE_CONTENT = 1


def _transparent_scroll(horizontal: bool) -> QScrollArea:
    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setFrameShape(QScrollArea.Shape.NoFrame)
    scroll.setStyleSheet("QScrollArea { background-color: transparent; border: none; }")
    if horizontal:
        scroll.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
    else:
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
    return scroll


class HomePanel(QWidget):
    """Home tab showing one section per category.

    Renders whatever HomeState it is given. User interaction is forwarded
    as signals for the HomeController to handle.

    Example:
        panel = HomePanel()
        home.state_changed.connect(panel.set_state)
        panel.favorite_toggled.connect(home.toggle_favorite)
        panel.set_state(home.state)
    """

    favorite_toggled = Signal(str)  # song_id
    song_clicked = Signal(str)  # song_id

    def __init__(self) -> None:
        """Initialize the home panel."""
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(spacing.lg, spacing.lg, spacing.lg, spacing.lg)
        layout.setSpacing(spacing.md)

        p = theme_manager.palette
        self._stack = QStackedWidget()

        self._status_label = QLabel("Loading...")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setWordWrap(True)
        self._stack.addWidget(self._status_label)

        scroll = _transparent_scroll(horizontal=False)
        self._container = QWidget()
        self._container.setStyleSheet("background-color: transparent;")
        self._container_layout = QVBoxLayout(self._container)
        self._container_layout.setContentsMargins(0, 0, 0, 0)
        self._container_layout.setSpacing(spacing.xl)
        self._container_layout.addStretch()
        scroll.setWidget(self._container)
        self._stack.addWidget(scroll)

        layout.addWidget(self._stack)
        self._status_label.setStyleSheet(f"color: {p.text_secondary};")

        self._sections: list[QWidget] = []
        self._section_names: list[str] = []
        self._song_cards: dict[str, SongCard] = {}
        self._state: HomeState = HomeLoading()

        theme_manager.theme_changed.connect(self._refresh_theme)

    @property
    def status_text(self) -> str:
        """Return the loading/error text (empty when showing content)."""
        if self._stack.currentIndex() == _PAGE_CONTENT:
            return ""
        return self._status_label.text()

    @property
    def is_showing_content(self) -> bool:
        """Return True if categories are displayed."""
        return self._stack.currentIndex() == _PAGE_CONTENT

    @property
    def section_names(self) -> list[str]:
        """Return the category names in display order."""
        return list(self._section_names)

    def song_card(self, song_id: str) -> SongCard | None:
        """Return the card for a song, or None if not displayed."""
        return self._song_cards.get(song_id)

    @Slot(object)
    def set_state(self, state: HomeState) -> None:
        """Render a published HomeState.

        Args:
            state: The controller's latest state.
        """
        self._state = state
        p = theme_manager.palette
        if isinstance(state, HomeLoading):
            self._status_label.setText("Loading...")
            self._status_label.setStyleSheet(f"color: {p.text_secondary};")
            self._stack.setCurrentIndex(_PAGE_STATUS)
        elif isinstance(state, HomeError):
            self._status_label.setText(f"Error: {state.message}")
            self._status_label.setStyleSheet(f"color: {p.error};")
            self._stack.setCurrentIndex(_PAGE_STATUS)
        elif isinstance(state, HomeSuccess):
            self.set_categories(state.categories)
            self._stack.setCurrentIndex(_PAGE_CONTENT)
        else:
            logger.warning("Unknown home state: %r", state)

    def set_categories(self, categories: tuple[Category, ...]) -> None:
        """Update displayed categories.

        When the layout (category names and song IDs) is unchanged, cards
        are updated in place. Otherwise all sections are rebuilt.

        Args:
            categories: Catalog snapshot to display.
        """
        layout_key = [c.name for c in categories]
        song_ids = [s.id for c in categories for s in c.songs]
        if layout_key == self._section_names and song_ids == list(self._song_cards):
            for category in categories:
                for song in category.songs:
                    self._song_cards[song.id].set_song(song)
            return

        self._clear_sections()
        for category in categories:
            section = self._build_section(category)
            # Insert before the trailing stretch
            self._container_layout.insertWidget(self._container_layout.count() - 1, section)
            self._sections.append(section)
        self._section_names = layout_key

    @Slot()
    def _refresh_theme(self) -> None:
        """Rebuild cards and labels with the new palette."""
        self._clear_sections()
        self.set_state(self._state)

    def _clear_sections(self) -> None:
        for section in self._sections:
            self._container_layout.removeWidget(section)
            section.deleteLater()
        self._sections.clear()
        self._section_names.clear()
        self._song_cards.clear()

    def _build_section(self, category: Category) -> QWidget:
        p = theme_manager.palette
        section = QWidget()
        section_layout = QVBoxLayout(section)
        section_layout.setContentsMargins(0, 0, 0, 0)
        section_layout.setSpacing(spacing.md)

        header = QLabel(category.name)
        header.setStyleSheet(
            f"font-weight: bold; font-size: {typography.title}pt; color: {p.text};"
        )
        section_layout.addWidget(header)

        row_scroll = _transparent_scroll(horizontal=True)
        row = QWidget()
        row.setStyleSheet("background-color: transparent;")
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.setSpacing(spacing.md)

        for song in category.songs:
            card = SongCard(song)
            card.favorite_toggled.connect(self.favorite_toggled.emit)
            card.clicked.connect(self.song_clicked.emit)
            row_layout.addWidget(card)
            self._song_cards[song.id] = card
        row_layout.addStretch()

        row_scroll.setWidget(row)
        row_scroll.setFixedHeight(sizing.song_cover + 90)
        section_layout.addWidget(row_scroll)
        return section
