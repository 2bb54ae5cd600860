"""Tests for song, playlist and cover widgets."""

from unittest.mock import Mock

from PySide6.QtCore import Qt
from pytestqt.qtbot import QtBot

from tunestream.models.playlist import Playlist
from tunestream.models.song import Song
from tunestream.ui.widgets.cover_art import CoverArt, seed_to_hex
from tunestream.ui.widgets.playlist_card import PlaylistCard
from tunestream.ui.widgets.song_card import (
    HEART_FILLED,
    HEART_OUTLINE,
    FavoriteSongRow,
    SongCard,
)

SONG = Song(id="rock_1", title="Highway to Hell", artist="AC/DC", color_seed=0xFF1E88E5)


class TestCoverArt:
    """Test the placeholder cover."""

    def test_seed_to_hex_drops_alpha(self) -> None:
        """Test ARGB seeds become #RRGGBB."""
        assert seed_to_hex(0xFF1E88E5) == "#1E88E5"
        assert seed_to_hex(0x00000000) == "#000000"

    def test_cover_size_and_color(self, qtbot: QtBot) -> None:
        """Test the cover is square and carries its color."""
        cover = CoverArt(0xFFE53935, size=64)
        qtbot.addWidget(cover)
        assert cover.width() == 64
        assert cover.height() == 64
        assert cover.color == "#E53935"


class TestSongCard:
    """Test SongCard."""

    def test_initial_heart(self, qtbot: QtBot) -> None:
        """Test an unfavorited song shows an outline heart."""
        card = SongCard(SONG)
        qtbot.addWidget(card)
        assert card.song_id == "rock_1"
        assert card.is_favorite is False
        assert card.heart_button.text() == HEART_OUTLINE

    def test_heart_click_emits_toggle(self, qtbot: QtBot) -> None:
        """Test clicking the heart requests a toggle without flipping locally."""
        card = SongCard(SONG)
        qtbot.addWidget(card)

        with qtbot.waitSignal(card.favorite_toggled, timeout=1000) as blocker:
            qtbot.mouseClick(card.heart_button, Qt.MouseButton.LeftButton)

        assert blocker.args == ["rock_1"]
        assert card.is_favorite is False

    def test_set_song_updates_heart(self, qtbot: QtBot) -> None:
        """Test a newer snapshot fills the heart."""
        card = SongCard(SONG)
        qtbot.addWidget(card)

        card.set_song(SONG.toggled())

        assert card.is_favorite is True
        assert card.heart_button.text() == HEART_FILLED

    def test_card_click(self, qtbot: QtBot) -> None:
        """Test clicking the card body emits clicked."""
        card = SongCard(SONG)
        qtbot.addWidget(card)
        slot = Mock()
        card.clicked.connect(slot)

        qtbot.mouseClick(card, Qt.MouseButton.LeftButton)

        slot.assert_called_once_with("rock_1")


class TestFavoriteSongRow:
    """Test FavoriteSongRow."""

    def test_click_emits_song_id(self, qtbot: QtBot) -> None:
        """Test clicking a row emits the song ID."""
        row = FavoriteSongRow(SONG.toggled())
        qtbot.addWidget(row)
        with qtbot.waitSignal(row.clicked, timeout=1000) as blocker:
            qtbot.mouseClick(row, Qt.MouseButton.LeftButton)
        assert blocker.args == ["rock_1"]


class TestPlaylistCard:
    """Test PlaylistCard."""

    def test_click_emits_playlist_id(self, qtbot: QtBot) -> None:
        """Test clicking a playlist emits its ID."""
        card = PlaylistCard(
            Playlist(id="playlist_2", name="Workout Mix", song_count=18, color_seed=0xFFE53935)
        )
        qtbot.addWidget(card)
        assert card.playlist_id == "playlist_2"
        with qtbot.waitSignal(card.clicked, timeout=1000) as blocker:
            qtbot.mouseClick(card, Qt.MouseButton.LeftButton)
        assert blocker.args == ["playlist_2"]
