"""Tests for Category and Playlist models."""

from tunestream.models.category import Category
from tunestream.models.playlist import Playlist
from tunestream.models.song import Song


def _category() -> Category:
    return Category(
        name="Mix",
        songs=(
            Song(id="a", title="A", artist="X"),
            Song(id="b", title="B", artist="Y"),
        ),
    )


class TestCategory:
    """Tests for Category dataclass."""

    def test_song_count(self) -> None:
        """Test song_count."""
        assert _category().song_count == 2
        assert Category(name="Empty").song_count == 0

    def test_list_input_is_stored_as_tuple(self) -> None:
        """Test that a list of songs is frozen into a tuple."""
        category = Category(name="Mix", songs=[Song(id="a", title="A", artist="X")])  # type: ignore[arg-type]
        assert isinstance(category.songs, tuple)

    def test_get_song(self) -> None:
        """Test looking up a song by ID."""
        category = _category()
        found = category.get_song("b")
        assert found is not None
        assert found.title == "B"
        assert category.get_song("missing") is None

    def test_with_favorite_toggled(self) -> None:
        """Test toggling builds a new category and keeps others intact."""
        original = _category()
        updated = original.with_favorite_toggled("a")

        assert updated is not original
        assert updated.name == "Mix"
        assert updated.songs[0].is_favorite is True
        assert updated.songs[1] is original.songs[1]
        assert original.songs[0].is_favorite is False

    def test_with_favorite_toggled_unknown_id(self) -> None:
        """Test toggling an unknown ID yields an equal category."""
        original = _category()
        assert original.with_favorite_toggled("zzz") == original


class TestPlaylist:
    """Tests for Playlist dataclass."""

    def test_defaults(self) -> None:
        """Test default values."""
        playlist = Playlist(id="p", name="Road Trip")
        assert playlist.description == ""
        assert playlist.song_count == 0
        assert playlist.color_seed == 0

    def test_display_song_count(self) -> None:
        """Test plural handling of song counts."""
        assert Playlist(id="p", name="N", song_count=25).display_song_count == "25 songs"
        assert Playlist(id="p", name="N", song_count=1).display_song_count == "1 song"
        assert Playlist(id="p", name="N", song_count=0).display_song_count == "0 songs"
