"""Category model grouping songs for the Home tab."""

from dataclasses import dataclass, field

from tunestream.models.song import Song


@dataclass(frozen=True, slots=True)
class Category:
    """A named, ordered group of songs.

    Attributes:
        name: Category title shown as a section header.
        songs: Songs in display order.
    """

    name: str
    songs: tuple[Song, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Store songs as a tuple so the category stays immutable."""
        if not isinstance(self.songs, tuple):
            object.__setattr__(self, "songs", tuple(self.songs))

    @property
    def song_count(self) -> int:
        """Return the number of songs in this category."""
        return len(self.songs)

    def get_song(self, song_id: str) -> Song | None:
        """Return song by ID or None if not found."""
        for song in self.songs:
            if song.id == song_id:
                return song
        return None

    def with_favorite_toggled(self, song_id: str) -> "Category":
        """Return a new category with every matching song's favorite flag flipped.

        The song tuple is always rebuilt; non-matching songs are reused as-is.
        """
        return Category(
            name=self.name,
            songs=tuple(song.toggled() if song.id == song_id else song for song in self.songs),
        )
