"""Playlist model for the Library tab."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Playlist:
    """A saved playlist (metadata only).

    Attributes:
        id: Unique playlist identifier.
        name: Playlist title.
        description: Short description line.
        song_count: Number of songs, descriptive only.
        color_seed: ARGB color used only for the placeholder cover.
    """

    id: str
    name: str
    description: str = ""
    song_count: int = 0
    color_seed: int = 0

    @property
    def display_song_count(self) -> str:
        """Return song count with the right plural, e.g. '25 songs'."""
        if self.song_count == 1:
            return "1 song"
        return f"{self.song_count} songs"
