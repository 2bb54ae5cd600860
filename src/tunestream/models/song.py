"""Song model representing a single catalog entry."""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Song:
    """A song in the catalog.

    Attributes:
        id: Unique, stable song identifier.
        title: Song title.
        artist: Performing artist.
        color_seed: ARGB color used only for the placeholder cover.
        is_favorite: Whether the user marked the song as a favorite.
    """

    id: str
    title: str
    artist: str
    color_seed: int = 0
    is_favorite: bool = False

    def toggled(self) -> "Song":
        """Return a copy with the favorite flag inverted."""
        return replace(self, is_favorite=not self.is_favorite)

    @property
    def display_name(self) -> str:
        """Return 'title - artist' for display."""
        if not self.artist:
            return self.title
        return f"{self.title} - {self.artist}"
