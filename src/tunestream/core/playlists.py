"""Playlist store with the fixed list of saved playlists."""

from collections.abc import Iterable

from tunestream.core.seed import initial_playlists
from tunestream.models.playlist import Playlist


class PlaylistStore:
    """Read-only store of the user's playlists.

    No operation mutates the list; it is built once at construction.
    """

    def __init__(self, playlists: Iterable[Playlist] | None = None) -> None:
        """Initialize the store.

        Args:
            playlists: Playlists to serve. Defaults to the seed data.
        """
        self._playlists: tuple[Playlist, ...] = (
            tuple(playlists) if playlists is not None else initial_playlists()
        )

    def list_playlists(self) -> tuple[Playlist, ...]:
        """Return all playlists in seed order."""
        return self._playlists

    def get_playlist(self, playlist_id: str) -> Playlist | None:
        """Return playlist by ID or None if not found."""
        for playlist in self._playlists:
            if playlist.id == playlist_id:
                return playlist
        return None
