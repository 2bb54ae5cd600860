"""Data models for songs, categories, and playlists."""

from tunestream.models.category import Category
from tunestream.models.playlist import Playlist
from tunestream.models.song import Song

__all__ = [
    "Category",
    "Playlist",
    "Song",
]
