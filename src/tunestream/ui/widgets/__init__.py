"""Reusable UI widgets."""

from tunestream.ui.widgets.cover_art import CoverArt
from tunestream.ui.widgets.playlist_card import PlaylistCard
from tunestream.ui.widgets.song_card import FavoriteSongRow, SongCard

__all__ = ["CoverArt", "FavoriteSongRow", "PlaylistCard", "SongCard"]
