"""Fixed seed data for the catalog and playlist stores.

Constructed fresh on every call so each store owns its own snapshot.
"""

from tunestream.models.category import Category
from tunestream.models.playlist import Playlist
from tunestream.models.song import Song

# (category name, [(id, title, artist, color_seed), ...])
_CATEGORY_SEED: tuple[tuple[str, tuple[tuple[str, str, str, int], ...]], ...] = (
    (
        "Rock Classics",
        (
            ("rock_1", "Highway to Hell", "AC/DC", 0xFF1E88E5),
            ("rock_2", "Bohemian Rhapsody", "Queen", 0xFF8E24AA),
            ("rock_3", "Stairway to Heaven", "Led Zeppelin", 0xFF43A047),
            ("rock_4", "Sweet Child O' Mine", "Guns N' Roses", 0xFFE53935),
            ("rock_5", "Back in Black", "AC/DC", 0xFF3949AB),
            ("rock_6", "Hotel California", "Eagles", 0xFFFB8C00),
            ("rock_7", "Comfortably Numb", "Pink Floyd", 0xFF00ACC1),
            ("rock_8", "November Rain", "Guns N' Roses", 0xFF7CB342),
            ("rock_9", "Dream On", "Aerosmith", 0xFFD81B60),
            ("rock_10", "Smoke on the Water", "Deep Purple", 0xFF5E35B1),
        ),
    ),
    (
        "Coding Focus",
        (
            ("code_1", "Weightless", "Marconi Union", 0xFF26A69A),
            ("code_2", "Clair de Lune", "Debussy", 0xFF5C6BC0),
            ("code_3", "Experience", "Ludovico Einaudi", 0xFF66BB6A),
            ("code_4", "Time", "Hans Zimmer", 0xFF42A5F5),
            ("code_5", "Gymnopédie No.1", "Erik Satie", 0xFFAB47BC),
            ("code_6", "River Flows in You", "Yiruma", 0xFF26C6DA),
            ("code_7", "Nuvole Bianche", "Ludovico Einaudi", 0xFF9CCC65),
            ("code_8", "Interstellar Main Theme", "Hans Zimmer", 0xFF7E57C2),
            ("code_9", "Arrival of the Birds", "The Cinematic Orchestra", 0xFFFFCA28),
            ("code_10", "On the Nature of Daylight", "Max Richter", 0xFFEF5350),
        ),
    ),
    (
        "Gym Energy",
        (
            ("gym_1", "Stronger", "Kanye West", 0xFFFF7043),
            ("gym_2", "Lose Yourself", "Eminem", 0xFF78909C),
            ("gym_3", "Eye of the Tiger", "Survivor", 0xFFFFA726),
            ("gym_4", "Till I Collapse", "Eminem", 0xFF5C6BC0),
            ("gym_5", "Can't Hold Us", "Macklemore", 0xFF66BB6A),
            ("gym_6", "Power", "Kanye West", 0xFFEC407A),
            ("gym_7", "Remember the Name", "Fort Minor", 0xFF29B6F6),
            ("gym_8", "Thunderstruck", "AC/DC", 0xFFFFEE58),
            ("gym_9", "Believer", "Imagine Dragons", 0xFFAB47BC),
            ("gym_10", "Warriors", "Imagine Dragons", 0xFF26A69A),
        ),
    ),
    (
        "Chill Vibes",
        (
            ("chill_1", "Sunset Lover", "Petit Biscuit", 0xFFFFAB91),
            ("chill_2", "Intro", "The xx", 0xFF90A4AE),
            ("chill_3", "Midnight City", "M83", 0xFFCE93D8),
            ("chill_4", "Electric Feel", "MGMT", 0xFF80DEEA),
            ("chill_5", "Breathe", "Télépopmusik", 0xFFA5D6A7),
            ("chill_6", "Teardrop", "Massive Attack", 0xFFB39DDB),
            ("chill_7", "Porcelain", "Moby", 0xFF81D4FA),
            ("chill_8", "Fade Into You", "Mazzy Star", 0xFFF48FB1),
            ("chill_9", "Skinny Love", "Bon Iver", 0xFFFFCC80),
            ("chill_10", "Holocene", "Bon Iver", 0xFFC5E1A5),
        ),
    ),
    (
        "Latin Hits",
        (
            ("latin_1", "Despacito", "Luis Fonsi", 0xFFFF8A65),
            ("latin_2", "Bailando", "Enrique Iglesias", 0xFFFFD54F),
            ("latin_3", "La Bicicleta", "Shakira & Carlos Vives", 0xFF4DD0E1),
            ("latin_4", "Vivir Mi Vida", "Marc Anthony", 0xFFAED581),
            ("latin_5", "Danza Kuduro", "Don Omar", 0xFFBA68C8),
            ("latin_6", "Livin' la Vida Loca", "Ricky Martin", 0xFFFF8A80),
            ("latin_7", "Waka Waka", "Shakira", 0xFF82B1FF),
            ("latin_8", "Súbeme la Radio", "Enrique Iglesias", 0xFFB9F6CA),
            ("latin_9", "Mi Gente", "J Balvin", 0xFFFFE57F),
            ("latin_10", "Gasolina", "Daddy Yankee", 0xFFEA80FC),
        ),
    ),
)

_PLAYLIST_SEED: tuple[tuple[str, str, str, int, int], ...] = (
    ("playlist_1", "My Favorites", "Songs I love the most", 25, 0xFF1E88E5),
    ("playlist_2", "Workout Mix", "High energy tracks for the gym", 18, 0xFFE53935),
    ("playlist_3", "Chill Evening", "Relaxing tunes for unwinding", 32, 0xFF7CB342),
    ("playlist_4", "Road Trip", "Perfect for long drives", 45, 0xFFFB8C00),
    ("playlist_5", "Focus Mode", "Concentration and productivity", 20, 0xFF8E24AA),
    ("playlist_6", "Party Hits", "Get the party started", 38, 0xFF00ACC1),
)


def initial_categories() -> tuple[Category, ...]:
    """Return the seed catalog: 5 categories of 10 songs, none favorited."""
    return tuple(
        Category(
            name=name,
            songs=tuple(
                Song(id=song_id, title=title, artist=artist, color_seed=color)
                for song_id, title, artist, color in songs
            ),
        )
        for name, songs in _CATEGORY_SEED
    )


def initial_playlists() -> tuple[Playlist, ...]:
    """Return the six seed playlists."""
    return tuple(
        Playlist(
            id=playlist_id,
            name=name,
            description=description,
            song_count=song_count,
            color_seed=color,
        )
        for playlist_id, name, description, song_count, color in _PLAYLIST_SEED
    )
