"""TuneStream - a small music-streaming demo built on PySide6."""

__version__ = "0.1.0"
