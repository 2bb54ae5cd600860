"""UI panels for the main window tabs."""

from tunestream.ui.panels.home import HomePanel
from tunestream.ui.panels.library import LibraryPanel

__all__ = ["HomePanel", "LibraryPanel"]
