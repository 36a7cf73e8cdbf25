"""dirpane widgets."""

from .path_bar import PathBar
from .directory_pane import DirectoryPane, EntryItem, EntryList

__all__ = [
    "PathBar",
    "DirectoryPane",
    "EntryItem",
    "EntryList",
]
