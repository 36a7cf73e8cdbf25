"""Directory entries and hidden-item filtering."""

from dataclasses import dataclass
from typing import Literal

EntryKind = Literal["file", "folder"]


@dataclass(frozen=True)
class Entry:
    """One file or folder inside a directory listing."""

    name: str
    path: str
    kind: EntryKind
    is_hidden: bool = False

    @property
    def is_folder(self) -> bool:
        return self.kind == "folder"


# Entries in the order the filesystem query returned them
Listing = tuple[Entry, ...]


def visible_entries(listing: Listing, show_hidden: bool) -> Listing:
    """Return the entries that should be displayed, preserving listing order."""
    return tuple(entry for entry in listing if not entry.is_hidden or show_hidden)
