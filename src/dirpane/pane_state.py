"""Selection, pending input and refresh bookkeeping for one directory pane.

PaneState performs no I/O. Operations that need the filesystem return a
request object (``ListingRequest``, ``CreateRequest``, ``RenameRequest``) for
the caller to carry out, and listing results are folded back in with
``apply_listing``. This keeps every transition synchronous and testable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal

from .entries import Entry, EntryKind, Listing, visible_entries
from .errors import InvalidTransition, StaleResponse
from .finder import IncrementalFinder
from .navigation import NavigationNode, NavigationStack

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]


@dataclass(frozen=True)
class Idle:
    """No name is being typed."""


@dataclass(frozen=True)
class Creating:
    """A name for a new item of ``kind`` is being typed."""

    kind: EntryKind


@dataclass(frozen=True)
class Renaming:
    """A new name for the entry called ``old_name`` is being typed."""

    old_name: str


PendingInput = Idle | Creating | Renaming


@dataclass(frozen=True)
class ListingRequest:
    """A directory listing to fetch, tagged with the location it is for."""

    location: str


@dataclass(frozen=True)
class CreateRequest:
    name: str
    location: str
    kind: EntryKind


@dataclass(frozen=True)
class RenameRequest:
    old_name: str
    new_name: str
    location: str


class PaneState:
    """State machine behind a single directory pane."""

    def __init__(
        self,
        home: str,
        parent_of: Callable[[str], str],
        show_hidden: bool = False,
        finder: IncrementalFinder | None = None,
        on_activate: Callable[[], None] | None = None,
    ) -> None:
        self.location = home
        self.listing: Listing = ()
        # Location ``listing`` was fetched for; lags ``location`` while a listing loads
        self._listing_location: str | None = None
        self.selection_index = 0
        self.show_hidden = show_hidden
        self.pending_input: PendingInput = Idle()
        self.just_deleted = False
        self.history = NavigationStack()
        self.finder = finder or IncrementalFinder()
        self._parent_of = parent_of
        self._on_activate = on_activate
        # Location the last refresh decision ran for; None until the first one
        self._settled_location: str | None = None
        self._input_closed = False

    # Derived state

    @property
    def visible_entries(self) -> Listing:
        return visible_entries(self.listing, self.show_hidden)

    @property
    def selected_entry(self) -> Entry | None:
        """Get the entry under the cursor, or None if nothing is visible."""
        entries = self.visible_entries
        if 0 <= self.selection_index < len(entries):
            return entries[self.selection_index]
        return None

    # Navigation

    def descend(self, child_path: str) -> ListingRequest | None:
        """Enter a child directory, remembering where we came from.

        Nothing is remembered while the shown listing belongs to another
        location (still loading, or the last listing failed), so the parent is
        fetched again on the way back.
        """
        if self._listing_location == self.location:
            self.history.push(
                NavigationNode(
                    location=self.location,
                    selection_index=self.selection_index,
                    listing=self.listing,
                )
            )
        self._change_location(child_path)
        return self.refresh()

    def ascend(self) -> ListingRequest | None:
        """Go to the parent directory, reusing the history snapshot if it matches."""
        parent = self._parent_of(self.location)
        if parent == self.location:
            return None
        self._change_location(parent)
        return self.refresh()

    def go_to(self, path: str) -> ListingRequest | None:
        """Jump directly to ``path``. Not a back-navigation, so history is dropped."""
        self.history.clear()
        self._change_location(path)
        return self.refresh()

    def _change_location(self, path: str) -> None:
        self.location = path
        self.selection_index = 0
        self.finder.reset()

    # Selection

    def move(self, direction: Direction) -> None:
        """Move the cursor one entry up or down; no-op at either end."""
        if direction == "up":
            if self.selection_index > 0:
                self.selection_index -= 1
        elif direction == "down":
            if self.selection_index < len(self.visible_entries) - 1:
                self.selection_index += 1
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

    def toggle_hidden(self) -> None:
        """Show or hide hidden entries. Filtering is derived, so nothing is fetched."""
        self.show_hidden = not self.show_hidden
        self._clamp_selection()

    def select_index(self, index: int, notify: bool = True) -> None:
        """Put the cursor on ``index`` of the visible entries.

        Args:
            index: Index into the visible entries
            notify: Emit the activation event so the owner marks this pane active
        """
        self.selection_index = index
        self._clamp_selection()
        if notify and self._on_activate is not None:
            self._on_activate()

    def jump_to_prefix(self, char: str) -> bool:
        """Feed a typed character to the finder and move the cursor to its match.

        Returns True if the cursor moved to a match.
        """
        index = self.finder.consume(char, self.visible_entries)
        if index < 0:
            return False
        self.select_index(index, notify=False)
        return True

    def _clamp_selection(self) -> None:
        count = len(self.visible_entries)
        self.selection_index = max(0, min(self.selection_index, count - 1))

    # Pending input

    def begin_create(self, kind: EntryKind) -> None:
        if not isinstance(self.pending_input, Idle):
            raise InvalidTransition(
                f"Cannot start creating while {self.pending_input!r} is active"
            )
        self.pending_input = Creating(kind)

    def commit_create(self, name: str | None) -> CreateRequest | None:
        """Finish creating. An empty or missing name cancels silently.

        The pane returns to Idle before the request is carried out, so a
        failed create is reported but not rolled back. Run ``refresh()`` once
        the request has completed.
        """
        pending = self.pending_input
        if not isinstance(pending, Creating):
            raise InvalidTransition(f"commit_create called while {pending!r}")

        request = None
        if name:
            request = CreateRequest(name=name, location=self.location, kind=pending.kind)

        self.pending_input = Idle()
        self._input_closed = True
        return request

    def begin_rename(self) -> None:
        if not isinstance(self.pending_input, Idle):
            raise InvalidTransition(
                f"Cannot start renaming while {self.pending_input!r} is active"
            )
        if self.selected_entry is None:
            raise InvalidTransition("Nothing selected to rename")
        self.pending_input = Renaming(self.selected_entry.name)

    def commit_rename(
        self, old_name: str | None, new_name: str | None
    ) -> RenameRequest | None:
        """Finish renaming. Missing names, or an unchanged name, cancel silently.

        As with ``commit_create``, the pane is Idle again before the request
        runs; call ``refresh()`` once it has completed.
        """
        if not isinstance(self.pending_input, Renaming):
            raise InvalidTransition(f"commit_rename called while {self.pending_input!r}")

        request = None
        if old_name and new_name and old_name != new_name:
            request = RenameRequest(
                old_name=old_name, new_name=new_name, location=self.location
            )

        self.pending_input = Idle()
        self._input_closed = True
        return request

    # Refresh

    def notify_deleted(self) -> ListingRequest | None:
        """Record that an entry was deleted and re-list the current location."""
        self.just_deleted = True
        return self.refresh()

    def notify_changed(self) -> ListingRequest | None:
        """Re-list after an outside change, the same way a delete does."""
        return self.notify_deleted()

    def refresh(self) -> ListingRequest | None:
        """Decide whether the displayed entries must be reloaded.

        Returns a ListingRequest when a fresh listing is needed. When the
        history holds a snapshot of the current location, that snapshot is
        restored instead and None is returned.
        """
        if (
            self.location == self._settled_location
            and not self._input_closed
            and not self.just_deleted
        ):
            return None

        self.just_deleted = False
        self._input_closed = False
        self._settled_location = self.location

        if self.history.peek_matches(self.location):
            node = self.history.pop()
            self.listing = node.listing
            self._listing_location = node.location
            self.selection_index = node.selection_index
            self._clamp_selection()
            logger.debug("Restored %s from history", self.location)
            return None

        return ListingRequest(self.location)

    def is_current(self, request: ListingRequest) -> bool:
        """Check whether ``request`` still targets the current location."""
        return request.location == self.location

    def apply_listing(self, request: ListingRequest, listing: Listing) -> None:
        """Fold a completed listing into the state.

        Raises:
            StaleResponse: The pane has moved on since the request was issued
        """
        if not self.is_current(request):
            raise StaleResponse(request.location)
        self.listing = tuple(listing)
        self._listing_location = request.location
        self._clamp_selection()
