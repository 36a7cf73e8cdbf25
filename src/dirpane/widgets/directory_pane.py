"""Directory pane widget: one navigable listing of a directory."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import DescendantFocus, Key
from textual.message import Message
from textual.widgets import Input, Label, ListItem, ListView
from textual.worker import Worker

from ..actions.pane_actions import PaneActionsMixin
from ..config import Config
from ..entries import Entry
from ..errors import ListingFailed, StaleResponse
from ..filesystem import home_directory, list_directory, parent_of
from ..finder import IncrementalFinder, is_search_char
from ..pane_state import Idle, ListingRequest, PaneState
from ..watcher import DirectoryWatcher
from .path_bar import PathBar

logger = logging.getLogger(__name__)


class EntryItem(ListItem):
    """A list item representing a directory entry."""

    def __init__(self, entry: Entry) -> None:
        super().__init__(classes="hidden-entry" if entry.is_hidden else "")
        self.entry = entry

    def compose(self) -> ComposeResult:
        if self.entry.is_folder:
            yield Label(f"{self.entry.name}/", classes="folder")
        else:
            yield Label(self.entry.name)


class EntryList(ListView):
    """ListView whose cursor keys are routed through the pane state."""

    class CursorMoved(Message):
        """Message emitted when up or down is pressed."""

        def __init__(self, direction: str) -> None:
            super().__init__()
            self.direction = direction

    def action_cursor_up(self) -> None:
        self.post_message(self.CursorMoved("up"))

    def action_cursor_down(self) -> None:
        self.post_message(self.CursorMoved("down"))


class DirectoryPane(PaneActionsMixin, Vertical):
    """Widget showing the entries of one directory."""

    DEFAULT_CSS = """
    DirectoryPane {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
    }

    DirectoryPane.active {
        border: solid $accent;
    }

    DirectoryPane > #name-input {
        height: 1;
        border: none;
        padding: 0 1;
        display: none;
    }

    DirectoryPane > #name-input.visible {
        display: block;
    }

    DirectoryPane > EntryList {
        height: 1fr;
    }

    DirectoryPane ListItem {
        padding: 0 1;
    }

    DirectoryPane ListItem.hidden-entry {
        color: $text-muted;
    }

    DirectoryPane .folder {
        text-style: bold;
    }

    DirectoryPane ListItem.--highlight {
        background: $boost;
    }

    DirectoryPane.active ListItem.--highlight {
        background: $accent;
    }
    """

    BINDINGS = [
        Binding("backspace", "go_back", "Back"),
        Binding("tilde", "go_home", "Home", show=False),
        Binding("full_stop", "toggle_hidden", "Hidden"),
        Binding("ctrl+n", "new_file", "New File"),
        Binding("f7", "new_folder", "New Folder"),
        Binding("f2", "rename", "Rename"),
        Binding("delete", "delete", "Delete"),
    ]

    class Activated(Message):
        """Message emitted when this pane becomes the one the user is working in."""

        def __init__(self, pane: "DirectoryPane") -> None:
            super().__init__()
            self.pane = pane

    def __init__(self, config: Config, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.state = PaneState(
            home=str(config.start_directory),
            parent_of=parent_of,
            show_hidden=config.show_hidden,
            finder=IncrementalFinder(timeout=config.finder_timeout),
            on_activate=lambda: self.post_message(self.Activated(self)),
        )
        self._watcher: DirectoryWatcher | None = None
        self._pending_delete: str | None = None

    def compose(self) -> ComposeResult:
        yield PathBar(home=home_directory(), id="path-bar")
        yield Input(id="name-input")
        yield EntryList(id="entry-list")

    @property
    def list_view(self) -> EntryList:
        return self.query_one("#entry-list", EntryList)

    @property
    def name_input(self) -> Input:
        return self.query_one("#name-input", Input)

    def on_mount(self) -> None:
        if self.config.watch:
            self._watcher = DirectoryWatcher(
                self._on_directory_change, self.config.watch_debounce
            )
            self._watcher.start()
        self._load(self.state.refresh())

    def on_unmount(self) -> None:
        if self._watcher:
            self._watcher.stop()

    # Listing

    def _load(self, request: ListingRequest | None) -> None:
        """Show the current state and fetch a fresh listing if one was requested."""
        self._pending_delete = None
        self.query_one("#path-bar", PathBar).show_location(
            self.state.location, self.state.show_hidden
        )
        if self._watcher:
            self._watcher.watch(self.state.location)

        if request is None:
            self.call_later(self._render_entries)
            return

        self.run_worker(
            lambda: (request, list_directory(request.location)),
            name="_list_directory",
            group="listing",
            thread=True,
            exit_on_error=False,
        )

    async def _render_entries(self) -> None:
        """Rebuild the list from the visible entries and restore the cursor."""
        list_view = self.list_view
        await list_view.clear()

        entries = self.state.visible_entries
        await list_view.extend(EntryItem(entry) for entry in entries)

        if entries:
            list_view.index = self.state.selection_index

    def _on_directory_change(self) -> None:
        """Handle a change on disk (called from the watcher thread)."""
        self.app.call_from_thread(self._handle_directory_change)

    def _handle_directory_change(self) -> None:
        # A refresh now would clobber the name being typed
        if isinstance(self.state.pending_input, Idle):
            self._load(self.state.notify_changed())

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Handle background listing and file operation completion."""
        worker_name = event.worker.name

        if worker_name == "_list_directory":
            self._on_listing_done(event)
        else:
            self._on_file_operation_done(event)

    def _on_listing_done(self, event: Worker.StateChanged) -> None:
        if event.state.name == "ERROR":
            error = event.worker.error
            if isinstance(error, ListingFailed) and error.path != self.state.location:
                logger.debug("Ignoring failure for %s, pane has moved on", error.path)
                return
            logger.warning("Listing failed: %s", error)
            self.app.notify(str(error), severity="error")
            return

        if event.state.name != "SUCCESS":
            return

        request, listing = event.worker.result
        try:
            self.state.apply_listing(request, listing)
        except StaleResponse as e:
            logger.debug("%s", e)
            return
        self.call_later(self._render_entries)

    # Selection

    def on_entry_list_cursor_moved(self, event: EntryList.CursorMoved) -> None:
        event.stop()
        self.state.move(event.direction)
        if self.state.visible_entries:
            self.list_view.index = self.state.selection_index

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        """Keep the state in step with highlights the list makes on its own."""
        if not isinstance(self.state.pending_input, Idle):
            return
        index = event.list_view.index
        if index is not None and index != self.state.selection_index:
            self.state.select_index(index, notify=False)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle click or Enter: select the entry and open it if it is a folder."""
        if not isinstance(event.item, EntryItem) or not isinstance(
            self.state.pending_input, Idle
        ):
            return
        index = event.list_view.index
        if index is not None:
            self.state.select_index(index)
        if event.item.entry.is_folder:
            self._load(self.state.descend(event.item.entry.path))

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        self.post_message(self.Activated(self))

    def on_key(self, event: Key) -> None:
        """Feed alphanumeric keys to type-to-jump; Escape cancels name input."""
        if not isinstance(self.state.pending_input, Idle):
            if event.key == "escape":
                self._commit_input(None)
                event.stop()
            return

        if event.character and is_search_char(event.character):
            event.stop()
            if self.state.jump_to_prefix(event.character):
                self.list_view.index = self.state.selection_index
