"""File and navigation action handlers for DirectoryPane."""

from __future__ import annotations

import logging

from textual.widgets import Input
from textual.worker import Worker

from ..entries import EntryKind
from ..filesystem import create_item, delete_item, rename_item
from ..pane_state import Creating, Idle, Renaming

logger = logging.getLogger(__name__)

# Workers whose completion should trigger a re-listing
FILE_OPERATION_WORKERS = ("_create_item", "_rename_item", "_delete_item")


class PaneActionsMixin:
    """Mixin providing pane actions (back, home, hidden, new, rename, delete)."""

    def action_go_back(self) -> None:
        """Go to the parent directory."""
        if not isinstance(self.state.pending_input, Idle):
            return
        self._load(self.state.ascend())

    def action_go_home(self) -> None:
        """Jump to the configured start directory."""
        if not isinstance(self.state.pending_input, Idle):
            return
        self._load(self.state.go_to(str(self.config.start_directory)))

    def action_toggle_hidden(self) -> None:
        """Show or hide dot-files."""
        self.state.toggle_hidden()
        self._load(None)

    def action_new_file(self) -> None:
        self._begin_create("file")

    def action_new_folder(self) -> None:
        self._begin_create("folder")

    def _begin_create(self, kind: EntryKind) -> None:
        if not isinstance(self.state.pending_input, Idle):
            return
        self.state.begin_create(kind)
        self._show_input("", f"New {kind} name")

    def action_rename(self) -> None:
        """Start renaming the selected entry."""
        if not isinstance(self.state.pending_input, Idle):
            return
        entry = self.state.selected_entry
        if entry is None:
            self.app.notify("Nothing selected", severity="warning")
            return
        self.state.begin_rename()
        self._show_input(entry.name, "New name")

    def _show_input(self, value: str, placeholder: str) -> None:
        name_input = self.name_input
        name_input.placeholder = placeholder
        name_input.value = value
        name_input.add_class("visible")
        name_input.focus()

    def _hide_input(self) -> None:
        name_input = self.name_input
        name_input.remove_class("visible")
        name_input.value = ""
        self.list_view.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in the name input."""
        if event.input.id == "name-input":
            event.stop()
            self._commit_input(event.value.strip())

    def _commit_input(self, value: str | None) -> None:
        """Finish a create or rename. None or an empty value cancels."""
        pending = self.state.pending_input
        self._hide_input()

        if isinstance(pending, Creating):
            request = self.state.commit_create(value)
            if request:
                self.run_worker(
                    lambda: create_item(request.name, request.location, request.kind),
                    name="_create_item",
                    group="file-ops",
                    thread=True,
                    exit_on_error=False,
                )
                return
        elif isinstance(pending, Renaming):
            request = self.state.commit_rename(pending.old_name, value)
            if request:
                self.run_worker(
                    lambda: rename_item(request.old_name, request.new_name, request.location),
                    name="_rename_item",
                    group="file-ops",
                    thread=True,
                    exit_on_error=False,
                )
                return
        else:
            return

        # Cancelled: still closes the input cycle
        self._load(self.state.refresh())

    def action_delete(self) -> None:
        """Delete the selected entry, after a confirming second press if configured."""
        if not isinstance(self.state.pending_input, Idle):
            return
        entry = self.state.selected_entry
        if entry is None:
            self.app.notify("Nothing selected", severity="warning")
            return

        if self.config.confirm_delete and self._pending_delete != entry.path:
            self._pending_delete = entry.path
            self.app.notify(
                f"Press Delete again to delete {entry.name}",
                severity="warning",
                timeout=3,
            )
            return

        self._pending_delete = None
        path = entry.path
        self.run_worker(
            lambda: delete_item(path),
            name="_delete_item",
            group="file-ops",
            thread=True,
            exit_on_error=False,
        )

    def _on_file_operation_done(self, event: Worker.StateChanged) -> None:
        """Report the outcome of a create, rename or delete and re-list."""
        worker_name = event.worker.name
        if worker_name not in FILE_OPERATION_WORKERS:
            return

        if event.state.name == "ERROR":
            logger.warning("%s failed: %s", worker_name, event.worker.error)
            # The pane is already Idle; the failure is reported, not rolled back
            self.app.notify(str(event.worker.error), severity="error")
            self._load(self.state.refresh())
            return

        if event.state.name != "SUCCESS":
            return

        if worker_name == "_delete_item":
            self._load(self.state.notify_deleted())
        else:
            self._load(self.state.refresh())
