"""Pane focus action handlers for DirpaneApp."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..widgets import DirectoryPane


class NavigationActionsMixin:
    """Mixin providing app-level navigation actions (focus between panes, help)."""

    def _panes(self) -> list[DirectoryPane]:
        return list(self.query("DirectoryPane"))

    def _get_current_focus_index(self) -> int:
        """Get the index of the pane holding focus, or -1."""
        focused = self.focused
        if focused is None:
            return -1
        for i, pane in enumerate(self._panes()):
            if pane in focused.ancestors_with_self:
                return i
        return -1

    def action_focus_next(self) -> None:
        """Focus the next pane."""
        panes = self._panes()
        if not panes:
            return
        next_index = (self._get_current_focus_index() + 1) % len(panes)
        panes[next_index].list_view.focus()

    def action_focus_previous(self) -> None:
        """Focus the previous pane."""
        panes = self._panes()
        if not panes:
            return
        prev_index = (self._get_current_focus_index() - 1) % len(panes)
        panes[prev_index].list_view.focus()

    def on_directory_pane_activated(self, event: DirectoryPane.Activated) -> None:
        """Mark the pane the user is working in."""
        if self.active_pane is event.pane:
            return
        for pane in self._panes():
            pane.set_class(pane is event.pane, "active")
        self.active_pane = event.pane

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "Type to jump, Enter=Open, Backspace=Back, ~=Home, .=Hidden, "
            "Ctrl+N=New File, F7=New Folder, F2=Rename, Del=Delete, Tab=Other Pane, Ctrl+Q=Quit",
            timeout=5,
        )
