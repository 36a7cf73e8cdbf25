"""Path header shown above each directory pane."""

import os

from rich.text import Text

from textual.widgets import Static


def _build_path(location: str, home: str, show_hidden: bool) -> Text:
    """Build the header as a Rich Text object, home abbreviated and leaf in bold."""
    display = location
    if home and (location == home or location.startswith(home + os.sep)):
        display = "~" + location[len(home):]

    head, sep, leaf = display.rpartition(os.sep)
    text = Text(no_wrap=True, overflow="ellipsis")
    if sep and leaf:
        text.append(head + sep, style="bright_cyan")
    text.append(leaf or display, style="bold bright_cyan")
    if show_hidden:
        text.append("  [hidden]", style="dim")
    return text


class PathBar(Static):
    """Shows the current location of a pane."""

    DEFAULT_CSS = """
    PathBar {
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    def __init__(self, home: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._home = home

    def show_location(self, location: str, show_hidden: bool = False) -> None:
        self.update(_build_path(location, self._home, show_hidden))
