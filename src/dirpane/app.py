"""Main Textual application for dirpane."""

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer

from .actions import NavigationActionsMixin
from .config import Config
from .widgets import DirectoryPane


class DirpaneApp(NavigationActionsMixin, App):
    """dirpane - Two-Pane Terminal File Manager."""

    TITLE = "dirpane"
    SUB_TITLE = "Terminal File Manager"

    CSS = """
    #main-container {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("tab", "focus_next", "Other Pane", show=False),
        Binding("shift+tab", "focus_previous", "Prev Pane", show=False),
        Binding("question_mark", "help", "Help"),
    ]

    PANE_COUNT = 2

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.config = config
        self.active_pane: DirectoryPane | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="main-container"):
            for i in range(self.PANE_COUNT):
                yield DirectoryPane(self.config, id=f"pane-{i}")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the first pane after mounting."""
        self.query_one("#pane-0", DirectoryPane).list_view.focus()


def run_app(config: Config, start_directory: Path | None = None) -> None:
    """Run the dirpane application."""
    if start_directory is not None:
        config.start_directory = start_directory
    app = DirpaneApp(config)
    app.run()
