"""dirpane - a two-pane terminal file manager."""

__version__ = "0.1.0"
