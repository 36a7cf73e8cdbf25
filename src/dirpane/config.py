"""Configuration loading and defaults for dirpane."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .filesystem import home_directory


def get_config_dir() -> Path:
    """Get the dirpane config directory (XDG-style)."""
    return Path.home() / ".config" / "dirpane"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class Config:
    """Application configuration."""

    start_directory: Path = field(default_factory=lambda: Path(home_directory()))
    show_hidden: bool = False
    finder_timeout: float = 1.0  # seconds before a type-to-jump query expires
    watch: bool = True
    watch_debounce: float = 0.5
    confirm_delete: bool = True
    log_file: str = ""  # empty = no log output
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        start_dir = data.get("start_directory", "")
        if start_dir:
            start_directory = Path(start_dir).expanduser()
        else:
            start_directory = Path(home_directory())

        log_file = data.get("log_file", "")
        if log_file:
            log_file = str(Path(log_file).expanduser())

        return cls(
            start_directory=start_directory,
            show_hidden=bool(data.get("show_hidden", False)),
            finder_timeout=float(data.get("finder_timeout", 1.0)),
            watch=bool(data.get("watch", True)),
            watch_debounce=float(data.get("watch_debounce", 0.5)),
            confirm_delete=bool(data.get("confirm_delete", True)),
            log_file=log_file,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# dirpane Configuration',
            '',
            '# Directory both panes open in',
            f'start_directory = "{self.start_directory}"',
            '',
            '# Show dot-files when a pane opens (toggle with ".")',
            f'show_hidden = {str(self.show_hidden).lower()}',
            '',
            '# Seconds of inactivity before type-to-jump starts a new search',
            f'finder_timeout = {self.finder_timeout}',
            '',
            '# Reload a pane when its directory changes on disk',
            f'watch = {str(self.watch).lower()}',
            f'watch_debounce = {self.watch_debounce}',
            '',
            '# Require a second press of Delete to confirm',
            f'confirm_delete = {str(self.confirm_delete).lower()}',
            '',
            '# Log file path; empty disables logging',
            f'log_file = "{self.log_file}"',
            f'log_level = "{self.log_level}"  # DEBUG, INFO, WARNING or ERROR',
        ]

        config_path.write_text("\n".join(lines) + "\n")
