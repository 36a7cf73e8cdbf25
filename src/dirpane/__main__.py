"""Entry point for dirpane."""

import logging
import sys
from pathlib import Path

from .app import run_app
from .config import Config


def setup_logging(config: Config) -> None:
    """Send log records to the configured file; a terminal UI owns stderr."""
    if not config.log_file:
        logging.getLogger("dirpane").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for dirpane."""
    args = sys.argv[1:] if argv is None else argv
    try:
        # Load configuration
        config = Config.load()
        setup_logging(config)

        start_directory = None
        if args:
            start_directory = Path(args[0]).expanduser().resolve()
            if not start_directory.is_dir():
                print(f"Error: not a directory: {args[0]}", file=sys.stderr)
                return 1

        # Run the application
        run_app(config, start_directory)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
