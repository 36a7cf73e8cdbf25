"""File system watcher for auto-refresh of a pane's directory."""

import logging
import os
import threading
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import ObservedWatch

logger = logging.getLogger(__name__)


class DirectoryEventHandler(FileSystemEventHandler):
    """Handler for changes to the direct children of one directory, with debouncing."""

    def __init__(
        self,
        directory: str,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        super().__init__()
        self.directory = os.path.normpath(directory)
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def _is_child(self, path: str | bytes) -> bool:
        """Check if the path is directly inside the watched directory."""
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        return os.path.dirname(os.path.normpath(path)) == self.directory

    def _schedule_update(self, path: str | bytes) -> None:
        """Schedule a debounced change notification."""
        logger.debug("Change detected: %s", path)
        with self._lock:
            # Cancel existing timer
            if self._timer:
                self._timer.cancel()

            self._timer = threading.Timer(
                self.debounce_seconds,
                self._fire,
            )
            self._timer.daemon = True
            self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        logger.info("Directory changed: %s", self.directory)
        self.on_change()

    def cancel(self) -> None:
        """Drop any pending notification."""
        with self._lock:
            if self._timer:
                self._timer.cancel()
                self._timer = None

    def on_created(self, event: FileSystemEvent) -> None:
        if self._is_child(event.src_path):
            self._schedule_update(event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if self._is_child(event.src_path):
            self._schedule_update(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle rename/move into, out of, or within the directory."""
        if self._is_child(event.src_path):
            self._schedule_update(event.src_path)
        elif getattr(event, "dest_path", "") and self._is_child(event.dest_path):
            self._schedule_update(event.dest_path)


class DirectoryWatcher:
    """Watches the directory a pane is showing and reports changes to it."""

    def __init__(
        self,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._observer: Observer | None = None
        self._handler: DirectoryEventHandler | None = None
        self._watch: ObservedWatch | None = None

    @property
    def directory(self) -> str | None:
        return self._handler.directory if self._handler else None

    def start(self) -> None:
        """Start the observer thread. Call ``watch()`` to pick a directory."""
        if self._observer is not None:
            return  # Already running

        self._observer = Observer()
        self._observer.daemon = True
        self._observer.start()

    def watch(self, directory: str) -> None:
        """Watch ``directory`` instead of whatever was watched before."""
        if self._observer is None:
            return
        if self._handler is not None and self._handler.directory == os.path.normpath(directory):
            return

        self._unschedule()
        handler = DirectoryEventHandler(directory, self.on_change, self.debounce_seconds)
        try:
            self._watch = self._observer.schedule(handler, directory, recursive=False)
        except OSError as e:
            # Unwatchable directories still work, they just don't auto-refresh
            logger.warning("Cannot watch %s: %s", directory, e)
            return
        self._handler = handler
        logger.info("Watching %s", directory)

    def _unschedule(self) -> None:
        if self._handler is not None:
            self._handler.cancel()
        if self._observer is not None and self._watch is not None:
            try:
                self._observer.unschedule(self._watch)
            except KeyError:
                pass  # Emitter already gone (directory was removed)
        self._handler = None
        self._watch = None

    def stop(self) -> None:
        """Stop watching."""
        self._unschedule()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=1.0)
            self._observer = None

    def __enter__(self) -> "DirectoryWatcher":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()
