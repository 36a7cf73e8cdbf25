"""Error kinds raised by the pane core and its filesystem collaborators."""


class PaneError(Exception):
    """Base class for dirpane errors."""


class ListingFailed(PaneError):
    """A directory could not be listed (missing, unreadable, not a directory)."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot list {path}: {reason}")
        self.path = path
        self.reason = reason


class CreateFailed(PaneError):
    """A new file or folder could not be created."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Cannot create {name}: {reason}")
        self.name = name
        self.reason = reason


class RenameFailed(PaneError):
    """An entry could not be renamed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Cannot rename {name}: {reason}")
        self.name = name
        self.reason = reason


class DeleteFailed(PaneError):
    """An entry could not be deleted."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Cannot delete {name}: {reason}")
        self.name = name
        self.reason = reason


class StaleResponse(PaneError):
    """A listing arrived for a location the pane has already left.

    Never shown to the user; callers drop the result.
    """

    def __init__(self, location: str) -> None:
        super().__init__(f"Discarded listing for {location}")
        self.location = location


class InvalidTransition(PaneError):
    """A pane operation was called in a state that does not allow it."""
