"""Type-to-jump search over the visible entries of a pane."""

import logging
import re
import time
from typing import Callable, Sequence

from .entries import Entry

logger = logging.getLogger(__name__)

# Only single alphanumeric keystrokes take part in the search
SEARCH_CHAR_PATTERN = re.compile(r"[a-z0-9]", re.IGNORECASE)

DEFAULT_TIMEOUT = 1.0


def is_search_char(char: str) -> bool:
    """Check whether a keystroke takes part in type-to-jump."""
    return len(char) == 1 and SEARCH_CHAR_PATTERN.fullmatch(char) is not None


class IncrementalFinder:
    """Accumulates typed characters and finds the first entry with that prefix.

    The accumulated query is dropped when no character has been consumed for
    ``timeout`` seconds, or when ``reset()`` is called on a location change.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout = timeout
        self._clock = clock
        self._query = ""
        self._last_input: float | None = None

    @property
    def query(self) -> str:
        return self._query

    def reset(self) -> None:
        """Forget the accumulated query."""
        self._query = ""
        self._last_input = None

    def consume(self, char: str, entries: Sequence[Entry]) -> int:
        """Add a character to the query and return the index of the first match.

        If nothing matches the extended query, the character is dropped and the
        previous query is tried again, so one mistyped key does not end the
        search. Returns -1 when neither matches.

        Args:
            char: The typed character
            entries: The currently visible entries

        Returns:
            Index into ``entries``, or -1 if nothing matched
        """
        if not is_search_char(char):
            return -1

        now = self._clock()
        if self._last_input is not None and now - self._last_input > self.timeout:
            logger.debug("Finder query %r expired", self._query)
            self._query = ""
        self._last_input = now

        previous = self._query
        self._query = previous + char.lower()
        index = self._find(self._query, entries)
        if index >= 0:
            return index

        self._query = previous
        if previous:
            index = self._find(previous, entries)
            if index >= 0:
                return index

        self._query = ""
        return -1

    @staticmethod
    def _find(query: str, entries: Sequence[Entry]) -> int:
        for i, entry in enumerate(entries):
            if entry.name.lower().startswith(query):
                return i
        return -1
