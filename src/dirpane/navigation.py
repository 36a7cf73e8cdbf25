"""Navigation state management for back-navigation between directories."""

from dataclasses import dataclass

from .entries import Listing


@dataclass(frozen=True)
class NavigationNode:
    """Snapshot of a pane taken before descending into a child directory."""

    location: str
    selection_index: int
    listing: Listing


class NavigationStack:
    """Stack-based history of parent directories."""

    def __init__(self) -> None:
        self._stack: list[NavigationNode] = []

    def push(self, node: NavigationNode) -> None:
        """Push a node, replacing the top if it is for the same location."""
        if self._stack and self._stack[-1].location == node.location:
            self._stack[-1] = node
        else:
            self._stack.append(node)

    def peek_matches(self, location: str) -> bool:
        """Check whether the most recent node was taken at ``location``."""
        return bool(self._stack) and self._stack[-1].location == location

    def pop(self) -> NavigationNode | None:
        """Pop and return the most recent node, or None if empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self) -> None:
        """Clear all navigation history."""
        self._stack.clear()

    def is_empty(self) -> bool:
        """Check if the navigation stack is empty."""
        return len(self._stack) == 0

    def __len__(self) -> int:
        return len(self._stack)
