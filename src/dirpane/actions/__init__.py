"""Action handler mixins for DirpaneApp and DirectoryPane."""

from .navigation_actions import NavigationActionsMixin
from .pane_actions import PaneActionsMixin

__all__ = [
    "NavigationActionsMixin",
    "PaneActionsMixin",
]
