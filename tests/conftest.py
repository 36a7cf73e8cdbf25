"""Shared fixtures for dirpane tests."""

import pytest

from dirpane.entries import Entry
from dirpane.filesystem import parent_of
from dirpane.finder import IncrementalFinder
from dirpane.pane_state import PaneState


def make_entry(name: str, kind: str = "file", location: str = "/home/u") -> Entry:
    """Build an Entry the way list_directory would for ``location``."""
    return Entry(
        name=name,
        path=f"{location}/{name}",
        kind=kind,
        is_hidden=name.startswith("."),
    )


class FakeClock:
    """Manually advanced clock for finder timeout tests."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def home_listing():
    return (
        make_entry("docs", "folder"),
        make_entry(".config", "folder"),
        make_entry("music", "folder"),
        make_entry("notes.txt"),
        make_entry(".bashrc"),
        make_entry("todo.md"),
    )


@pytest.fixture
def docs_listing():
    location = "/home/u/docs"
    return (
        make_entry("draft.md", location=location),
        make_entry("report.pdf", location=location),
    )


@pytest.fixture
def activations():
    """Records activation events emitted by a pane."""
    return []


@pytest.fixture
def pane(clock, activations):
    """A PaneState at /home/u that has not loaded anything yet."""
    return PaneState(
        home="/home/u",
        parent_of=parent_of,
        finder=IncrementalFinder(timeout=1.0, clock=clock),
        on_activate=lambda: activations.append(True),
    )


@pytest.fixture
def loaded_pane(pane, home_listing):
    """A PaneState showing the /home/u listing."""
    request = pane.refresh()
    pane.apply_listing(request, home_listing)
    return pane


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small directory tree with hidden and visible entries."""
    root = tmp_path / "root"
    root.mkdir()

    (root / "beta.txt").write_text("beta\n")
    (root / "Alpha.md").write_text("# Alpha\n")
    (root / ".hidden").write_text("secret\n")

    (root / "projects").mkdir()
    (root / "projects" / "readme.md").write_text("hello\n")
    (root / "Archive").mkdir()

    return root
