"""Filesystem operations backing the directory panes.

These are the only functions that touch the disk. They are called from
background workers and report failures with the exceptions in ``errors``.
"""

import logging
import os
import shutil
from pathlib import Path

from .entries import Entry, EntryKind, Listing
from .errors import CreateFailed, DeleteFailed, ListingFailed, RenameFailed

logger = logging.getLogger(__name__)


def home_directory() -> str:
    """Get the user's home directory."""
    return str(Path.home())


def parent_of(path: str) -> str:
    """Get the parent directory of ``path``. The root is its own parent."""
    return os.path.normpath(os.path.join(path, os.pardir))


def is_hidden_name(name: str) -> bool:
    """Check whether a name follows the dot-file convention for hidden items."""
    return name.startswith(".")


def _entry_for(dir_entry: os.DirEntry) -> Entry:
    try:
        is_dir = dir_entry.is_dir()
    except OSError:
        is_dir = False
    return Entry(
        name=dir_entry.name,
        path=os.path.abspath(dir_entry.path),
        kind="folder" if is_dir else "file",
        is_hidden=is_hidden_name(dir_entry.name),
    )


def list_directory(path: str) -> Listing:
    """List a directory, folders first and then files, each sorted by name.

    Raises:
        ListingFailed: The path is missing, unreadable or not a directory
    """
    try:
        with os.scandir(path) as it:
            entries = [_entry_for(e) for e in it]
    except FileNotFoundError:
        raise ListingFailed(path, "no such directory")
    except NotADirectoryError:
        raise ListingFailed(path, "not a directory")
    except PermissionError:
        raise ListingFailed(path, "permission denied")
    except OSError as e:
        raise ListingFailed(path, e.strerror or str(e))

    entries.sort(key=lambda e: (not e.is_folder, e.name.lower()))
    logger.info("Listed %d entries in %s", len(entries), path)
    return tuple(entries)


def _invalid_name_reason(name: str) -> str | None:
    """Return why ``name`` cannot be used as an entry name, or None if it can."""
    if not name or not name.strip():
        return "name is empty"
    if name in (".", ".."):
        return "reserved name"
    if "/" in name or (os.altsep and os.altsep in name) or os.sep in name:
        return "name contains a path separator"
    if "\0" in name:
        return "name contains a null byte"
    return None


def create_item(name: str, at_path: str, kind: EntryKind) -> str:
    """Create an empty file or a folder called ``name`` inside ``at_path``.

    Returns:
        The path of the created item

    Raises:
        CreateFailed: The name is invalid, already taken, or the OS refused
    """
    reason = _invalid_name_reason(name)
    if reason:
        raise CreateFailed(name, reason)

    target = Path(at_path) / name
    try:
        if kind == "folder":
            target.mkdir()
        else:
            # "x" fails instead of truncating an existing file
            with open(target, "x"):
                pass
    except FileExistsError:
        raise CreateFailed(name, "an item with that name already exists")
    except OSError as e:
        raise CreateFailed(name, e.strerror or str(e))

    logger.info("Created %s %s", kind, target)
    return str(target)


def rename_item(old_name: str, new_name: str, at_path: str) -> str:
    """Rename ``old_name`` to ``new_name`` inside ``at_path``.

    Returns:
        The new path

    Raises:
        RenameFailed: Invalid name, missing source, existing target, or OS error
    """
    reason = _invalid_name_reason(new_name)
    if reason:
        raise RenameFailed(old_name, reason)

    source = Path(at_path) / old_name
    target = Path(at_path) / new_name
    if not source.exists() and not source.is_symlink():
        raise RenameFailed(old_name, "it no longer exists")
    # Allow case-only renames on case-insensitive filesystems
    if target.exists() and not (source.exists() and target.samefile(source)):
        raise RenameFailed(old_name, f"{new_name} already exists")

    try:
        source.rename(target)
    except OSError as e:
        raise RenameFailed(old_name, e.strerror or str(e))

    logger.info("Renamed %s to %s", source, target)
    return str(target)


def delete_item(path: str) -> None:
    """Delete a file, a symlink, or a folder with everything inside it.

    Raises:
        DeleteFailed: The item is missing or could not be removed
    """
    target = Path(path)
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except FileNotFoundError:
        raise DeleteFailed(target.name, "it no longer exists")
    except OSError as e:
        raise DeleteFailed(target.name, e.strerror or str(e))

    logger.info("Deleted %s", path)
