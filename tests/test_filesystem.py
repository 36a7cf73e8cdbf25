"""Tests for dirpane.filesystem module."""

import os
from pathlib import Path

import pytest

from dirpane.errors import CreateFailed, DeleteFailed, ListingFailed, RenameFailed
from dirpane.filesystem import (
    create_item,
    delete_item,
    home_directory,
    is_hidden_name,
    list_directory,
    parent_of,
    rename_item,
)


class TestPaths:
    def test_parent_of(self):
        assert parent_of("/home/u/docs") == "/home/u"

    def test_parent_of_trailing_separator(self):
        assert parent_of("/home/u/docs/") == "/home/u"

    def test_parent_of_root(self):
        assert parent_of("/") == "/"

    def test_home_directory(self):
        assert home_directory() == str(Path.home())

    def test_hidden_names(self):
        assert is_hidden_name(".bashrc")
        assert not is_hidden_name("notes.txt")


class TestListDirectory:
    def test_folders_first_then_files(self, sample_tree):
        names = [e.name for e in list_directory(str(sample_tree))]
        assert names == ["Archive", "projects", ".hidden", "Alpha.md", "beta.txt"]

    def test_entry_fields(self, sample_tree):
        entries = {e.name: e for e in list_directory(str(sample_tree))}
        assert entries["projects"].kind == "folder"
        assert entries["beta.txt"].kind == "file"
        assert entries[".hidden"].is_hidden
        assert not entries["beta.txt"].is_hidden
        assert entries["beta.txt"].path == str(sample_tree / "beta.txt")

    def test_empty_directory(self, tmp_path):
        assert list_directory(str(tmp_path)) == ()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ListingFailed) as exc_info:
            list_directory(str(tmp_path / "missing"))
        assert exc_info.value.path == str(tmp_path / "missing")

    def test_not_a_directory(self, sample_tree):
        with pytest.raises(ListingFailed):
            list_directory(str(sample_tree / "beta.txt"))

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permissions are not enforced for root",
    )
    def test_unreadable_directory(self, tmp_path):
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            with pytest.raises(ListingFailed) as exc_info:
                list_directory(str(locked))
            assert exc_info.value.reason == "permission denied"
        finally:
            locked.chmod(0o755)


class TestCreateItem:
    def test_create_file(self, sample_tree):
        path = create_item("new.txt", str(sample_tree), "file")
        assert Path(path).is_file()
        assert Path(path).read_text() == ""

    def test_create_folder(self, sample_tree):
        path = create_item("new-folder", str(sample_tree), "folder")
        assert Path(path).is_dir()

    def test_create_existing_file_fails(self, sample_tree):
        with pytest.raises(CreateFailed):
            create_item("beta.txt", str(sample_tree), "file")
        assert (sample_tree / "beta.txt").read_text() == "beta\n"

    def test_create_existing_folder_fails(self, sample_tree):
        with pytest.raises(CreateFailed):
            create_item("projects", str(sample_tree), "folder")

    @pytest.mark.parametrize("name", ["", "  ", ".", "..", "a/b"])
    def test_invalid_names(self, sample_tree, name):
        with pytest.raises(CreateFailed):
            create_item(name, str(sample_tree), "file")

    def test_missing_parent(self, tmp_path):
        with pytest.raises(CreateFailed):
            create_item("x", str(tmp_path / "missing"), "file")


class TestRenameItem:
    def test_rename_file(self, sample_tree):
        path = rename_item("beta.txt", "gamma.txt", str(sample_tree))
        assert Path(path).read_text() == "beta\n"
        assert not (sample_tree / "beta.txt").exists()

    def test_rename_folder(self, sample_tree):
        rename_item("projects", "work", str(sample_tree))
        assert (sample_tree / "work" / "readme.md").exists()

    def test_rename_onto_existing_fails(self, sample_tree):
        with pytest.raises(RenameFailed):
            rename_item("beta.txt", "Alpha.md", str(sample_tree))
        assert (sample_tree / "beta.txt").exists()

    def test_rename_missing_source_fails(self, sample_tree):
        with pytest.raises(RenameFailed):
            rename_item("nope.txt", "other.txt", str(sample_tree))

    def test_rename_invalid_name_fails(self, sample_tree):
        with pytest.raises(RenameFailed):
            rename_item("beta.txt", "../escape.txt", str(sample_tree))


class TestDeleteItem:
    def test_delete_file(self, sample_tree):
        delete_item(str(sample_tree / "beta.txt"))
        assert not (sample_tree / "beta.txt").exists()

    def test_delete_folder_tree(self, sample_tree):
        delete_item(str(sample_tree / "projects"))
        assert not (sample_tree / "projects").exists()

    def test_delete_symlink_keeps_target(self, sample_tree):
        link = sample_tree / "link"
        link.symlink_to(sample_tree / "projects")
        delete_item(str(link))
        assert not link.exists()
        assert (sample_tree / "projects" / "readme.md").exists()

    def test_delete_missing_fails(self, sample_tree):
        with pytest.raises(DeleteFailed):
            delete_item(str(sample_tree / "missing"))
