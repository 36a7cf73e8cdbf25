"""Tests for dirpane.widgets.path_bar module."""

from dirpane.widgets.path_bar import _build_path


class TestBuildPath:
    def test_home_is_abbreviated(self):
        text = _build_path("/home/u/docs", "/home/u", False)
        assert text.plain == "~/docs"

    def test_home_itself(self):
        assert _build_path("/home/u", "/home/u", False).plain == "~"

    def test_outside_home(self):
        assert _build_path("/tmp/work", "/home/u", False).plain == "/tmp/work"

    def test_root(self):
        assert _build_path("/", "/home/u", False).plain == "/"

    def test_hidden_marker(self):
        text = _build_path("/tmp", "/home/u", True)
        assert text.plain == "/tmp  [hidden]"
