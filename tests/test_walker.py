"""Unit tests for TreeWalker."""

import os
from pathlib import Path

import pytest

from resource_access.discovery.walker import TreeWalker, join_name
from resource_access.exceptions import FolderReadError


class TestJoinName:
    """Tests for joining logical prefixes and relative names."""

    def test_joins_with_slash(self):
        assert join_name("io/app", "readme.txt") == "io/app/readme.txt"

    def test_empty_prefix(self):
        assert join_name("", "root.txt") == "root.txt"

    def test_prefix_with_trailing_slash(self):
        assert join_name("io/app/", "readme.txt") == "io/app/readme.txt"


class TestTreeWalker:
    """Tests for walking directory trees."""

    def test_walks_files_recursively(self, tree_backend: Path):
        """Test that every regular file is yielded with the logical prefix."""
        walker = TreeWalker()

        with walker.walk("io/app", tree_backend / "io" / "app") as names:
            result = list(names)

        assert result == [
            "io/app/Main.class",
            "io/app/module.pyc",
            "io/app/readme.txt",
            "io/app/conf/settings.yaml",
        ]

    def test_directories_are_not_yielded(self, tree_backend: Path):
        """Test that directories are traversed but not reported."""
        names = TreeWalker().walk("io", tree_backend / "io").to_list()

        assert "io/app" not in names
        assert "io/app/conf" not in names
        assert "io/app/conf/settings.yaml" in names

    def test_root_prefix(self, tree_backend: Path):
        """Test walking the backend root with an empty prefix."""
        names = TreeWalker().walk("", tree_backend).to_list()

        assert "root.txt" in names
        assert "io/app/readme.txt" in names

    def test_empty_directory(self, temp_dir: Path):
        """Test that an empty directory yields nothing."""
        empty = temp_dir / "empty"
        empty.mkdir()

        assert TreeWalker().walk("empty", empty).to_list() == []

    def test_missing_root_fails(self, temp_dir: Path):
        """Test that a missing root is reported immediately."""
        with pytest.raises(FolderReadError):
            TreeWalker().walk("io/app", temp_dir / "does" / "not" / "exist")

    def test_file_root_fails(self, tree_backend: Path):
        """Test that a regular file is not accepted as a root."""
        with pytest.raises(FolderReadError):
            TreeWalker().walk("root.txt", tree_backend / "root.txt")

    def test_traversal_fault_fails_while_draining(self, tree_backend: Path, monkeypatch):
        """Test that a fault during traversal surfaces as FolderReadError."""
        def failing_walk(top, onerror=None, **kwargs):
            onerror(PermissionError(13, "Permission denied", str(top)))
            yield from ()

        monkeypatch.setattr(os, "walk", failing_walk)
        stream = TreeWalker().walk("io", tree_backend / "io")

        with pytest.raises(FolderReadError) as exc_info:
            stream.to_list()

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_walk_is_lazy(self, tree_backend: Path, monkeypatch):
        """Test that traversal happens only as names are pulled."""
        visited = []
        real_walk = os.walk

        def counting_walk(top, **kwargs):
            for entry in real_walk(top, **kwargs):
                visited.append(entry[0])
                yield entry

        monkeypatch.setattr(os, "walk", counting_walk)
        stream = TreeWalker().walk("io", tree_backend / "io")
        assert visited == []

        with stream:
            next(stream)

        # Only io/ and io/app/ were needed for the first file
        assert len(visited) == 2
