"""Unit tests for data models."""

import io
from datetime import datetime
from pathlib import Path

from resource_access.discovery.locator import SearchPathLocator
from resource_access.models import AuditEvent, LocationKind, ResourceConfig


class TestAuditEvent:
    """Tests for AuditEvent serialization."""

    def test_to_dict(self):
        """Test that events serialize to JSON-compatible dicts."""
        ts = datetime(2024, 1, 1, 12, 0, 0)
        event = AuditEvent(
            ts=ts,
            kind="read",
            name="io/app/readme.txt",
            bytes=12,
            detail={"encoding": "utf-8"},
        )

        data = event.to_dict()

        assert data["ts"] == "2024-01-01T12:00:00"
        assert data["kind"] == "read"
        assert data["name"] == "io/app/readme.txt"
        assert data["location"] is None
        assert data["bytes"] == 12
        assert data["detail"] == {"encoding": "utf-8"}

    def test_from_dict_restores_event(self):
        """Test that from_dict reverses to_dict."""
        event = AuditEvent(
            ts=datetime(2024, 5, 6, 7, 8, 9),
            kind="materialize",
            name="config.txt",
            location="/tmp/resource-abc",
        )

        assert AuditEvent.from_dict(event.to_dict()) == event


class TestLocationKind:
    """Tests for LocationKind."""

    def test_values(self):
        """Test the two backend kinds."""
        assert LocationKind.PLAIN_TREE.value == "plain_tree"
        assert LocationKind.ARCHIVE.value == "archive"


class TestResourceConfig:
    """Tests for ResourceConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ResourceConfig()

        assert config.search_path == []
        assert ".class" in config.excluded_suffixes
        assert ".pyc" in config.excluded_suffixes
        assert ".zip" in config.archive_suffixes
        assert ".jar" in config.archive_suffixes
        assert config.temp_prefix == "resource-"
        assert config.temp_suffix == ""
        assert config.buffer_size == io.DEFAULT_BUFFER_SIZE

    def test_from_dict_partial(self):
        """Test that missing keys fall back to defaults."""
        config = ResourceConfig.from_dict({
            "search_path": ["/srv/classes", "/srv/lib/app.zip"],
            "temp_prefix": "app-",
        })

        assert config.search_path == [Path("/srv/classes"), Path("/srv/lib/app.zip")]
        assert config.temp_prefix == "app-"
        assert config.excluded_suffixes == (".class", ".pyc")

    def test_to_dict(self):
        """Test that to_dict produces plain lists and strings."""
        config = ResourceConfig(search_path=[Path("/srv/classes")], excluded_suffixes=(".o",))

        data = config.to_dict()

        assert data["search_path"] == ["/srv/classes"]
        assert data["excluded_suffixes"] == [".o"]
        assert ResourceConfig.from_dict(data) == config

    def test_build_locator(self, tree_backend: Path):
        """Test that build_locator searches the configured path."""
        config = ResourceConfig(search_path=[tree_backend], archive_suffixes=(".pack",))

        locator = config.build_locator()

        assert isinstance(locator, SearchPathLocator)
        assert locator.entries == [tree_backend]
        assert locator.archive_suffixes == (".pack",)
