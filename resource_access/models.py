"""Data models for resource access."""

import io
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_access.discovery.locator import SearchPathLocator


class LocationKind(Enum):
    """Storage backend behind a location descriptor."""
    PLAIN_TREE = "plain_tree"
    ARCHIVE = "archive"


@dataclass
class AuditEvent:
    """Record of a resource operation."""
    ts: datetime
    kind: str  # "resolve", "materialize", "read", "enumerate", "error"
    name: str
    location: str | None = None
    bytes: int | None = None
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ts": self.ts.isoformat(),
            "kind": self.kind,
            "name": self.name,
            "location": self.location,
            "bytes": self.bytes,
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AuditEvent":
        """Deserialize from dict."""
        return cls(
            ts=datetime.fromisoformat(data["ts"]),
            kind=data["kind"],
            name=data["name"],
            location=data.get("location"),
            bytes=data.get("bytes"),
            detail=data.get("detail", {}),
        )


DEFAULT_EXCLUDED_SUFFIXES = (".class", ".pyc")
DEFAULT_ARCHIVE_SUFFIXES = (".zip", ".jar", ".whl", ".egg")


@dataclass
class ResourceConfig:
    """Configuration for resource resolution and enumeration."""
    search_path: list[Path] = field(default_factory=list)
    excluded_suffixes: tuple[str, ...] = DEFAULT_EXCLUDED_SUFFIXES
    archive_suffixes: tuple[str, ...] = DEFAULT_ARCHIVE_SUFFIXES
    temp_prefix: str = "resource-"
    temp_suffix: str = ""
    buffer_size: int = io.DEFAULT_BUFFER_SIZE

    def build_locator(self) -> "SearchPathLocator":
        """Create a SearchPathLocator over this configuration's search path."""
        from resource_access.discovery.locator import SearchPathLocator

        return SearchPathLocator(
            self.search_path,
            archive_suffixes=self.archive_suffixes,
        )

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "search_path": [str(entry) for entry in self.search_path],
            "excluded_suffixes": list(self.excluded_suffixes),
            "archive_suffixes": list(self.archive_suffixes),
            "temp_prefix": self.temp_prefix,
            "temp_suffix": self.temp_suffix,
            "buffer_size": self.buffer_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ResourceConfig":
        """Deserialize from dict."""
        return cls(
            search_path=[Path(entry).expanduser() for entry in data.get("search_path", [])],
            excluded_suffixes=tuple(data.get("excluded_suffixes", DEFAULT_EXCLUDED_SUFFIXES)),
            archive_suffixes=tuple(data.get("archive_suffixes", DEFAULT_ARCHIVE_SUFFIXES)),
            temp_prefix=data.get("temp_prefix", "resource-"),
            temp_suffix=data.get("temp_suffix", ""),
            buffer_size=data.get("buffer_size", io.DEFAULT_BUFFER_SIZE),
        )
