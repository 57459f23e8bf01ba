"""Central entry point for resource access.

This module provides the ResourceRepository class, which resolves logical
resource names and enumerates logical folders against one injected
ResourceLocator, whatever mix of directories and archives that locator
searches.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from resource_access.discovery.locator import ResourceLocator
from resource_access.discovery.stream import EntryStream
from resource_access.exceptions import (
    ConfigurationError,
    ResourceError,
    ResourceNotFoundError,
)
from resource_access.models import AuditEvent, ResourceConfig
from resource_access.observability.audit import AuditSink
from resource_access.resources.reader import ResourceReader
from resource_access.resources.resolver import ResourceResolver
from resource_access.runtime.enumerator import FolderEnumerator


def _require_name(name: str, what: str, allow_empty: bool = False) -> str:
    if name is None or (name == "" and not allow_empty):
        raise ValueError(f"The {what} is required.")
    if not isinstance(name, str):
        raise TypeError(f"The {what} must be a string, got {type(name).__name__}.")
    if name.startswith("/"):
        raise ValueError(f"The {what} must not start with '/': {name}")
    return name


class ResourceRepository:
    """Uniform access to resources held by directories and archives.

    ResourceRepository is the main entry point of the library. A resource is
    a byte payload addressed by a '/'-separated logical name; the repository
    resolves names and enumerates folders without the caller ever knowing
    which backend holds the data.

    - Single resources resolve to the first backend that holds them.
    - Folders merge every backend, reporting each name once.

    The repository holds no state between calls, so one instance may be
    shared freely; the streams it returns may not.

    Example:
        >>> from pathlib import Path
        >>> from resource_access import ResourceRepository, SearchPathLocator
        >>>
        >>> repo = ResourceRepository(
        ...     SearchPathLocator([Path("build/resources"), Path("lib/app.zip")])
        ... )
        >>> repo.get_as_string("io/app/readme.txt", "utf-8")
        'Hello!\\n'
        >>> repo.list("io/app")
        ['io/app/readme.txt', 'io/app/conf/settings.yaml']
    """

    def __init__(
        self,
        locator: ResourceLocator,
        config: ResourceConfig | None = None,
        audit_sink: AuditSink | None = None,
    ):
        """Initialize repository with a backend locator.

        Args:
            locator: ResourceLocator that knows the ordered backend chain
            config: Optional ResourceConfig. If None, uses defaults.
            audit_sink: Optional AuditSink for logging operations.
                       If None, audit logging is disabled.

        Raises:
            ConfigurationError: If locator is missing
        """
        if locator is None:
            raise ConfigurationError("The resource locator is required.")

        self._locator = locator
        self._config = config or ResourceConfig()
        self._audit_sink = audit_sink

        self._resolver = ResourceResolver(locator, buffer_size=self._config.buffer_size)
        self._reader = ResourceReader(self._resolver, self._config)
        self._enumerator = FolderEnumerator(
            locator,
            excluded_suffixes=self._config.excluded_suffixes,
        )

    @classmethod
    def from_config(
        cls,
        config: ResourceConfig,
        audit_sink: AuditSink | None = None,
    ) -> "ResourceRepository":
        """Build a repository whose locator searches config.search_path."""
        return cls(config.build_locator(), config=config, audit_sink=audit_sink)

    @property
    def locator(self) -> ResourceLocator:
        return self._locator

    def _audit(self, kind: str, name: str, **kwargs) -> None:
        if self._audit_sink:
            self._audit_sink.log(AuditEvent(ts=datetime.now(), kind=kind, name=name, **kwargs))

    def _audit_error(self, operation: str, name: str, error: ResourceError) -> None:
        self._audit(
            "error",
            name,
            detail={
                "operation": operation,
                "error_type": type(error).__name__,
                "message": str(error),
            },
        )

    def get_as_stream(self, name: str) -> BinaryIO:
        """Open a resource as a buffered binary stream.

        Args:
            name: Logical resource name

        Returns:
            Binary stream; the caller owns it and must close it

        Raises:
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource could not be opened
        """
        name = _require_name(name, "resource name")

        try:
            stream = self._resolver.resolve(name)
        except ResourceError as e:
            self._audit_error("resolve", name, e)
            raise

        self._audit("resolve", name)
        return stream

    def get_as_path(self, name: str) -> Path:
        """Copy a resource to a new temporary file and return its path.

        The file is never deleted by the repository. Removing it is up to the
        caller.

        Raises:
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource could not be read
            MaterializationError: If the temporary file could not be written
        """
        name = _require_name(name, "resource name")

        try:
            path = self._reader.extract(name)
        except ResourceError as e:
            self._audit_error("materialize", name, e)
            raise

        self._audit("materialize", name, location=str(path), bytes=path.stat().st_size)
        return path

    def get_as_bytes(self, name: str) -> bytes:
        """Read a resource fully into memory."""
        name = _require_name(name, "resource name")

        try:
            content = self._reader.read_bytes(name)
        except ResourceError as e:
            self._audit_error("read", name, e)
            raise

        self._audit(
            "read",
            name,
            bytes=len(content),
            detail={"sha256": self._reader.compute_sha256(content)},
        )
        return content

    def get_as_string(self, name: str, encoding: str) -> str:
        """Read a resource as text decoded with the named encoding.

        Args:
            name: Logical resource name
            encoding: Text encoding name (e.g., "utf-8")

        Raises:
            EncodingError: If the encoding is not supported
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource could not be read
        """
        name = _require_name(name, "resource name")
        if encoding is None:
            raise ValueError("The string character set is required.")
        if not isinstance(encoding, str):
            raise TypeError(
                f"The string character set must be a string, got {type(encoding).__name__}."
            )

        try:
            text = self._reader.read_text(name, encoding)
        except ResourceError as e:
            self._audit_error("read", name, e)
            raise

        self._audit("read", name, detail={"encoding": encoding, "characters": len(text)})
        return text

    def exists(self, name: str) -> bool:
        """Return True if any backend holds the resource."""
        name = _require_name(name, "resource name")

        try:
            stream = self._resolver.resolve(name)
        except ResourceNotFoundError:
            return False
        stream.close()
        return True

    def stream(self, folder: str) -> EntryStream:
        """Lazily stream the resource names available under a folder.

        You will need to close this stream to release open archives.

        Raises:
            FolderReadError: If a folder location could not be read
        """
        folder = _require_name(folder, "folder resource name", allow_empty=True)

        try:
            entries = self._enumerator.stream(folder)
        except ResourceError as e:
            self._audit_error("enumerate", folder, e)
            raise

        self._audit("enumerate", folder, detail={"mode": "stream"})
        return entries

    def list_matching(self, folder: str, pattern: str | re.Pattern) -> list[str]:
        """List the resource names under a folder that fully match pattern.

        Raises:
            FolderReadError: If a folder location could not be read
        """
        folder = _require_name(folder, "folder resource name", allow_empty=True)
        if pattern is None:
            raise ValueError("The pattern to match is required.")

        try:
            names = self._enumerator.list_matching(folder, pattern)
        except ResourceError as e:
            self._audit_error("enumerate", folder, e)
            raise

        self._audit(
            "enumerate",
            folder,
            detail={
                "mode": "list_matching",
                "pattern": getattr(pattern, "pattern", pattern),
                "count": len(names),
            },
        )
        return names

    def list(self, folder: str) -> list[str]:
        """List the resource names available under a folder.

        Raises:
            FolderReadError: If a folder location could not be read
        """
        folder = _require_name(folder, "folder resource name", allow_empty=True)

        try:
            names = self._enumerator.list(folder)
        except ResourceError as e:
            self._audit_error("enumerate", folder, e)
            raise

        self._audit("enumerate", folder, detail={"mode": "list", "count": len(names)})
        return names
