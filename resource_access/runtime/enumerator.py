"""Folder enumeration across every backend of a locator."""

import re

from resource_access.discovery.location import parse_location
from resource_access.discovery.locator import ResourceLocator
from resource_access.discovery.stream import EntryStream
from resource_access.exceptions import BackendError, CloseError, FolderReadError
from resource_access.models import DEFAULT_EXCLUDED_SUFFIXES


class FolderEnumerator:
    """Merges the contents of a logical folder from every backend.

    For each location the locator reports, in order, the enumerator opens
    an EntryStream (tree walk or archive listing), then chains the streams,
    drops names already seen and drops compiled artifacts. Any number of
    plain-tree and archive locations may contribute to one folder; each
    archive keeps its own handle until the merged stream is closed.

    A single unreadable location fails the whole enumeration.
    """

    def __init__(
        self,
        locator: ResourceLocator,
        excluded_suffixes: tuple[str, ...] = DEFAULT_EXCLUDED_SUFFIXES,
    ):
        """Initialize with a backend locator.

        Args:
            locator: ResourceLocator that reports folder locations
            excluded_suffixes: Name suffixes removed from every enumeration
        """
        self.locator = locator
        self.excluded_suffixes = tuple(excluded_suffixes)

    def stream(self, folder: str) -> EntryStream:
        """Lazily stream the distinct resource names under a logical folder.

        The caller must close the returned stream, preferably with a
        ``with`` block.

        Args:
            folder: Logical folder name

        Returns:
            EntryStream in first-encountered order; empty if no backend has
            the folder

        Raises:
            FolderReadError: If the locator faults or a location cannot be
                opened (and, while draining, if a location cannot be read)
        """
        try:
            urls = self.locator.find_locations(folder)
        except (BackendError, OSError) as e:
            raise FolderReadError(
                f"The resource folder, {folder}, could not be read."
            ) from e

        if not urls:
            return EntryStream.empty()

        streams: list[EntryStream] = []
        try:
            for url in urls:
                location = parse_location(url)
                streams.append(location.open(folder))
        except FolderReadError:
            try:
                EntryStream.concat(streams).close()
            except CloseError:
                # Report the open failure, not the cleanup
                pass
            raise

        merged = EntryStream.concat(streams)
        return merged.filter(self._is_resource).distinct()

    def list_matching(self, folder: str, pattern: str | re.Pattern) -> list[str]:
        """Return the names under a folder that fully match a regular expression.

        Args:
            folder: Logical folder name
            pattern: Regular expression, as a string or compiled pattern

        Returns:
            Matching names, in stream order
        """
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.stream(folder).filter(
            lambda name: regex.fullmatch(name) is not None
        ).to_list()

    def list(self, folder: str) -> list[str]:
        """Return the distinct resource names under a folder, in stream order."""
        return self.stream(folder).to_list()

    def _is_resource(self, name: str) -> bool:
        return not name.endswith(self.excluded_suffixes)
