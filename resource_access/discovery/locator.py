"""Backend locators: where logical folders and resources physically live."""

import sys
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from resource_access.discovery.location import ArchiveLocation, PlainTreeLocation
from resource_access.exceptions import BackendError
from resource_access.models import DEFAULT_ARCHIVE_SUFFIXES


class ResourceLocator(ABC):
    """Abstract interface for resolving logical names against backends.

    A locator plays the role of a class loader: it knows an ordered chain of
    backends and answers two questions about a logical name. Implementations
    hold no per-call state, so one locator can serve many repositories.
    """

    @abstractmethod
    def find_locations(self, folder: str) -> list[str]:
        """Return the location descriptors of a logical folder, in backend order.

        Args:
            folder: Logical folder name ("" for the root of every backend)

        Returns:
            Location descriptor URLs; empty if the folder exists nowhere

        Raises:
            BackendError: If the lookup mechanism itself faults
        """
        pass

    @abstractmethod
    def open_resource(self, name: str) -> BinaryIO | None:
        """Open the first backend's copy of a logical resource.

        Args:
            name: Logical resource name

        Returns:
            A readable binary stream owned by the caller, or None if no
            backend holds the name

        Raises:
            BackendError: If the lookup mechanism itself faults
            OSError: If the resource exists but cannot be opened
        """
        pass


class SearchPathLocator(ResourceLocator):
    """Locator over an ordered search path of directories and archives.

    Each entry is either a directory (plain tree) or a zip-format archive.
    Entries are consulted in order, so earlier entries shadow later ones
    when a single resource is resolved.

    Example:
        >>> locator = SearchPathLocator([Path("build/classes"), Path("lib/app.jar")])
        >>> locator.find_locations("io/app")
        ['file:///work/build/classes/io/app', 'zip:file:///work/lib/app.jar!/io/app']
    """

    def __init__(
        self,
        entries: list[Path],
        archive_suffixes: tuple[str, ...] = DEFAULT_ARCHIVE_SUFFIXES,
    ):
        """Initialize with the search path.

        Args:
            entries: Directories and archive files, highest priority first
            archive_suffixes: File suffixes treated as archives without sniffing
        """
        self.entries = [Path(entry).expanduser() for entry in entries]
        self.archive_suffixes = tuple(suffix.lower() for suffix in archive_suffixes)

    @classmethod
    def from_sys_path(cls) -> "SearchPathLocator":
        """Build a locator over the interpreter's import path."""
        return cls([Path(entry) for entry in sys.path if entry])

    def _is_archive(self, entry: Path) -> bool:
        if not entry.is_file():
            return False
        if entry.suffix.lower() in self.archive_suffixes:
            return True
        return zipfile.is_zipfile(entry)

    def _open_archive(self, entry: Path) -> zipfile.ZipFile:
        try:
            return zipfile.ZipFile(entry, "r")
        except (zipfile.BadZipFile, OSError) as e:
            raise BackendError(f"The archive, {entry}, could not be opened.") from e

    def find_locations(self, folder: str) -> list[str]:
        locations = []

        for entry in self.entries:
            try:
                if entry.is_dir():
                    candidate = entry / folder if folder else entry
                    if candidate.is_dir():
                        locations.append(PlainTreeLocation(candidate).to_url())
                elif self._is_archive(entry):
                    with self._open_archive(entry) as archive:
                        if _archive_has_folder(archive, folder):
                            locations.append(ArchiveLocation(entry, folder).to_url())
            except OSError as e:
                raise BackendError(
                    f"The search path entry, {entry}, could not be inspected."
                ) from e

        return locations

    def open_resource(self, name: str) -> BinaryIO | None:
        for entry in self.entries:
            try:
                if entry.is_dir():
                    candidate = entry / name
                    if candidate.is_file():
                        return open(candidate, "rb")
                elif self._is_archive(entry):
                    archive = self._open_archive(entry)
                    try:
                        info = _archive_file_entry(archive, name)
                        if info is not None:
                            # The member shares the archive's file handle and
                            # keeps it open until the member itself is closed.
                            return archive.open(info)
                    finally:
                        archive.close()
            except (
                zipfile.BadZipFile,
                zipfile.LargeZipFile,
                NotImplementedError,  # unsupported compression method
                RuntimeError,  # encrypted member
            ) as e:
                raise BackendError(
                    f"The resource, {name}, could not be opened from {entry}."
                ) from e

        return None


def _archive_has_folder(archive: zipfile.ZipFile, folder: str) -> bool:
    if not folder:
        return True
    prefix = folder if folder.endswith("/") else folder + "/"
    return any(name.startswith(prefix) for name in archive.namelist())


def _archive_file_entry(archive: zipfile.ZipFile, name: str) -> zipfile.ZipInfo | None:
    try:
        info = archive.getinfo(name)
    except KeyError:
        return None
    if info.is_dir():
        return None
    return info
