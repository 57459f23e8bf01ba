"""Entry listing for archive resource locations."""

import zipfile
from pathlib import Path
from typing import Iterator

from resource_access.discovery.stream import EntryStream
from resource_access.exceptions import CloseError, FolderReadError


class ArchiveLister:
    """Lists the entries of a zip-format archive under a logical prefix.

    Archive entry names are already logical names, so they are yielded
    unchanged. Directory entries (names ending in '/') are skipped.

    The archive stays open until the returned EntryStream is closed.
    """

    def list(self, logical_prefix: str, archive_path: Path) -> EntryStream:
        """Stream the archive entries whose names start with logical_prefix.

        Args:
            logical_prefix: Logical folder name to match entry names against
            archive_path: Path to the archive file on disk

        Returns:
            EntryStream of matching entry names, in catalog order

        Raises:
            FolderReadError: If the archive cannot be opened
        """
        try:
            archive = zipfile.ZipFile(archive_path, "r")
        except (zipfile.BadZipFile, OSError) as e:
            raise FolderReadError(
                f"The resource folder in the archive, {archive_path}, could not be read."
            ) from e

        def close() -> None:
            try:
                archive.close()
            except OSError as e:
                raise CloseError(
                    f"The archive, {archive_path}, could not be closed."
                ) from e

        return EntryStream(self._names(archive, logical_prefix), on_close=[close])

    def _names(self, archive: zipfile.ZipFile, logical_prefix: str) -> Iterator[str]:
        for info in archive.infolist():
            name = info.filename
            if name.startswith(logical_prefix) and not name.endswith("/"):
                yield name
