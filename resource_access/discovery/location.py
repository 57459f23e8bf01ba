"""Location descriptors and their classification by scheme marker.

A locator reports where a logical folder lives as URL strings:

    file:///srv/classes/io/app                 plain directory tree
    zip:file:///srv/lib/app.zip!/io/app        entry prefix inside an archive

jar: is accepted as an alias of zip:. parse_location() turns these strings
into PlainTreeLocation or ArchiveLocation objects, which know how to open
themselves as an EntryStream.
"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from resource_access.discovery.archive import ArchiveLister
from resource_access.discovery.stream import EntryStream
from resource_access.discovery.walker import TreeWalker
from resource_access.exceptions import FolderReadError
from resource_access.models import LocationKind

ARCHIVE_SCHEMES = ("zip", "jar")
ARCHIVE_SEPARATOR = "!/"


@dataclass(frozen=True)
class PlainTreeLocation:
    """A logical folder backed by a directory on disk."""
    root: Path

    @property
    def kind(self) -> LocationKind:
        return LocationKind.PLAIN_TREE

    def open(self, logical_prefix: str) -> EntryStream:
        """Walk the directory and stream the names found under it."""
        return TreeWalker().walk(logical_prefix, self.root)

    def to_url(self) -> str:
        return Path(self.root).absolute().as_uri()


@dataclass(frozen=True)
class ArchiveLocation:
    """A logical folder backed by an entry prefix inside an archive."""
    archive: Path
    inner: str = ""

    @property
    def kind(self) -> LocationKind:
        return LocationKind.ARCHIVE

    def open(self, logical_prefix: str) -> EntryStream:
        """List the archive and stream the entry names under the prefix."""
        return ArchiveLister().list(logical_prefix, self.archive)

    def to_url(self) -> str:
        archive_url = Path(self.archive).absolute().as_uri()
        return f"zip:{archive_url}{ARCHIVE_SEPARATOR}{self.inner}"


Location = PlainTreeLocation | ArchiveLocation


def _file_url_to_path(url: str, original: str) -> Path:
    parsed = urlparse(url)
    if parsed.scheme != "file" or not parsed.path:
        raise FolderReadError(f"The location, {original}, is not a file location.")
    return Path(url2pathname(parsed.path))


def classify(url: str) -> LocationKind:
    """Classify a location descriptor by its scheme marker."""
    scheme = url.split(":", 1)[0].lower() if ":" in url else ""
    if scheme in ARCHIVE_SCHEMES:
        return LocationKind.ARCHIVE
    return LocationKind.PLAIN_TREE


def parse_location(url: str) -> Location:
    """Decode a location descriptor into a PlainTreeLocation or ArchiveLocation.

    Args:
        url: Location descriptor as reported by a ResourceLocator

    Returns:
        The decoded location

    Raises:
        FolderReadError: If the descriptor cannot be parsed into a physical form
    """
    if classify(url) is LocationKind.ARCHIVE:
        body = url.split(":", 1)[1]
        separator = body.find(ARCHIVE_SEPARATOR)
        if separator == -1:
            raise FolderReadError(
                f"The archive location, {url}, has no '{ARCHIVE_SEPARATOR}' separator."
            )
        archive = _file_url_to_path(body[:separator], url)
        inner = body[separator + len(ARCHIVE_SEPARATOR):]
        return ArchiveLocation(archive=archive, inner=inner)

    return PlainTreeLocation(root=_file_url_to_path(url, url))
