"""Filesystem walking for plain-tree resource locations."""

import os
from pathlib import Path
from typing import Iterator

from resource_access.discovery.stream import EntryStream
from resource_access.exceptions import FolderReadError


def join_name(prefix: str, relative: str) -> str:
    """Join a logical folder prefix and a relative name with a single '/'."""
    if not prefix or prefix.endswith("/"):
        return prefix + relative
    return f"{prefix}/{relative}"


class TreeWalker:
    """Walks a directory tree and yields the logical names of its files.

    Directories are traversed but never yielded. Names always use forward
    slashes, whatever the host path separator is. Traversal is lazy, so a
    consumer that stops early never touches the rest of the tree.
    """

    def walk(self, logical_prefix: str, root: Path) -> EntryStream:
        """Stream the logical names of every regular file under root.

        Args:
            logical_prefix: Logical folder name that root corresponds to
            root: Directory to walk recursively

        Returns:
            EntryStream of logical_prefix-relative names

        Raises:
            FolderReadError: If root is not a readable directory, or (while
                draining) if any part of the tree cannot be read

        Example:
            >>> walker = TreeWalker()
            >>> with walker.walk("io/app", Path("/srv/classes/io/app")) as names:
            ...     print(list(names))
            ['io/app/readme.txt', 'io/app/conf/settings.yaml']
        """
        root = Path(root)

        if not root.is_dir():
            raise FolderReadError(
                f"The resource folder, {logical_prefix}, could not be read: "
                f"{root} is not a directory."
            )

        return EntryStream(self._names(logical_prefix, root))

    def _names(self, logical_prefix: str, root: Path) -> Iterator[str]:
        def on_error(error: OSError) -> None:
            raise FolderReadError(
                f"The resource folder, {logical_prefix}, could not be read."
            ) from error

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            # Sorted in place so os.walk descends in a stable order
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if not path.is_file():
                    continue
                relative = path.relative_to(root).as_posix()
                yield join_name(logical_prefix, relative)
