"""Resolution of logical resource names to open byte streams."""

import io
import zipfile
import zlib
from typing import BinaryIO, Callable

from resource_access.discovery.locator import ResourceLocator
from resource_access.exceptions import (
    BackendError,
    ResourceNotFoundError,
    ResourceReadError,
)


class ResourceResolver:
    """Opens the first backend copy of a logical resource.

    Unlike folder enumeration, resolution never merges backends: the first
    backend in locator order that holds the name wins.
    """

    def __init__(self, locator: ResourceLocator, buffer_size: int = io.DEFAULT_BUFFER_SIZE):
        """Initialize with a backend locator.

        Args:
            locator: ResourceLocator consulted for every resolution
            buffer_size: Buffer size used when wrapping unbuffered streams
        """
        self.locator = locator
        self.buffer_size = buffer_size

    def resolve(self, name: str) -> BinaryIO:
        """Open a logical resource as a buffered binary stream.

        Args:
            name: Logical resource name (e.g., "io/app/readme.txt")

        Returns:
            Buffered binary stream; the caller owns it and must close it

        Raises:
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource exists but could not be opened
        """
        try:
            stream = self.locator.open_resource(name)
        except (BackendError, OSError) as e:
            raise ResourceReadError(f"The resource, {name}, could not be read.") from e

        if stream is None:
            raise ResourceNotFoundError(f"The resource, {name}, could not be found.")

        if isinstance(stream, io.BufferedIOBase):
            return stream
        return io.BufferedReader(stream, self.buffer_size)

    def read_into(self, name: str, sink: Callable[[bytes], object]) -> int:
        """Resolve a resource and feed its bytes to sink until exhausted.

        Returns:
            Number of bytes read

        Raises:
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If opening or reading the resource faults
        """
        return self.copy(name, self.resolve(name), sink)

    def copy(self, name: str, stream: BinaryIO, sink: Callable[[bytes], object]) -> int:
        """Drain an already resolved stream into sink and close it.

        Read faults, including damaged archive members, are reported as
        ResourceReadError; whatever sink raises propagates unchanged.
        """
        total = 0
        with stream:
            while True:
                try:
                    chunk = stream.read(self.buffer_size)
                except (OSError, EOFError, zipfile.BadZipFile, zlib.error) as e:
                    raise ResourceReadError(
                        f"The resource, {name}, could not be read."
                    ) from e
                if not chunk:
                    break
                sink(chunk)
                total += len(chunk)
        return total
