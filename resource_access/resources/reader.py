"""Materialization of resolved resources as bytes, text and temporary files."""

import codecs
import hashlib
import io
import os
import tempfile
from pathlib import Path

from resource_access.exceptions import EncodingError, MaterializationError
from resource_access.models import ResourceConfig
from resource_access.resources.resolver import ResourceResolver


class ResourceReader:
    """Drains resolved resources into memory, text or temporary files.

    Every method resolves the resource, consumes the stream fully and closes
    it before returning.
    """

    def __init__(self, resolver: ResourceResolver, config: ResourceConfig | None = None):
        """Initialize with a resolver.

        Args:
            resolver: ResourceResolver used to open resources
            config: Optional ResourceConfig for temporary file naming
        """
        self.resolver = resolver
        self.config = config or ResourceConfig()

    def read_bytes(self, name: str) -> bytes:
        """Read a resource fully into memory.

        Raises:
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource could not be read
        """
        buffer = io.BytesIO()
        self.resolver.read_into(name, buffer.write)
        return buffer.getvalue()

    def read_text(self, name: str, encoding: str) -> str:
        """Read a resource and decode it with the named text encoding.

        Bytes that are invalid in the encoding are replaced rather than
        rejected; only an unknown encoding is an error.

        Args:
            name: Logical resource name
            encoding: Codec name understood by Python (e.g., "utf-8")

        Returns:
            The decoded text

        Raises:
            EncodingError: If the encoding is not a supported text encoding
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource could not be read
        """
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise EncodingError(
                f"The resource, {name}, could not be read as a string "
                f"using the character set, {encoding}."
            ) from e

        content = self.read_bytes(name)

        try:
            return content.decode(encoding, errors="replace")
        except LookupError as e:
            # Known codec, but not a bytes-to-text one (e.g., "hex")
            raise EncodingError(
                f"The resource, {name}, could not be read as a string "
                f"using the character set, {encoding}."
            ) from e

    def extract(self, name: str) -> Path:
        """Copy a resource into a new temporary file.

        The temporary file is not deleted by this library; the caller owns
        its lifecycle.

        Args:
            name: Logical resource name

        Returns:
            Path to the new temporary file

        Raises:
            ResourceNotFoundError: If no backend holds the name
            ResourceReadError: If the resource could not be read
            MaterializationError: If the temporary file could not be created
                or written
        """
        stream = self.resolver.resolve(name)

        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=self.config.temp_prefix,
                suffix=self.config.temp_suffix,
            )
        except OSError as e:
            stream.close()
            raise MaterializationError(
                f"A new temporary file could not be created for: {name}"
            ) from e

        try:
            with os.fdopen(fd, "wb") as out:
                def write(chunk: bytes) -> None:
                    try:
                        out.write(chunk)
                    except OSError as e:
                        raise MaterializationError(
                            f"The resource, {name}, could not be copied to {temp_path}."
                        ) from e

                self.resolver.copy(name, stream, write)
        except OSError as e:
            # fdopen or the final flush on close
            stream.close()
            os.unlink(temp_path)
            raise MaterializationError(
                f"The resource, {name}, could not be copied to {temp_path}."
            ) from e
        except Exception:
            os.unlink(temp_path)
            raise

        return Path(temp_path)

    def compute_sha256(self, content: str | bytes) -> str:
        """Compute SHA256 hash of content.

        Args:
            content: String or bytes to hash

        Returns:
            Hexadecimal SHA256 hash string
        """
        if isinstance(content, str):
            content = content.encode('utf-8')
        return hashlib.sha256(content).hexdigest()
