"""Resource Access - uniform reading of resources from directories and archives.

Resources are byte payloads addressed by '/'-separated logical names. This
library resolves them and enumerates logical folders across an ordered
search path of plain directory trees and zip-format archives, so calling
code never branches on where the data actually lives.
"""

from resource_access.exceptions import (
    ResourceError,
    ResourceNotFoundError,
    ResourceReadError,
    FolderReadError,
    MaterializationError,
    EncodingError,
    CloseError,
    ConfigurationError,
    BackendError,
)

from resource_access.models import AuditEvent, LocationKind, ResourceConfig

from resource_access.config import load_config
from resource_access.discovery import (
    ArchiveLocation,
    EntryStream,
    PlainTreeLocation,
    ResourceLocator,
    SearchPathLocator,
    parse_location,
)
from resource_access.observability import AuditSink, JSONLAuditSink, StdoutAuditSink
from resource_access.runtime import FolderEnumerator, ResourceRepository

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "ResourceError",
    "ResourceNotFoundError",
    "ResourceReadError",
    "FolderReadError",
    "MaterializationError",
    "EncodingError",
    "CloseError",
    "ConfigurationError",
    "BackendError",
    # Models
    "AuditEvent",
    "LocationKind",
    "ResourceConfig",
    "load_config",
    # Discovery
    "ArchiveLocation",
    "EntryStream",
    "PlainTreeLocation",
    "ResourceLocator",
    "SearchPathLocator",
    "parse_location",
    # Runtime
    "FolderEnumerator",
    "ResourceRepository",
    # Observability
    "AuditSink",
    "JSONLAuditSink",
    "StdoutAuditSink",
]
