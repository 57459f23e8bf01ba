"""Exception classes for resource access."""


class ResourceError(Exception):
    """Base exception for all resource access errors."""
    pass


class ResourceNotFoundError(ResourceError):
    """Raised when no backend holds the requested resource."""
    pass


class ResourceReadError(ResourceError):
    """Raised when a resolved resource could not be opened or drained."""
    pass


class FolderReadError(ResourceError):
    """Raised when a folder location could not be walked or listed."""
    pass


class MaterializationError(ResourceError):
    """Raised when a resource could not be copied to a temporary file."""
    pass


class EncodingError(ResourceError):
    """Raised when a text encoding is not supported."""
    pass


class CloseError(ResourceError):
    """Raised when a backend handle could not be released."""
    pass


class ConfigurationError(ResourceError):
    """Raised when construction or configuration preconditions are violated."""
    pass


class BackendError(ResourceError):
    """Raised when a locator's lookup mechanism itself faults."""
    pass
