"""Resources module for resolving and materializing single resources."""

from resource_access.resources.resolver import ResourceResolver
from resource_access.resources.reader import ResourceReader

__all__ = ["ResourceResolver", "ResourceReader"]
