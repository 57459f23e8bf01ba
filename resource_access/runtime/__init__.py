"""Runtime module for resource repository and folder enumeration."""

from resource_access.runtime.enumerator import FolderEnumerator
from resource_access.runtime.repository import ResourceRepository

__all__ = ["FolderEnumerator", "ResourceRepository"]
