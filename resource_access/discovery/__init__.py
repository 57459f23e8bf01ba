"""Discovery module for backend location and folder enumeration."""

from resource_access.discovery.stream import EntryStream
from resource_access.discovery.walker import TreeWalker
from resource_access.discovery.archive import ArchiveLister
from resource_access.discovery.location import (
    ArchiveLocation,
    PlainTreeLocation,
    classify,
    parse_location,
)
from resource_access.discovery.locator import ResourceLocator, SearchPathLocator

__all__ = [
    "EntryStream",
    "TreeWalker",
    "ArchiveLister",
    "ArchiveLocation",
    "PlainTreeLocation",
    "classify",
    "parse_location",
    "ResourceLocator",
    "SearchPathLocator",
]
