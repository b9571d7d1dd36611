"""Storage infrastructure for appbuilder.

Provides Result-based persistence for the build's JSON documents:

- JsonStorage: Low-level JSON file I/O
- MetadataRepository: Project metadata (package.json)
- BuildConfigRepository: Build configuration (AppBuilder.json)
"""

from appbuilder.infrastructure.storage.json_storage import JsonStorage
from appbuilder.infrastructure.storage.repositories import (
    BuildConfigRepository,
    MetadataRepository,
)

__all__ = [
    "JsonStorage",
    "MetadataRepository",
    "BuildConfigRepository",
]
