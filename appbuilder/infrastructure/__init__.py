"""Infrastructure layer for appbuilder.

This module provides clean interfaces for I/O operations, returning
Result monads for explicit error handling.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - MetadataRepository: Project metadata persistence
        - BuildConfigRepository: Build configuration loading

    Filesystem:
        - filesystem: clean/ensure directories, artifact writes, copies

    Tools:
        - ESLintRunner, StyleLintRunner: lint passes
        - RollupBundler: JS bundling
        - TerserMinifier: JS minification
"""

from appbuilder.infrastructure import filesystem
from appbuilder.infrastructure.storage import (
    BuildConfigRepository,
    JsonStorage,
    MetadataRepository,
)
from appbuilder.infrastructure.tools import (
    ESLintRunner,
    RollupBundler,
    StyleLintRunner,
    TerserMinifier,
)

__all__ = [
    # Storage
    "JsonStorage",
    "MetadataRepository",
    "BuildConfigRepository",
    # Filesystem
    "filesystem",
    # Tools
    "ESLintRunner",
    "StyleLintRunner",
    "RollupBundler",
    "TerserMinifier",
]
