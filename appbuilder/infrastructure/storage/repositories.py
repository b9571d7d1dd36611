"""Repositories for the two documents a build reads.

Both wrap ``JsonStorage`` and validate the parsed JSON into domain models,
returning Result types so that a bad file becomes a single typed
``config-load`` error.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from appbuilder.domain.build.models import BuildConfig, ProjectMetadata
from appbuilder.domain.shared import BuildError, Err, Ok, Result, config_error
from appbuilder.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class MetadataRepository:
    """Project metadata (``package.json``) persistence."""

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the metadata file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._path = path
        self._storage = storage or JsonStorage()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Result[ProjectMetadata, BuildError]:
        """Load and validate the metadata file.

        Returns:
            Ok(ProjectMetadata) as stored on disk, or Err(BuildError).
        """
        result = self._storage.load_json(self._path)
        if isinstance(result, Err):
            logger.error(result.error.message)
            return result

        try:
            return Ok(ProjectMetadata.from_document(result.value))
        except ValidationError as e:
            error = config_error(f"Invalid project metadata in {self._path}: {_describe(e)}")
            logger.error(error.message)
            return Err(error)

    def save(self, metadata: ProjectMetadata) -> Result[None, BuildError]:
        """Write the metadata back, 4-space indented, other keys untouched."""
        result = self._storage.save_json(self._path, metadata.to_document(), indent=4)
        if isinstance(result, Err):
            logger.error(result.error.message)
        return result


class BuildConfigRepository:
    """Build configuration (``AppBuilder.json``) loading."""

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        self._path = path
        self._storage = storage or JsonStorage()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Result[BuildConfig, BuildError]:
        """Load and validate the build configuration.

        Returns:
            Ok(BuildConfig), or Err(BuildError) naming every invalid field.
        """
        result = self._storage.load_json(self._path)
        if isinstance(result, Err):
            logger.error(result.error.message)
            return result

        try:
            return Ok(BuildConfig.model_validate(result.value))
        except ValidationError as e:
            error = config_error(f"Invalid build configuration in {self._path}: {_describe(e)}")
            logger.error(error.message)
            return Err(error)
