"""Build domain models.

Pydantic models for the two JSON documents a build reads (the build
configuration and the project metadata) plus the plain dataclasses that
describe one run. These are data structures only; loading and saving
lives in ``appbuilder.infrastructure.storage``.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Placeholder tags the HTML rewriter replaces with integrity-checked tags
DEFAULT_JS_PLACEHOLDER = '<script src="main.js" type="module"></script>'
DEFAULT_CSS_PLACEHOLDER = '<link rel="stylesheet" href="EncryptDecrypt.css" />'

RELEASE = "release"


class CopyDescriptor(BaseModel):
    """A ``{src, dest}`` entry of a task's ``copyFiles`` list."""

    model_config = ConfigDict(frozen=True)

    src: str
    dest: str


class TaskSpec(BaseModel):
    """One named unit of the build producing artifacts for one directory."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    type: str = Field(description="Build type that activates the task, e.g. 'debug'")
    dest_dir: str = Field(alias="destDir")
    js_file: str | None = Field(default=None, alias="jsFile")
    css_files: list[str] = Field(default_factory=list, alias="cssFiles")
    html_file: str | None = Field(default=None, alias="htmlFile")
    clean_dirs: list[str] = Field(default_factory=list, alias="cleanDirs")
    copy_files: list[CopyDescriptor] = Field(default_factory=list, alias="copyFiles")
    js_placeholder: str = Field(default=DEFAULT_JS_PLACEHOLDER, alias="jsPlaceholder")
    css_placeholder: str = Field(default=DEFAULT_CSS_PLACEHOLDER, alias="cssPlaceholder")

    @field_validator("css_files", "clean_dirs", "copy_files", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def js_output_name(self) -> str:
        return f"{self.name}.min.js"

    @property
    def css_output_name(self) -> str:
        return f"{self.name}.min.css"

    @property
    def html_output_name(self) -> str | None:
        """Base name of the HTML template, directory component discarded."""
        if not self.html_file:
            return None
        return Path(self.html_file.replace("\\", "/")).name


class BuildConfig(BaseModel):
    """The build configuration document (``AppBuilder.json``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tasks: list[TaskSpec]
    eslint_files: list[str] = Field(default_factory=list, alias="ESLintFiles")
    stylelint_files: list[str] = Field(default_factory=list, alias="styleLintFiles")

    @field_validator("eslint_files", "stylelint_files", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("tasks")
    @classmethod
    def _unique_names(cls, tasks: list[TaskSpec]) -> list[TaskSpec]:
        seen: set[str] = set()
        for task in tasks:
            if task.name in seen:
                raise ValueError(f"duplicate task name '{task.name}'")
            seen.add(task.name)
        return tasks


class ProjectMetadata(BaseModel):
    """Project metadata (``package.json``).

    ``document`` keeps the whole parsed JSON object so that saving it back
    touches nothing but ``buildNumber``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str
    license: str = ""
    sources: str = ""
    author: str | None = None
    build_number: int = Field(alias="buildNumber", ge=0)
    document: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    @field_validator("author", mode="before")
    @classmethod
    def _author_name(cls, value: Any) -> Any:
        # npm allows "author" to be a {name, email, url} object
        if isinstance(value, dict):
            return value.get("name")
        return value

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ProjectMetadata":
        return cls.model_validate({**document, "document": dict(document)})

    def next_build(self) -> "ProjectMetadata":
        """Return a copy with the build counter incremented by one."""
        return self.model_copy(update={"build_number": self.build_number + 1})

    def to_document(self) -> dict[str, Any]:
        """The loaded JSON object with the current build number."""
        document = dict(self.document)
        document["buildNumber"] = self.build_number
        return document


class BuildStatus(str, Enum):
    """Run-global status. Once ERROR, it stays ERROR."""

    OK = "ok"
    ERROR = "error"


class ArtifactKind(str, Enum):
    JS = "js"
    CSS = "css"
    HTML = "html"
    COPY = "copy"


@dataclass(frozen=True)
class Artifact:
    """An on-disk output written by a producer.

    Attributes:
        kind: What the producer made.
        path: Where it was written.
        integrity: Base64 SHA-384 digest for hashed artifacts (JS/CSS).
    """

    kind: ArtifactKind
    path: Path
    integrity: str | None = None


@dataclass
class BuildRunState:
    """Mutable state of one build run.

    Only the controller and the task pipeline touch it, and only one task
    runs at a time.
    """

    build_type: str | None
    status: BuildStatus = BuildStatus.OK
    started_at: int | None = None  # perf_counter_ns()
    current_task: TaskSpec | None = None
    js_hash: str | None = None
    css_hash: str | None = None
    artifacts: list[Artifact] = field(default_factory=list)

    @property
    def release(self) -> bool:
        return self.build_type == RELEASE

    def fail(self) -> None:
        self.status = BuildStatus.ERROR

    def reset_hashes(self) -> None:
        self.js_hash = None
        self.css_hash = None
