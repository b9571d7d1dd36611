"""Shared domain utilities for appbuilder.

This package provides common building blocks used across the build stages:

- Result monad for explicit error handling
- Build error taxonomy

Example usage:
    >>> from appbuilder.domain.shared import BuildError, Err, Ok, Result, config_error
    >>>
    >>> def find_task(name: str) -> Result[dict, BuildError]:
    ...     if name == "missing":
    ...         return Err(config_error("Task not found"))
    ...     return Ok({"name": name})
"""

from appbuilder.domain.shared.errors import (
    BuildError,
    ErrorKind,
    config_error,
    directory_error,
    lint_error,
    producer_error,
)
from appbuilder.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "flat_map",
    # Errors
    "BuildError",
    "ErrorKind",
    "config_error",
    "lint_error",
    "directory_error",
    "producer_error",
]
