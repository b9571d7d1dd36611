"""Result types returned by every build stage.

A stage returns ``Ok(value)`` or ``Err(BuildError)``; callers check with
``isinstance`` and return the ``Err`` unchanged, which is what makes the
whole run stop at the first failure.

Example usage:
    >>> def check_dest(path: str) -> Result[str, str]:
    ...     if not path:
    ...         return Err("Empty destination")
    ...     return Ok(path)
    ...
    >>> check_dest("dist/")
    Ok(value='dist/')
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]  # noqa: UP007


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Feed an Ok value into the next stage; an Err skips it."""
    if isinstance(result, Ok):
        return fn(result.value)
    return result
