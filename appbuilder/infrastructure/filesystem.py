"""Filesystem operations used by the task pipeline.

Each operation returns a Result; ``OSError`` never escapes this module.
"""

import logging
import shutil
import stat
from pathlib import Path

from appbuilder.domain.build.models import CopyDescriptor
from appbuilder.domain.shared import BuildError, Err, Ok, Result, directory_error, producer_error

logger = logging.getLogger(__name__)


def clean_dirs(dirs: list[str]) -> Result[None, BuildError]:
    """Delete each directory and recreate it empty.

    Directories that do not exist yet are simply created, so running this
    twice in a row leaves every directory existing and empty both times.
    """
    for name in dirs:
        path = Path(name)
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            elif path.exists() or path.is_symlink():
                path.unlink()
            path.mkdir(parents=True)
        except OSError as e:
            logger.error(f"Cannot clean directory {path}: {e}")
            return Err(directory_error(f"Cannot clean directory {path}: {e}"))
    return Ok(None)


def remove_tree(path: Path) -> None:
    """Remove a directory tree if present, ignoring a missing path."""
    shutil.rmtree(path, ignore_errors=True)


def ensure_dir(name: str) -> Result[Path, BuildError]:
    """Validate a destination directory, creating it when missing.

    Returns:
        Ok(Path) for a usable directory, Err(BuildError) when the name is
        empty, names a regular file, or cannot be created.
    """
    if not name:
        logger.error("Empty destination directory")
        return Err(directory_error("Empty destination directory"))

    path = Path(name)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError:
        logger.error(f"{path} exists and is not a directory")
        return Err(directory_error(f"{path} exists and is not a directory"))
    except OSError as e:
        logger.error(f"Cannot create directory {path}: {e}")
        return Err(directory_error(f"Cannot create directory {path}: {e}"))
    return Ok(path)


def read_text(path: Path) -> Result[str, BuildError]:
    """Read UTF-8 text as stored, without newline translation."""
    try:
        return Ok(path.read_bytes().decode("utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}")
        return Err(producer_error(f"Cannot read {path}: {e}"))


def write_text(path: Path, content: str) -> Result[Path, BuildError]:
    """Write ``content`` as UTF-8 bytes, without newline translation.

    The bytes on disk are exactly the bytes an integrity digest of
    ``content`` covers.
    """
    try:
        path.write_bytes(content.encode("utf-8"))
    except OSError as e:
        logger.error(f"Cannot write {path}: {e}")
        return Err(producer_error(f"Cannot write {path}: {e}"))
    return Ok(path)


def copy_entry(descriptor: CopyDescriptor) -> Result[None, BuildError]:
    """Copy one ``{src, dest}`` entry.

    Directories are copied recursively over whatever is at ``dest``; files
    are copied after creating the parent directories of ``dest``. Anything
    else (a symlink, a socket) is skipped with a warning.
    """
    src = Path(descriptor.src)
    dest = Path(descriptor.dest)
    try:
        mode = src.lstat().st_mode
        if stat.S_ISDIR(mode):
            shutil.copytree(src, dest, dirs_exist_ok=True)
        elif stat.S_ISREG(mode):
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dest)
        else:
            logger.warning(f"Skipping {src}: not a regular file or directory")
    except (OSError, shutil.Error) as e:
        logger.error(f"Cannot copy {src} to {dest}: {e}")
        return Err(producer_error(f"Cannot copy {src} to {dest}: {e}"))
    return Ok(None)


def copy_files(descriptors: list[CopyDescriptor]) -> Result[None, BuildError]:
    """Copy every entry in order, stopping at the first failure."""
    for descriptor in descriptors:
        result = copy_entry(descriptor)
        if isinstance(result, Err):
            return result
    return Ok(None)
