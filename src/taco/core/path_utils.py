"""Filesystem helpers: directory creation, copying, and path validation."""

import asyncio
import errno
import os
import re
import secrets
import shutil
import sys
import tempfile
from pathlib import Path

from taco.core.errors import TacoError, TacoErrorCode

_DRIVE_LETTER = re.compile(r"^[a-zA-Z]:$")
_COPY_CHUNK_SIZE = 64 * 1024


def read_file_contents(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file, stripping a leading byte order mark."""
    contents = path.read_text(encoding=encoding)
    if contents.startswith("\ufeff"):
        contents = contents[1:]
    return contents


def create_directory_if_necessary(directory: Path) -> bool:
    """Create a directory (and parents) if it does not exist.

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        OSError: If the directory could not be created
    """
    if directory.exists():
        return False
    try:
        directory.mkdir(parents=True)
        return True
    except OSError:
        # Another process may have created it between the check and mkdir
        if not directory.exists():
            raise
    return False


def _copy_file_sync(source: Path, target: Path) -> None:
    try:
        src = open(source, "rb")
    except OSError as e:
        raise TacoError.wrap(TacoErrorCode.FAILED_FILE_READ, e, source) from e

    with src:
        try:
            dst = open(target, "wb")
        except OSError as e:
            raise TacoError.wrap(TacoErrorCode.FAILED_FILE_WRITE, e, target) from e
        with dst:
            while True:
                try:
                    chunk = src.read(_COPY_CHUNK_SIZE)
                except OSError as e:
                    raise TacoError.wrap(TacoErrorCode.FAILED_FILE_READ, e, source) from e
                if not chunk:
                    break
                try:
                    dst.write(chunk)
                except OSError as e:
                    raise TacoError.wrap(TacoErrorCode.FAILED_FILE_WRITE, e, target) from e


async def copy_file(source: Path, target: Path) -> None:
    """Copy a single file, completing once the target is fully written.

    Raises:
        TacoError: FailedFileRead for source errors, FailedFileWrite for target errors
    """
    await asyncio.to_thread(_copy_file_sync, source, target)


def _copy_tree_sync(source: Path, target: Path) -> None:
    try:
        shutil.copytree(source, target, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise TacoError.wrap(TacoErrorCode.FAILED_RECURSIVE_COPY, e, source, target) from e


async def copy_recursive(source: Path, target: Path) -> None:
    """Recursively copy a directory into target, merging with existing content.

    A failed copy leaves whatever was already written in place.

    Raises:
        TacoError: FailedRecursiveCopy identifying source and target
    """
    await asyncio.to_thread(_copy_tree_sync, source, target)


def _make_scratch_dir() -> Path:
    tmp_dir = Path(tempfile.gettempdir())
    while True:
        candidate = tmp_dir / secrets.token_hex(20)
        try:
            candidate.mkdir()
            return candidate
        except FileExistsError:
            continue


def _is_invalid_segment_error(error: OSError) -> bool:
    if error.errno == errno.ENOENT:
        return True
    # Windows reports reserved characters as EINVAL rather than ENOENT
    return sys.platform == "win32" and error.errno == errno.EINVAL


def is_path_valid(path_to_test: str) -> bool:
    """Check that every segment of a path is an acceptable file name.

    Each segment is created as a directory inside a fresh scratch directory.
    A segment that fails with ENOENT is an invalid name. Any other OS error
    is treated as valid since it says nothing about the name itself.
    """
    scratch = _make_scratch_dir()
    current = scratch
    try:
        for index, segment in enumerate(path_to_test.split(os.sep)):
            if index == 0 and sys.platform == "win32" and _DRIVE_LETTER.match(segment):
                continue
            next_path = current / segment
            try:
                next_path.mkdir()
                current = next_path
            except ValueError:
                # Embedded NUL bytes never reach the filesystem
                return False
            except OSError as e:
                if _is_invalid_segment_error(e):
                    return False
        return True
    finally:
        shutil.rmtree(scratch, ignore_errors=True)
