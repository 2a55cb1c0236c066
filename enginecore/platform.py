"""File-system and environment access with a platform-independent interface."""

from __future__ import annotations

import os
import shutil
import time
from pathlib import Path

from .results import FAILURE, FILE_DOESNT_EXIST, Result, ResultError, System

ENVIRONMENT_VARIABLE_DOESNT_EXIST = Result(False, System.PLATFORM, 1)


class PlatformError(ResultError):
    """A platform operation failed; ``result`` tells which kind of failure."""


def _wrap(error, message):
    result = FILE_DOESNT_EXIST if isinstance(error, FileNotFoundError) else FAILURE
    return PlatformError(result, f"{message}: {error}")


def copy_file(source, target, fail_if_target_exists=False, modify_target_time=False):
    """Copy ``source`` to ``target``.

    Unless ``modify_target_time`` is set the target keeps the source's
    timestamps; otherwise its last write time becomes the current time.
    """
    if fail_if_target_exists and os.path.exists(target):
        raise PlatformError(FAILURE, f'The target file "{target}" already exists')
    try:
        if modify_target_time:
            shutil.copyfile(source, target)
            now = time.time()
            os.utime(target, (now, now))
        else:
            shutil.copy2(source, target)
    except OSError as error:
        raise _wrap(error, f'Failed to copy "{source}" to "{target}"') from error


def create_directory_if_it_doesnt_exist(file_path):
    """Create the directory that would hold ``file_path`` and any missing parents."""
    directory = os.path.dirname(os.fspath(file_path))
    if not directory:
        return
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as error:
        raise _wrap(error, f'Failed to create the directory "{directory}"') from error


def does_file_exist(path):
    """Whether a file exists at ``path``."""
    return os.path.isfile(path)


def get_files_in_directory(path, recursive=True):
    """Return the paths of the files in a directory, sorted.

    Subdirectories are searched too when ``recursive`` is true.
    """
    if not os.path.isdir(path):
        raise PlatformError(FILE_DOESNT_EXIST, f'The directory "{path}" doesn\'t exist')
    root = Path(path)
    try:
        candidates = root.rglob("*") if recursive else root.iterdir()
        return sorted(str(entry) for entry in candidates if entry.is_file())
    except OSError as error:
        raise _wrap(error, f'Failed to list the files in "{path}"') from error


def get_environment_variable(key):
    """Return the value of an environment variable."""
    try:
        return os.environ[key]
    except KeyError:
        raise PlatformError(
            ENVIRONMENT_VARIABLE_DOESNT_EXIST,
            f'The environment variable "{key}" doesn\'t exist',
        ) from None


def get_last_write_time(path):
    """The last write time of a file, in nanoseconds since the epoch."""
    try:
        return os.stat(path).st_mtime_ns
    except OSError as error:
        raise _wrap(error, f'Failed to get the last write time of "{path}"') from error


def invalidate_last_write_time(path):
    """Set a file's last write time to the earliest time so it looks out of date."""
    try:
        access_time = os.stat(path).st_atime_ns
        os.utime(path, ns=(access_time, 0))
    except OSError as error:
        raise _wrap(error, f'Failed to invalidate the last write time of "{path}"') from error


def load_binary_file(path):
    """Return the whole contents of a file as bytes."""
    try:
        return Path(path).read_bytes()
    except OSError as error:
        raise _wrap(error, f'Failed to load "{path}"') from error


def write_binary_file(path, data):
    """Write ``data`` to a file in a single operation, replacing its contents."""
    try:
        Path(path).write_bytes(bytes(data))
    except OSError as error:
        raise _wrap(error, f'Failed to write "{path}"') from error