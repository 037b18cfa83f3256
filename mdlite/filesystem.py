"""Filesystem helpers for mdlite."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, MARKDOWN_EXTENSIONS
from .exceptions import FileTooLargeError

MAX_FILE_SIZE_ENV_VAR = "MDLITE_MAX_FILE_SIZE"
MAX_LINE_LENGTH_ENV_VAR = "MDLITE_MAX_LINE_LENGTH"


def _positive_int_from_env(name: str, default: int) -> int:
    env_value = os.environ.get(name)
    if env_value is None:
        return default

    try:
        value = int(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {name}: {env_value} (expected positive integer)"
        raise ValueError(error_message) from error

    if value <= 0:
        error_message = f"{name} must be a positive integer, got {value}."
        raise ValueError(error_message)

    return value


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MDLITE_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    return _positive_int_from_env(MAX_FILE_SIZE_ENV_VAR, default)


def get_max_line_length(default: int = DEFAULT_MAX_LINE_LENGTH) -> int:
    """Resolve the maximum allowed line length.

    Args:
        default: Fallback value in characters when the environment variable is
            unset.

    Returns:
        int: Maximum allowed line length in characters.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    return _positive_int_from_env(MAX_LINE_LENGTH_ENV_VAR, default)


def _traverses_symlink(path: Path) -> bool:
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(raw_path: str, base_dir: Path) -> Path:
    """Resolve a user-supplied Markdown path that must live under `base_dir`.

    Raises:
        ValueError: Describing the first failed check. Checks run in order:
            symlinks, existence, regular file, `base_dir` containment,
            Markdown extension.
    """
    path = Path(raw_path).expanduser()
    if _traverses_symlink(path):
        raise ValueError(f"Symlinks are not supported for security reasons: {path}")

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")
    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        supported = ", ".join(MARKDOWN_EXTENSIONS)
        raise ValueError(
            f"{resolved} is not a Markdown file.\nSupported extensions are: {supported}"
        )

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """`lstat` a Markdown input, raising `IOError` unless it is a regular file."""
    try:
        stat_result = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if stat.S_ISLNK(stat_result.st_mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int):
    if stat_result.st_size > max_size:
        raise FileTooLargeError(stat_result.st_size, max_size)


def safe_read(filepath: Path) -> TextIO:
    # newline="" keeps CRLF intact; split_lines handles both endings.
    try:
        return open(filepath, "r", encoding="UTF-8", newline="")
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error


def write_output(filepath: Path, content: str):
    """Write rendered HTML to `filepath` atomically.

    The content goes to a temporary file in the target directory, which then
    replaces the destination. Permissions of an existing destination are kept.

    Args:
        filepath: Destination path.
        content: Text to write.

    Raises:
        IOError: If the destination is a symlink or not a regular file, or the
            write fails.

    Examples:
        write_output(Path("README.html"), "<h1>Title</h1>")
    """
    permissions: int | None = None
    if filepath.is_symlink():
        error_message = f"Refusing to write through a symlink: {filepath}."
        raise IOError(error_message)
    if filepath.exists():
        permissions = stat.S_IMODE(collect_file_stat(filepath).st_mode)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            if permissions is not None:
                os.chmod(tmp_file.name, permissions)

        os.replace(temp_path, filepath)
    except OSError as error:
        error_message = f"Error writing {filepath}: {error}"
        raise IOError(error_message) from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
