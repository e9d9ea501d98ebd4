from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution, structural validation and tolerant text reads shared by
every analyzer. Validation helpers raise domain errors; read helpers let
OSError propagate so callers can degrade at the smallest scope.
"""

import os
from typing import Iterable, Optional, Sequence

from routescope.domain.errors import (
    DirectoryNotFoundError,
    MissingDirectoryError,
    PathNotADirectoryError,
)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

UNIX_APP_DIR_NAME = ".routescope"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the directory for persistent application data (~/.routescope).

    Automatically creates the hierarchy if it does not exist.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation; an unwritable home only disables persistence
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion and user home shortcuts (~/).
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def first_existing(base: str, candidates: Iterable[Sequence[str]], *, want_dir: bool) -> Optional[str]:
    """
    Return the first candidate under base that exists as the wanted kind.

    Args:
        base: Directory the candidates are relative to.
        candidates: Ordered path-part tuples.
        want_dir: Match directories when True, regular files otherwise.

    Returns:
        Optional[str]: Absolute path of the first hit, or None.
    """
    probe = os.path.isdir if want_dir else os.path.isfile
    for parts in candidates:
        full = os.path.join(base, *parts)
        if probe(full):
            return full
    return None

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def validate_directory(path: Optional[str], label: str = "Target") -> str:
    """
    Check structural preconditions for an analysis root.

    Args:
        path: Directory to validate.
        label: Human name used when the argument is missing.

    Returns:
        str: The absolute directory path.

    Raises:
        MissingDirectoryError: If path is empty or None.
        DirectoryNotFoundError: If path does not exist.
        PathNotADirectoryError: If path exists but is not a directory.
    """
    if not path:
        raise MissingDirectoryError(label)

    abs_path = os.path.abspath(path)
    if not os.path.exists(abs_path):
        raise DirectoryNotFoundError(abs_path)
    if not os.path.isdir(abs_path):
        raise PathNotADirectoryError(abs_path)
    return abs_path


def read_text(path: str) -> str:
    """
    Read a source file as UTF-8, replacing undecodable bytes.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def to_posix(rel_path: str) -> str:
    """Normalise OS separators to forward slashes."""
    return rel_path.replace(os.sep, "/")
