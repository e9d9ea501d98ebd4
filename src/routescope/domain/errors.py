from __future__ import annotations

"""
Domain Error Hierarchy.

Structural precondition failures raised before any per-file analysis is
scheduled. Per-file failures never surface as exceptions; they degrade to
safe defaults inside the analyzers.
"""


class RouteScopeError(Exception):
    """Base class for every error raised by the analysis engine."""


class MissingDirectoryError(RouteScopeError):
    """A required directory argument was not supplied."""

    def __init__(self, label: str) -> None:
        super().__init__(f"{label} directory is required")
        self.label = label


class DirectoryNotFoundError(RouteScopeError):
    """The target directory does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory does not exist: {path}")
        self.path = path


class PathNotADirectoryError(RouteScopeError):
    """The target path exists but is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path is not a directory: {path}")
        self.path = path
