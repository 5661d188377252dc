"""Working directory management for myshell.

This module provides the PathManager class which handles:
- Current working directory tracking
- Path resolution (relative to absolute)
- Validated directory changes

The working directory lives here rather than in the interpreter's own
process state; external programs are started in it explicitly.
"""

import os
from typing import Optional

from .exceptions import DirectoryNotFoundError, WorkingDirectoryError


def current_process_directory() -> Optional[str]:
    """Return the interpreter process's working directory, or None if it is gone."""
    try:
        return os.getcwd()
    except OSError:
        return None


class PathManager:
    """Manages paths and working directory.

    Attributes:
        cwd: Current working directory, or None when it could not be
             determined at startup
    """

    def __init__(self, initial_cwd: Optional[str] = "/"):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial current working directory (default: '/')
        """
        self.cwd = initial_cwd

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Normalized absolute path

        Raises:
            WorkingDirectoryError: relative path with an unknown cwd

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        if not path:
            path = self.get_cwd()

        if path.startswith("/"):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.get_cwd(), path))

    def change_directory(self, path: str) -> str:
        """Change the current working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Returns:
            The new working directory

        Raises:
            DirectoryNotFoundError: target is missing, not a directory, or
                not searchable. ``path`` is reported as given.
        """
        try:
            target = self.resolve_path(path)
        except WorkingDirectoryError:
            raise DirectoryNotFoundError(path)

        if not os.path.isdir(target) or not os.access(target, os.X_OK):
            raise DirectoryNotFoundError(path)

        self.cwd = target
        return target

    def get_cwd(self) -> str:
        """Get the current working directory.

        Raises:
            WorkingDirectoryError: cwd could not be determined
        """
        if self.cwd is None:
            raise WorkingDirectoryError()
        return self.cwd
