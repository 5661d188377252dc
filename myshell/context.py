"""
CommandContext - Encapsulates the session state commands run against.

This module provides the CommandContext dataclass that decouples commands
from the Shell class: the working directory and the environment are
explicit fields instead of ambient process state, so commands can be run
in isolation by tests.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional
import os
import pwd

from .exceptions import HomeDirectoryError
from .path_manager import PathManager
from .search_path import get_search_path_dirs, search_paths


def _live_environment() -> Mapping[str, str]:
    return os.environ


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Current working directory (through the PathManager)
    - Environment variables (read on every access, never snapshotted)
    - Executable lookup on PATH

    Example:
        >>> from myshell.context import CommandContext
        >>> ctx = CommandContext(env={'PATH': '/bin'}, path_manager=PathManager('/tmp'))
        >>> ctx.cwd
        '/tmp'
        >>> ctx.search_path_dirs()
        ['/bin']
    """

    env: Mapping[str, str] = field(default_factory=_live_environment)
    path_manager: PathManager = field(default_factory=PathManager)

    @property
    def cwd(self) -> Optional[str]:
        """Current working directory, None if it is unknown."""
        return self.path_manager.cwd

    def get_cwd(self) -> str:
        """Current working directory; raises WorkingDirectoryError if unknown."""
        return self.path_manager.get_cwd()

    def resolve_path(self, path: str) -> str:
        """Resolve a path against the working directory."""
        return self.path_manager.resolve_path(path)

    def change_directory(self, path: str) -> str:
        """Change the working directory; raises DirectoryNotFoundError."""
        return self.path_manager.change_directory(path)

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value or None if not set
        """
        return self.env.get(name)

    def home_directory(self) -> str:
        """
        Look up the user's home directory.

        HOME is used when set, otherwise the password database entry of the
        current user.

        Raises:
            HomeDirectoryError: neither source yields a directory
        """
        home = self.get_variable('HOME')
        if home:
            return home

        try:
            home = pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            raise HomeDirectoryError("$HOME is not defined")

        if not home:
            raise HomeDirectoryError("$HOME is not defined")
        return home

    def search_path_dirs(self) -> List[str]:
        """Directories listed in PATH right now."""
        return get_search_path_dirs(self.env)

    def find_executable(self, name: str) -> Optional[str]:
        """
        Resolve a command name on PATH.

        Relative PATH entries are looked up from the working directory.

        Args:
            name: Command name

        Returns:
            Path to the first existing match, or None
        """
        return search_paths(self.search_path_dirs(), name, cwd=self.cwd)

    def environment(self) -> dict:
        """Copy of the environment, for handing to a child process."""
        return dict(self.env)

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(cwd={self.cwd!r}, "
            f"env_vars={len(self.env)})"
        )
