"""
Custom exception hierarchy for myshell.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Every message here is written to standard output by the shell, so the
wording of each message is part of the user-visible behaviour.

Usage:
    from myshell.exceptions import DirectoryNotFoundError

    try:
        context.change_directory(path)
    except DirectoryNotFoundError as e:
        process.stdout.write(f"{e}\\n")
        return e.exit_code
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Working Directory Errors
# =============================================================================

class DirectoryError(ShellError):
    """
    Base class for working-directory errors.

    Raised by the session context when the working directory cannot be
    read or changed.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.path = path


class DirectoryNotFoundError(DirectoryError):
    """
    Raised when cd cannot enter a directory.

    The same message is used for every failure (missing path, not a
    directory, permission denied).

    Example:
        raise DirectoryNotFoundError("/nonexistent/path")
    """

    def __init__(self, path: str):
        message = f"cd: {path}: No such file or directory"
        super().__init__(message, path, exit_code=1)


class HomeDirectoryError(DirectoryError):
    """
    Raised when the user's home directory cannot be determined.

    Example:
        raise HomeDirectoryError("$HOME is not defined")
    """

    def __init__(self, details: str):
        message = f"Failed to find user's home directory {details}"
        super().__init__(message, exit_code=1)
        self.details = details


class WorkingDirectoryError(DirectoryError):
    """Raised when the current working directory is unknown."""

    def __init__(self, details: Optional[str] = None):
        super().__init__("Failed to get working directory", exit_code=1)
        self.details = details


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor found on PATH.

    The message echoes the whole command line, not only the command name.

    Example:
        raise CommandNotFoundError("foo bar baz")
    """

    def __init__(self, line: str):
        message = f"{line}: command not found"
        super().__init__(line, message, exit_code=127)


class ExternalProgramError(CommandError):
    """
    Raised when a resolved external program cannot be run, or exits
    unsuccessfully.

    Example:
        raise ExternalProgramError("ls", "exit status 2")
    """

    def __init__(self, command: str, details: str, exit_code: int = 1):
        message = f"Error running external program {command}:{details}"
        super().__init__(command, message, exit_code=exit_code)
        self.details = details


# =============================================================================
# Input Errors
# =============================================================================

class InputReadError(ShellError):
    """
    Raised when the next command line cannot be read.

    This is the only fatal error: the interpreter reports it and
    terminates with a non-zero status.

    Example:
        raise InputReadError("EOF")
    """

    def __init__(self, details: str):
        message = f"Error reading command: {details}"
        super().__init__(message, exit_code=1)
        self.details = details
