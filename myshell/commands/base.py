"""
Base utilities for command implementations.

All diagnostics go to the process's stdout: the shell has a single
user-facing output stream.
"""

from ..exceptions import ShellError
from ..process import Process


def report_shell_error(process: Process, error: ShellError) -> int:
    """
    Write a ShellError's message as one line.

    Returns:
        The error's exit code

    Example:
        try:
            process.context.change_directory(path)
        except DirectoryNotFoundError as e:
            return report_shell_error(process, e)
    """
    process.write_line(str(error))
    return error.exit_code


__all__ = [
    'report_shell_error',
]
