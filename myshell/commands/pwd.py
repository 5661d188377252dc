"""
PWD command - print working directory.
"""

from ..exceptions import WorkingDirectoryError
from ..process import Process
from . import register_command
from .base import report_shell_error


@register_command('pwd')
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd
    """
    try:
        cwd = process.context.get_cwd()
    except WorkingDirectoryError as e:
        return report_shell_error(process, e)
    process.write_line(cwd)
    return 0
