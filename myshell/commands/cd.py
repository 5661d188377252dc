"""
CD command - change the working directory.
"""

import logging

from ..exceptions import DirectoryError
from ..process import Process
from . import register_command
from .base import report_shell_error

logger = logging.getLogger(__name__)

HOME_SHORTCUT = '~'


@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change directory

    Usage: cd <path>

    A bare ``~`` means the user's home directory. Without an argument
    nothing happens.
    """
    if not process.args:
        return 0

    path = process.args[0]

    try:
        if path == HOME_SHORTCUT:
            path = process.context.home_directory()
        new_cwd = process.context.change_directory(path)
    except DirectoryError as e:
        return report_shell_error(process, e)

    logger.debug("cwd is now %s", new_cwd)
    return 0
