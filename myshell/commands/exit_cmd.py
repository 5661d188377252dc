"""
EXIT command - leave the shell.
"""

import sys

from ..process import Process
from . import register_command


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the shell with status 0

    Usage: exit

    Arguments are accepted and ignored. The interpreter loop normally
    handles exit before dispatch; this handler covers direct dispatch.
    """
    process.stdout.flush()
    sys.exit(0)
