"""
TYPE command - describe how a name would be interpreted.
"""

from ..process import Process
from . import is_builtin, register_command


@register_command('type')
def cmd_type(process: Process) -> int:
    """
    Display information about a command name

    Usage: type <name>

    Output:
        <name> is a shell builtin
        <name> is <path>          (found on PATH)
        <name>: not found

    Only the first argument is inspected. Without one nothing is printed.
    """
    if not process.args:
        return 0

    name = process.args[0]

    if is_builtin(name):
        process.write_line(f"{name} is a shell builtin")
        return 0

    path = process.context.find_executable(name)
    if path is not None:
        process.write_line(f"{name} is {path}")
        return 0

    process.write_line(f"{name}: not found")
    return 1
