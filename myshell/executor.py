"""External program execution.

A command that is not a builtin is looked up on PATH and, when found, run
to completion with its standard output captured in full and then forwarded.
The child's standard error is left attached to the interpreter's.
"""

import logging
import subprocess

from .exceptions import ExternalProgramError
from .process import Process

logger = logging.getLogger(__name__)


def describe_exit_status(returncode: int) -> str:
    """Describe a non-zero child status as ``exit status N`` or ``signal: N``."""
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status {returncode}"


def run_external(process: Process) -> bool:
    """
    Run ``process.command`` as an external program.

    Args:
        process: Process whose command is resolved on PATH and whose args
                 are passed to the program

    Returns:
        False if no executable was found (nothing is written); True once a
        match was found, even if running it failed. Failures are reported
        on process.stdout and recorded in process.exit_code.
    """
    context = process.context
    path = context.find_executable(process.command)
    if path is None:
        return False

    logger.debug("running %s as %s with args %r", process.command, path, process.args)

    try:
        result = subprocess.run(
            [path] + list(process.args),
            cwd=context.cwd,
            env=context.environment(),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        logger.warning("failed to start %s: %s", path, e)
        error = ExternalProgramError(process.command, str(e))
        process.write_line(str(error))
        process.exit_code = error.exit_code
        return True

    if result.stdout:
        process.stdout.write(result.stdout)
    process.stdout.flush()

    logger.debug("%s exited with status %d", path, result.returncode)
    # Killed by signal N is reported as 128 + N, as POSIX shells do
    status = result.returncode if result.returncode >= 0 else 128 - result.returncode
    if status != 0:
        error = ExternalProgramError(
            process.command, describe_exit_status(result.returncode), exit_code=status
        )
        process.write_line(str(error))
    process.exit_code = status
    return True
