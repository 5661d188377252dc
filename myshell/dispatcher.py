"""Routing of a token sequence to a builtin or an external program."""

import logging
from typing import List, Optional

from .builtins import get_builtin
from .context import CommandContext
from .exceptions import CommandNotFoundError
from .executor import run_external
from .process import Process
from .streams import OutputStream

logger = logging.getLogger(__name__)


def dispatch(tokens: List[str], line: str, context: CommandContext,
             stdout: Optional[OutputStream] = None) -> int:
    """
    Execute one tokenized command line.

    Args:
        tokens: Token sequence (token[0] is the command name)
        line: The trimmed command line the tokens came from, used in the
              "command not found" message
        context: Session context (cwd and environment)
        stdout: Output stream for all command output and error lines

    Returns:
        Exit status of the command; 127 when nothing matched
    """
    if not tokens:
        return 0

    command, args = tokens[0], tokens[1:]
    executor = get_builtin(command)
    process = Process(command=command, args=args, stdout=stdout,
                      executor=executor, context=context)

    if executor is not None:
        logger.debug("dispatching %s to builtin", command)
        return process.execute()

    if run_external(process):
        return process.exit_code

    logger.debug("no builtin or executable named %s", command)
    error = CommandNotFoundError(line)
    process.write_line(str(error))
    process.stdout.flush()
    return error.exit_code
