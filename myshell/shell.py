"""Interactive interpreter loop"""

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

from .config import ShellConfig
from .context import CommandContext
from .dispatcher import dispatch
from .exceptions import InputReadError
from .lexer import first_word, tokenize
from .path_manager import PathManager, current_process_directory
from .streams import OutputStream

logger = logging.getLogger(__name__)

EXIT_COMMAND = 'exit'


class Shell:
    """Read-dispatch loop over one command per input line.

    Attributes:
        config: Prompt and logging settings
        context: Session context shared by every command (cwd, env)
        stdin: Stream command lines are read from
        stdout: Stream for the prompt and all command output
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        initial_env: Optional[Mapping[str, str]] = None,
        initial_cwd: Optional[str] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[OutputStream] = None,
    ):
        """
        Initialize the shell

        Args:
            config: Settings (default: ShellConfig.from_env())
            initial_env: Environment mapping (default: the live os.environ)
            initial_cwd: Starting directory (default: the process's cwd)
            stdin: Input stream (default: sys.stdin)
            stdout: Output stream (default: sys.stdout)
        """
        self.config = config or ShellConfig.from_env()
        if initial_cwd is None:
            initial_cwd = current_process_directory()
        self.context = CommandContext(
            env=initial_env if initial_env is not None else os.environ,
            path_manager=PathManager(initial_cwd),
        )
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout or OutputStream.to_stdout()

    @property
    def cwd(self) -> Optional[str]:
        return self.context.cwd

    @property
    def env(self) -> Mapping[str, str]:
        return self.context.env

    def read_line(self) -> str:
        """
        Read and trim the next command line.

        Raises:
            InputReadError: end of input, or a final line without a newline
        """
        try:
            raw = self.stdin.readline()
        except OSError as e:
            raise InputReadError(str(e))

        if not raw.endswith('\n'):
            raise InputReadError("EOF")
        return raw.strip()

    def execute(self, line: str) -> int:
        """
        Execute one trimmed command line.

        Returns:
            Exit status of the command (0 for blank lines)

        Raises:
            SystemExit: the line's first word is ``exit``
        """
        if first_word(line) == EXIT_COMMAND:
            logger.debug("exit requested")
            self.stdout.flush()
            sys.exit(0)

        tokens = tokenize(line)
        if not tokens:
            return 0

        return dispatch(tokens, line, self.context, self.stdout)

    def repl(self):
        """
        Run until ``exit`` or an input failure.

        Never returns: exits with 0 on ``exit`` and 1 when input cannot be
        read.
        """
        while True:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()

            try:
                line = self.read_line()
            except InputReadError as e:
                logger.debug("input failed: %s", e.details)
                self.stdout.write(f"{e}\n")
                self.stdout.flush()
                sys.exit(e.exit_code)

            status = self.execute(line)
            logger.debug("%r finished with status %d", line, status)
