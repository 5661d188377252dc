"""Process class: one command invocation"""

from typing import List, Optional, Callable

from .context import CommandContext
from .streams import OutputStream


class Process:
    """Represents a single command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[OutputStream] = None,
        executor: Optional[Callable] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name (token[0])
            args: Command arguments (token[1:])
            stdout: Output stream; builtin output, child output and error
                    lines all go here
            executor: Callable that executes the command; required by execute()
            context: CommandContext with the session's cwd and environment
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    def write_line(self, text: str):
        """Write one line of output."""
        self.stdout.write(f"{text}\n")

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except Exception as e:
            self.write_line(f"Error executing '{self.command}': {str(e)}")
            self.exit_code = 1

        self.stdout.flush()

        return self.exit_code

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
