"""
Configuration settings for myshell.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = "WARNING"

PROMPT_VARIABLE = "MYSHELL_PROMPT"
LOG_LEVEL_VARIABLE = "MYSHELL_LOG_LEVEL"


@dataclass
class ShellConfig:
    """Interpreter settings.

    Attributes:
        prompt: Text written before each read, without a newline
        log_level: Level name for the diagnostic log on stderr
    """

    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """Build settings from MYSHELL_* environment variables, with defaults."""
        if env is None:
            env = os.environ
        return cls(
            prompt=env.get(PROMPT_VARIABLE, DEFAULT_PROMPT),
            log_level=env.get(LOG_LEVEL_VARIABLE, DEFAULT_LOG_LEVEL).upper(),
        )
