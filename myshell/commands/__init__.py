"""
Builtin command registry.

Each builtin lives in its own module and registers itself with
``@register_command``. BUILTINS is the single source of truth: the
dispatcher routes through it and ``type`` answers "is this a builtin"
from it.
"""

import importlib
from typing import Callable, Dict, List, Optional

BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = (
    'echo',
    'type_cmd',
    'exit_cmd',
    'pwd',
    'cd',
)


def register_command(*names: str):
    """
    Decorator registering a function as a builtin under one or more names.

    Example:
        @register_command('pwd')
        def cmd_pwd(process: Process) -> int:
            ...
    """
    def decorator(func):
        for name in names:
            BUILTINS[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module so their decorators populate BUILTINS."""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')


def get_builtin(name: str) -> Optional[Callable]:
    """
    Get a builtin command executor.

    Args:
        name: The command name to look up

    Returns:
        The command function, or None if not found
    """
    return BUILTINS.get(name)


def is_builtin(name: str) -> bool:
    """Check whether a name is a builtin."""
    return name in BUILTINS


def builtin_names() -> List[str]:
    """All builtin names, sorted."""
    return sorted(BUILTINS)
