"""
Built-in shell commands registry.

All built-in commands live in the commands/ directory.
This module loads them and exposes the populated registry.
"""

from .commands import load_all_commands, BUILTINS, get_builtin, is_builtin, builtin_names

# Load all command modules to populate the registry
load_all_commands()

__all__ = ['BUILTINS', 'get_builtin', 'is_builtin', 'builtin_names']
