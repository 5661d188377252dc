"""Executable lookup on the PATH search list.

The search list is read from the environment on every call, never cached,
so changes to PATH are observed by the next lookup.
"""

import logging
import os
from typing import List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

PATH_VARIABLE = "PATH"
PATH_SEPARATOR = ":"


def get_search_path_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories listed in PATH, in lookup order.

    Args:
        env: Environment mapping to read (default: os.environ at call time)

    Returns:
        Directory list; empty when PATH is unset or empty

    Examples:
        >>> get_search_path_dirs({'PATH': '/usr/bin:/bin'})
        ['/usr/bin', '/bin']
        >>> get_search_path_dirs({})
        []
    """
    if env is None:
        env = os.environ
    value = env.get(PATH_VARIABLE)
    if not value:
        return []
    return value.split(PATH_SEPARATOR)


def join_search_path(directory: str, name: str) -> str:
    """Place ``name`` under ``directory`` and clean the result.

    Unlike os.path.join, an absolute ``name`` does not replace the
    directory. An empty directory leaves ``name`` as given.

    Examples:
        >>> join_search_path('/usr//bin', 'ls')
        '/usr/bin/ls'
        >>> join_search_path('/opt', '/bin/sh')
        '/opt/bin/sh'
    """
    if not directory:
        return os.path.normpath(name)
    return os.path.normpath(directory.rstrip("/") + "/" + name.lstrip("/"))


def search_paths(paths: Sequence[str], name: str, cwd: Optional[str] = None) -> Optional[str]:
    """Find the first ``directory/name`` that exists.

    Only existence is checked, not the executable bit, so a plain file with
    the right name is still returned.

    Args:
        paths: Directories to search, in precedence order
        name: File name to look for
        cwd: Directory that relative entries are resolved against

    Returns:
        The joined path of the first match, or None

    Examples:
        With /usr/bin/ls missing and /bin/ls present:
            search_paths(['/usr/bin', '/bin'], 'ls') -> '/bin/ls'
    """
    for directory in paths:
        candidate = join_search_path(directory, name)
        if cwd is not None and not os.path.isabs(candidate):
            candidate = os.path.normpath(os.path.join(cwd, candidate))
        if os.path.exists(candidate):
            logger.debug("resolved %s to %s", name, candidate)
            return candidate
    logger.debug("%s not found in %d search directories", name, len(paths))
    return None
