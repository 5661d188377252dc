"""Command line tokenization for myshell.

Lines are split on single spaces and empty fields are dropped, so runs of
spaces behave like one separator. There is no quoting or escaping: a space
always separates tokens.
"""

from typing import List

SEPARATOR = " "


def tokenize(line: str) -> List[str]:
    """Split a command line into non-empty tokens.

    Args:
        line: Trimmed command line

    Returns:
        Token list; token[0] is the command name, the rest are arguments.
        An empty or blank line yields an empty list.

    Examples:
        >>> tokenize("echo a   b")
        ['echo', 'a', 'b']
        >>> tokenize("")
        []
    """
    return [part for part in line.split(SEPARATOR) if part]


def first_word(line: str) -> str:
    """Return the first space-delimited field of a line (may be empty)."""
    return line.split(SEPARATOR, 1)[0]
