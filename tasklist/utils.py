"""
Utility functions for the tasklist application.
"""

import re
import unicodedata
from typing import Optional

from tasklist.constants import MSG_NO_INDEX
from tasklist.exceptions import ArgumentMissingError, NotANumberError

_INDEX_PATTERN = re.compile(r"\+?[0-9]+")

_CHAR_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
}

# Control, format, surrogate, private-use, unassigned and line/paragraph separators
_UNPRINTABLE_CATEGORIES = {"Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"}


def parse_index(argument: Optional[str]) -> int:
    """
    Parse a task index argument.

    Args:
        argument: The raw argument text following the command keyword.

    Returns:
        The index as a non-negative integer.

    Raises:
        ArgumentMissingError: If no argument was given.
        NotANumberError: If the argument is not an optionally '+'-prefixed
            run of ASCII digits.

    Examples:
        >>> parse_index("3")
        3
        >>> parse_index("+7")
        7
    """
    if argument is None:
        raise ArgumentMissingError(MSG_NO_INDEX)
    if not _INDEX_PATTERN.fullmatch(argument):
        raise NotANumberError(argument)
    return int(argument)


def format_content(content: str) -> str:
    """
    Quote task content for single-line display.

    Newlines, tabs, quotes and backslashes get backslash escapes and other
    unprintable characters are shown as \\u{hex}, so every task renders on
    one line, e.g. 'a\\nb\\x01' becomes '"a\\\\nb\\\\u{1}"'.
    """
    parts = []
    for char in content:
        if char in _CHAR_ESCAPES:
            parts.append(_CHAR_ESCAPES[char])
        elif unicodedata.category(char) in _UNPRINTABLE_CATEGORIES:
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'
