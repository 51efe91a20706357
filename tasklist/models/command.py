"""
Command model and line classification for the interactive loop.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from tasklist.constants import (
    CMD_ADD,
    CMD_CLEAR,
    CMD_DEL,
    CMD_EXIT,
    CMD_TODO,
    CMD_UPDATE,
)


class CommandKind(str, Enum):
    """Recognized command kinds."""

    ADD = "ADD"
    DEL = "DEL"
    UPDATE = "UPDATE"
    TODO = "TODO"
    CLEAR = "CLEAR"
    EXIT = "EXIT"
    UNKNOWN = "UNKNOWN"


# Checked in order; the first matching prefix wins.
PREFIX_COMMANDS = (
    (CMD_ADD, CommandKind.ADD),
    (CMD_DEL, CommandKind.DEL),
    (CMD_UPDATE, CommandKind.UPDATE),
    (CMD_TODO, CommandKind.TODO),
)

# These only match the whole line.
EXACT_COMMANDS = (
    (CMD_EXIT, CommandKind.EXIT),
    (CMD_CLEAR, CommandKind.CLEAR),
)


class Command(BaseModel):
    """A classified input line.

    argument is the text after the first space, or None when the line has
    no space at all.
    """

    kind: CommandKind
    argument: Optional[str] = None
    raw: str


def split_argument(line: str) -> Optional[str]:
    """Return everything after the first space, or None if there is none."""
    parts = line.split(" ", 1)
    if len(parts) < 2:
        return None
    return parts[1]


def parse_command(line: str) -> Command:
    """Classify one input line.

    Matching is case-sensitive and never abbreviates keywords.

    Args:
        line: Input line with its terminator already removed.

    Returns:
        The classified Command; UNKNOWN if nothing matches.
    """
    for keyword, kind in PREFIX_COMMANDS:
        if line.startswith(keyword):
            return Command(kind=kind, argument=split_argument(line), raw=line)

    for keyword, kind in EXACT_COMMANDS:
        if line == keyword:
            return Command(kind=kind, raw=line)

    return Command(kind=CommandKind.UNKNOWN, raw=line)
