"""
Data models for tasklist.

Import models explicitly from their modules:
    from tasklist.models.task import Task
    from tasklist.models.command import Command, CommandKind, parse_command
"""

from .command import Command, CommandKind, parse_command
from .task import Task

__all__ = ["Command", "CommandKind", "Task", "parse_command"]
