"""
CommandLoop - the line-oriented interpreter for tasklist.

Classifies each input line, validates its arguments, applies it to the
TaskStore and emits feedback. Hydrates the store at startup and flushes it
on EXIT through the StorageManager.
"""
import logging
from enum import Enum
from typing import Callable, Iterable, Optional

import click

from tasklist.constants import (
    MSG_ADDED,
    MSG_CHOSEN_TASK,
    MSG_CLEARED,
    MSG_DELETED,
    MSG_EMPTY_LIST,
    MSG_ENTER_CONTENT,
    MSG_EXITING,
    MSG_TOTAL_TASKS,
    MSG_UNKNOWN_COMMAND,
    MSG_UPDATED,
)
from tasklist.exceptions import IndexOutOfRangeError, LoadError, ValidationError
from tasklist.managers.storage_manager import StorageManager
from tasklist.managers.task_store import TaskStore
from tasklist.models.command import Command, CommandKind, parse_command
from tasklist.utils import parse_index

Emitter = Callable[[str], None]

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    """Where the loop is in its input protocol."""

    AWAITING_COMMAND = "awaiting-command"
    AWAITING_CONTENT = "awaiting-content"


class CommandLoop:
    """
    Interprets one line at a time against a TaskStore.

    UPDATE is a two-step exchange: the line 'UPDATE <i>' shows the task and
    moves the loop to AWAITING_CONTENT; the next line is taken verbatim as
    the new content and the loop returns to AWAITING_COMMAND. Because the
    state lives on the loop rather than in a nested read, any source of
    lines can drive it.
    """

    def __init__(
        self,
        storage: StorageManager,
        echo: Optional[Emitter] = None,
        store: Optional[TaskStore] = None,
    ) -> None:
        """
        Initialize CommandLoop.

        Args:
            storage: Persistence collaborator used by hydrate() and EXIT.
            echo: Output function for feedback lines. Defaults to click.echo.
            store: Pre-built store; normally left out and filled by hydrate().
        """
        self.storage = storage
        self.echo = echo or click.echo
        self.store = store if store is not None else TaskStore()
        self.state = LoopState.AWAITING_COMMAND
        self.pending_index: Optional[int] = None
        self.exited = False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def hydrate(self) -> None:
        """Load the stored tasks, falling back to an empty store on failure."""
        try:
            tasks = self.storage.load_tasks()
        except LoadError as e:
            logger.warning("Starting with an empty list: %s", e)
            self.store = TaskStore()
            self.echo(MSG_EMPTY_LIST)
            return

        self.store = TaskStore(tasks)
        self.display()

    def run(self, lines: Iterable[str]) -> bool:
        """Process lines until EXIT.

        Args:
            lines: Source of input lines, e.g. a text stream.

        Returns:
            True if EXIT was processed, False if the input ran out first.

        Raises:
            SaveError: If the final save on EXIT fails.
        """
        for line in lines:
            self.handle_line(line)
            if self.exited:
                return True
        logger.info("Input ended before EXIT")
        return False

    # =========================================================================
    # Dispatch
    # =========================================================================

    def handle_line(self, line: str) -> None:
        """Process exactly one line of input.

        Raises:
            SaveError: If the line is EXIT and saving fails.
        """
        line = line.removesuffix("\n").removesuffix("\r")

        if self.state is LoopState.AWAITING_CONTENT:
            self._apply_update(line)
            return

        command = parse_command(line)
        logger.debug("Dispatching %s", command.kind.value)

        handler = {
            CommandKind.ADD: self._do_add,
            CommandKind.DEL: self._do_delete,
            CommandKind.UPDATE: self._do_update,
            CommandKind.TODO: self._do_todo,
            CommandKind.CLEAR: self._do_clear,
            CommandKind.EXIT: self._do_exit,
        }.get(command.kind, self._do_unknown)
        handler(command)

    def _do_add(self, command: Command) -> None:
        self.store.add(command.argument)
        self.echo(MSG_ADDED)

    def _do_delete(self, command: Command) -> None:
        try:
            index = parse_index(command.argument)
            self.store.delete(index)
        except (ValidationError, IndexOutOfRangeError) as e:
            self.echo(str(e))
            return
        self.echo(MSG_DELETED)

    def _do_update(self, command: Command) -> None:
        """First UPDATE step: show the chosen task and wait for content."""
        try:
            index = parse_index(command.argument)
            task = self.store.get(index)
        except (ValidationError, IndexOutOfRangeError) as e:
            self.echo(str(e))
            return

        self.echo(MSG_CHOSEN_TASK)
        self.echo(task.display())
        self.echo(MSG_ENTER_CONTENT)
        self.pending_index = index
        self.state = LoopState.AWAITING_CONTENT

    def _apply_update(self, content: str) -> None:
        """Second UPDATE step: replace the pending task's content."""
        index = self.pending_index
        self.pending_index = None
        self.state = LoopState.AWAITING_COMMAND

        try:
            previous = self.store.update(index, content)
        except IndexOutOfRangeError as e:
            logger.error("Pending update target vanished: %s", e)
            self.echo(str(e))
            return

        logger.debug("Task %d was %r", index, previous)
        self.echo(MSG_UPDATED)

    def _do_todo(self, command: Command) -> None:
        self.display()

    def _do_clear(self, command: Command) -> None:
        self.store.clear()
        self.echo(MSG_CLEARED)

    def _do_exit(self, command: Command) -> None:
        self.echo(MSG_EXITING)
        self.storage.save_tasks(self.store.tasks)
        self.exited = True

    def _do_unknown(self, command: Command) -> None:
        self.echo(MSG_UNKNOWN_COMMAND.format(line=command.raw))

    # =========================================================================
    # Output
    # =========================================================================

    def display(self) -> None:
        """Show every task with its index, or the empty-list message."""
        if self.store.count == 0:
            self.echo(MSG_EMPTY_LIST)
            return

        self.echo(MSG_TOTAL_TASKS.format(count=self.store.count))
        for index, task in self.store.list():
            self.echo(f"{index} {task.display()}")
            self.echo("")
