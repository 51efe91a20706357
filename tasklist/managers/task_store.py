"""
TaskStore for tasklist.

Owns the ordered task collection and its index-based mutations.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from tasklist.exceptions import IndexOutOfRangeError
from tasklist.models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered collection of tasks addressed by zero-based position.

    Handles:
    - Adding tasks (explicit content or the default placeholder)
    - Reading, updating and deleting tasks by index
    - Clearing the collection
    - Listing (index, task) pairs for display

    count is cached and always equals the number of stored tasks. Deleting a
    task shifts every later task down by one, so indices shown before a
    deletion are stale afterwards.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        """
        Initialize TaskStore.

        Args:
            tasks: Tasks to hydrate the store with, in order.
        """
        self._tasks: List[Task] = list(tasks) if tasks is not None else []
        self._count = len(self._tasks)

    @property
    def count(self) -> int:
        """Number of tasks in the store."""
        return self._count

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Tasks in order, for persistence."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return self._count

    def _check_index(self, index: int) -> None:
        """Raise IndexOutOfRangeError unless 0 <= index < count."""
        if index < 0 or index >= self._count:
            raise IndexOutOfRangeError(index)

    def add(self, content: Optional[str] = None) -> None:
        """Append a task.

        Args:
            content: Task text. The default placeholder is used when None.
        """
        task = Task(content=content) if content is not None else Task()
        self._tasks.append(task)
        self._count += 1
        logger.debug("Added task at index %d", self._count - 1)

    def get(self, index: int) -> Task:
        """Return the task at index.

        Raises:
            IndexOutOfRangeError: If index is not in [0, count).
        """
        self._check_index(index)
        return self._tasks[index]

    def update(self, index: int, new_content: str) -> str:
        """Replace the content of the task at index.

        Args:
            index: Position of the task.
            new_content: Replacement text.

        Returns:
            The previous content.

        Raises:
            IndexOutOfRangeError: If index is not in [0, count).
        """
        self._check_index(index)
        previous = self._tasks[index].modify(new_content)
        logger.debug("Updated task at index %d", index)
        return previous

    def delete(self, index: int) -> Task:
        """Remove and return the task at index.

        Later tasks shift down by one position.

        Raises:
            IndexOutOfRangeError: If index is not in [0, count).
        """
        self._check_index(index)
        removed = self._tasks.pop(index)
        self._count -= 1
        logger.debug("Deleted task at index %d", index)
        return removed

    def clear(self) -> None:
        """Remove every task."""
        self._tasks.clear()
        self._count = 0

    def list(self) -> Tuple[Tuple[int, Task], ...]:
        """Return (index, task) pairs in order.

        The result is a snapshot and may be iterated any number of times.
        """
        return tuple(enumerate(self._tasks))
