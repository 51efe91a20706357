"""
Task model for the tasklist application.
"""

from pydantic import BaseModel, ConfigDict

from tasklist.constants import DEFAULT_TASK_CONTENT
from tasklist.utils import format_content


class Task(BaseModel):
    """A single to-do entry.

    A task has no identity of its own; it is addressed by its position in
    the TaskStore.
    """

    model_config = ConfigDict(extra="ignore")

    content: str = DEFAULT_TASK_CONTENT

    def modify(self, content: str) -> str:
        """Replace the content in place.

        Args:
            content: New task content.

        Returns:
            The previous content.
        """
        previous = self.content
        self.content = content
        return previous

    def display(self) -> str:
        """Render the task as a one-line 'Task: "..."' string."""
        return f"Task: {format_content(self.content)}"


class TaskRecord(BaseModel):
    """A task as stored on disk. Unlike Task, content is required."""

    model_config = ConfigDict(extra="ignore")

    content: str

    def to_task(self) -> Task:
        return Task(content=self.content)
