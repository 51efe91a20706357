"""
Storage manager for tasklist.

Handles loading and saving the task list JSON file.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from pydantic import TypeAdapter, ValidationError

from tasklist.exceptions import LoadError, SaveError
from tasklist.models.task import Task, TaskRecord

logger = logging.getLogger(__name__)

_RECORD_LIST_ADAPTER = TypeAdapter(List[TaskRecord])


class StorageManager:
    """
    Persists the task list as a JSON array of {"content": ...} records.

    Handles atomic writes to prevent data corruption.
    """

    def __init__(self, data_file: Path) -> None:
        """
        Initialize the StorageManager.

        Args:
            data_file: Path to the task list JSON file.
        """
        self.data_file = Path(data_file)

    def _atomic_write(self, data: list) -> None:
        """Write data to the task file atomically to prevent corruption.

        Raises:
            SaveError: If writing to file fails.
        """
        directory = self.data_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=directory, prefix=".tmp_tasklist_", suffix=".json"
            )
        except OSError as e:
            raise SaveError(f"Failed to write to {self.data_file}: {e}")

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as temp_file:
                json.dump(data, temp_file, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.data_file)
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise SaveError(f"Failed to write to {self.data_file}: {e}")

    def load_tasks(self) -> List[Task]:
        """Load the stored tasks in order.

        Returns:
            The stored tasks, or an empty list if the file does not exist.

        Raises:
            LoadError: If the file cannot be read or does not hold a list of tasks.
        """
        if not self.data_file.exists():
            logger.info("No task file at %s, starting empty", self.data_file)
            return []

        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            records = _RECORD_LIST_ADAPTER.validate_python(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise LoadError(f"Failed to load {self.data_file}: {e}")

        tasks = [record.to_task() for record in records]
        logger.info("Loaded %d task(s) from %s", len(tasks), self.data_file)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Save tasks in order, replacing the file contents.

        Raises:
            SaveError: If writing fails.
        """
        data = [task.model_dump(mode="json") for task in tasks]
        self._atomic_write(data)
        logger.info("Saved %d task(s) to %s", len(data), self.data_file)
