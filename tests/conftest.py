"""
Test fixtures for the tasklist test suite.

Provides:
- Temporary directory fixtures (isolated from the project's .tasklist/)
- Builders for stores, storage managers and command loops
- Logging and config singleton cleanup between tests
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest

from tasklist.command_loop import CommandLoop
from tasklist.constants import reset_config_manager
from tasklist.managers.storage_manager import StorageManager
from tasklist.managers.task_store import TaskStore
from tasklist.models.task import Task


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Generator[None, None, None]:
    """Reset the config singleton and root log handlers around every test."""
    reset_config_manager()
    yield
    reset_config_manager()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    logging.captureWarnings(False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="tasklist_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """Path for a task file that does not exist yet."""
    return temp_dir / "data" / "todo.json"


# =============================================================================
# Builders and Helpers
# =============================================================================


class Transcript:
    """Collects lines emitted by a CommandLoop."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, message: str) -> None:
        self.lines.extend(message.split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines = []


@pytest.fixture
def storage(data_file: Path) -> StorageManager:
    """StorageManager pointed at a temporary file."""
    return StorageManager(data_file)


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture
def make_loop(storage: StorageManager, transcript: Transcript):
    """Build a CommandLoop over a store holding the given contents."""

    def _make(*contents: str) -> CommandLoop:
        store = TaskStore(Task(content=c) for c in contents)
        return CommandLoop(storage, echo=transcript, store=store)

    return _make


def contents(store: TaskStore) -> List[str]:
    """Contents of a store in order."""
    return [task.content for _, task in store.list()]


@pytest.fixture
def helpers():
    """Provide helper functions for tests."""
    return {
        "contents": contents,
    }
