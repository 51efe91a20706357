"""
Custom exceptions for the tasklist application.
"""


class TaskListError(Exception):
    """Base exception for all tasklist-related errors."""
    pass


class ValidationError(TaskListError):
    """Raised when a command argument fails validation."""
    pass


class ArgumentMissingError(ValidationError):
    """Raised when a command requires an index and none was given."""
    pass


class NotANumberError(ValidationError):
    """Raised when an index argument is not a non-negative integer."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Not a Number: {argument}.")


class NotFoundError(TaskListError):
    """Raised when a requested task is not found."""
    pass


class IndexOutOfRangeError(NotFoundError):
    """Raised when an index falls outside [0, count)."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Index out of Range: {index}.")


class StorageError(TaskListError):
    """Raised when reading or writing the task file fails."""
    pass


class LoadError(StorageError):
    """Raised when stored tasks cannot be read or decoded."""
    pass


class SaveError(StorageError):
    """Raised when tasks cannot be written to storage."""
    pass


class ConfigurationError(TaskListError):
    """Raised when there's a configuration or setup issue."""
    pass
