"""
Constants for the tasklist application.

Note: These constants serve as default fallback values.
Actual values are loaded from .tasklist/config.json at runtime via ConfigManager.
"""
from pathlib import Path
from typing import Any, Optional
import json

from tasklist.exceptions import ConfigurationError

# =============================================================================
# Default Fallback Values
# These are used if config.json doesn't exist or doesn't specify a value.
# =============================================================================

DEFAULT_APP_DIR = Path(".tasklist")
DEFAULT_CONFIG_FILE = DEFAULT_APP_DIR / "config.json"
DEFAULT_DATA_FILE = DEFAULT_APP_DIR / "todo.json"
DEFAULT_LOG_DIR = DEFAULT_APP_DIR
LOG_FILE_NAME = "tasklist.log"

# Task content used when ADD is given no text (not configurable)
DEFAULT_TASK_CONTENT = "To Be Determined\nwrite something to do here."

# Command keywords (not configurable, case-sensitive)
CMD_ADD = "ADD"
CMD_DEL = "DEL"
CMD_UPDATE = "UPDATE"
CMD_TODO = "TODO"
CMD_EXIT = "EXIT"
CMD_CLEAR = "CLEAR"

# =============================================================================
# User-facing messages
# =============================================================================

MSG_ADDED = "Adding Task Successfully!"
MSG_DELETED = "Deleting Task Successfully!"
MSG_UPDATED = "Updating Task Successfully!"
MSG_CLEARED = "Clear up the Todo List Successfully!"
MSG_EMPTY_LIST = "We have an empty todo list!"
MSG_NO_INDEX = "No Index Specified."
MSG_CHOSEN_TASK = "Your Chosen Task:\n"
MSG_ENTER_CONTENT = "\nPlease enter the new content:"
MSG_EXITING = "exiting the program..."
MSG_TOTAL_TASKS = "Total Tasks: [{count}]\n"
MSG_UNKNOWN_COMMAND = "unknown command: {line}"
MSG_INPUT_CLOSED = "Input closed before EXIT; changes were not saved."


# =============================================================================
# Config Loader
# Load values from .tasklist/config.json at runtime.
# =============================================================================

_config_manager_instance: Optional['ConfigManager'] = None


class ConfigManager:
    """
    Manages loading configuration from a config.json file with fallback to defaults.

    Usage:
        config = ConfigManager()
        data_file = config.get_path('data_file', DEFAULT_DATA_FILE)

        config = ConfigManager(config_path=Path("/custom/path/config.json"))
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to config.json file. Defaults to .tasklist/config.json.
        """
        self._config: Optional[dict] = None
        self._config_path = config_path if config_path is not None else DEFAULT_CONFIG_FILE

    def _load_config(self) -> dict:
        """Load config from config.json file."""
        if self._config is not None:
            return self._config

        if self._config_path.exists():
            try:
                with open(self._config_path, "r") as f:
                    loaded = json.load(f)
            except (json.JSONDecodeError, IOError):
                loaded = {}
            self._config = loaded if isinstance(loaded, dict) else {}
        else:
            self._config = {}

        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value with fallback to default.

        Args:
            key: Configuration key name.
            default: Default value if key not found.

        Returns:
            Config value or default.
        """
        config = self._load_config()
        return config.get(key, default)

    def get_path(self, key: str, default: Path) -> Path:
        """Get a filesystem path config value with fallback.

        Raises:
            ConfigurationError: If the configured value is not a string.
        """
        value = self.get(key)
        if value is None:
            return default
        if not isinstance(value, str) or not value:
            raise ConfigurationError(
                f"Config key '{key}' in {self._config_path} must be a non-empty path string."
            )
        return Path(value).expanduser()

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path


def get_config_manager(reset: bool = False, config_path: Optional[Path] = None) -> ConfigManager:
    """
    Get the singleton ConfigManager instance.

    Args:
        reset: If True, reset the singleton and create a new instance.
        config_path: Config file used when a new instance is created.

    Returns:
        ConfigManager singleton instance.
    """
    global _config_manager_instance
    if _config_manager_instance is None or reset:
        _config_manager_instance = ConfigManager(config_path)
    return _config_manager_instance


def reset_config_manager() -> None:
    """Reset the singleton ConfigManager instance (useful for testing)."""
    global _config_manager_instance
    _config_manager_instance = None


def get_data_file() -> Path:
    """Get the task data file from config or default."""
    return get_config_manager().get_path('data_file', DEFAULT_DATA_FILE)


def get_log_dir() -> Path:
    """Get the log directory from config or default."""
    return get_config_manager().get_path('log_dir', DEFAULT_LOG_DIR)
