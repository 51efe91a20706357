"""
Logging configuration for tasklist.

Feedback for the user goes to stdout through click; log records go to
stderr (warnings and above) and to a log file (everything).
"""

import logging
import sys
from pathlib import Path
from typing import Union

from tasklist.constants import DEFAULT_LOG_DIR, LOG_FILE_NAME


class _ConsoleNoiseFilter(logging.Filter):
    """Keep tasklist records; let third-party records through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasklist" or record.name.startswith("tasklist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: Union[str, Path] = DEFAULT_LOG_DIR,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure the root logger with a console handler and a file handler.

    Call this once, before the first log record is emitted.

    Args:
        log_dir: Directory that receives the log file.
        console_level: Minimum level written to stderr.
        file_level: Minimum level written to the log file.

    Returns:
        Path to the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
