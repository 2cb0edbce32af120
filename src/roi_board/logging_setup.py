# src/roi_board/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "roi-board.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Logger whose per-mutation DEBUG/INFO lines would interleave with the table output.
_CHATTY_LOGGERS = frozenset({"roi_board.tasks.task_store"})


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console-only filter. The board's own loggers pass, except the store
    below WARNING; everything else (third-party, py.warnings) needs ERROR.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("roi_board."):
            if record.name in _CHATTY_LOGGERS:
                return record.levelno >= logging.WARNING
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/roi",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route the root logger to stderr (filtered) and to `<log_dir>/roi-board.log`.

    Replaces any handlers already on the root logger. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
