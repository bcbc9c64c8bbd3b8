# src/fishron/logging_setup.py

"""
Logging for a chat that owns stdout.

Replies are printed to stdout (console) or drawn in the window (GUI), so:
- the log file gets everything, with full timestamps
- stderr only shows fishron records at or above the configured level, in a
  short one-line form that reads as a side note next to the chat
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"


class _OwnRecordsOnly(logging.Filter):
    """Pass fishron.* records; other loggers reach stderr only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "fishron" or record.name.startswith("fishron."):
            return True
        return record.levelno >= logging.ERROR


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Map 'debug' / 'INFO' / ... to a logging level; unknown names give `default`."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(*, log_file: str | Path, console_level: int = logging.WARNING) -> None:
    """
    Install the file and stderr handlers on the root logger.

    Safe to call again (e.g. from tests): handlers installed by a previous call are replaced.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        if getattr(h, "_fishron", False):
            root.removeHandler(h)
            h.close()

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    ch.addFilter(_OwnRecordsOnly())

    for h in (fh, ch):
        h._fishron = True  # type: ignore[attr-defined]
        root.addHandler(h)

    logging.captureWarnings(True)
