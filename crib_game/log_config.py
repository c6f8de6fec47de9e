"""Project-wide logging setup.

Logs go to text/log_file.log unless CRIB_LOG_FILE is set. Only a file
handler is installed: stdout is where the game talks to the player.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from crib_game.constants import LOG_FILE, LOG_LEVEL


def _log_path() -> Path:
    if LOG_FILE is None or LOG_FILE.strip() == "":
        return Path(__file__).resolve().parent.parent / "text" / "log_file.log"
    return Path(LOG_FILE).expanduser()


def configure_logging(log_path: Path | None = None) -> Path:
    log_path = log_path or _log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)

    already = False
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and Path(getattr(handler, "baseFilename", "")) == Path(os.path.abspath(log_path)):
            already = True
            break
    if not already:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return log_path
