"""Project-wide logging setup.

Python auto-imports sitecustomize when it is on sys.path. This ensures
all scripts/tests log to text/log_file.log unless CRIB_LOG_FILE is set.
"""
from crib_game.log_config import configure_logging

configure_logging()
