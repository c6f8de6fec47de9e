from logging import getLogger
logger = getLogger(__name__)

__all__ = [
    "cards",
    "utils",
    "scoring",
    "gamestate",
    "errors",
    "game",
    "players",
    "cli",
]
