"""Utility functions for git-recent.

- logging: root logger setup and module loggers
"""

from .logging import LevelColorFormatter, get_log_file, get_logger, setup_logging

__all__ = [
    "LevelColorFormatter",
    "get_log_file",
    "get_logger",
    "setup_logging",
]
