"""Logging setup for git-recent.

The interactive switcher draws on the whole terminal, so while it runs every
record goes to a log file instead of stderr. ``--list`` runs log to stderr,
plus the file when ``--debug`` is given.
"""
import logging
import sys
from pathlib import Path
from typing import Optional


PACKAGE_PREFIX = "git_recent."

LOG_DIR_NAME = ".git-recent"
LOG_FILE_NAME = "git-recent.log"

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# GitPython logs every git command it runs at DEBUG
NOISY_LOGGERS = ("git",)


class LevelColorFormatter(logging.Formatter):
    """Colors the level name of console records.

    The record itself is left untouched so the file handler never sees
    escape codes.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str, use_color: Optional[bool] = None):
        super().__init__(fmt=fmt, datefmt=DATE_FORMAT)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def get_log_file() -> Path:
    """Return the path of the log file used by the interactive switcher."""
    return Path.home() / LOG_DIR_NAME / LOG_FILE_NAME


def _console_level(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> Optional[Path]:
    """
    Configure the root logger for one run.

    Args:
        verbose: Show INFO records on the console
        debug: Show DEBUG records on the console and also write the log file
        tui_mode: Log to the file only

    Returns:
        The log file path when file logging is enabled, else None
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_level = _console_level(verbose, debug)
    root_logger.setLevel(logging.DEBUG if tui_mode else console_level)

    log_file = None
    if tui_mode or debug:
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    if not tui_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(LevelColorFormatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, named without the ``git_recent.`` prefix."""
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
