"""
Logging setup for the command line tool.

The library itself only logs through ``logging.getLogger(__name__)``; handlers
are installed here, on the ``html_filter`` logger, when the tool starts.
"""

import logging
import os
import sys
import time
from typing import Dict, Optional

ROOT_LOGGER = "html_filter"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if self.colored and color:
            message = message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)
        return message


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  colored: bool = True) -> logging.Logger:
    """
    Install console and file handlers on the package logger.

    Calling it again once handlers are installed changes nothing.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Level name for the console (standard error)
        file_level: Level name for the log file
        colored: Whether console output uses ANSI colors

    Returns:
        logging.Logger: The ``html_filter`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    console = LOG_LEVELS.get(console_level.upper(), logging.INFO)
    to_file = LOG_LEVELS.get(file_level.upper(), logging.DEBUG) if log_file else logging.CRITICAL
    logger.setLevel(min(console, to_file))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console)
    console_handler.setFormatter(LogFormatter(colored=colored, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(to_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """Log ``exception`` at ERROR, with its traceback."""
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Times the named phases of a run (parse, filter) and logs each duration."""

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing ``name`` and log how long it took.

        Returns:
            float: Duration in seconds, 0.0 if ``name`` was never started
        """
        if name not in self.start_times:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - self.start_times.pop(name)
        self.logger.log(LOG_LEVELS.get(level.upper(), logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")
        return duration
