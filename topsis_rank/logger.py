# -*- coding: utf-8 -*-
"""
Logging system for TOPSIS ranking.

Features:
- Colored console output with level-based styling
- Clean file logging (no ANSI codes)
- Log rotation with configurable size limits
- Hierarchical module logging (``topsis_rank.<module>``)
- Timing of library operations at DEBUG level

Library modules only ever emit DEBUG records on module loggers; nothing is
printed until the host application calls :func:`setup_logger`.
"""

import logging
import logging.handlers
import sys
import os
import re
import time
from pathlib import Path
from typing import Callable, Dict, Optional, Union
from contextlib import contextmanager
from functools import wraps

from .config import LoggingConfig, LogLevel


# =============================================================================
# Constants
# =============================================================================

LOG_NAME = "topsis_rank"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


# =============================================================================
# Console styling
# =============================================================================

class Colors:
    """ANSI escapes keyed by log level, plus helpers to strip or detect them."""
    RESET = "\033[0m"
    RED = "\033[31m"

    LEVELS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: RED,
        logging.CRITICAL: "\033[1;91m",
    }
    _ESCAPE = re.compile(r'\033\[[0-9;]*m')

    @classmethod
    def strip(cls, text: str) -> str:
        return cls._ESCAPE.sub('', text)

    @staticmethod
    def enabled() -> bool:
        """NO_COLOR wins over FORCE_COLOR; otherwise colour only a TTY."""
        if os.getenv("NO_COLOR"):
            return False
        return bool(os.getenv("FORCE_COLOR")) or getattr(sys.stdout, "isatty", lambda: False)()


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name of each record."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and Colors.enabled()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)
        record = logging.makeLogRecord(record.__dict__)
        tint = Colors.LEVELS.get(record.levelno, "")
        record.levelname = f"{tint}{record.levelname:8}{Colors.RESET}"
        return super().format(record)


class CleanFormatter(logging.Formatter):
    """Plain-text formatter; removes escapes a caller put in the message."""

    def format(self, record: logging.LogRecord) -> str:
        return Colors.strip(super().format(record))


# =============================================================================
# Logger Factory
# =============================================================================

class LoggerFactory:
    """
    Factory for creating and managing loggers.

    Provides centralized logger configuration and management.
    """

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _root_logger: Optional[logging.Logger] = None

    @classmethod
    def setup(
        cls,
        name: str = LOG_NAME,
        level: Union[int, str, LogLevel] = logging.INFO,
        log_file: Optional[Path] = None,
        console: bool = True,
        use_colors: bool = False,
        max_bytes: int = MAX_LOG_SIZE,
        backup_count: int = BACKUP_COUNT,
        **kwargs
    ) -> logging.Logger:
        """
        Setup and configure the package logger.

        Parameters
        ----------
        name : str
            Logger name
        level : int, str, or LogLevel
            Console logging level
        log_file : Path, optional
            Path for plain text log file (always written at DEBUG level)
        console : bool
            Enable console output
        use_colors : bool
            Enable colored console output
        max_bytes : int
            Maximum log file size before rotation
        backup_count : int
            Number of backup files to keep

        Returns
        -------
        logging.Logger
            Configured logger instance
        """
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)
        elif isinstance(level, LogLevel):
            level = level.numeric

        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG if log_file else level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.propagate = False

        if console:
            console_handler = logging.StreamHandler(kwargs.get('stream', sys.stdout))
            console_handler.setLevel(level)
            if use_colors:
                console_fmt = ColoredFormatter(
                    fmt='%(asctime)s │ %(levelname)s │ %(message)s',
                    datefmt=CONSOLE_DATE_FORMAT,
                    use_colors=use_colors,
                )
            else:
                console_fmt = CleanFormatter(
                    fmt='%(asctime)s | %(levelname)-8s | %(message)s',
                    datefmt=CONSOLE_DATE_FORMAT
                )
            console_handler.setFormatter(console_fmt)
            logger.addHandler(console_handler)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CleanFormatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt=DEFAULT_DATE_FORMAT
            ))
            logger.addHandler(file_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        cls._root_logger = logger
        cls._loggers[name] = logger
        cls._configured = True

        return logger

    @classmethod
    def get_logger(cls, name: str = LOG_NAME) -> logging.Logger:
        """
        Get a logger instance.

        Unlike :meth:`setup`, this never attaches handlers: an unconfigured
        package stays silent.
        """
        if name in cls._loggers:
            return cls._loggers[name]

        if cls._root_logger is not None and not name.startswith(cls._root_logger.name):
            name = f"{cls._root_logger.name}.{name}"

        logger = logging.getLogger(name)
        cls._loggers[name] = logger
        return logger

    @classmethod
    def get_module_logger(cls, module_name: str) -> logging.Logger:
        """Get a logger for a specific module (e.g. ``'mcdm.topsis'``)."""
        root_name = cls._root_logger.name if cls._root_logger else LOG_NAME
        return cls.get_logger(f"{root_name}.{module_name}")

    @classmethod
    def reset(cls) -> None:
        """Forget configured loggers (handlers are left untouched)."""
        cls._loggers = {}
        cls._configured = False
        cls._root_logger = None


# =============================================================================
# Convenience Functions
# =============================================================================

def setup_logger(
    name: str = LOG_NAME,
    level: Union[int, str, LogLevel] = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Setup and configure the package logger (convenience function).

    Parameters
    ----------
    name : str
        Logger name
    level : int, str or LogLevel
        Logging level for console output
    log_file : Path, optional
        Path for debug log file (logs everything at DEBUG level)
    console : bool
        Enable console output
    config : LoggingConfig, optional
        When given, its level, log file and colour flag take precedence

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    use_colors = False
    if config is not None:
        level = config.level
        log_file = config.log_file or log_file
        use_colors = config.use_colors

    return LoggerFactory.setup(
        name=name,
        level=level,
        log_file=log_file,
        console=console,
        use_colors=use_colors,
    )


def get_logger(name: str = LOG_NAME) -> logging.Logger:
    """Get existing logger or a silent child of the package logger."""
    return LoggerFactory.get_logger(name)


def get_module_logger(module_name: str) -> logging.Logger:
    """Get a logger for a specific module."""
    return LoggerFactory.get_module_logger(module_name)


# =============================================================================
# Decorators
# =============================================================================

def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    show_result: bool = False
) -> Callable:
    """
    Decorator to log function execution.

    Failures are logged at DEBUG level and re-raised unchanged.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or get_logger()
            func_name = func.__qualname__

            log.log(level, f"Calling {func_name}")
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.time() - start
                log.debug(f"{func_name} failed after {elapsed:.3f}s: {type(e).__name__}: {e}")
                raise

            elapsed = time.time() - start
            if show_result:
                log.log(level, f"{func_name} returned {repr(result)[:100]} ({elapsed:.3f}s)")
            else:
                log.log(level, f"{func_name} completed ({elapsed:.3f}s)")
            return result

        return wrapper
    return decorator


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG
):
    """
    Context manager for timing operations.

    Example:
        with timed_operation(logger, "normalization"):
            normalize()
    """
    start = time.time()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    finally:
        elapsed = time.time() - start
        logger.log(level, f"Finished: {operation} ({elapsed:.3f}s)")


__all__ = [
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'Colors',
    'ColoredFormatter',
    'CleanFormatter',
    'log_execution',
    'timed_operation',
    'LOG_NAME',
]
