"""
Logging setup for AdventureWorks-Lab.

``setup_logging`` installs one console handler and, unless disabled, one
file handler on the root logger, then pins the levels of the project's own
packages and of the chatty third-party libraries. Defaults come from the
``ADVENTUREWORKS_LAB_LOG_*`` settings.

Modules get their logger with ``get_logger(__name__)``.
"""

import logging
from pathlib import Path
from typing import List, Optional

from adventureworks_lab.server.core.config import settings

_config = settings.logging
LOG_LEVEL = _config.level.upper()
LOG_FORMAT = _config.format
LOG_FILE_DIR = _config.file_dir
ENABLE_FILE_LOGGING = _config.enable_file

LOG_FILE_NAME = "adventureworks_lab.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

MODULE_LOG_LEVELS = {
    "adventureworks_lab.core": "INFO",
    "adventureworks_lab.core.database": "INFO",
    # Verifier runs log every failing attempt at DEBUG.
    "adventureworks_lab.practice": "DEBUG",
    "adventureworks_lab.server": "INFO",
    "adventureworks_lab.server.api": "DEBUG",
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def _build_handlers(level: str, formatter: logging.Formatter, to_file: bool) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    handlers: List[logging.Handler] = [console]

    if to_file:
        log_dir = Path(LOG_FILE_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        # The file keeps everything, the console is filtered by ``level``.
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    return handlers


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure the root logger.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        log_level: Console level, overrides ``ADVENTUREWORKS_LAB_LOG_LEVEL``
        log_format: ``simple``, ``detailed`` or ``json``; unknown names fall back to ``detailed``
        enable_file: Set to False to skip the log file even when the settings enable it
    """
    level = (log_level or LOG_LEVEL).upper()
    format_name = log_format or LOG_FORMAT
    to_file = enable_file and ENABLE_FILE_LOGGING
    formatter = logging.Formatter(FORMATS.get(format_name, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in _build_handlers(level, formatter, to_file):
        root_logger.addHandler(handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={format_name}, file_logging={to_file}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
