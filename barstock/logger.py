import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union
from . import settings


def setup_logger(name: Optional[str] = None, log_level: Union[int, str, None] = None) -> logging.Logger:
    """
    Sets up the given logger (root by default) with console output and a rotating
    log file under settings.LOG_DIR. The level defaults to settings.LOG_LEVEL.
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Only this logger's own handlers count; ancestors may be configured by a host app
    if logger.handlers:
        return logger

    # Stock tables and order messages print as-is, the file keeps the full context
    console_format = logging.Formatter("%(message)s")
    file_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_DIR / settings.LOG_FILENAME,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger
