"""
Logging setup for the Job Portal.

Records from the ``job_portal`` package follow the configured level. Server,
ORM and HTTP-client libraries are held at WARNING so a DEBUG run shows the
portal's own decisions (rejected tokens, duplicate applications, cascades)
without per-request and per-statement noise.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "job_portal"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LIBRARY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "urllib3", "httpx")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    library_level: str = "WARNING",
) -> logging.Logger:
    """
    Configure the root handlers and the portal's package logger.

    Args:
        level: Level for the ``job_portal`` package (DEBUG, INFO, ...)
        log_file: Optional file that receives the same records, with line numbers
        library_level: Level for third-party library loggers

    Returns:
        The ``job_portal`` package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=LOG_DATE_FORMAT))
        root_logger.addHandler(file_handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    library_numeric_level = getattr(logging, library_level.upper(), logging.WARNING)
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_numeric_level)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Named logger; pass ``__name__`` so records land under ``job_portal``."""
    return logging.getLogger(name)
