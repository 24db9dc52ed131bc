"""
Logging setup for the client.

Console output always, and a rotating log file when a filename is given.
Loggers are created per module with `logging.getLogger(__name__)`, so everything in this project lives under the "src" logger.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from src.core.config import ClientSettings, get_settings

APP_LOGGER_NAME = "src"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    log_level: Optional[str] = None,
    app_log_level: Optional[str] = None,
    log_filename: Optional[str] = None,
    settings: Optional[ClientSettings] = None,
) -> None:
    """
    Configure logging for the whole process.

    Arguments left out are taken from the client settings (`log_level`, `app_log_level`, `log_file`).

    Args:
        log_level: Root logger level (third party libraries like httpx log through it)
        app_log_level: Level of the application logger ("src" and all module loggers below it)
        log_filename: Optional path of a log file. Rotated at 1MB, 5 backups kept.
        settings: Settings to read the defaults from, `get_settings()` if not given
    """
    settings = settings or get_settings()
    log_level = log_level or settings.log_level
    app_log_level = app_log_level or settings.app_log_level
    log_filename = log_filename or settings.log_file

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Reconfiguring should not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_filename:
        log_path = Path(log_filename)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(getattr(logging, app_log_level.upper()))

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
