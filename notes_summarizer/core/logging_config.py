"""
Logging configuration for the Meeting Notes Summarizer.
"""

import logging
import logging.handlers
from pathlib import Path

from .config import AppConfig


LOG_FORMATS = {
    "standard": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s - %(message)s",
}

# Libraries that log request/parse chatter at INFO or DEBUG
NOISY_LOGGERS = ("urllib3", "httpx", "multipart", "docx", "slowapi")


def setup_logging(config: AppConfig, log_to_console: bool = True) -> logging.Logger:
    """
    Configure the root logger from the runtime settings.

    Args:
        config: Runtime settings (log_level, log_file, log_format)
        log_to_console: Whether to log to console

    Returns:
        The configured root logger
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    formatter = logging.Formatter(
        LOG_FORMATS.get(config.log_format, LOG_FORMATS["standard"]),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # File handler with rotation
    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    root_logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={config.log_file}")
    return root_logger
