"""
Logging configuration for the DNS record validation engine
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None):
    """Configure application logging"""

    settings = settings or get_settings()
    log_settings = settings.logging
    level = getattr(logging, log_settings.level.upper())

    # Create logs directory if it doesn't exist
    if log_settings.file:
        log_file_path = Path(log_settings.file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_settings.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (if specified)
    if log_settings.file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_settings.file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # SQLAlchemy logger (only show warnings and above)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    # Rejected records are worth keeping even when the root level is raised
    logging.getLogger("dnsguard.validation").setLevel(logging.INFO)

    if settings.DEBUG:
        root_logger.setLevel(logging.DEBUG)
        logging.getLogger("dnsguard").setLevel(logging.DEBUG)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name"""
    return logging.getLogger(name)


def get_validation_logger() -> logging.Logger:
    """Get record validation decisions logger"""
    return logging.getLogger("dnsguard.validation")


def get_record_store_logger() -> logging.Logger:
    """Get record store query logger"""
    return logging.getLogger("dnsguard.services.record_gateway")
