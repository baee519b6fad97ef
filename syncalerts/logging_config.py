"""Centralized logging configuration for syncalerts."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .api.config.SyncAlertsConfig import SyncAlertsConfig
from .constants import LOG_FILE_NAME


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging for syncalerts.

    Args:
        level: Logging level (default INFO)
        log_file: Optional path to log file (default $SYNCALERTS_HOME/syncalerts.log)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    if log_file is None:
        log_file = SyncAlertsConfig.get_home_dir() / LOG_FILE_NAME

    # Ensure log directory exists
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )


def setup_logging_from_config(config: SyncAlertsConfig, log_file: Optional[Path] = None) -> None:
    """Configure logging using the ``log`` section of a loaded config."""
    setup_logging(level=config.log.numeric_level, log_file=log_file)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"syncalerts.{name}")
