"""Log configuration."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


class LogConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")

    @property
    def numeric_level(self) -> int:
        """Level as understood by the ``logging`` module."""
        return _LEVELS[self.level]
