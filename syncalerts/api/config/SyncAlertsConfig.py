"""Top-level syncalerts configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME, SYNCALERTS_HOME_ENV, SYNCALERTS_HOME_EXT
from ..alerts.AlertsConfig import AlertsConfig
from .LogConfig import LogConfig


class SyncAlertsConfig(BaseModel):
    """Top-level configuration for syncalerts."""

    model_config = ConfigDict(extra="forbid")

    alerts: AlertsConfig = Field(default_factory=AlertsConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on SYNCALERTS_HOME or default to ~/.syncalerts."""
        home_env = os.environ.get(SYNCALERTS_HOME_ENV)
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / SYNCALERTS_HOME_EXT

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the home directory."""
        return cls.get_home_dir() / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> "SyncAlertsConfig":
        """Load and validate config from file.

        Args:
            path: Config file to read (default $SYNCALERTS_HOME/config.json)

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if path is None:
            path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for display."""
        return {
            "alerts": self.alerts.model_dump(),
            "log": self.log.model_dump(),
        }
