"""Config API module."""

from .LogConfig import LogConfig
from .SyncAlertsConfig import SyncAlertsConfig

__all__ = ["LogConfig", "SyncAlertsConfig"]
