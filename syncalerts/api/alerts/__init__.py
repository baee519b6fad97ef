"""Alerts API module."""

from .AlertsConfig import AlertsConfig
from .AlertsManager import AlertsManager
from .AlertsStatus import AlertsStatus
from .ConflictFileWatcher import ConflictFileWatcher
from .Event import Event
from .FileTransfer import FileTransfer
from .TransferHistory import FailingTransfer, TransferHistory

__all__ = [
    "AlertsConfig",
    "AlertsManager",
    "AlertsStatus",
    "ConflictFileWatcher",
    "Event",
    "FailingTransfer",
    "FileTransfer",
    "TransferHistory",
]
