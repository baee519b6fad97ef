"""Interface of the conflicted-file watcher consumed by the alerts manager."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .Event import Event


@runtime_checkable
class ConflictFileWatcher(Protocol):
    """Reports the paths of files with unresolved synchronization conflicts."""

    conflicted_files_changed: Event

    @property
    def conflicted_files(self) -> Sequence[str]: ...
