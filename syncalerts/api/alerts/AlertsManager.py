"""Alerts manager: merges failing transfers and conflicted files into one alert state."""

import logging
from types import TracebackType

from .AlertsConfig import AlertsConfig
from .AlertsStatus import AlertsStatus
from .ConflictFileWatcher import ConflictFileWatcher
from .Event import Event
from .TransferHistory import TransferHistory

logger = logging.getLogger(__name__)

_EMPTY: tuple[str, ...] = ()


class AlertsManager:
    """Derives the "alerts present" state shown by a user interface.

    Two upstream sources are tracked at all times: folders that contain
    failing transfers (from a ``TransferHistory``) and conflicted file paths
    (from a ``ConflictFileWatcher``). Each category can be hidden with its
    toggle; hidden categories keep being tracked, so enabling one again shows
    the current state straight away.

    ``alerts_state_changed`` fires synchronously after every change that can
    affect the public properties. Listeners re-read the properties; the
    sequences they get back are immutable tuples.
    """

    def __init__(
        self,
        transfer_history: TransferHistory,
        conflict_file_watcher: ConflictFileWatcher,
        config: AlertsConfig | None = None,
    ) -> None:
        if config is None:
            config = AlertsConfig()

        self.transfer_history = transfer_history
        self.conflict_file_watcher = conflict_file_watcher
        self.alerts_state_changed = Event("alerts_state_changed")

        self._failing_folders: frozenset[str] = frozenset()
        self._conflicted_files: tuple[str, ...] = _EMPTY
        self._enable_failed_transfer_alerts = config.enable_failed_transfer_alerts
        self._enable_conflicted_file_alerts = config.enable_conflicted_file_alerts
        self._disposed = False

        self._folders_view: tuple[str, ...] = _EMPTY
        self._conflicted_view: tuple[str, ...] = _EMPTY
        self._reset_outputs()

        self.transfer_history.transfer_completed.subscribe(self._on_transfer_completed)
        self.conflict_file_watcher.conflicted_files_changed.subscribe(self._on_conflicted_files_changed)
        logger.debug("Alerts manager subscribed to transfer history and conflict watcher")

    # Public view

    @property
    def any_alerts(self) -> bool:
        return len(self.folders_with_failed_transfer_files) > 0 or len(self.conflicted_files) > 0

    @property
    def folders_with_failed_transfer_files(self) -> tuple[str, ...]:
        """Folder ids with failing transfers; empty while the category is disabled."""
        return self._folders_view

    @property
    def conflicted_files(self) -> tuple[str, ...]:
        """Conflicted file paths; empty while the category is disabled."""
        return self._conflicted_view

    @property
    def enable_failed_transfer_alerts(self) -> bool:
        return self._enable_failed_transfer_alerts

    @enable_failed_transfer_alerts.setter
    def enable_failed_transfer_alerts(self, value: bool) -> None:
        if self._enable_failed_transfer_alerts == value:
            return
        self._enable_failed_transfer_alerts = value
        logger.debug("Failed transfer alerts %s", "enabled" if value else "disabled")
        self._reset_outputs()
        self._raise_alerts_state_changed()

    @property
    def enable_conflicted_file_alerts(self) -> bool:
        return self._enable_conflicted_file_alerts

    @enable_conflicted_file_alerts.setter
    def enable_conflicted_file_alerts(self, value: bool) -> None:
        if self._enable_conflicted_file_alerts == value:
            return
        self._enable_conflicted_file_alerts = value
        logger.debug("Conflicted file alerts %s", "enabled" if value else "disabled")
        self._reset_outputs()
        self._raise_alerts_state_changed()

    def status(self) -> AlertsStatus:
        """Snapshot of the public state."""
        return AlertsStatus(
            any_alerts=self.any_alerts,
            folders_with_failed_transfer_files=self.folders_with_failed_transfer_files,
            conflicted_files=self.conflicted_files,
            enable_failed_transfer_alerts=self.enable_failed_transfer_alerts,
            enable_conflicted_file_alerts=self.enable_conflicted_file_alerts,
        )

    # Upstream handlers

    def _on_transfer_completed(self) -> None:
        if self._disposed:
            return

        new_folders = frozenset(transfer.folder_id for transfer in self.transfer_history.failing_transfers)
        if new_folders == self._failing_folders:
            return

        logger.debug(
            "Folders with failing transfers changed: %d -> %d", len(self._failing_folders), len(new_folders)
        )
        self._failing_folders = new_folders
        self._reset_outputs()
        self._raise_alerts_state_changed()

    def _on_conflicted_files_changed(self) -> None:
        if self._disposed:
            return

        # Every watcher notification counts as a change, even with identical content
        self._conflicted_files = tuple(self.conflict_file_watcher.conflicted_files)
        logger.debug("Conflicted files changed: %d file(s)", len(self._conflicted_files))
        self._reset_outputs()
        self._raise_alerts_state_changed()

    def _reset_outputs(self) -> None:
        """Recompute both public views from the toggles and the tracked sets.

        A view keeps its object identity when its content is unchanged.
        """
        folders = tuple(sorted(self._failing_folders)) if self._enable_failed_transfer_alerts else _EMPTY
        if folders != self._folders_view:
            self._folders_view = folders

        conflicted = self._conflicted_files if self._enable_conflicted_file_alerts else _EMPTY
        if conflicted != self._conflicted_view:
            self._conflicted_view = conflicted

    def _raise_alerts_state_changed(self) -> None:
        if self._disposed:
            return
        self.alerts_state_changed.fire()

    # Lifecycle

    def dispose(self) -> None:
        """Stop listening to both collaborators. Safe to call more than once."""
        self.transfer_history.transfer_completed.unsubscribe(self._on_transfer_completed)
        self.conflict_file_watcher.conflicted_files_changed.unsubscribe(self._on_conflicted_files_changed)
        if not self._disposed:
            logger.debug("Alerts manager disposed")
        self._disposed = True

    def __enter__(self) -> "AlertsManager":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"AlertsManager(any_alerts={self.any_alerts}, "
            f"failing_folders={len(self._failing_folders)}, "
            f"conflicted_files={len(self._conflicted_files)})"
        )
