"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from syncalerts.api.alerts.AlertsManager import AlertsManager
from syncalerts.api.alerts.Event import Event
from syncalerts.api.alerts.FileTransfer import FileTransfer


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests wiring several components together")
    config.addinivalue_line("markers", "alerts: alerts domain tests")
    config.addinivalue_line("markers", "config: configuration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fake collaborators
# =============================================================================


class FakeTransferHistory:
    """In-memory transfer history.

    ``complete`` records a transfer and fires ``transfer_completed`` the way a
    real history does once a transfer finishes.
    """

    def __init__(self) -> None:
        self.transfer_completed = Event("transfer_completed")
        self.transfers: dict[tuple[str, str], FileTransfer] = {}
        self.queries = 0

    @property
    def failing_transfers(self) -> list[FileTransfer]:
        self.queries += 1
        return [t for t in self.transfers.values() if t.failed]

    def complete(self, transfer: FileTransfer) -> None:
        self.transfers[(transfer.folder_id, transfer.path)] = transfer
        self.transfer_completed.fire()

    def fail(self, folder_id: str, path: str, error: str = "permission denied") -> None:
        self.complete(FileTransfer(folder_id=folder_id, path=path, error=error))

    def succeed(self, folder_id: str, path: str) -> None:
        self.complete(FileTransfer(folder_id=folder_id, path=path))


class FakeConflictFileWatcher:
    """In-memory conflict watcher; ``report`` replaces the list and notifies."""

    def __init__(self) -> None:
        self.conflicted_files_changed = Event("conflicted_files_changed")
        self._conflicted_files: list[str] = []

    @property
    def conflicted_files(self) -> list[str]:
        return self._conflicted_files

    def report(self, paths: list[str]) -> None:
        self._conflicted_files = list(paths)
        self.conflicted_files_changed.fire()


class Recorder:
    """Counts notifications and captures the public state seen by a listener."""

    def __init__(self, manager: AlertsManager) -> None:
        self.manager = manager
        self.calls = 0
        self.seen: list[bool] = []
        manager.alerts_state_changed.subscribe(self)

    def __call__(self) -> None:
        self.calls += 1
        self.seen.append(self.manager.any_alerts)


def assert_any_alerts_consistent(manager: AlertsManager) -> None:
    expected = len(manager.folders_with_failed_transfer_files) > 0 or len(manager.conflicted_files) > 0
    assert manager.any_alerts == expected


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def transfer_history() -> FakeTransferHistory:
    return FakeTransferHistory()


@pytest.fixture
def conflict_watcher() -> FakeConflictFileWatcher:
    return FakeConflictFileWatcher()


@pytest.fixture
def manager(transfer_history, conflict_watcher):
    mgr = AlertsManager(transfer_history, conflict_watcher)
    yield mgr
    mgr.dispose()


@pytest.fixture
def recorder(manager) -> Recorder:
    return Recorder(manager)


@pytest.fixture
def syncalerts_home(tmp_path: Path, monkeypatch) -> Path:
    """Point SYNCALERTS_HOME at a temporary directory with no config file."""
    monkeypatch.setenv("SYNCALERTS_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_config(syncalerts_home: Path):
    """Write a config dict (or raw text) to $SYNCALERTS_HOME/config.json."""

    def _write(data) -> Path:
        path = syncalerts_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def check_invariant():
    return assert_any_alerts_consistent
