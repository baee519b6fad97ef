"""Interface of the transfer history consumed by the alerts manager."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .Event import Event


@runtime_checkable
class FailingTransfer(Protocol):
    """Anything that names the folder a failing transfer belongs to."""

    @property
    def folder_id(self) -> str: ...


@runtime_checkable
class TransferHistory(Protocol):
    """Tracks file transfers and knows which of them are currently failing.

    ``transfer_completed`` fires whenever any transfer completes; its listeners
    re-query ``failing_transfers``.
    """

    transfer_completed: Event

    @property
    def failing_transfers(self) -> Iterable[FailingTransfer]: ...
