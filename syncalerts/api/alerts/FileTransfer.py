"""File transfer value type reported by a transfer history."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileTransfer:
    """A single file transfer within a synchronized folder.

    ``error`` is set when the transfer did not complete successfully.
    """

    folder_id: str
    path: str
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
