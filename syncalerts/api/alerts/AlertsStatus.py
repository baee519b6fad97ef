"""Alerts status model."""

from pydantic import BaseModel, ConfigDict, Field


class AlertsStatus(BaseModel):
    """Snapshot of the public alert state."""

    model_config = ConfigDict(frozen=True)

    any_alerts: bool
    folders_with_failed_transfer_files: tuple[str, ...] = Field(default_factory=tuple)
    conflicted_files: tuple[str, ...] = Field(default_factory=tuple)
    enable_failed_transfer_alerts: bool
    enable_conflicted_file_alerts: bool
