"""Alerts configuration (initial toggle values)."""

from pydantic import BaseModel, ConfigDict, Field


class AlertsConfig(BaseModel):
    """Which alert categories start out visible."""

    model_config = ConfigDict(extra="forbid")

    enable_failed_transfer_alerts: bool = Field(False, description="Show folders with failing transfers")
    enable_conflicted_file_alerts: bool = Field(False, description="Show conflicted files")
