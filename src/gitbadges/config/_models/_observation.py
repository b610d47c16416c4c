"""Observation configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator


class ObservationConfig(BaseModel):
    """Observation configuration section.

    Attributes:
        background_builds: Build snapshots on a worker thread.
        observed_directories: Directory trees registered with the host.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    background_builds: bool = True
    observed_directories: tuple[str, ...] = ("/",)

    @field_validator("observed_directories")
    @classmethod
    def _require_directories(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            msg = "at least one observed directory is required"
            raise ValueError(msg)
        return value
