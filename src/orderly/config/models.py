"""Configuration models describing Orderly settings."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderlyBaseModel(BaseModel):
    """Shared configuration for Orderly Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class FolderOverrides(OrderlyBaseModel):
    """Explicit locations replacing the platform's well-known folders.

    Attributes:
        downloads: Directory scanned for new files.
        documents: Parent of the documents destination folder.
        pictures: Parent of the pictures destination folder.
        videos: Parent of the videos destination folder.
    """

    downloads: Optional[str] = None
    documents: Optional[str] = None
    pictures: Optional[str] = None
    videos: Optional[str] = None


class OrganizationOptions(OrderlyBaseModel):
    """Settings that govern where relocated files land.

    Attributes:
        subfolder_name: Folder created under each category folder to receive files.
    """

    subfolder_name: str = "Recent Downloads"

    @field_validator("subfolder_name")
    @classmethod
    def _single_component(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError("subfolder_name must be a single, non-empty folder name")
        return value


class LoggingSettings(OrderlyBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class CLIOptions(OrderlyBaseModel):
    """CLI behavior defaults and presentation preferences.

    Attributes:
        quiet_default: Whether commands suppress non-error output by default.
        summary_default: Whether commands only print summary lines by default.
    """

    quiet_default: bool = False
    summary_default: bool = False


class OrderlyConfig(OrderlyBaseModel):
    """Top-level configuration struct for Orderly.

    Attributes:
        folders: Optional overrides for the well-known folders.
        organization: Destination layout settings.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    folders: FolderOverrides = Field(default_factory=FolderOverrides)
    organization: OrganizationOptions = Field(default_factory=OrganizationOptions)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "CLIOptions",
    "FolderOverrides",
    "LoggingSettings",
    "OrderlyBaseModel",
    "OrderlyConfig",
    "OrganizationOptions",
]
