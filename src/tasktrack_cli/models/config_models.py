"""Configuration models.

This module defines the pydantic models persisted to ``config.json``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Where the task file and its counter sidecar live."""

    path: str = Field(
        default="tasks.tsv",
        description="Task file; relative paths resolve against the working directory",
    )
    sidecar_suffix: str = Field(
        default=".meta", description="Suffix appended to path for the next-id sidecar"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml"] = Field(default="table")
    color: bool = Field(default=True)
    title_width: int = Field(default=40, ge=2)
    tags_width: int = Field(default=20, ge=2)


class AppConfig(BaseModel):
    """Main application configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
