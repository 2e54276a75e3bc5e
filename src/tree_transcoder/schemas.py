"""Pydantic schemas for runtime validation of run options."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_name(value: str) -> str:
    if not value.strip():
        raise ValueError("encoding name cannot be empty.")
    return value


class TreeRunConfig(BaseModel):
    """Validated input for tree-mode transcoding."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path
    destination_dir: Path
    encoding: str
    max_workers: int | None = Field(default=None, ge=1)

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        return _require_name(value)


class FileRunConfig(BaseModel):
    """Validated input for single-file transcoding."""

    model_config = ConfigDict(extra="forbid")

    source_file: Path
    encoding: str

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        return _require_name(value)
