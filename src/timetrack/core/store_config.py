"""Configuration for a ResourceStore instance."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .paths import user_data_dir


class StoreConfig(BaseModel):
    """Validated configuration for a ResourceStore. Passed via DI at construction."""

    data_dir: Path | None = None
    filename: str = Field(default="db.json", min_length=1)
    indent: int | None = Field(default=None, ge=0)

    @property
    def path(self) -> Path:
        return (self.data_dir or user_data_dir()) / self.filename
