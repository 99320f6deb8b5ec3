"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - pydantic-settings model read from the environment.
    * get_settings - cached accessor.

Usage:
    Every value can be overridden with an ``EXPENSE_TRACKER_`` prefixed
    environment variable or a local ``.env`` file, e.g.
    ``EXPENSE_TRACKER_DATA_DIRECTORY=~/finance``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the ledger and its storage."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_directory: Path = Field(
        Path("data"),
        validate_default=True,
        description="Directory holding the file backend's stored payloads.",
    )
    storage_backend: Literal["file", "memory"] = Field(
        "file",
        description="Key-value backend used to persist the ledger.",
    )
    storage_key: str = Field(
        "SavedTransactions",
        min_length=1,
        description="Fixed key under which the whole transaction collection is stored.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level name.",
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings so every module sees the same configuration."""

    return ExpenseTrackerSettings()
