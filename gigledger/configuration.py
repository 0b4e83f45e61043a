"""Mini README: Centralised configuration for the gigledger companion.

Structure:
    * GigLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``GIGLEDGER_*`` environment variables (or a
    local ``.env`` file). Settings choose the storage backend and key used for
    the persisted ledger blob, the default monthly goal, whether amount parsing
    is strict, and where the HTTP host binds.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_MONTHLY_GOAL = 20000.0
DEFAULT_STORAGE_KEY = "earningsData"


class GigLedgerSettings(BaseSettings):
    """Runtime configuration for the earnings ledger and its hosts."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the json-file store.",
    )
    storage_backend: str = Field(
        "json-file",
        description="Identifier of the registered store backend (memory or json-file).",
    )
    storage_key: str = Field(
        DEFAULT_STORAGE_KEY,
        description="Fixed key the ledger blob is saved under.",
        min_length=1,
    )
    default_monthly_goal: float = Field(
        DEFAULT_MONTHLY_GOAL,
        description="Monthly goal applied to freshly constructed ledgers.",
        gt=0,
    )
    strict_parsing: bool = Field(
        False,
        description=(
            "Raise on malformed amounts instead of coercing them to zero."
            " Off by default to match the mobile app's behaviour."
        ),
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the HTTP host to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP host exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field("INFO", description="Root logging level name.")

    class Config:
        env_prefix = "GIGLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories; the json-file store creates it on first write."""

        return Path(value).expanduser().resolve()

    @validator("storage_backend")
    def _normalise_backend(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache()
def get_settings() -> GigLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GigLedgerSettings()
