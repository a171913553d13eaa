"""Mini README: Centralised configuration for the account ledger.

Structure:
    * LedgerSettings - pydantic-settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The entry point calls ``get_settings`` once and hands the resulting
    values to ``BalanceStore.from_settings``. Library code never reads the
    settings directly, so tests construct ``LedgerSettings`` (or a store)
    with explicit values instead of mutating process state.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path(__file__).parent / "ledger" / "data.json"


class LedgerSettings(BaseSettings):
    """Runtime configuration for the balance store and the menu."""

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_file: Path = Field(
        DEFAULT_DATA_FILE,
        description="JSON file holding the persisted balance record.",
    )
    initial_balance: Decimal = Field(
        Decimal("1000.00"),
        description="Balance written when no record exists yet.",
        ge=0,
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level applied by the interactive entry point.",
    )

    @field_validator("data_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories and resolve to an absolute path."""

        return Path(value).expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across a run."""

    return LedgerSettings()
