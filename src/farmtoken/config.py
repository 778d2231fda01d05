from __future__ import annotations

from typing import Annotated, Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings, read from the environment and `.env` at startup.

    Notes:
    - Without OPERATOR_ID/OPERATOR_KEY and LEDGER_URL the app runs against the
      simulated ledger.
    - CORS_ORIGIN accepts a comma-separated list.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    host: str = "127.0.0.1"
    port: int = 4000
    cors_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("*",),
        validation_alias=AliasChoices("cors_origins", "CORS_ORIGIN"),
    )
    operator_id: str | None = None
    operator_key: str | None = None
    network: str = Field(
        default="testnet",
        validation_alias=AliasChoices("network", "HEDERA_NETWORK"),
    )
    ledger_url: str | None = None
    ledger_timeout_s: float = Field(default=30.0, gt=0)
    log_level: str = "info"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            value = value.split(",")
        origins = tuple(str(o).strip() for o in value if str(o).strip())
        return origins or ("*",)

    @field_validator("log_level")
    @classmethod
    def _lower_log_level(cls, value: str) -> str:
        return value.strip().lower() or "info"

    @property
    def has_operator(self) -> bool:
        return bool(self.operator_id and self.operator_key)

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "Settings":
        """Read settings from the process environment, then `env_file` if it exists."""
        return cls(_env_file=env_file)
