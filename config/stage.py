from __future__ import annotations

from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from config.local import DEFAULT_CONTRACT_OWNER

ROOT = Path(__file__).resolve().parents[1]
ENV_FILE = ROOT / "env" / ".env.staging"


class StageSettings(BaseSettings):
    APP_ENV: str = "stage"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    CONTRACT_OWNER: str = DEFAULT_CONTRACT_OWNER

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
    )

    @field_validator("CONTRACT_OWNER")
    @classmethod
    def owner_not_blank(cls, value: str) -> str:
        """Staging deployments must name a real contract owner"""
        value = value.strip()
        if not value:
            raise ValueError("CONTRACT_OWNER must not be blank")
        return value
