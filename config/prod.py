from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from config.local import DEFAULT_CONTRACT_OWNER

ROOT = Path(__file__).resolve().parents[1]
ENV_FILE = ROOT / "env" / ".env.production"


class ProdSettings(BaseSettings):
    APP_ENV: str = "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    CONTRACT_OWNER: str = DEFAULT_CONTRACT_OWNER

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
    )
