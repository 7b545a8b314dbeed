from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

ROOT = Path(__file__).resolve().parents[1]
ENV_FILE = ROOT / "env" / ".env.local"

DEFAULT_CONTRACT_OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


class LocalSettings(BaseSettings):
    APP_ENV: str = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"

    # Principal allowed to authorise lessee verifiers
    CONTRACT_OWNER: str = DEFAULT_CONTRACT_OWNER

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
    )
