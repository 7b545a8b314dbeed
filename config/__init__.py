from __future__ import annotations

import os

# Mode selector: use MODE env var if set, else fall back to APP_ENV, then 'local'
MODE = os.environ.get("MODE") or os.environ.get("APP_ENV") or "local"
MODE = MODE.lower()


# Import per-environment settings classes
from .local import LocalSettings
from .stage import StageSettings
from .prod import ProdSettings
from .test import TestSettings


_MAPPING = {
    "local": LocalSettings,
    "stage": StageSettings,
    "staging": StageSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
    "test": TestSettings,
}


def _choose_settings_class(mode: str):
    return _MAPPING.get(mode, LocalSettings)


# Instantiate settings from selected class. Each class reads its own env file
# through `model_config`, environment variables take precedence.
SettingsClass = _choose_settings_class(MODE)
settings = SettingsClass()

__all__ = ["settings", "SettingsClass", "MODE"]
