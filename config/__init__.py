import importlib
import os
from types import ModuleType
from typing import Optional

_SETTINGS_BY_ENV = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted settings module for `env`, or for APP_ENV when env is None.

    Unknown names fall back to development.
    """
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return _SETTINGS_BY_ENV.get(env.strip().lower(), "config.development")


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
