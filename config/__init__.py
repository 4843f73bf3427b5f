import os
from typing import Optional

_SETTINGS_BY_ENV = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
    "dev": "development",
    "development": "development",
}


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV selects the settings module; unknown values fall back to development.
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return f"config.{_SETTINGS_BY_ENV.get(env, 'development')}"
