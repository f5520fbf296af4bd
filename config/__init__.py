"""Settings modules for the punch CLI.

PUNCH_ENV names one of the modules in this package. Unknown names fall back
to DEFAULT_ENV so a typo never points the CLI at a missing module.
"""
import os
from typing import Optional

DEFAULT_ENV = "development"

_ENV_ALIASES = {
    "dev": "development",
    "development": "development",
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def resolve_env(name: Optional[str] = None) -> str:
    if name is None:
        name = os.getenv("PUNCH_ENV", DEFAULT_ENV)
    return _ENV_ALIASES.get(name.strip().lower(), DEFAULT_ENV)


def get_settings_module(env: Optional[str] = None) -> str:
    return f"config.{resolve_env(env)}"
