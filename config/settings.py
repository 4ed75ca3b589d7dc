import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# .env values never override variables already set in the environment
load_dotenv()

DEFAULT_DB_PATH = "data/game_data.db"
DEFAULT_LOG_LEVEL = "INFO"


def get_env_var(key: str, default: str = None) -> str:
    """Return an environment variable, falling back to ``default``.

    Raises ValueError when the variable is unset and no default is given.
    """
    value = os.getenv(key)
    if value is not None:
        return value
    if default is not None:
        return default
    raise ValueError(f"Environment variable '{key}' is not set.")


def resolve_log_level(name: str) -> str:
    """Return ``name`` upper-cased when logging knows it, else the default level."""
    name = name.upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    db_path: Path
    log_level: str


def load_settings(db_path: str = None) -> Settings:
    """Resolve the runtime settings once; ``db_path`` overrides the environment."""
    return Settings(
        db_path=Path(db_path or get_env_var("TTRPG_DB_PATH", DEFAULT_DB_PATH)),
        log_level=resolve_log_level(get_env_var("TTRPG_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
