"""Configuration management for the PlanWise backend."""
import logging
import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional, Tuple
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
DEFAULT_PORT: Final[int] = 8080
DEFAULT_OPENAI_MODEL: Final[str] = "gpt-4"
DEFAULT_MAX_UPLOAD_BYTES: Final[int] = 5 * 1024 * 1024
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


class ConfigError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    database_url: str
    openai_api_key: str
    port: int = DEFAULT_PORT
    host: str = APP_HOST
    openai_model: str = DEFAULT_OPENAI_MODEL
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = DEFAULT_LOG_LEVEL


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (os.environ by default).

    DATABASE_URL and OPENAI_API_KEY are mandatory; everything else falls back
    to a default. Raises ConfigError so the caller can stop the process.
    """
    if env is None:
        env = os.environ

    database_url = (env.get("DATABASE_URL") or "").strip()
    openai_api_key = (env.get("OPENAI_API_KEY") or "").strip()
    if not database_url or not openai_api_key:
        raise ConfigError("Missing DATABASE_URL or OPENAI_API_KEY")

    origins = tuple(o.strip() for o in (env.get("CORS_ORIGINS") or "*").split(",") if o.strip())

    log_level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown LOG_LEVEL {log_level!r}")

    return Settings(
        database_url=database_url,
        openai_api_key=openai_api_key,
        port=_int_setting(env, "PORT", DEFAULT_PORT),
        host=(env.get("APP_HOST") or APP_HOST).strip(),
        openai_model=(env.get("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL).strip(),
        max_upload_bytes=_int_setting(env, "MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        cors_origins=origins or ("*",),
        log_level=log_level,
    )
