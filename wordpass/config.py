"""
Configuration loaded from environment variables
Optional .env file in the working directory or project root
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from mnemonic import Mnemonic
from pydantic_settings import BaseSettings


def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    root_env = Path(__file__).parent.parent / ".env"
    if root_env.exists():
        return str(root_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Dictionary source
    WORDLIST_LANGUAGE: str = "english"  # BIP39 list shipped with mnemonic
    WORDLIST_PATH: Optional[str] = None  # One word per line, wins over language

    # Generation defaults
    DEFAULT_COUNT: int = 4
    DEFAULT_SEPARATOR: str = " "

    # Request caps
    MAX_COUNT: int = 64
    MAX_MIN_LENGTH: int = 512
    MAX_SEPARATOR_LENGTH: int = 16

    # Application
    LOG_LEVEL: str = "INFO"
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_BURST: int = 10

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings, reporting every problem at once."""
    errors = []

    if active_settings.WORDLIST_PATH:
        if not Path(active_settings.WORDLIST_PATH).is_file():
            errors.append(f"WORDLIST_PATH does not exist: {active_settings.WORDLIST_PATH}")
    elif active_settings.WORDLIST_LANGUAGE not in Mnemonic.list_languages():
        allowed = ", ".join(sorted(Mnemonic.list_languages()))
        errors.append(f"WORDLIST_LANGUAGE must be one of: {allowed}")

    for field_name in ("MAX_COUNT", "MAX_MIN_LENGTH", "MAX_SEPARATOR_LENGTH",
                       "RATE_LIMIT_PER_MINUTE", "RATE_LIMIT_BURST"):
        if getattr(active_settings, field_name) < 1:
            errors.append(f"{field_name} must be >= 1")

    if not 1 <= active_settings.DEFAULT_COUNT <= max(active_settings.MAX_COUNT, 1):
        errors.append("DEFAULT_COUNT must be between 1 and MAX_COUNT")

    if not active_settings.DEFAULT_SEPARATOR:
        errors.append("DEFAULT_SEPARATOR must not be empty")

    if active_settings.LOG_LEVEL.upper() not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


def resolve_log_level(active_settings: Settings) -> int:
    return getattr(logging, active_settings.LOG_LEVEL.upper(), logging.INFO)


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
