import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pairseal.constants import SUPPORTED_VERSIONS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    PROJECT_NAME: str = "pairseal"

    # Version used by encrypt() when the caller passes version=None
    DEFAULT_VERSION: int = 1

    LOG_LEVEL: str = "WARNING"
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_prefix="PAIRSEAL_", env_file=".env", extra="ignore")

    @field_validator("DEFAULT_VERSION")
    @classmethod
    def validate_default_version(cls, v: int) -> int:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(f"DEFAULT_VERSION must be one of {sorted(SUPPORTED_VERSIONS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)


def normalize_log_level(value: str) -> str:
    """Uppercase a level name and check that logging knows it."""
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command-line use. The library itself never calls this."""
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    logging.basicConfig(level=normalize_log_level(level), format=LOG_FORMAT)
