from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import logging
import pydantic


class Settings(BaseSettings):
    """
    Manages all queue settings.
    Reads from environment variables prefixed with REFQUEUE_ (and .env file).
    """

    # --- Core Configuration ---
    # Re-check every queue invariant after each mutation (O(n) per call)
    DEBUG: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_COLORS: bool = True

    # --- Queue Behaviour ---
    # NaN has no place in a descending order, so it is refused by default
    REJECT_NAN_PRIORITY: bool = True

    @pydantic.field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """
        Accepts any casing of a standard logging level name.
        """
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    # Pydantic-Settings configuration
    model_config = SettingsConfigDict(
        env_prefix="REFQUEUE_",
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Returns a cached instance of the Settings object.
    Using @lru_cache ensures the .env file is read only once.
    """
    return Settings()
