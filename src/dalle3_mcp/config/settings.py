import logging
import sys
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    A configuration class for managing environment variables.

    The values are read once when the server starts and the resulting object
    is handed to the image generation service, so nothing downstream reads
    the process environment directly.
    """

    # Empty variables count as unset, so `REQUEST_TIMEOUT=` keeps the default
    model_config = SettingsConfigDict(env_ignore_empty=True)

    OPENAI_API_KEY: str = Field(min_length=1)
    OPENAI_API_BASE_URL: str = "https://api.openai.com/v1"
    IMAGE_MODEL: str = "dall-e-3"
    # None disables the timeout entirely
    REQUEST_TIMEOUT: Optional[float] = None
    LOG_LEVEL: LogLevel = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings_or_exit() -> Settings:
    """
    Load the settings, terminating the process if any value is invalid.
    """
    try:
        return get_settings()
    except ValidationError as e:
        if any(error["loc"] == ("OPENAI_API_KEY",) for error in e.errors()):
            logger.error("Error: OPENAI_API_KEY environment variable is required")
        else:
            logger.error(f"Error: invalid configuration: {e}")
        sys.exit(1)
