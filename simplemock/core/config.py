import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simplemock.core.exceptions import ConfigurationError

ROOT_LOGGER_NAME = "simplemock"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class MockSettings(BaseSettings):
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Level applied to the 'simplemock' logger by configure_logging().",
    )
    STRICT_RESULT_TYPES: bool = Field(
        default=True,
        description=(
            "Check every resolved value against the result type declared by the mocked method. "
            "When False, resolvers may return anything and InvalidResultType is never raised."
        ),
    )
    COLLECT_ALL_DISCREPANCIES: bool = Field(
        default=False,
        description=(
            "Report every missing and unexpected sequence in a single VerificationFailed "
            "instead of raising on the first discrepancy found."
        ),
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("STRICT_RESULT_TYPES", "COLLECT_ALL_DISCREPANCIES", mode="before")
    @classmethod
    def _blank_is_default(cls, v, info):
        # An empty env var means "unset", not False
        if isinstance(v, str) and not v.strip():
            return cls.model_fields[info.field_name].default
        return v

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEMOCK_",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> MockSettings:
    """Settings read once from the environment; tests call get_settings.cache_clear()."""
    try:
        return MockSettings()
    except ValueError as e:
        raise ConfigurationError(f"Invalid SimpleMock settings: {e}") from e


def configure_logging(settings: MockSettings = None) -> logging.Logger:
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL.value)
    return logger
