from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_database_url() -> str:
    """Default database URL: a SQLite file at the project root (local development only).

    Set DATABASE_URL to a PostgreSQL connection string for anything shared.
    """
    db_path = Path(__file__).parent.parent.parent / "readiness.db"
    return f"sqlite:///{db_path.resolve()}"


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="DATABASE_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="Optional path for a rotating log file",
    )
    default_history_days: int = Field(
        default=28,
        validation_alias="DEFAULT_HISTORY_DAYS",
        description="History length used by the readiness view when the client sends none",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_history_days")
    @classmethod
    def validate_default_history_days(cls, value: int) -> int:
        """Clamp the default history length into the range the API accepts (7-90)."""
        if value < 7 or value > 90:
            logger.warning(f"DEFAULT_HISTORY_DAYS={value} is outside 7-90. Defaulting to 28.")
            return 28
        return value


settings = Settings()
