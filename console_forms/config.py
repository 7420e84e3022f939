import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Field defaults
    DEFAULT_MAX_ATTEMPTS: int = 3
    DEFAULT_REQUIRED: bool = True

    # Boolean answers matching this pattern (case-insensitive) count as "yes"
    BOOLEAN_TRUE_PATTERN: str = r"^y"

    # Separator used by dotted condition paths, e.g. "questions.how_old"
    PATH_DELIMITER: str = "."

    SAVE_CONFIRM_MESSAGE: str = "Save results?"

    # Discovery only looks this many directory levels below each search root
    DISCOVERY_MAX_DEPTH: int = 2

    LOG_LEVEL: str = "WARNING"

    # Loads from a .env file in the working directory
    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_FORMS_", env_file=".env", extra="ignore"
    )


# Singleton instance
settings = Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Applies the configured log level to the package logger.
    The root logger is left alone so host applications keep their own setup.
    """
    logger = logging.getLogger("console_forms")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    return logger
