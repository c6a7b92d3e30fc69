import secrets
from typing import Optional
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from quizhost.app.domain.errors import ConfigurationError


class Settings(BaseSettings):
    # Host authentication
    HOST_PASSWORD: str = Field(min_length=1)
    # Key material for sealed cookies. A random default means cookies do not survive restarts.
    COOKIE_SECRET: str = Field(default_factory=lambda: secrets.token_urlsafe(32), min_length=1)

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "quizhost"
    DB_POOL_MINSIZE: int = 1
    DB_POOL_MAXSIZE: int = 10
    DB_QUERY_TIMEOUT: float = Field(default=5.0, gt=0)

    # HTTP
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "quizhost.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def load_settings(env_file: Optional[str] = ".env", **overrides) -> Settings:
    """
    Reads configuration once at process start.

    :param env_file: Optional dotenv file consulted after the real environment.
    :param overrides: Explicit values, mostly for tests.
    :return: The validated Settings.
    :raises ConfigurationError: If a required value such as HOST_PASSWORD is missing.
    """
    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as e:
        fields = ", ".join(str(error['loc'][0]) for error in e.errors() if error['loc'])
        raise ConfigurationError(f"Invalid or missing configuration: {fields}") from e
