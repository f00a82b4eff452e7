from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENVIRONMENTS = ("local", "dev", "prod")
STORAGE_BACKENDS = ("sqlite", "memory")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment: local (text logs), dev (json, debug), prod (json, info)
    environment: str = "local"

    # Application
    app_name: str = "Alias Shortener"
    app_version: str = "1.0.0"

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8082
    http_timeout: int = 4  # seconds
    http_idle_timeout: int = 60  # seconds

    # Storage
    storage_backend: str = "sqlite"  # Options: "sqlite", "memory"
    storage_path: str = "./storage/storage.db"
    storage_timeout: float = 5.0  # SQLite busy timeout in seconds

    # Alias generation
    alias_length: int = 6
    max_retries: int = 5

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def _known_env(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ENVIRONMENTS:
            raise ValueError(f"environment must be one of {ENVIRONMENTS}, got {value!r}")
        return value

    @field_validator("storage_backend")
    @classmethod
    def _known_backend(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in STORAGE_BACKENDS:
            raise ValueError(f"storage_backend must be one of {STORAGE_BACKENDS}, got {value!r}")
        return value

    @field_validator("alias_length", "max_retries")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the SQLite file at storage_path"""
        return f"sqlite:///{self.storage_path}"


# Create settings instance
settings = Settings()
