"""Application configuration loaded from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import ConfigDict, computed_field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    ENV: str = "dev"
    DEBUG: bool = False

    # Database connection components
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "im"
    POSTGRES_PASSWORD: str = "im"
    POSTGRES_DB: str = "im"

    # Allow DATABASE_URL to be set directly, or construct from components
    DATABASE_URL: str | None = None

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """Get database URL, either from DATABASE_URL env var or construct from components."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        # URL encode every component in case it contains special characters
        encoded_password = quote_plus(str(self.POSTGRES_PASSWORD), safe="")
        encoded_user = quote_plus(str(self.POSTGRES_USER), safe="")
        encoded_host = quote_plus(str(self.POSTGRES_HOST), safe="")
        encoded_db = quote_plus(str(self.POSTGRES_DB), safe="")
        return (
            f"postgresql+psycopg2://{encoded_user}:{encoded_password}"
            f"@{encoded_host}:{self.POSTGRES_PORT}/{encoded_db}"
        )

    # Security
    BCRYPT_ROUNDS: int = 12

    # Service endpoint used by IdentityClient
    SERVICE_URL: str = "http://localhost:9115"
    CLIENT_TIMEOUT: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"  # INFO for dev, WARNING for prod

    model_config = ConfigDict(
        env_file=[".env", "../.env"],  # Try .env in current dir first, then parent dir
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env that are not in Settings
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
