"""Configuration settings for the Monitorias API."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./monitorias.db")

    # Access tokens
    TOKEN_NAME: str = os.getenv("TOKEN_NAME", "auth_token")
    PASSWORD_MIN_LENGTH: int = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))

    # Requests
    MAX_BODY_SIZE_KB: int = int(os.getenv("MAX_BODY_SIZE_KB", "1024"))

    # Application
    APP_ENV: str = os.getenv("APP_ENV", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings."""
        warnings = []
        if self.APP_ENV == "production" and self.DATABASE_URL.startswith("sqlite"):
            warnings.append("DATABASE_URL points at SQLite in production")
        if self.PASSWORD_MIN_LENGTH < 8:
            warnings.append(f"PASSWORD_MIN_LENGTH={self.PASSWORD_MIN_LENGTH} is below the recommended 8")
        if self.DEBUG and self.APP_ENV == "production":
            warnings.append("DEBUG is enabled in production - SQL statements will be logged")
        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
