# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Rome")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Repository backend: "mongodb" (production) or "inmemory" (local runs, tests)
        self.user_repository: Final[str] = os.getenv("USER_REPOSITORY", "mongodb").lower()

        # Database Configuration
        # MONGO_URI has no default: the mongodb backend refuses to start without it
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI") or None
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "user_api")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
