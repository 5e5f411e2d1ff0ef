# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_accounts")
        self.mongo_users_collection: Final[str] = os.getenv("MONGO_USERS_COLLECTION", "users")

        # Image Upload Configuration
        self.image_upload_dir: Final[str] = os.getenv("IMAGE_UPLOAD_DIR", "./images")
        self.image_upload_max_mb: Final[int] = int(os.getenv("IMAGE_UPLOAD_MAX_MB", "5"))

        # Error reporting: echo internal exception text to clients only when enabled
        self.expose_internal_errors: Final[bool] = _env_bool("EXPOSE_INTERNAL_ERRORS")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "2700"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
            ).split(",")
            if origin.strip()
        ]

    @property
    def image_upload_max_bytes(self) -> int:
        return self.image_upload_max_mb * 1024 * 1024


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
