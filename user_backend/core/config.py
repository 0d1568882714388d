# Standard library imports
import os
from typing import Final, List, Optional

# Local application imports
from ..domain.constants.media_constants import DEFAULT_MAX_FILE_SIZE


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    Components receive the values they need from the DI providers instead of
    reading them here directly.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_accounts")

        # Activation token Configuration
        self.jwt_activation_key: Final[str] = os.getenv(
            "JWT_ACTIVATION_KEY", "change_this_secret_in_production"
        )
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")

        # Client URL used to build activation links
        self.client_url: Final[str] = os.getenv("CLIENT_URL", "http://localhost:3000").rstrip("/")

        # Image uploads
        self.max_file_size: Final[int] = int(os.getenv("MAX_FILE_SIZE", str(DEFAULT_MAX_FILE_SIZE)))
        self.image_upload_dir: Final[str] = os.getenv("IMAGE_UPLOAD_DIR", "public/images/users")

        # SMTP Configuration
        self.smtp_host: Final[str] = os.getenv("SMTP_HOST", "")
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_user: Final[str] = os.getenv("SMTP_USER", "")
        self.smtp_password: Final[str] = os.getenv("SMTP_PASSWORD", "")
        self.smtp_use_tls: Final[bool] = _env_bool("SMTP_USE_TLS", "false")
        self.smtp_start_tls: Final[bool] = _env_bool("SMTP_START_TLS", "true")
        self.email_from: Final[str] = os.getenv("EMAIL_FROM", "")
        self.email_from_name: Final[str] = os.getenv("EMAIL_FROM_NAME", "User Accounts")

        # Security
        self.hash_passwords: Final[bool] = _env_bool("HASH_PASSWORDS", "false")

        # HTTP / logging
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


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
