# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1/models/gemini-pro:generateText"
)


def _get_list(value: Optional[str], default: List[str]) -> List[str]:
    if value is None or not value.strip():
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    Built once at startup and handed to the DI container, which passes it on
    to the token service, the MongoDB connection and the Gemini client.
    Required values that are missing are reported by
    configuration_problems() instead of failing construction.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "5000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_allow_origins: Final[List[str]] = _get_list(
            os.getenv("CORS_ALLOW_ORIGINS"), ["*"]
        )

        # Database Configuration
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI") or None
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "mentorship")

        # JWT Configuration
        self.secret_key: Final[Optional[str]] = os.getenv("SECRET_KEY") or None
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Gemini Configuration
        self.gemini_api_key: Final[str] = os.getenv("GEMINI_API_KEY", "")
        self.gemini_api_url: Final[str] = os.getenv("GEMINI_API_URL", DEFAULT_GEMINI_API_URL)

    def configuration_problems(self) -> List[str]:
        """
        List required settings that are missing

        Returns:
            Human readable descriptions, empty when everything is configured
        """
        problems: List[str] = []
        if not self.mongo_uri:
            problems.append("MONGO_URI is not set; database routes will fail")
        if not self.secret_key:
            problems.append("SECRET_KEY is not set; login and dashboard routes will fail")
        if not self.gemini_api_key:
            problems.append("GEMINI_API_KEY is not set; /api/gemini will be rejected upstream")
        return problems


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
