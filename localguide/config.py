"""
Configuration module for the Local Guide chat backend.

Loads environment variables and validates required settings.
"""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load .env file
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API
    GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Knowledge files (<category>.txt + <category>.csv)
    DATA_DIR: Path = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data")))
    PRICE_TIER_COLUMN: str = os.getenv("PRICE_TIER_COLUMN", "Εύρος_Τιμών")
    # Off by default: every request re-reads the files from disk
    KNOWLEDGE_CACHE_ENABLED: bool = os.getenv("KNOWLEDGE_CACHE_ENABLED", "false").lower() == "true"

    # Generation retry policy
    MAX_GENERATION_ATTEMPTS: int = int(os.getenv("MAX_GENERATION_ATTEMPTS", "3"))
    INITIAL_RETRY_DELAY_MS: int = int(os.getenv("INITIAL_RETRY_DELAY_MS", "1000"))
    # 0 disables the per-request timeout
    REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "60"))

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "3000"))

    # CORS Settings (only enforced in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing or invalid.
        """
        required_settings = {
            "GOOGLE_API_KEY": cls.GOOGLE_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

        if cls.MAX_GENERATION_ATTEMPTS < 1:
            raise ValueError("MAX_GENERATION_ATTEMPTS must be at least 1")

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (fail fast if the API key is missing).
# Tests set VALIDATE_CONFIG=false to import the app without real credentials.
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    settings.validate()
