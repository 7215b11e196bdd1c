"""
Configuration management for TrendFetch.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Config:
    """Application configuration."""

    # Marketplace settings
    MARKETPLACE_HOST: str = os.getenv("MARKETPLACE_HOST", "www.trendyol.com")
    # Root label the marketplace puts at the head of every breadcrumb
    MARKETPLACE_NAME: str = os.getenv("MARKETPLACE_NAME", "Trendyol")

    # Outbound fetch settings
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    )
    # None means the request may block until the upstream server answers
    FETCH_TIMEOUT_S: Optional[float] = _optional_float("FETCH_TIMEOUT_S")

    # Pricing
    PRICE_MARKUP: str = os.getenv("PRICE_MARKUP", "1.15")

    # Flask settings
    FLASK_ENV: str = os.getenv("FLASK_ENV", "development")
    FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "True").lower() == "true"
    FLASK_HOST: str = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("FLASK_PORT", "5000"))
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def get_cors_origins(cls) -> list[str]:
        """Parse the comma separated CORS origins setting."""
        origins = [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not cls.MARKETPLACE_HOST:
            errors.append("MARKETPLACE_HOST is empty")

        try:
            markup = float(cls.PRICE_MARKUP)
            if markup <= 0:
                errors.append(f"PRICE_MARKUP must be positive, got {cls.PRICE_MARKUP}")
        except ValueError:
            errors.append(f"Invalid PRICE_MARKUP: {cls.PRICE_MARKUP}")

        if cls.FETCH_TIMEOUT_S is not None and cls.FETCH_TIMEOUT_S <= 0:
            errors.append(f"FETCH_TIMEOUT_S must be positive, got {cls.FETCH_TIMEOUT_S}")

        if cls.FLASK_ENV == "production" and cls.SECRET_KEY == "dev-secret-key":
            errors.append("SECRET_KEY uses the development default in production")

        return errors

    @classmethod
    def is_valid(cls) -> bool:
        """Check if configuration is valid."""
        return len(cls.validate()) == 0

    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary (safe for logging)."""
        return {
            "flask_env": cls.FLASK_ENV,
            "flask_debug": cls.FLASK_DEBUG,
            "marketplace_host": cls.MARKETPLACE_HOST,
            "fetch_timeout_s": cls.FETCH_TIMEOUT_S,
            "price_markup": cls.PRICE_MARKUP,
            "cors_origins": cls.get_cors_origins(),
            "log_level": cls.LOG_LEVEL,
        }
