"""
Configuration module for Ephemeral Paste.
Loads environment variables and provides config objects.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class Settings:
    """Application settings loaded from environment variables."""

    APP_DOMAIN: str = os.getenv("APP_DOMAIN", "")
    DEBUG: bool = _as_bool(os.getenv("DEBUG", "False"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    # 0 disables the background sweeper; expiry is then purely lazy
    SWEEP_INTERVAL_SECONDS: float = float(os.getenv("SWEEP_INTERVAL_SECONDS", "0"))


settings = Settings()
