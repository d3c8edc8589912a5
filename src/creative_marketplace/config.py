"""
Central configuration module for the Creative Marketplace API
Reads environment variables and reports missing settings as warnings
"""
import os
import sys
from typing import List

# Load environment variables from .env file if it exists (dev only)
try:
    from dotenv import load_dotenv
    if os.getenv("ENV", "dev").lower() == "dev":
        load_dotenv()
except ImportError:
    pass


class Config:
    """Central configuration class with environment variable validation"""

    # Environment
    ENV: str = os.getenv("ENV", "dev").lower()

    # Application identity (embedded in session tokens, sent to the identity provider)
    APP_ID: str = os.getenv("APP_ID", "")

    # Session signing secret
    JWT_SECRET: str = os.getenv("JWT_SECRET", "")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Identity provider
    OAUTH_SERVER_URL: str = os.getenv("OAUTH_SERVER_URL", "")
    OWNER_OPEN_ID: str = os.getenv("OWNER_OPEN_ID", "")

    # Hosted LLM / notification service
    LLM_API_URL: str = os.getenv("LLM_API_URL", "")
    LLM_API_KEY: str = os.getenv("LLM_API_KEY", "")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemini-2.5-flash")

    # Server
    PORT: int = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS: List[str] = []

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __init__(self):
        """Initialize configuration and validate variables"""
        self._load_cors_origins()
        self._validate()

    def _load_cors_origins(self):
        """Load CORS origins from environment variable"""
        default_origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]

        cors_env = os.getenv("CORS_ORIGINS", "")
        if cors_env:
            env_origins = [origin.strip() for origin in cors_env.split(",") if origin.strip()]
            self.CORS_ORIGINS = default_origins + env_origins
        else:
            self.CORS_ORIGINS = default_origins

    def _validate(self):
        """
        Collect configuration problems.

        Missing settings only disable the features that depend on them, so
        problems are reported and the process keeps running.
        """
        errors = []

        if self.ENV not in ["dev", "test", "staging", "prod"]:
            errors.append(f"Invalid ENV value: {self.ENV}. Must be 'dev', 'test', 'staging', or 'prod'")

        if not self.JWT_SECRET:
            errors.append("JWT_SECRET is not set - session cookies cannot be issued or verified")

        if not self.DATABASE_URL:
            errors.append("DATABASE_URL is not set - queries return empty results and mutations fail")

        if not self.OAUTH_SERVER_URL:
            errors.append("OAUTH_SERVER_URL is not set - OAuth login is unavailable")

        if not self.LLM_API_KEY:
            errors.append("LLM_API_KEY is not set - AI assist and owner notifications are unavailable")

        if errors and self.ENV != "test":
            print("=" * 60, file=sys.stderr)
            print(f"CONFIGURATION WARNINGS ({self.ENV} mode - continuing)", file=sys.stderr)
            print("=" * 60, file=sys.stderr)
            for error in errors:
                print(f"  - {error}", file=sys.stderr)
            print("=" * 60, file=sys.stderr)

        self.warnings = errors

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode"""
        return self.ENV == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode"""
        return self.ENV == "prod"


# Create global config instance
config = Config()
