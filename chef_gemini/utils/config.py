"""Configuration management for Chef Gemini.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini API Key: sent as the `key` query parameter on every model call.
        # Not validated here: a missing or invalid key surfaces as an HTTP failure.
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        # Default: gemini-2.5-flash (fast, cost-effective for short JSON replies)
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        # Base URL of the Generative Language REST API (v1beta exposes generateContent)
        self.GEMINI_BASE_URL: str = os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        )

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If the model name is empty or the base URL is not http(s).
        """
        if not self.GEMINI_MODEL.strip():
            raise ValueError("GEMINI_MODEL must not be empty")
        if not self.GEMINI_BASE_URL.startswith(("http://", "https://")):
            raise ValueError(
                f"GEMINI_BASE_URL must start with http:// or https://, got: {self.GEMINI_BASE_URL}"
            )


# Create module-level config instance and validate immediately
config = Config()
config.validate()
