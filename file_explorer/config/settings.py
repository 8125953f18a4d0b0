"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_explorer.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self.parse_log_level(
            self._get_env("FILE_EXPLORER_LOG_LEVEL", "WARNING")
        )
        self.log_file: str | None = os.getenv("FILE_EXPLORER_LOG_FILE") or None
        self.pretty: bool = (
            self._get_env("FILE_EXPLORER_PRETTY", "0").strip().lower() in TRUE_VALUES
        )
        self.app_name: str = "Python File Explorer"

    @staticmethod
    def parse_log_level(value: str) -> int:
        """Turn a level name such as 'info' into its logging constant."""
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level: {value}")
        return level

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)


# Global settings instance
settings = Settings()
