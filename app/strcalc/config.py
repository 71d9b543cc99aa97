"""
Configuration Module

Loads settings from environment variables and .env file.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://127.0.0.1",
]


@dataclass
class Config:
    """
    Application configuration.

    All settings are loaded from environment variables.
    See config/.env.example for available options.
    """

    # === Logging Settings ===
    log_level: str = "INFO"
    log_json: bool = True
    log_file: Optional[str] = None

    # === Server Settings ===
    server_host: str = "127.0.0.1"
    server_port: int = 8765
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        def get_list(key: str, default: List[str]) -> List[str]:
            value = os.getenv(key)
            if not value:
                return list(default)
            return [item.strip() for item in value.split(",") if item.strip()]

        return cls(
            # Logging
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_json=get_bool("LOG_JSON", True),
            log_file=os.getenv("LOG_FILE") or None,

            # Server
            server_host=os.getenv("SERVER_HOST", "127.0.0.1"),
            server_port=get_int("SERVER_PORT", 8765),
            cors_origins=get_list("ALLOWED_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        if not 1 <= self.server_port <= 65535:
            errors.append("SERVER_PORT must be between 1 and 65535")

        return errors

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from strcalc.config import load_config
        config = load_config()
    """
    return Config.from_env()
