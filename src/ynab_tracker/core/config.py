#!/usr/bin/env python3
"""
Configuration Management for the YNAB Price Tracker

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production) with appropriate
security measures for each.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class YNABConfig:
    """YNAB API configuration."""

    api_token: str | None = None
    base_url: str = "https://api.ynab.com/v1"
    timeout: int = 30


@dataclass
class QuotesConfig:
    """Market quote source configuration."""

    base_url: str = "https://query1.finance.yahoo.com"
    timeout: int = 15


@dataclass
class TrackerConfig:
    """Reconciliation state configuration."""

    state_file: Path


@dataclass
class Config:
    """
    Main configuration class for the tracker.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment

    data_dir: Path

    ynab: YNABConfig
    quotes: QuotesConfig
    tracker: TrackerConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("TRACKER_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_ynab_tracker"
            data_dir = Path(os.getenv("TRACKER_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("TRACKER_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        state_file_env = os.getenv("TRACKER_STATE_FILE")
        state_file = Path(state_file_env).expanduser() if state_file_env else data_dir / "tracker" / "state.json"

        ynab = YNABConfig(
            api_token=os.getenv("YNAB_API_TOKEN") or None,
            base_url=os.getenv("YNAB_BASE_URL", "https://api.ynab.com/v1"),
            timeout=int(os.getenv("YNAB_TIMEOUT", "30")),
        )

        quotes = QuotesConfig(
            base_url=os.getenv("QUOTES_BASE_URL", "https://query1.finance.yahoo.com"),
            timeout=int(os.getenv("QUOTES_TIMEOUT", "15")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            ynab=ynab,
            quotes=quotes,
            tracker=TrackerConfig(state_file=state_file),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if self.environment == Environment.PRODUCTION and not self.ynab.api_token:
            errors.append("YNAB_API_TOKEN is required in production")

        if self.ynab.timeout <= 0:
            errors.append("YNAB timeout must be positive")
        if self.quotes.timeout <= 0:
            errors.append("Quotes timeout must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from external libraries in production
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("urllib3").setLevel(logging.WARNING)
            logging.getLogger("requests").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["ynab.api_token"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***" if nested_value else None
                    elif isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()



def get_state_file() -> Path:
    """Get the reconciliation state file path."""
    return get_config().tracker.state_file
