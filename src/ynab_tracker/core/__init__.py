"""
Core Utilities Package

Shared configuration, currency arithmetic, and JSON persistence helpers.

This package provides:
- Currency handling with exact decimal arithmetic and integer milliunits
- Configuration management for environment-specific settings
- Atomic JSON file persistence
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_state_file,
    reload_config,
)
from .currency import (
    compute_milliunits,
    format_milliunits,
    parse_decimal,
)

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "get_state_file",
    "reload_config",
    # Currency utilities
    "compute_milliunits",
    "format_milliunits",
    "parse_decimal",
]
