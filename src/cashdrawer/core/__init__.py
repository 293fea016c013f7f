"""
Core Utilities Package

Shared helpers used across the reconciler:
- Currency parsing, rounding and formatting with one float tolerance
- Configuration management for environment-specific settings
- JSON file helpers
"""

from .config import Config, Environment, get_config, reload_config
from .currency import (
    DEFAULT_TOLERANCE,
    format_amount,
    format_denomination,
    is_multiple_of,
    parse_amount,
    parse_number,
    round_cents,
    round_half_up,
    sanitize_numeric_input,
)

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "reload_config",
    # Currency utilities
    "DEFAULT_TOLERANCE",
    "format_amount",
    "format_denomination",
    "is_multiple_of",
    "parse_amount",
    "parse_number",
    "round_cents",
    "round_half_up",
    "sanitize_numeric_input",
]
