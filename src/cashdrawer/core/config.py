#!/usr/bin/env python3
"""
Configuration Management for the Cash Drawer Reconciler

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production); the test
environment keeps its data in a temporary directory.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import DEFAULT_CURRENCY_SYMBOL, DEFAULT_TOLERANCE

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ReconciliationConfig:
    """Settings that feed the totals and allocation formulas."""

    fixed_deduction: float = 1000.0
    tolerance: float = DEFAULT_TOLERANCE
    max_adjustments: int = 10
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


@dataclass
class PersistenceConfig:
    """Snapshot storage settings."""

    snapshot_file: Path
    reports_dir: Path
    snapshot_ttl_seconds: int = 3600


@dataclass
class Config:
    """
    Main configuration class for the cash drawer application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    reconciliation: ReconciliationConfig
    persistence: PersistenceConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("CASHDRAWER_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_cashdrawer"
            data_dir = Path(os.getenv("CASHDRAWER_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("CASHDRAWER_DATA_DIR", "./data")).expanduser().resolve()

        reports_dir = data_dir / "reports"

        # Ensure directories exist
        for directory in [data_dir, reports_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        reconciliation = ReconciliationConfig(
            fixed_deduction=float(os.getenv("CASHDRAWER_FIXED_DEDUCTION", "1000")),
            tolerance=float(os.getenv("CASHDRAWER_TOLERANCE", str(DEFAULT_TOLERANCE))),
            max_adjustments=int(os.getenv("CASHDRAWER_MAX_ADJUSTMENTS", "10")),
            currency_symbol=os.getenv("CASHDRAWER_CURRENCY", DEFAULT_CURRENCY_SYMBOL),
        )

        persistence = PersistenceConfig(
            snapshot_file=data_dir / "drawer_snapshot.json",
            reports_dir=reports_dir,
            snapshot_ttl_seconds=int(os.getenv("CASHDRAWER_SNAPSHOT_TTL", "3600")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            reconciliation=reconciliation,
            persistence=persistence,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if self.persistence.snapshot_ttl_seconds <= 0:
            errors.append("Snapshot TTL must be positive")
        if not 0 < self.reconciliation.tolerance < 0.01:
            errors.append("Tolerance must be between 0 and 0.01")
        if self.reconciliation.max_adjustments < 1:
            errors.append("Max adjustments must be at least 1")
        if self.reconciliation.fixed_deduction < 0:
            errors.append("Fixed deduction must be non-negative")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                # Nested dataclass
                result[field_name] = {
                    name: _plain_value(value) for name, value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain_value(field_value)

        return result


def _plain_value(value: Any) -> Any:
    """Convert Path and Enum values to strings."""
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


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
