"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from noid.errors.catalog import BASE_CATALOG_NAME, RESOURCE_DIR, JsonCatalog

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class CatalogConfig:
    """Where message catalogs are found."""

    resource_dir: str = str(RESOURCE_DIR)
    default_catalog: str = BASE_CATALOG_NAME

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(
            resource_dir=os.getenv("NOID_CATALOG_DIR", str(RESOURCE_DIR)),
            default_catalog=os.getenv("NOID_DEFAULT_CATALOG", BASE_CATALOG_NAME),
        )

    def open_catalog(self, name: Optional[str] = None) -> JsonCatalog:
        """Catalog handle for name (default catalog if omitted). Loaded on first lookup."""
        return JsonCatalog(Path(self.resource_dir) / f"{name or self.default_catalog}.json")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("NOID_LOG_LEVEL", "INFO"),
            format=os.getenv("NOID_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("NOID_LOG_FILE"),
            json_logs=os.getenv("NOID_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class NoIDConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Additional settings
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "NoIDConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("NOID_ENVIRONMENT", "development"),
            debug=os.getenv("NOID_DEBUG", "false").lower() == "true",
            catalog=CatalogConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "NoIDConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "NoIDConfig":
        """Create config from dictionary, on top of the environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("catalog", "logging"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Unknown {section} setting ignored: {key}")

        if "settings" in data:
            config.settings.update(data["settings"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "catalog": {
                "resource_dir": self.catalog.resource_dir,
                "default_catalog": self.catalog.default_catalog,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
            "settings": dict(self.settings),
        }


# Global config instance
_config: Optional[NoIDConfig] = None


def load_config(filepath: str = None) -> NoIDConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        NoIDConfig instance
    """
    global _config

    if filepath:
        _config = NoIDConfig.from_file(filepath)
    else:
        default_paths = [
            "./noid.json",
            "./config/noid.json",
            os.path.expanduser("~/.noid/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = NoIDConfig.from_file(path)
                return _config

        _config = NoIDConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> NoIDConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None
