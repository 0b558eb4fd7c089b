"""
bootstrap/ - Bootstrap Layer

Configuration and logging setup.
"""

from .config import (
    NoIDConfig,
    CatalogConfig,
    LoggingConfig,
    load_config,
    get_config,
    reset_config,
)

from .entrypoints import (
    JSONFormatter,
    setup_logging,
    setup_logging_from_config,
)


__all__ = [
    # Config
    "NoIDConfig",
    "CatalogConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Entrypoints
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_config",
]
