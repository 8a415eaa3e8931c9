"""
Core Infrastructure - Logging and Configuration

Usage:
    from lumui.core import get_logger, get_config

    logger = get_logger(__name__)
    server = get_config().get_server_config()
"""

from ..secure_config import (
    ConfigurationError,
    SecureConfig,
    ServerConfig,
    get_config,
    validate_config_on_startup,
)
from .logging_config import JSONFormatter, get_logger, log_with_context, setup_logging

__all__ = [
    # Configuration
    "get_config",
    "validate_config_on_startup",
    "ConfigurationError",
    "SecureConfig",
    "ServerConfig",
    # Logging
    "get_logger",
    "setup_logging",
    "log_with_context",
    "JSONFormatter",
]
