"""
Secure Configuration Management

Provides validated configuration for applications that serve lumui pages
(the demo responder, the showcase generator).

Usage:
    from lumui.secure_config import get_config

    config = get_config()
    server = config.get_server_config()
    overrides = config.get_theme_overrides()

Behavior:
    - Loads a .env file once, on first use
    - Fail-fast on invalid values (bad port, unknown log level, non-hex colors)
    - Missing optional values fall back to documented defaults

Raises:
    ConfigurationError: If configuration is invalid
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

# Environment variable -> brand slot
THEME_ENV_VARS = {
    "LUMUI_BRAND_PRIMARY": "primary",
    "LUMUI_BRAND_SECONDARY": "secondary",
    "LUMUI_BRAND_ACCENT": "accent",
}


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class ServerConfig:
    """
    Validated settings for the demo HTTP responder.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.host:
            raise ConfigurationError("LUMUI_HOST must not be empty")

        if not 0 < self.port < 65536:
            raise ConfigurationError(f"LUMUI_PORT out of range: {self.port}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"LUMUI_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {self.log_level}"
            )


@dataclass(frozen=True)
class ThemeEnvConfig:
    """
    Brand color overrides read from the environment.

    Only 6-digit hex colors are accepted, since the theme generator derives
    rgba() blends from them.
    """

    brand: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        for slot, value in self.brand.items():
            if not HEX_COLOR_PATTERN.match(value):
                raise ConfigurationError(f"Brand color '{slot}' must be a #RRGGBB hex color: {value}")

    def as_overrides(self) -> dict[str, Any]:
        """Return the partial theme mapping accepted by create_theme()."""
        return {"brand": dict(self.brand)} if self.brand else {}


def _parse_bool(raw: str | None) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes", "on")


class SecureConfig:
    """
    Centralized configuration manager.

    Loads and validates configuration from environment variables.
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_server_config(self) -> ServerConfig:
        """
        Get validated server configuration.

        Returns:
            ServerConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        raw_port = os.getenv("LUMUI_PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"LUMUI_PORT must be an integer: {raw_port}") from None

        return ServerConfig(
            host=os.getenv("LUMUI_HOST", "127.0.0.1"),
            port=port,
            log_level=os.getenv("LUMUI_LOG_LEVEL", "INFO").upper(),
            json_logs=_parse_bool(os.getenv("LUMUI_JSON_LOGS")),
        )

    def get_theme_config(self) -> ThemeEnvConfig:
        """
        Get brand overrides from LUMUI_BRAND_* variables.

        Raises:
            ConfigurationError: If a color is not #RRGGBB
        """
        brand = {}
        for env_var, slot in THEME_ENV_VARS.items():
            value = os.getenv(env_var)
            if value:
                brand[slot] = value.strip()
        return ThemeEnvConfig(brand=brand)

    def get_theme_overrides(self) -> dict[str, Any]:
        """Convenience wrapper returning create_theme() overrides."""
        return self.get_theme_config().as_overrides()


_config_instance: SecureConfig | None = None


def get_config() -> SecureConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        SecureConfig: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SecureConfig()
    return _config_instance


def validate_config_on_startup(required_sections: list[str]) -> None:
    """
    Validate required configuration at application startup.

    Args:
        required_sections: Sections to validate ('server', 'theme')

    Raises:
        ConfigurationError: If any required configuration is invalid
        ValueError: If a section name is unknown
    """
    config = get_config()

    for section in required_sections:
        if section == "server":
            config.get_server_config()
        elif section == "theme":
            config.get_theme_config()
        else:
            raise ValueError(f"Unknown configuration section: {section}")
