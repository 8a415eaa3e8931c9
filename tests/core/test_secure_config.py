"""
Tests for lumui.secure_config
"""

import pytest

from lumui.core import ConfigurationError, ServerConfig, get_config, validate_config_on_startup
from lumui.secure_config import ThemeEnvConfig


class TestServerConfig:
    """Tests for server settings"""

    def test_defaults(self, fresh_config):
        server = get_config().get_server_config()
        assert server == ServerConfig()
        assert (server.host, server.port, server.log_level, server.json_logs) == ("127.0.0.1", 8000, "INFO", False)

    def test_environment_values(self, fresh_config, monkeypatch):
        monkeypatch.setenv("LUMUI_HOST", "0.0.0.0")
        monkeypatch.setenv("LUMUI_PORT", "9000")
        monkeypatch.setenv("LUMUI_LOG_LEVEL", "debug")
        monkeypatch.setenv("LUMUI_JSON_LOGS", "true")

        server = get_config().get_server_config()

        assert server.host == "0.0.0.0"
        assert server.port == 9000
        assert server.log_level == "DEBUG"
        assert server.json_logs is True

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_bad_port(self, fresh_config, monkeypatch, port):
        monkeypatch.setenv("LUMUI_PORT", port)
        with pytest.raises(ConfigurationError, match="LUMUI_PORT"):
            get_config().get_server_config()

    def test_bad_log_level(self, fresh_config, monkeypatch):
        monkeypatch.setenv("LUMUI_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError, match="LUMUI_LOG_LEVEL"):
            get_config().get_server_config()


class TestThemeConfig:
    """Tests for brand overrides from the environment"""

    def test_no_overrides(self, fresh_config):
        assert get_config().get_theme_overrides() == {}

    def test_brand_overrides(self, fresh_config, monkeypatch):
        monkeypatch.setenv("LUMUI_BRAND_PRIMARY", " #2563EB ")
        assert get_config().get_theme_overrides() == {"brand": {"primary": "#2563EB"}}

    def test_non_hex_rejected(self, fresh_config, monkeypatch):
        monkeypatch.setenv("LUMUI_BRAND_ACCENT", "red")
        with pytest.raises(ConfigurationError, match="accent"):
            get_config().get_theme_config()

    def test_as_overrides_is_a_copy(self):
        config = ThemeEnvConfig(brand={"primary": "#000000"})
        overrides = config.as_overrides()
        overrides["brand"]["primary"] = "#FFFFFF"
        assert config.brand["primary"] == "#000000"


class TestValidateOnStartup:
    """Tests for validate_config_on_startup()"""

    def test_valid_sections(self, fresh_config):
        validate_config_on_startup(["server", "theme"])

    def test_invalid_section_value(self, fresh_config, monkeypatch):
        monkeypatch.setenv("LUMUI_PORT", "-1")
        with pytest.raises(ConfigurationError):
            validate_config_on_startup(["server"])

    def test_unknown_section(self, fresh_config):
        with pytest.raises(ValueError, match="Unknown configuration section"):
            validate_config_on_startup(["database"])


def test_get_config_is_singleton(fresh_config):
    assert get_config() is get_config()
