"""Unit tests for hubkit configuration with pydantic-settings."""

import pytest
from pydantic import ValidationError

from hubkit.__version__ import __version__
from hubkit.config import DEFAULT_API_URL, HubkitConfig, get_config, reset_config


class TestHubkitConfig:
    """Test HubkitConfig defaults and environment overrides."""

    def test_default_config_values(self):
        config = HubkitConfig()

        assert config.github_token is None
        assert config.get_token() is None
        assert config.github_api_url == DEFAULT_API_URL
        assert config.github_api_version == "2022-11-28"
        assert config.user_agent == f"hubkit/{__version__}"
        assert config.connect_timeout == 5.0
        assert config.read_timeout == 30.0
        assert config.write_timeout == 5.0
        assert config.pool_timeout == 5.0
        assert config.follow_redirects is True
        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_env_token")
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")
        monkeypatch.setenv("HUBKIT_READ_TIMEOUT", "12.5")
        monkeypatch.setenv("HUBKIT_FOLLOW_REDIRECTS", "false")
        monkeypatch.setenv("HUBKIT_USER_AGENT", "release-bot/2.0")

        config = HubkitConfig()

        assert config.get_token() == "ghp_env_token"
        # Trailing slash stripped
        assert config.github_api_url == "https://ghe.example.com/api/v3"
        assert config.read_timeout == 12.5
        assert config.follow_redirects is False
        assert config.user_agent == "release-bot/2.0"

    def test_keyword_arguments_by_field_name(self):
        config = HubkitConfig(github_token="ghp_kw", read_timeout=10, log_level="debug")

        assert config.get_token() == "ghp_kw"
        assert config.read_timeout == 10
        assert config.log_level == "DEBUG"

    def test_token_is_not_exposed_in_repr(self):
        config = HubkitConfig(github_token="ghp_super_secret")

        assert "ghp_super_secret" not in repr(config)
        assert "ghp_super_secret" not in str(config.github_token)


class TestConfigValidation:
    """Test field validators and constraints."""

    def test_rejects_relative_api_url(self):
        with pytest.raises(ValidationError, match="absolute http"):
            HubkitConfig(github_api_url="api.github.com")

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_rejects_out_of_range_timeouts(self, timeout):
        with pytest.raises(ValidationError):
            HubkitConfig(read_timeout=timeout)

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("HUBKIT_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            HubkitConfig()

    def test_log_format_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("HUBKIT_LOG_FORMAT", "TEXT")

        assert HubkitConfig().log_format == "text"

    def test_config_is_frozen(self):
        config = HubkitConfig()

        with pytest.raises(ValidationError):
            config.read_timeout = 99


class TestConfigSingleton:
    """Test get_config caching and reset_config."""

    def test_get_config_returns_cached_instance(self):
        assert get_config() is get_config()

    def test_reset_config_reloads_environment(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_after_reset")

        # Still cached
        assert get_config() is first
        assert get_config().get_token() is None

        reset_config()

        assert get_config() is not first
        assert get_config().get_token() == "ghp_after_reset"
