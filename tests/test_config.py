"""
Tests for configuration loading.
"""

import pytest
import yaml

from federal_workdays.config.manager import ConfigManager, apply_cache_config
from federal_workdays.core.cache import get_default_cache
from federal_workdays.data.schemas import BusinessDayStrategy, Config


@pytest.fixture
def config_file(tmp_path):
    """Write a nested YAML config and return its path."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        yaml.dump(
            {
                "cache": {"max_size": 50, "ttl_seconds": 30},
                "calculation": {"strategy": "closed_form"},
                "output": {"format": "json", "directory": "out"},
                "api": {"host": "127.0.0.1", "port": 9000},
                "logging": {"level": "debug"},
            }
        ),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove FEDWORK_* variables from the environment."""
    for name in (
        "FEDWORK_CACHE_MAX_SIZE",
        "FEDWORK_CACHE_TTL_SECONDS",
        "FEDWORK_STRATEGY",
        "FEDWORK_OUTPUT_FORMAT",
        "FEDWORK_OUTPUT_DIRECTORY",
        "FEDWORK_API_HOST",
        "FEDWORK_API_PORT",
        "FEDWORK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_packaged_defaults(self):
        config = ConfigManager().load_config()

        assert config.cache_max_size == 1000
        assert config.cache_ttl_seconds == 600
        assert config.business_day_strategy is BusinessDayStrategy.SET_DIFFERENCE

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()
        assert config == Config()

    def test_load_nested_yaml(self, config_file):
        config = ConfigManager(config_file).load_config()

        assert config.cache_max_size == 50
        assert config.cache_ttl_seconds == 30
        assert config.business_day_strategy is BusinessDayStrategy.CLOSED_FORM
        assert config.output_format == "json"
        assert config.output_directory == "out"
        assert config.api_host == "127.0.0.1"
        assert config.api_port == 9000
        assert config.log_level == "DEBUG"

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("FEDWORK_CACHE_MAX_SIZE", "10")
        monkeypatch.setenv("FEDWORK_STRATEGY", "set_difference")
        monkeypatch.setenv("FEDWORK_API_PORT", "8081")

        config = ConfigManager(config_file).load_config()

        assert config.cache_max_size == 10
        assert config.business_day_strategy is BusinessDayStrategy.SET_DIFFERENCE
        assert config.api_port == 8081

    def test_invalid_env_number_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("FEDWORK_CACHE_TTL_SECONDS", "ten minutes")
        config = ConfigManager(config_file).load_config()
        assert config.cache_ttl_seconds == 30

    def test_invalid_strategy(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FEDWORK_STRATEGY", "guess")
        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(tmp_path / "missing.yaml")).load_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("cache: [unclosed", encoding="utf-8")
        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, config_file, tmp_path):
        manager = ConfigManager(config_file)
        config = manager.load_config()

        output_path = str(tmp_path / "nested" / "saved.yaml")
        manager.save_config(config, output_path)

        assert ConfigManager(output_path).load_config() == config

    def test_apply_cache_config(self, config_file):
        config = ConfigManager(config_file).load_config()
        cache = apply_cache_config(config)

        assert get_default_cache() is cache
        assert cache.max_size == 50
        assert cache.ttl_seconds == 30
