"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from federal_workdays.core.cache import ObservanceCache, configure_default_cache
from federal_workdays.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug("No config file at %s, using defaults", config_path)
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                return self._flatten_config(config) if config else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        if "cache" in config:
            cache = config["cache"] or {}
            if "max_size" in cache:
                result["cache_max_size"] = cache["max_size"]
            if "ttl_seconds" in cache:
                result["cache_ttl_seconds"] = cache["ttl_seconds"]

        if "calculation" in config:
            calc = config["calculation"] or {}
            if "strategy" in calc:
                result["business_day_strategy"] = calc["strategy"]

        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        if "api" in config:
            api = config["api"] or {}
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        if "logging" in config:
            log = config["logging"] or {}
            if "level" in log:
                result["log_level"] = log["level"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - FEDWORK_CACHE_MAX_SIZE -> cache_max_size
        - FEDWORK_CACHE_TTL_SECONDS -> cache_ttl_seconds
        - FEDWORK_STRATEGY -> business_day_strategy
        - FEDWORK_OUTPUT_FORMAT -> output_format
        - FEDWORK_OUTPUT_DIRECTORY -> output_directory
        - FEDWORK_API_HOST -> api_host
        - FEDWORK_API_PORT -> api_port
        - FEDWORK_LOG_LEVEL -> log_level

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "FEDWORK_CACHE_MAX_SIZE": ("cache_max_size", int),
            "FEDWORK_CACHE_TTL_SECONDS": ("cache_ttl_seconds", float),
            "FEDWORK_STRATEGY": "business_day_strategy",
            "FEDWORK_OUTPUT_FORMAT": "output_format",
            "FEDWORK_OUTPUT_DIRECTORY": "output_directory",
            "FEDWORK_API_HOST": "api_host",
            "FEDWORK_API_PORT": ("api_port", int),
            "FEDWORK_LOG_LEVEL": "log_level",
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                if isinstance(mapping, tuple):
                    config_key, type_converter = mapping
                    try:
                        config_dict[config_key] = type_converter(env_value)
                    except ValueError:
                        logger.warning("Ignoring invalid value for %s: %r", env_var, env_value)
                else:
                    config_dict[mapping] = env_value

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "cache": {
                "max_size": config.cache_max_size,
                "ttl_seconds": config.cache_ttl_seconds,
            },
            "calculation": {
                "strategy": config.business_day_strategy.value,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def apply_cache_config(config: Config) -> ObservanceCache:
    """Install a process-wide observance cache sized by ``config``."""
    return configure_default_cache(
        max_size=config.cache_max_size,
        ttl_seconds=config.cache_ttl_seconds,
    )
