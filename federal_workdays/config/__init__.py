"""
Configuration loading.
"""

from federal_workdays.config.manager import ConfigManager, apply_cache_config

__all__ = ["ConfigManager", "apply_cache_config"]
