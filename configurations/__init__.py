# configurations/__init__.py
"""
configuration module
"""

from .factory import ConfigFactory, get_config, get_environment_config, get_environment_name
from .settings_base import EnvironmentVariables, get_env_flag
from .settings_browser import DEFAULT_USER_AGENT, BrowserConfig
from .settings_orchestrator import CrawlerConfig, DirectoryConfig, ScraperConfig

__all__ = [
    "EnvironmentVariables",
    "get_env_flag",
    "DEFAULT_USER_AGENT",
    "BrowserConfig",
    "CrawlerConfig",
    "DirectoryConfig",
    "ScraperConfig",
    "ConfigFactory",
    "get_config",
    "get_environment_config",
    "get_environment_name",
]
