# configurations/factory.py
"""
Builds ScraperConfig objects for the development, testing and production
presets, plus ad hoc configs with keyword overrides.
"""

import os

from .settings_base import EnvironmentVariables
from .settings_browser import BrowserConfig
from .settings_orchestrator import CrawlerConfig, DirectoryConfig, ScraperConfig

# ***> override prefix -> ScraperConfig attribute holding that section <***
SECTION_PREFIXES = {
    "browser_": "browser",
    "crawler_": "crawler",
    "directory_": "directory",
}


class ConfigFactory:
    """
    Preset configurations, one static method per environment
    """

    @staticmethod
    def development() -> ScraperConfig:
        """Small runs with verbose logs."""
        return ScraperConfig(
            browser=BrowserConfig.from_env(),
            crawler=CrawlerConfig(max_clubs=20),
            directory=DirectoryConfig(max_pages=3),
            log_level="DEBUG",
            _environment="development",
        )

    @staticmethod
    def testing() -> ScraperConfig:
        """No waits anywhere, tiny caps, quiet logs."""
        return ScraperConfig(
            browser=BrowserConfig(),
            crawler=CrawlerConfig(
                max_clubs=5,
                homepage_settle_delay=0.0,
                subpage_settle_delay=0.0,
                second_level_settle_delay=0.0,
                inter_club_delay=0.0,
                checkpoint_retry_delay=0.0,
            ),
            directory=DirectoryConfig(
                initial_settle_delay=0.0,
                page_settle_delay=0.0,
                expand_settle_delay=0.0,
                collapse_settle_delay=0.0,
                max_pages=2,
            ),
            log_level="ERROR",
            _environment="testing",
        )

    @staticmethod
    def production() -> ScraperConfig:
        return ScraperConfig(
            browser=BrowserConfig.from_env(),
            crawler=CrawlerConfig(),
            directory=DirectoryConfig(),
            log_level="INFO",
            _environment="production",
        )

    @staticmethod
    def custom(environment: str = "production", **kwargs) -> ScraperConfig:
        """
        Start from a preset and apply keyword overrides.

        Plain names are set on ScraperConfig itself. Names starting with
        ``browser_``, ``crawler_`` or ``directory_`` are set on that section
        with the prefix removed. Keys that match nothing are ignored.

        Args:
            environment: Preset to start from
            **kwargs: Override values

        Returns:
            Validated configuration

        Raises:
            ValueError: If the preset is unknown or a value is out of range
        """
        config = get_config(environment)
        config._environment = f"custom-{environment.lower()}"

        for key, value in kwargs.items():
            target, attribute = config, key
            for prefix, section in SECTION_PREFIXES.items():
                if key.startswith(prefix):
                    target, attribute = getattr(config, section), key[len(prefix):]
                    break
            if hasattr(target, attribute):
                setattr(target, attribute, value)

        config.validate()
        return config


PRESETS = {
    "development": ConfigFactory.development,
    "testing": ConfigFactory.testing,
    "production": ConfigFactory.production,
}


def get_config(environment: str = "production") -> ScraperConfig:
    """
    Preset configuration by name (case-insensitive)
    """
    try:
        builder = PRESETS[environment.lower()]
    except KeyError:
        raise ValueError(f"Unknown environment: {environment}") from None
    return builder()


def get_environment_name(default: str = "production") -> str:
    """
    Environment named by the .env file or the process environment
    """
    env = EnvironmentVariables()
    env.load()
    return os.getenv(env.ENVIRONMENT_VAR) or default


def get_environment_config() -> ScraperConfig:
    return get_config(get_environment_name())
