# pipelines/orchestrators/base_orchestrator.py
"""
Base orchestrator class with common functionality.
Provides shared methods and initialization logic.
"""

from abc import ABC, abstractmethod
from typing import Optional

from configurations import ConfigFactory, ScraperConfig
from exceptions import ConfigurationError
from extractors.navigation import NavigationManager


class BaseOrchestrator(ABC):
    """
    Abstract base class for orchestrator implementations.
    Provides common initialization and utility methods.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        navigator: Optional[NavigationManager] = None,
    ):
        """
        Initialize base orchestrator with configuration validation.

        Args:
            config: Scraper configuration (uses production if None)
            navigator: Navigation manager, a default one if None

        Raises:
            ConfigurationError: If configuration is invalid
        """
        # ***> Initialize configuration using factory pattern <***
        self.config = config or ConfigFactory.production()

        # ***> Validate configuration before proceeding <***
        self._validate_configuration()

        # ***> Set up core components <***
        self.navigator = navigator or NavigationManager()

    def _validate_configuration(self) -> None:
        """
        Validate the provided configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            self.config.validate()
        except ValueError as error:
            raise ConfigurationError("Invalid configuration: %s" % error) from error

    @property
    def environment(self) -> str:
        return self.config._environment or "unknown"

    @abstractmethod
    def cleanup(self) -> None:
        """
        Release run state. Must be implemented by subclasses.
        """
