# extractors/navigation/navigation_config.py
"""
Configuration settings for navigation operations.
Centralizes all navigation-related constants and settings.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class NavigationConfig:
    """
    Configuration class for navigation operations.

    Contains all navigation-related settings and constants
    to avoid hardcoding values throughout the application.
    """

    # URL display limits
    URL_DISPLAY_LIMIT: int = 80

    # Default page number
    DEFAULT_PAGE_NUMBER: int = 1

    # Only these schemes are ever navigated
    ALLOWED_SCHEMES: Tuple[str, ...] = ("http", "https")

    # Directory pagination selectors from HTMLConstants
    PAGE_LINK_SELECTOR: str = '.pagination a[aria-label^="Page"]'
    PAGE_LINK_TEMPLATE: str = 'a[aria-label="Page {page}"]'
    NEXT_ARROW_SELECTOR: str = ".pagination a svg.rotate-180"
    GENERIC_NEXT_SELECTOR: str = (
        'a[rel="next"], a[aria-label="Next"], a[aria-label="Next page"], '
        ".pagination li.next a"
    )
    CARD_SELECTOR: str = ".ais-Hits-item"

    # Page number pattern from ScrapingConstants
    PAGE_NUMBER_PATTERN: str = r"Page\s+(\d+)"

    @classmethod
    def from_constants(cls, html_constants, scraping_constants):
        """
        Create configuration from existing constants classes.

        Args:
            html_constants: HTMLConstants class
            scraping_constants: ScrapingConstants class

        Returns:
            NavigationConfig instance with values from constants
        """
        config = cls()
        config.PAGE_LINK_SELECTOR = html_constants.PAGE_LINK_SELECTOR
        config.PAGE_LINK_TEMPLATE = html_constants.PAGE_LINK_TEMPLATE
        config.NEXT_ARROW_SELECTOR = html_constants.NEXT_ARROW_SELECTOR
        config.CARD_SELECTOR = html_constants.CARD_SELECTOR
        config.PAGE_NUMBER_PATTERN = scraping_constants.PAGE_NUMBER_PATTERN
        return config
