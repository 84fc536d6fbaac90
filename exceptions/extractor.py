# pylint: disable=unnecessary-pass
"""
Custom exceptions for league scraping runs.
"""


class LeagueScrapingError(Exception):
    """
    Base exception for league scraping errors
    """

    pass


class NavigationError(LeagueScrapingError):
    """
    Raised when page navigation fails or times out
    """

    pass


class ConfigurationError(LeagueScrapingError):
    """
    Raised when configuration is invalid
    """

    pass


class BrowserLaunchError(LeagueScrapingError):
    """
    Raised when the headless browser cannot be started
    """

    pass


class DirectoryLoadError(LeagueScrapingError):
    """
    Raised when the federation directory listing cannot be loaded
    """

    pass
