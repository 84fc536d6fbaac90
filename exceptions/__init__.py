from .checkpoint import CheckpointError
from .extractor import (
    BrowserLaunchError,
    ConfigurationError,
    DirectoryLoadError,
    LeagueScrapingError,
    NavigationError,
)
from .parsers import ClubSourceError, ParsingError

__all__ = [
    "LeagueScrapingError",
    "NavigationError",
    "ConfigurationError",
    "BrowserLaunchError",
    "DirectoryLoadError",
    "ParsingError",
    "ClubSourceError",
    "CheckpointError",
]
