from .base_extractor import BaseDataExtractor
from .extraction_config import ExtractionConfig
from .extractor_directory import CardIdentity, DirectoryCardExtractor
from .extractor_links import TeamPageLinkExtractor
from .extractor_page_text import PageTextExtractor, extract_page_text
from .navigation import (
    BrowserSession,
    NavigationManager,
    PageNumberExtractor,
    PaginationFinder,
    URLParser,
)
from .parsers import LeagueBreakdown, LeagueClassifier, OfferingCategory, OfferingParser

__all__ = [
    "BaseDataExtractor",
    "ExtractionConfig",
    "PageTextExtractor",
    "extract_page_text",
    "TeamPageLinkExtractor",
    "CardIdentity",
    "DirectoryCardExtractor",
    "BrowserSession",
    "NavigationManager",
    "URLParser",
    "PageNumberExtractor",
    "PaginationFinder",
    "LeagueBreakdown",
    "LeagueClassifier",
    "OfferingCategory",
    "OfferingParser",
]
