from .browser_session import BrowserSession, build_chrome_options
from .navigation_config import NavigationConfig
from .navigation_manager import NavigationManager
from .page_number_extractor import PageNumberExtractor
from .pagination_finder import PaginationFinder
from .url_parser import URLParser

__all__ = [
    "BrowserSession",
    "build_chrome_options",
    "NavigationConfig",
    "URLParser",
    "PageNumberExtractor",
    "PaginationFinder",
    "NavigationManager",
]
