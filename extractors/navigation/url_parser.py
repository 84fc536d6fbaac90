# extractors/navigation/url_parser.py
"""
URL parsing and manipulation utilities.
Handles absolute URL resolution and same-site filtering.
"""

from typing import Iterable, List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from .navigation_config import NavigationConfig


class URLParser:
    """
    Handles URL parsing and manipulation operations.

    Responsible for resolving hrefs against the page they were found
    on, dropping fragments and keeping discovery on one host.
    """

    def __init__(self, config: NavigationConfig):
        """
        Initialize URL parser with configuration.

        Args:
            config: NavigationConfig instance with URL settings
        """
        self.config = config

    def make_absolute_url(self, href: str, base_url: str) -> Optional[str]:
        """
        Resolve an href against the page URL.

        Args:
            href: Raw href attribute, relative or absolute
            base_url: URL of the page the href was found on

        Returns:
            Absolute URL without fragment, or None for unusable hrefs
        """
        if not isinstance(href, str) or not href.strip():
            return None

        try:
            absolute, _fragment = urldefrag(urljoin(base_url, href.strip()))
            parsed = urlparse(absolute)
        except ValueError:
            return None

        if parsed.scheme not in self.config.ALLOWED_SCHEMES or not parsed.hostname:
            return None
        return absolute

    def get_hostname(self, url: str) -> str:
        try:
            return (urlparse(url).hostname or "").lower()
        except ValueError:
            return ""

    def is_same_host(self, url: str, base_url: str) -> bool:
        """
        True when both URLs point at the same hostname
        """
        host = self.get_hostname(url)
        return bool(host) and host == self.get_hostname(base_url)

    def page_key(self, url: str) -> str:
        """
        Identity of a page for visit tracking: hostname lowercased and
        trailing slashes dropped, so ``https://x.ch`` and ``https://x.ch/``
        are the same page.
        """
        try:
            parsed = urlparse(url)
        except ValueError:
            return url
        path = parsed.path.rstrip("/")
        return parsed._replace(netloc=parsed.netloc.lower(), path=path).geturl()

    def deduplicate(self, urls: Iterable[str]) -> List[str]:
        """
        Drop repeated pages while keeping first-seen order
        """
        seen = set()
        unique = []
        for url in urls:
            key = self.page_key(url)
            if key not in seen:
                seen.add(key)
                unique.append(url)
        return unique

    def truncate_url_for_display(self, url: str) -> str:
        """
        Truncate URL for display purposes.

        Args:
            url: URL to truncate

        Returns:
            Truncated URL with ellipsis if needed
        """
        if len(url) > self.config.URL_DISPLAY_LIMIT:
            return f"{url[: self.config.URL_DISPLAY_LIMIT]}..."
        return url
