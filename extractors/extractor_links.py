# extractors/extractor_links.py
"""
Discovers likely team/league subpages of a club website.
"""

from typing import List, Union

from bs4 import BeautifulSoup, Tag

from logger import get_logger

from .base_extractor import BaseDataExtractor
from .navigation import NavigationConfig, URLParser

logger = get_logger("extract")


class TeamPageLinkExtractor(BaseDataExtractor):
    """
    Finds candidate subpages from one loaded page.

    A link qualifies when its href or text contains a team/league keyword,
    or when it sits inside a navigation, menu or header region. Candidates
    are resolved to absolute URLs, kept on the page's host, de-duplicated
    and capped.
    """

    def __init__(self, url_parser: URLParser = None):
        super().__init__()
        self.url_parser = url_parser or URLParser(NavigationConfig())

    def find_team_pages(
        self, page: Union[str, BeautifulSoup, Tag, None], base_url: str, limit: int = 15
    ) -> List[str]:
        """
        Collect candidate subpage URLs.

        Args:
            page: Parsed page or raw HTML
            base_url: URL the page was loaded from
            limit: Maximum number of URLs returned

        Returns:
            Absolute same-host URLs in discovery order
        """
        if limit <= 0:
            return []

        try:
            soup = self.to_soup(page)
            hrefs = self._keyword_hrefs(soup) + self._navigation_hrefs(soup)
        except Exception as e:
            logger.debug(self.config.ERROR_MESSAGES["link_extraction"].format(base_url, e))
            return []

        candidates = []
        for href in self.url_parser.deduplicate(hrefs):
            url = self.url_parser.make_absolute_url(href, base_url)
            if url and self.url_parser.is_same_host(url, base_url):
                candidates.append(url)

        return self.url_parser.deduplicate(candidates)[:limit]

    def _keyword_hrefs(self, soup: Tag) -> List[str]:
        found = []
        for link in soup.find_all("a", href=True):
            raw_href = str(link.get("href", "")).strip()
            if not raw_href or self._is_skipped(raw_href):
                continue

            href = raw_href.lower()
            text = link.get_text(" ", strip=True).lower()
            if any(
                keyword in href or keyword in text
                for keyword in self.config.TEAM_PAGE_KEYWORDS
            ):
                found.append(raw_href)
        return found

    def _navigation_hrefs(self, soup: Tag) -> List[str]:
        found = []
        for link in soup.select(self.config.NAVIGATION_LINK_SELECTOR):
            raw_href = str(link.get("href", "")).strip()
            if raw_href and not self._is_skipped(raw_href):
                found.append(raw_href)
        return found

    def _is_skipped(self, href: str) -> bool:
        return href.lower().startswith(self.config.SKIPPED_LINK_PREFIXES)
