# extractors/extractor_page_text.py
"""
Flattens one loaded page into the text the league classifier reads.
"""

from typing import Callable, List, Union

from bs4 import BeautifulSoup, Tag

from logger import get_logger

from .base_extractor import BaseDataExtractor

logger = get_logger("extract")


class PageTextExtractor(BaseDataExtractor):
    """
    Concatenates, newline-separated, the text of:
    the page body, every table, every list, every heading, every
    team/league/card widget, every image alt text and every title attribute.

    Regions repeat text already present in the body on purpose: a heading
    or table cell then also stands on a line of its own.
    """

    def extract(self, page: Union[str, BeautifulSoup, Tag, None]) -> str:
        """
        Extract the text of a page.

        Args:
            page: Parsed page or raw HTML

        Returns:
            One string; empty regions contribute empty strings
        """
        try:
            soup = self.to_soup(page)
        except Exception as e:
            logger.debug(self.config.ERROR_MESSAGES["region_extraction"].format("page", e))
            return ""

        regions = [
            ("body", self._body_text),
            ("tables", lambda s: self._joined(self.select_text(s, self.config.TABLE_SELECTOR))),
            ("lists", lambda s: self._joined(self.select_text(s, self.config.LIST_SELECTOR))),
            ("headings", lambda s: self._joined(self.select_text(s, self.config.HEADING_SELECTOR))),
            ("cards", lambda s: self._joined(self.select_text(s, self.config.CARD_SELECTOR))),
            ("image alts", self._image_alts),
            ("titles", lambda s: self._joined(self.attribute_values(s, "title"))),
        ]
        return "\n".join(self._safe_region(soup, name, reader) for name, reader in regions)

    def _safe_region(self, soup: Tag, name: str, reader: Callable[[Tag], str]) -> str:
        try:
            return reader(soup)
        except Exception as e:
            logger.debug(self.config.ERROR_MESSAGES["region_extraction"].format(name, e))
            return ""

    def _body_text(self, soup: Tag) -> str:
        body = soup.body if isinstance(soup, BeautifulSoup) else None
        return self.visible_text(body or soup)

    def _image_alts(self, soup: Tag) -> str:
        alts = [str(img.get("alt", "")).strip() for img in soup.find_all("img", alt=True)]
        return self._joined(alt for alt in alts if alt)

    @staticmethod
    def _joined(texts) -> str:
        return "\n".join(texts)


def extract_page_text(page: Union[str, BeautifulSoup, Tag, None]) -> str:
    return PageTextExtractor().extract(page)
