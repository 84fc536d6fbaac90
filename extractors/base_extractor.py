# extractors/base_extractor.py
"""
Base extraction utilities shared by the page, link and directory extractors.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from .extraction_config import ExtractionConfig


class BaseDataExtractor:
    """
    Base class providing common extraction methods.

    Every method degrades to an empty value instead of raising, so a
    missing or malformed region never aborts a page.
    """

    def __init__(self):
        """
        Initialize the base extractor with configuration
        """
        self.config = ExtractionConfig()

    @staticmethod
    def to_soup(html: Union[str, BeautifulSoup, Tag, None]) -> BeautifulSoup:
        if isinstance(html, (BeautifulSoup, Tag)):
            return html
        return BeautifulSoup(html or "", "html.parser")

    def visible_text(self, element: Optional[Tag]) -> str:
        """
        Rendered-looking text of an element.

        Block elements start new lines, table cells are separated by a
        space, script/style content and comments are skipped and runs of
        whitespace inside a line collapse to one space.

        Args:
            element: BeautifulSoup Tag to read

        Returns:
            Text with one line per block, or empty string
        """
        if not isinstance(element, Tag):
            return ""

        parts: List[str] = []
        self._collect_text(element, parts)
        lines = (" ".join(line.split()) for line in "".join(parts).split("\n"))
        return "\n".join(line for line in lines if line)

    def _collect_text(self, element: Tag, parts: List[str]) -> None:
        for child in element.children:
            if isinstance(child, Tag):
                if child.name in self.config.HIDDEN_TAGS:
                    continue
                if child.name == self.config.LINE_BREAK_TAG:
                    parts.append("\n")
                    continue

                is_block = child.name in self.config.BLOCK_TAGS
                if is_block:
                    parts.append("\n")
                elif child.name in self.config.CELL_TAGS:
                    parts.append(" ")

                self._collect_text(child, parts)

                if is_block:
                    parts.append("\n")
            # Comments, CDATA and doctype are NavigableString subclasses
            elif type(child) is NavigableString:
                parts.append(str(child))

    def select_text(self, soup: Tag, selector: str) -> List[str]:
        """
        Visible text of every element matching a CSS selector
        """
        return [self.visible_text(element) for element in soup.select(selector)]

    def attribute_values(self, soup: Tag, attribute: str) -> List[str]:
        """
        Non-empty values of one attribute across the whole document
        """
        values = []
        for element in soup.find_all(attrs={attribute: True}):
            value = str(element.get(attribute, "")).strip()
            if value:
                values.append(value)
        return values

    def first_text(self, soup: Tag, selector: str) -> str:
        element = soup.select_one(selector)
        return element.get_text(" ", strip=True) if element else ""
