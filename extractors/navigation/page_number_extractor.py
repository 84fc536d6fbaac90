# extractors/navigation/page_number_extractor.py
"""
Page number extraction utilities.
Reads page numbers out of pagination link labels.
"""

import re
from typing import Iterable, Optional

from .navigation_config import NavigationConfig


class PageNumberExtractor:
    """
    Extracts page numbers from pagination labels such as ``"Page 7"``.
    """

    def __init__(self, config: NavigationConfig):
        """
        Initialize page number extractor with configuration.

        Args:
            config: NavigationConfig instance with pagination settings
        """
        self.config = config
        self._pattern = re.compile(config.PAGE_NUMBER_PATTERN)

    def page_number_from_label(self, label: Optional[str]) -> Optional[int]:
        if not label:
            return None
        match = self._pattern.search(label)
        return int(match.group(1)) if match else None

    def get_total_pages(self, labels: Iterable[Optional[str]]) -> int:
        """
        Highest page number among the labels.

        Args:
            labels: aria-label values of the pagination links

        Returns:
            Total page count (defaults to 1 if no label carries a number)
        """
        numbers = [
            number
            for number in (self.page_number_from_label(label) for label in labels)
            if number is not None
        ]
        return max(numbers + [self.config.DEFAULT_PAGE_NUMBER])
