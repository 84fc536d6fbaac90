# extractors/extractor_directory.py
"""
Reads club identity and revealed league badges from directory card markup.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from logger import get_logger

from .base_extractor import BaseDataExtractor

logger = get_logger("directory")


@dataclass
class CardIdentity:
    name: str
    city: Optional[str] = None
    email: Optional[str] = None


class DirectoryCardExtractor(BaseDataExtractor):
    """
    Pure functions over the outer HTML of one directory card or offering.
    """

    def __init__(self):
        super().__init__()
        self._postal_code = re.compile(self.config.POSTAL_CODE_PATTERN)
        self._badge = re.compile(self.config.BADGE_PATTERN)

    def extract_identity(self, card_html: Union[str, Tag, None]) -> Optional[CardIdentity]:
        """
        Read name, city and email from a club card.

        Args:
            card_html: Outer HTML of the card

        Returns:
            CardIdentity, or None when the card has no name
        """
        try:
            soup = self.to_soup(card_html)
            name = self.first_text(soup, self.config.DIRECTORY_NAME_SELECTOR)
            if not name:
                return None
            city = self.clean_city(self.first_text(soup, self.config.DIRECTORY_CITY_SELECTOR))
            email = self.first_text(soup, self.config.DIRECTORY_EMAIL_SELECTOR)
        except Exception as e:
            logger.debug(self.config.ERROR_MESSAGES["card_extraction"].format(e))
            return None

        return CardIdentity(name=name, city=city, email=email or None)

    def clean_city(self, text: str) -> Optional[str]:
        """
        Strip the leading postal code: ``"6500 Bellinzona"`` -> ``"Bellinzona"``
        """
        text = " ".join((text or "").split())
        if not text:
            return None
        match = self._postal_code.match(text)
        return match.group(1) if match else text

    def extract_badges(self, offer_html: Union[str, Tag, None]) -> List[str]:
        """
        League badges revealed inside an expanded offering.

        Scans every span and every leaf div, skipping range labels such as
        ``"NLA – 5L"``. Only the closed badge vocabulary is kept.

        Args:
            offer_html: Outer HTML of the offering container

        Returns:
            Badge texts in document order, without repeats
        """
        try:
            soup = self.to_soup(offer_html)
            candidates = [span.get_text(strip=True) for span in soup.find_all("span")]
            candidates += [
                div.get_text(strip=True)
                for div in soup.find_all("div")
                if div.find(True) is None
            ]
        except Exception as e:
            logger.debug(self.config.ERROR_MESSAGES["card_extraction"].format(e))
            return []

        badges: List[str] = []
        for text in candidates:
            if self.is_badge(text) and text not in badges:
                badges.append(text)
        return badges

    def is_badge(self, text: str) -> bool:
        if not text or self.config.RANGE_SEPARATOR in text:
            return False
        return bool(self._badge.match(text)) or self.config.SENIOR_BADGE_TEXT in text
