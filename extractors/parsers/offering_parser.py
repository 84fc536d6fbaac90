# extractors/parsers/offering_parser.py
"""
Maps directory offering headers and revealed badges onto a club record.
"""

from dataclasses import dataclass

from logger import get_logger
from models import AGE_CODES, BeachCategory, DirectoryClubRecord, Gender, LeagueCode

from .base_parser import BaseParser

logger = get_logger("directory")

_NATIONAL_CODES = frozenset({LeagueCode.NLA, LeagueCode.NLB})
_REGIONAL_CODES = frozenset(
    {
        LeagueCode.LIGA_1,
        LeagueCode.LIGA_2,
        LeagueCode.LIGA_3,
        LeagueCode.LIGA_4,
        LeagueCode.LIGA_5,
    }
)


@dataclass(frozen=True)
class OfferingCategory:
    """
    Category context read from an offering header such as
    ``"Volleyball Frauen (NLA – 5L)"``.
    """

    label: str
    is_women: bool = False
    is_men: bool = False
    is_juniorinnen: bool = False
    is_junioren: bool = False
    is_kids: bool = False
    is_beach: bool = False

    @property
    def short_label(self) -> str:
        return self.label.split("(")[0].strip()


class OfferingParser(BaseParser):
    """
    Turns offering headers into category contexts and applies badges.
    """

    def parse_header(self, header_text: str) -> OfferingCategory:
        label = " ".join((header_text or "").split())
        lower = label.lower()
        is_juniorinnen = self.config.GIRLS_YOUTH_HEADER_MARKER in label
        return OfferingCategory(
            label=label,
            is_women=self.config.WOMEN_HEADER_MARKER in label,
            is_men=self.config.MEN_HEADER_MARKER in label,
            is_juniorinnen=is_juniorinnen,
            is_junioren=(
                self.config.BOYS_YOUTH_HEADER_MARKER in label and not is_juniorinnen
            ),
            is_kids=self.config.KIDS_HEADER_MARKER in lower,
            is_beach=self.config.BEACH_HEADER_MARKER in lower,
        )

    def apply_badge(
        self, record: DirectoryClubRecord, category: OfferingCategory, badge: str
    ) -> bool:
        """
        Set the one attribute implied by (category x badge).

        Args:
            record: Club record being built
            category: Context of the expanded offering
            badge: Revealed badge text, e.g. ``"NLB"`` or ``"U18"``

        Returns:
            True if the badge changed the record's league sets
        """
        entry = f"{category.short_label}: {badge}"
        if entry not in record.specific_leagues:
            record.specific_leagues.append(entry)

        if self.config.SENIOR_BADGE_MARKER in badge.lower():
            gender = self._senior_gender(category)
            if gender is not None:
                record.senioren.add(gender)
                return True
            return False

        try:
            code = LeagueCode(badge)
        except ValueError:
            logger.debug("Badge %r has no canonical code", badge)
            return False

        if code in _NATIONAL_CODES:
            gender = self._senior_gender(category)
            if gender is not None:
                record.add_league(gender, code)
                return True
        elif code in _REGIONAL_CODES:
            if category.is_women and not category.is_juniorinnen:
                record.add_league(Gender.WOMEN, code)
                return True
            if category.is_men and not category.is_junioren:
                record.add_league(Gender.MEN, code)
                return True
        elif code in AGE_CODES:
            if category.is_juniorinnen:
                record.add_youth(Gender.WOMEN, code)
                return True
            if category.is_junioren:
                record.add_youth(Gender.MEN, code)
                return True
        return False

    def apply_category_flags(
        self, record: DirectoryClubRecord, category: OfferingCategory
    ) -> None:
        """
        Record kids and beach offerings, which are known from the header alone
        """
        if category.is_kids:
            record.kids_volley = True

        if category.is_beach:
            if category.is_women:
                record.beach.add(BeachCategory.WOMEN)
            if category.is_men:
                record.beach.add(BeachCategory.MEN)
            if category.is_juniorinnen:
                record.beach.add(BeachCategory.JUNIORINNEN)
            if category.is_junioren:
                record.beach.add(BeachCategory.JUNIOREN)

    @staticmethod
    def _senior_gender(category: OfferingCategory):
        if category.is_women:
            return Gender.WOMEN
        if category.is_men:
            return Gender.MEN
        return None
