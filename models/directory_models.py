# models/directory_models.py
"""
Directory-side record: one club card from the federation listing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from .league_codes import AGE_CODES, SENIOR_CODES, LeagueCode, codes_to_values, sort_codes


class Gender(str, Enum):
    WOMEN = "women"
    MEN = "men"


class BeachCategory(str, Enum):
    WOMEN = "beachWomen"
    MEN = "beachMen"
    JUNIORINNEN = "beachJuniorinnen"
    JUNIOREN = "beachJunioren"


@dataclass
class DirectoryClubRecord:
    """
    Leagues one club offers according to the directory, held as one set
    of codes per dimension.

    The wide per-field boolean view is derived by ``to_flags`` and never
    stored.
    """

    name: str
    city: Optional[str] = None
    email: Optional[str] = None
    women_leagues: Set[LeagueCode] = field(default_factory=set)
    men_leagues: Set[LeagueCode] = field(default_factory=set)
    women_youth: Set[LeagueCode] = field(default_factory=set)
    men_youth: Set[LeagueCode] = field(default_factory=set)
    senioren: Set[Gender] = field(default_factory=set)
    beach: Set[BeachCategory] = field(default_factory=set)
    kids_volley: bool = False
    offerings: List[str] = field(default_factory=list)
    specific_leagues: List[str] = field(default_factory=list)

    def add_league(self, gender: Gender, code: LeagueCode) -> None:
        target = self.women_leagues if gender is Gender.WOMEN else self.men_leagues
        target.add(code)

    def add_youth(self, gender: Gender, code: LeagueCode) -> None:
        target = self.women_youth if gender is Gender.WOMEN else self.men_youth
        target.add(code)

    def has_league(self, gender: Gender, code: LeagueCode) -> bool:
        target = self.women_leagues if gender is Gender.WOMEN else self.men_leagues
        return code in target

    def to_flags(self) -> Dict[str, bool]:
        """
        Legacy wide schema: one boolean per (gender x league) and
        (gender x age category), plus kids and beach variants.
        """
        flags: Dict[str, bool] = {}
        for gender, leagues, youth in (
            (Gender.WOMEN, self.women_leagues, self.women_youth),
            (Gender.MEN, self.men_leagues, self.men_youth),
        ):
            for code in sort_codes(SENIOR_CODES):
                flags[f"{gender.value}{code.value}"] = code in leagues
            flags[f"{gender.value}Senioren"] = gender in self.senioren
            for code in sort_codes(AGE_CODES):
                flags[f"{gender.value}{code.value}"] = code in youth

        flags["kidsVolley"] = self.kids_volley
        for category in BeachCategory:
            flags[category.value] = category in self.beach
        return flags

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "city": self.city,
            "email": self.email,
            "womenLeagues": codes_to_values(self.women_leagues),
            "menLeagues": codes_to_values(self.men_leagues),
            "womenYouthLeagues": codes_to_values(self.women_youth),
            "menYouthLeagues": codes_to_values(self.men_youth),
            "senioren": [g.value for g in Gender if g in self.senioren],
            "beach": [c.value for c in BeachCategory if c in self.beach],
            "kidsVolley": self.kids_volley,
            "rawAngebot": list(self.offerings),
            "specificLeagues": list(self.specific_leagues),
            "flags": self.to_flags(),
        }
