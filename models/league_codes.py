# models/league_codes.py
"""
Canonical league codes and the groupings used for attribution and statistics.
"""

from enum import Enum
from typing import Iterable, List


class LeagueCode(str, Enum):
    """
    Normalised league or age-category token, independent of source language
    """

    NLA = "NLA"
    NLB = "NLB"
    LIGA_1 = "1L"
    LIGA_2 = "2L"
    LIGA_3 = "3L"
    LIGA_4 = "4L"
    LIGA_5 = "5L"
    U13 = "U13"
    U14 = "U14"
    U15 = "U15"
    U16 = "U16"
    U17 = "U17"
    U18 = "U18"
    U19 = "U19"
    U20 = "U20"
    U21 = "U21"
    U23 = "U23"
    JUNIORS = "JUNIORS"
    CADETS = "CADETS"
    MINIMES = "MINIMES"
    NACHWUCHS = "NACHWUCHS"

    def __str__(self) -> str:
        return self.value


SENIOR_CODES = frozenset(
    {
        LeagueCode.NLA,
        LeagueCode.NLB,
        LeagueCode.LIGA_1,
        LeagueCode.LIGA_2,
        LeagueCode.LIGA_3,
        LeagueCode.LIGA_4,
        LeagueCode.LIGA_5,
    }
)

AGE_CODES = frozenset(
    {
        LeagueCode.U13,
        LeagueCode.U14,
        LeagueCode.U15,
        LeagueCode.U16,
        LeagueCode.U17,
        LeagueCode.U18,
        LeagueCode.U19,
        LeagueCode.U20,
        LeagueCode.U21,
        LeagueCode.U23,
    }
)

UMBRELLA_YOUTH_CODES = frozenset(
    {
        LeagueCode.JUNIORS,
        LeagueCode.CADETS,
        LeagueCode.MINIMES,
        LeagueCode.NACHWUCHS,
    }
)

YOUTH_CODES = AGE_CODES | UMBRELLA_YOUTH_CODES

_CANONICAL_ORDER = {code: position for position, code in enumerate(LeagueCode)}


def is_youth(code: LeagueCode) -> bool:
    return code in YOUTH_CODES


def sort_codes(codes: Iterable[LeagueCode]) -> List[LeagueCode]:
    """
    Order codes by their position in the enumeration, dropping duplicates
    """
    return sorted(set(codes), key=_CANONICAL_ORDER.__getitem__)


def codes_to_values(codes: Iterable[LeagueCode]) -> List[str]:
    return [code.value for code in sort_codes(codes)]


def parse_codes(values: Iterable[str]) -> List[LeagueCode]:
    """
    Convert serialized code strings back to LeagueCode members.

    Raises:
        ValueError: If a value is not a known code
    """
    return sort_codes(LeagueCode(value) for value in values)
