# extractors/parsers/league_patterns.py
"""
Multilingual league detection ruleset (German, French, Italian).

Each rule maps one family of spellings to a canonical league code. The
ruleset is built once at import time and never mutated.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

from models import LeagueCode

# Team-line prefixes such as "Damen 1 (NLA)" or "Hommes 2 NLB"
_TEAM_PREFIX = r"\b(?:Herren|Damen|Frauen|Hommes|Femmes)"

_ORDINAL_WORDS = {
    1: ("Erste", "Première", "Prima", r"1[èe]?re?"),
    2: ("Zweite", "Deuxième", "Seconda", r"2[èe]?me?"),
    3: ("Dritte", "Troisième", "Terza", r"3[èe]?me?"),
    4: ("Vierte", "Quatrième", "Quarta", r"4[èe]?me?"),
    5: ("Fünfte", "Cinquième", "Quinta", r"5[èe]?me?"),
}

_LIGA_CODES = {
    1: LeagueCode.LIGA_1,
    2: LeagueCode.LIGA_2,
    3: LeagueCode.LIGA_3,
    4: LeagueCode.LIGA_4,
    5: LeagueCode.LIGA_5,
}

_AGE_CODES = {
    13: LeagueCode.U13,
    14: LeagueCode.U14,
    15: LeagueCode.U15,
    16: LeagueCode.U16,
    17: LeagueCode.U17,
    18: LeagueCode.U18,
    19: LeagueCode.U19,
    20: LeagueCode.U20,
    21: LeagueCode.U21,
    23: LeagueCode.U23,
}


@dataclass(frozen=True)
class PatternRule:
    """
    One spelling family and the code it normalises to
    """

    key: str
    pattern: "re.Pattern"
    code: LeagueCode

    def matches(self, line: str) -> bool:
        # search() keeps no position state between calls
        return self.pattern.search(line) is not None


def _rule(key: str, pattern: str, code: LeagueCode) -> PatternRule:
    return PatternRule(key=key, pattern=re.compile(pattern, re.IGNORECASE), code=code)


def _national_league_rules() -> List[PatternRule]:
    rules = []
    for letter, code in (("A", LeagueCode.NLA), ("B", LeagueCode.NLB)):
        lower = letter.lower()
        rules.extend(
            [
                _rule(
                    f"nl{lower}_de",
                    rf"\bNL{letter}\b|\bNationalliga\s*{letter}\b|\bNat\.?\s*Liga\s*{letter}\b",
                    code,
                ),
                _rule(
                    f"nl{lower}_fr",
                    rf"\bLigue\s*Nationale\s*{letter}\b|\bLN{letter}\b"
                    rf"|\bLig\.?\s*Nat\.?\s*{letter}\b",
                    code,
                ),
                _rule(f"nl{lower}_it", rf"\bLega\s*Nazionale\s*{letter}\b", code),
            ]
        )
    # NLA team lines carry the first team number, NLB lines any single digit
    rules.append(
        _rule("nla_team", rf"{_TEAM_PREFIX}\s*1\s*[\(\[]?\s*NLA\s*[\)\]]?", LeagueCode.NLA)
    )
    rules.append(
        _rule("nlb_team", rf"{_TEAM_PREFIX}\s*\d?\s*[\(\[]?\s*NLB\s*[\)\]]?", LeagueCode.NLB)
    )
    return rules


def _regional_league_rules() -> List[PatternRule]:
    rules = []
    for number, code in _LIGA_CODES.items():
        german, french, italian, french_ordinal = _ORDINAL_WORDS[number]
        rules.extend(
            [
                _rule(
                    f"liga{number}_de",
                    rf"\b{number}\.?\s*Liga\b|\bLiga\s*{number}\b|\b{german}\s*Liga\b",
                    code,
                ),
                _rule(
                    f"liga{number}_fr",
                    rf"\b{french_ordinal}\s*Ligue\b|\bLigue\s*{number}\b"
                    rf"|\b{french}\s*Ligue\b",
                    code,
                ),
                _rule(
                    f"liga{number}_it",
                    rf"\b{italian}\s*Lega\b|\b{number}[°ª]?\s*Lega\b"
                    rf"|\bLega\s*{number}\b|\bSerie\s*{number}\b",
                    code,
                ),
                _rule(f"liga{number}_short", rf"\b{number}L\b|\b{number}\.\s*L\b", code),
                _rule(
                    f"liga{number}_team",
                    rf"{_TEAM_PREFIX}\s*\d?\s*[\(\[]?\s*{number}\.?\s*"
                    rf"(?:Liga|Ligue|Lega)\s*[\)\]]?",
                    code,
                ),
            ]
        )
    return rules


def _age_category_rules() -> List[PatternRule]:
    rules = []
    for age, code in _AGE_CODES.items():
        pattern = (
            rf"\bU[\-\s]?{age}\b|\bUnter[\-\s]?{age}\b"
            rf"|\bMoins\s*de\s*{age}\b|\bM{age}\b"
        )
        if code is LeagueCode.U13:
            # Birth-year squads ("Jg. 2012") are the youngest category
            pattern += r"|\bJg\.?\s*\d{4}\b"
        rules.append(_rule(f"u{age}", pattern, code))
    return rules


def _umbrella_youth_rules() -> List[PatternRule]:
    return [
        _rule(
            "juniors",
            r"\bJuniors?\b|\bJunioren\b|\bGiovani\b|\bJuniorinnen\b",
            LeagueCode.JUNIORS,
        ),
        _rule(
            "cadets",
            r"\bCadets?\b|\bCadettes?\b|\bKadetten\b|\bCadetti\b",
            LeagueCode.CADETS,
        ),
        _rule("minimes", r"\bMinimes?\b|\bMini\s*Volley\b", LeagueCode.MINIMES),
        _rule("nachwuchs", r"\bNachwuchs\b|\bNachwuchsteam\b", LeagueCode.NACHWUCHS),
    ]


def build_league_rules() -> Tuple[PatternRule, ...]:
    """
    Build the full ruleset in evaluation order.

    Returns:
        Immutable tuple of rules
    """
    return tuple(
        _national_league_rules()
        + _regional_league_rules()
        + _age_category_rules()
        + _umbrella_youth_rules()
    )


LEAGUE_RULES: Tuple[PatternRule, ...] = build_league_rules()
