# extractors/parsers/league_parser.py
"""
League classifier for accumulated club page text.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from models import AGE_CODES, UMBRELLA_YOUTH_CODES, ClubLeagueResult, LeagueCode
from models import codes_to_values, is_youth

from .base_parser import BaseParser
from .league_patterns import LEAGUE_RULES, PatternRule


@dataclass
class LeagueBreakdown:
    """
    Codes detected in one text blob, partitioned by attribution.

    ``all`` is a superset of the other three sets.
    """

    women: Set[LeagueCode] = field(default_factory=set)
    men: Set[LeagueCode] = field(default_factory=set)
    youth: Set[LeagueCode] = field(default_factory=set)
    all: Set[LeagueCode] = field(default_factory=set)

    def apply_to(self, result: ClubLeagueResult) -> None:
        result.women_leagues = set(self.women)
        result.men_leagues = set(self.men)
        result.youth_leagues = set(self.youth)
        result.all_leagues = set(self.all)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "women": codes_to_values(self.women),
            "men": codes_to_values(self.men),
            "youth": codes_to_values(self.youth),
            "all": codes_to_values(self.all),
        }


class LeagueClassifier(BaseParser):
    """
    Detects canonical league codes line by line and attributes them to
    women, men and youth from context tokens on the same line.

    Attribution rules:
    - every matched code goes to ``all``
    - youth codes go to ``youth``, plus each gender whose context is on the line
    - senior codes go to ``women`` when women context is present, otherwise
      to ``men`` when men context is present
    - a line naming a specific age category (U13..U23) does not also report
      umbrella terms such as JUNIORS from that line
    """

    def __init__(self, rules: Optional[Sequence[PatternRule]] = None):
        super().__init__()
        self.rules = tuple(rules) if rules is not None else LEAGUE_RULES

    def classify(self, text: str) -> LeagueBreakdown:
        """
        Classify an accumulated text blob.

        Args:
            text: Concatenated text of every page visited for a club

        Returns:
            LeagueBreakdown, empty when nothing matched
        """
        breakdown = LeagueBreakdown()
        for line in self._split_lines(text):
            self._classify_line(line, breakdown)
        return breakdown

    def match_line(self, line: str) -> Set[LeagueCode]:
        """
        Codes whose patterns match one line, after umbrella suppression
        """
        matched = {rule.code for rule in self.rules if rule.matches(line)}
        if matched & AGE_CODES:
            matched -= UMBRELLA_YOUTH_CODES
        return matched

    def _classify_line(self, line: str, breakdown: LeagueBreakdown) -> None:
        matched = self.match_line(line)
        if not matched:
            return

        women_context = self._has_women_context(line)
        men_context = self._has_men_context(line)

        for code in matched:
            breakdown.all.add(code)

            if is_youth(code):
                breakdown.youth.add(code)
                if women_context:
                    breakdown.women.add(code)
                if men_context:
                    breakdown.men.add(code)
            elif women_context:
                # Women context wins when both are on the line
                breakdown.women.add(code)
            elif men_context:
                breakdown.men.add(code)
