from .base_parser import BaseParser
from .league_parser import LeagueBreakdown, LeagueClassifier
from .league_patterns import LEAGUE_RULES, PatternRule, build_league_rules
from .offering_parser import OfferingCategory, OfferingParser
from .parser_config import ParserConfig

__all__ = [
    "ParserConfig",
    "BaseParser",
    "PatternRule",
    "LEAGUE_RULES",
    "build_league_rules",
    "LeagueBreakdown",
    "LeagueClassifier",
    "OfferingCategory",
    "OfferingParser",
]
