from .club_models import ClubLeagueResult, ClubSource
from .directory_models import BeachCategory, DirectoryClubRecord, Gender
from .league_codes import (
    AGE_CODES,
    SENIOR_CODES,
    UMBRELLA_YOUTH_CODES,
    YOUTH_CODES,
    LeagueCode,
    codes_to_values,
    is_youth,
    parse_codes,
    sort_codes,
)

__all__ = [
    "ClubSource",
    "ClubLeagueResult",
    "DirectoryClubRecord",
    "Gender",
    "BeachCategory",
    "LeagueCode",
    "SENIOR_CODES",
    "AGE_CODES",
    "UMBRELLA_YOUTH_CODES",
    "YOUTH_CODES",
    "codes_to_values",
    "is_youth",
    "parse_codes",
    "sort_codes",
]
