# models/club_models.py
"""
Crawler-side records: the club input and the per-club league result.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .league_codes import LeagueCode, codes_to_values, parse_codes


@dataclass(frozen=True)
class ClubSource:
    """
    One club as listed in the external registry. Read-only here.
    """

    id: str
    name: str
    website_url: str
    logo_ref: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClubSource":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            website_url=str(data.get("website") or "").strip(),
            logo_ref=data.get("logo"),
        )


@dataclass
class ClubLeagueResult:
    """
    Leagues detected for one club, filled in by the crawl orchestrator.

    ``all_leagues`` always contains every code found in the other three sets.
    """

    id: str
    name: str
    website: str
    women_leagues: Set[LeagueCode] = field(default_factory=set)
    men_leagues: Set[LeagueCode] = field(default_factory=set)
    youth_leagues: Set[LeagueCode] = field(default_factory=set)
    all_leagues: Set[LeagueCode] = field(default_factory=set)
    pages_scraped: List[str] = field(default_factory=list)
    text_sample: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def for_club(cls, club: ClubSource) -> "ClubLeagueResult":
        return cls(id=club.id, name=club.name, website=club.website_url)

    @property
    def has_leagues(self) -> bool:
        return bool(self.all_leagues)

    def clear_leagues(self) -> None:
        self.women_leagues.clear()
        self.men_leagues.clear()
        self.youth_leagues.clear()
        self.all_leagues.clear()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize with the camelCase keys used by the output artifacts
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "website": self.website,
            "womenLeagues": codes_to_values(self.women_leagues),
            "menLeagues": codes_to_values(self.men_leagues),
            "youthLeagues": codes_to_values(self.youth_leagues),
            "allLeagues": codes_to_values(self.all_leagues),
            "pagesScraped": list(self.pages_scraped),
        }
        if self.text_sample is not None:
            data["textSample"] = self.text_sample
        if self.error:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClubLeagueResult":
        """
        Rebuild a result from its serialized form.

        Raises:
            KeyError: If the id is missing
            ValueError: If a league list holds an unknown code
        """
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            website=data.get("website", ""),
            women_leagues=set(parse_codes(data.get("womenLeagues", []))),
            men_leagues=set(parse_codes(data.get("menLeagues", []))),
            youth_leagues=set(parse_codes(data.get("youthLeagues", []))),
            all_leagues=set(parse_codes(data.get("allLeagues", []))),
            pages_scraped=list(data.get("pagesScraped", [])),
            text_sample=data.get("textSample"),
            error=data.get("error"),
        )
