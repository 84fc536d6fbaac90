# pipelines/club_sources.py
"""
Loads the club registry export the crawler works through.
"""

import json
from pathlib import Path
from typing import List, Union

from exceptions import ClubSourceError
from logger import get_logger
from models import ClubSource

logger = get_logger("crawl")


def load_club_sources(path: Union[str, Path]) -> List[ClubSource]:
    """
    Read club records from a JSON file.

    Accepts either an object keyed by club id (``{id: {id, name, website,
    logo}}``) or a list of the same records. Clubs without a website are
    dropped, as are repeated ids after their first occurrence.

    Args:
        path: Location of the club file

    Returns:
        Clubs in file order

    Raises:
        ClubSourceError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ClubSourceError(str(path), e) from e

    if isinstance(data, dict):
        entries = list(data.values())
    elif isinstance(data, list):
        entries = data
    else:
        raise ClubSourceError(
            str(path), TypeError(f"expected object or list, got {type(data).__name__}")
        )

    clubs: List[ClubSource] = []
    seen = set()
    skipped = 0
    for entry in entries:
        if not isinstance(entry, dict):
            raise ClubSourceError(str(path), TypeError(f"invalid club entry: {entry!r}"))
        try:
            club = ClubSource.from_dict(entry)
        except KeyError as e:
            raise ClubSourceError(str(path), e) from e

        if not club.website_url or club.id in seen:
            skipped += 1
            continue
        seen.add(club.id)
        clubs.append(club)

    logger.info("Found %d clubs with websites (%d skipped) in %s", len(clubs), skipped, path)
    return clubs
