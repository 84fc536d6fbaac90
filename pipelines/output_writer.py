# pipelines/output_writer.py
"""
Serializes run results and prints the end-of-run summaries.
"""

import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd
from rich.console import Console
from rich.table import Table

from logger import get_logger
from models import (
    SENIOR_CODES,
    YOUTH_CODES,
    ClubLeagueResult,
    DirectoryClubRecord,
    Gender,
    LeagueCode,
    codes_to_values,
    sort_codes,
)

logger = get_logger("output")

EXAMPLE_CLUB_LIMIT = 10


def _count_codes(code_sets: Iterable[Iterable[LeagueCode]], allowed) -> Dict[str, int]:
    counter = Counter(code for codes in code_sets for code in codes if code in allowed)
    return {code.value: counter[code] for code in sort_codes(counter)}


def build_crawl_statistics(results: List[ClubLeagueResult]) -> Dict[str, Any]:
    """
    Aggregate statistics of a crawl.

    Senior counts only ever range over senior codes; youth codes are
    counted separately.
    """
    return {
        "totalScraped": len(results),
        "withLeagues": sum(1 for r in results if r.all_leagues),
        "withErrors": sum(1 for r in results if r.error),
        "womenNLA": sum(1 for r in results if LeagueCode.NLA in r.women_leagues),
        "womenNLB": sum(1 for r in results if LeagueCode.NLB in r.women_leagues),
        "menNLA": sum(1 for r in results if LeagueCode.NLA in r.men_leagues),
        "menNLB": sum(1 for r in results if LeagueCode.NLB in r.men_leagues),
        "uniqueLeagues": codes_to_values(code for r in results for code in r.all_leagues),
        "womenSeniorLeagues": _count_codes((r.women_leagues for r in results), SENIOR_CODES),
        "menSeniorLeagues": _count_codes((r.men_leagues for r in results), SENIOR_CODES),
        "youthLeagues": _count_codes((r.youth_leagues for r in results), YOUTH_CODES),
    }


def _write_json(payload: Any, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path


def write_crawl_output(
    results: List[ClubLeagueResult],
    path: Union[str, Path],
    scraped_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Write ``{scrapedAt, statistics, results}`` to the final artifact.

    Returns:
        The payload that was written
    """
    scraped_at = scraped_at or datetime.now(timezone.utc)
    payload = {
        "scrapedAt": scraped_at.isoformat().replace("+00:00", "Z"),
        "statistics": build_crawl_statistics(results),
        "results": [result.to_dict() for result in results],
    }
    written = _write_json(payload, path)
    logger.info("Saved %d club results to %s", len(results), written)
    return payload


def directory_flags_frame(records: List[DirectoryClubRecord]) -> pd.DataFrame:
    """
    One row per club with identity columns and the derived flag columns
    """
    rows = [
        {"name": r.name, "city": r.city, "email": r.email, **r.to_flags()}
        for r in records
    ]
    return pd.DataFrame(rows)


def build_directory_summary(records: List[DirectoryClubRecord]) -> Dict[str, int]:
    """
    Totals per flag, plus the overall club count under ``total``
    """
    summary = {"total": len(records)}
    frame = directory_flags_frame(records)
    if frame.empty:
        return summary

    flag_columns = [c for c in frame.columns if c not in ("name", "city", "email")]
    totals = frame[flag_columns].astype(bool).sum()
    summary.update({column: int(totals[column]) for column in flag_columns})
    return summary


def write_directory_output(
    records: List[DirectoryClubRecord],
    path: Union[str, Path],
    csv_path: Optional[Union[str, Path]] = None,
) -> List[Dict[str, Any]]:
    """
    Write the directory records as a JSON list, and optionally the flag view as CSV.

    Returns:
        The serialized records
    """
    payload = [record.to_dict() for record in records]
    written = _write_json(payload, path)
    logger.info("Saved %d clubs to %s", len(records), written)

    if csv_path:
        csv_path = Path(csv_path)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        directory_flags_frame(records).to_csv(csv_path, index=False)
        logger.info("Saved flag table to %s", csv_path)

    return payload


def print_crawl_summary(statistics: Dict[str, Any], output_path: str, console: Console = None) -> None:
    console = console or Console()

    table = Table(title="Club Website League Scrape")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Total scraped", str(statistics["totalScraped"]))
    table.add_row("With leagues", str(statistics["withLeagues"]))
    table.add_row("Errors", str(statistics["withErrors"]))
    table.add_row("Women NLA / NLB", f"{statistics['womenNLA']} / {statistics['womenNLB']}")
    table.add_row("Men NLA / NLB", f"{statistics['menNLA']} / {statistics['menNLB']}")
    console.print(table)

    unique = ", ".join(statistics["uniqueLeagues"]) or "none"
    console.print(f"Unique leagues found: [bold]{unique}[/bold]")
    console.print(f"Saved to: {output_path}")


def print_directory_summary(
    records: List[DirectoryClubRecord], output_path: str, console: Console = None
) -> None:
    console = console or Console()
    summary = build_directory_summary(records)

    table = Table(title=f"Directory Leagues ({summary['total']} clubs)")
    table.add_column("League", style="cyan")
    table.add_column("Women", justify="right", style="magenta")
    table.add_column("Men", justify="right", style="blue")
    for code in sort_codes(SENIOR_CODES):
        table.add_row(
            code.value,
            str(summary.get(f"women{code.value}", 0)),
            str(summary.get(f"men{code.value}", 0)),
        )
    table.add_row(
        "Senioren",
        str(summary.get("womenSenioren", 0)),
        str(summary.get("menSenioren", 0)),
    )
    console.print(table)
    console.print(f"Kids Volley: {summary.get('kidsVolley', 0)}")

    for gender, title in ((Gender.WOMEN, "Women NLA"), (Gender.MEN, "Men NLA")):
        examples = [r.name for r in records if r.has_league(gender, LeagueCode.NLA)]
        if examples:
            console.print(f"\n[bold]Clubs with {title}[/bold]")
            for name in examples[:EXAMPLE_CLUB_LIMIT]:
                console.print(f"  - {name}")

    console.print(f"\nSaved to: {output_path}")
