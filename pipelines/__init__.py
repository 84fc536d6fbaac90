# pipelines/__init__.py
"""
League collection pipelines: club website crawl and federation directory scrape.
"""

from .club_sources import load_club_sources
from .output_writer import (
    build_crawl_statistics,
    build_directory_summary,
    write_crawl_output,
    write_directory_output,
)
from .run_league_collection import ScrapingService, run_club_crawl, run_directory_scrape

__all__ = [
    "load_club_sources",
    "build_crawl_statistics",
    "build_directory_summary",
    "write_crawl_output",
    "write_directory_output",
    "ScrapingService",
    "run_club_crawl",
    "run_directory_scrape",
]
