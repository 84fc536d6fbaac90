# configurations/settings_orchestrator.py
"""
Main orchestrator configuration combining all components.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .settings_browser import BrowserConfig


@dataclass
class CrawlerConfig:
    """
    Club website crawl configuration
    """

    # File locations
    clubs_file: str = "data/club-websites.json"
    output_file: str = "data/club-leagues-scraped.json"
    checkpoint_file: str = "data/scrape-progress.json"

    # Run size
    max_clubs: int = 254

    # Navigation timing (seconds)
    homepage_timeout: float = 20.0
    subpage_timeout: float = 15.0
    homepage_settle_delay: float = 3.0
    subpage_settle_delay: float = 2.0
    second_level_settle_delay: float = 1.0
    inter_club_delay: float = 1.5

    # Page discovery bounds
    max_team_pages: int = 15
    second_level_links_per_page: int = 3
    max_second_level_pages: int = 10

    # Checkpointing
    checkpoint_batch_size: int = 10
    checkpoint_write_retries: int = 3
    checkpoint_retry_delay: float = 1.0

    text_sample_length: int = 500


@dataclass
class DirectoryConfig:
    """
    Federation directory driver configuration
    """

    directory_url: str = "https://www.volleyball.ch/de/verband/services/verein-suchen"
    output_file: str = "data/clubs-verein-suchen-leagues.json"
    csv_file: Optional[str] = None

    # Navigation timing (seconds)
    initial_load_timeout: float = 60.0
    initial_settle_delay: float = 3.0
    card_wait_timeout: float = 10.0
    page_settle_delay: float = 2.0
    expand_settle_delay: float = 0.3
    collapse_settle_delay: float = 0.1

    collapse_after_expand: bool = True
    max_pages: Optional[int] = None


@dataclass
class ScraperConfig:
    """
    Combined configuration for both acquisition strategies.
    """

    # Core configurations
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    crawler: CrawlerConfig = field(default_factory=CrawlerConfig)
    directory: DirectoryConfig = field(default_factory=DirectoryConfig)

    # Output settings
    output_directory: str = "data"

    # Logging settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_strategy: str = "session"

    # Environment tracking
    _environment: Optional[str] = None

    def validate(self) -> bool:
        """
        Validate configuration settings
        """
        crawler = self.crawler
        directory = self.directory

        for name in ("homepage_timeout", "subpage_timeout"):
            if getattr(crawler, name) <= 0:
                raise ValueError(f"{name} must be greater than 0")

        for name in (
            "max_clubs",
            "max_team_pages",
            "max_second_level_pages",
            "checkpoint_batch_size",
            "checkpoint_write_retries",
        ):
            if getattr(crawler, name) <= 0:
                raise ValueError(f"{name} must be greater than 0")

        if crawler.second_level_links_per_page < 0:
            raise ValueError("second_level_links_per_page cannot be negative")

        for name in (
            "homepage_settle_delay",
            "subpage_settle_delay",
            "second_level_settle_delay",
            "inter_club_delay",
            "checkpoint_retry_delay",
        ):
            if getattr(crawler, name) < 0:
                raise ValueError(f"{name} cannot be negative")

        if directory.initial_load_timeout <= 0 or directory.card_wait_timeout <= 0:
            raise ValueError("directory timeouts must be greater than 0")

        for name in (
            "initial_settle_delay",
            "page_settle_delay",
            "expand_settle_delay",
            "collapse_settle_delay",
        ):
            if getattr(directory, name) < 0:
                raise ValueError(f"directory {name} cannot be negative")

        if directory.max_pages is not None and directory.max_pages <= 0:
            raise ValueError("directory max_pages must be greater than 0")

        if self.browser.page_load_timeout <= 0:
            raise ValueError("browser page_load_timeout must be greater than 0")

        if not self.browser.user_agent:
            raise ValueError("browser user_agent cannot be empty")

        if self.log_strategy not in ("daily", "session"):
            raise ValueError(f"Unknown log strategy: {self.log_strategy}")

        return True

    def get_summary(self) -> dict:
        """
        Get a summary of the current configuration
        """
        crawler = self.crawler
        return {
            "environment": self._environment or "unknown",
            "crawler": {
                "max_clubs": crawler.max_clubs,
                "timeouts": f"{crawler.homepage_timeout}/{crawler.subpage_timeout}s",
                "settle_delays": (
                    f"{crawler.homepage_settle_delay}/"
                    f"{crawler.subpage_settle_delay}/"
                    f"{crawler.second_level_settle_delay}s"
                ),
                "page_caps": (
                    f"{crawler.max_team_pages}+{crawler.max_second_level_pages}"
                ),
                "checkpoint_batch_size": crawler.checkpoint_batch_size,
                "inter_club_delay": crawler.inter_club_delay,
            },
            "directory": {
                "url": self.directory.directory_url,
                "max_pages": self.directory.max_pages or "all",
            },
            "browser": {
                "headless": self.browser.headless,
                "user_agent": self.browser.user_agent,
            },
            "output": {"directory": self.output_directory},
        }

    def __post_init__(self):
        """
        Post-initialization validation and setup
        """
        if self._environment == "testing":
            return

        try:
            Path(self.output_directory).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logging.getLogger(__name__).warning(
                "Could not create output directory %s: %s", self.output_directory, e
            )

        try:
            self.validate()
        except ValueError as e:
            logging.getLogger(__name__).warning(
                "Configuration validation failed: %s", e
            )
