# pipelines/run_league_collection.py
"""
Main league collection API interface.
"""

from typing import Any, Callable, Dict, List, Optional

from configurations import ConfigFactory, ScraperConfig, get_config
from exceptions import ConfigurationError
from extractors.navigation import BrowserSession
from logger import get_logger
from models import DirectoryClubRecord

from .club_sources import load_club_sources
from .orchestrators import ClubWebsiteOrchestrator, DirectoryOrchestrator
from .output_writer import (
    print_crawl_summary,
    print_directory_summary,
    write_crawl_output,
    write_directory_output,
)

logger = get_logger("pipeline")


class ScrapingService:
    """
    Service class handling configuration shared by both collection strategies.
    """

    @staticmethod
    def setup_scraper_config(environment: str = "production", **overrides) -> ScraperConfig:
        """
        Build the configuration for an environment with optional overrides.

        Overrides use ``browser_``, ``crawler_`` and ``directory_`` prefixes
        for the nested sections. ``None`` values are ignored.

        Args:
            environment: Configuration environment name
            **overrides: Field overrides

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If the environment is unknown or a value is invalid
        """
        overrides = {key: value for key, value in overrides.items() if value is not None}
        try:
            if overrides:
                return ConfigFactory.custom(environment, **overrides)
            config = get_config(environment)
            config.validate()
            return config
        except ValueError as error:
            raise ConfigurationError("Invalid configuration: %s" % error) from error


def _execute_browser_workflow(config: ScraperConfig, work: Callable, driver_factory=None):
    """
    Run one workflow on a freshly launched browser, closing it on every exit path.
    """
    with BrowserSession(config.browser, driver_factory) as driver:
        return work(driver)


def run_club_crawl(
    config: Optional[ScraperConfig] = None,
    driver_factory: Optional[Callable] = None,
    show_summary: bool = True,
) -> Dict[str, Any]:
    """
    Crawl every club website and write the final artifact.

    The checkpoint is removed once every source club has been processed;
    a run stopped by the club cap keeps it so the next run resumes.

    Args:
        config: Scraper configuration (uses production if None)
        driver_factory: Builds the WebDriver from Chrome options
        show_summary: Print the rich summary table

    Returns:
        The written ``{scrapedAt, statistics, results}`` payload

    Raises:
        ClubSourceError: If the club file cannot be read
        BrowserLaunchError: If Chrome cannot be started
        CheckpointError: If progress cannot be persisted
    """
    config = config or ConfigFactory.production()
    clubs = load_club_sources(config.crawler.clubs_file)
    orchestrator = ClubWebsiteOrchestrator(config)

    try:
        run = _execute_browser_workflow(
            config, lambda driver: orchestrator.scrape_all_clubs(driver, clubs), driver_factory
        )
    finally:
        orchestrator.cleanup()

    payload = write_crawl_output(run.results, config.crawler.output_file)
    orchestrator.checkpoint.finalize(run.run_complete)
    if not run.run_complete:
        logger.info(
            "%d clubs left for the next run, checkpoint kept at %s",
            run.remaining,
            config.crawler.checkpoint_file,
        )

    if show_summary:
        print_crawl_summary(payload["statistics"], config.crawler.output_file)
    return payload


def run_directory_scrape(
    config: Optional[ScraperConfig] = None,
    driver_factory: Optional[Callable] = None,
    show_summary: bool = True,
) -> List[DirectoryClubRecord]:
    """
    Scrape the federation directory and write its artifacts.

    Args:
        config: Scraper configuration (uses production if None)
        driver_factory: Builds the WebDriver from Chrome options
        show_summary: Print the rich summary

    Returns:
        All club records collected

    Raises:
        BrowserLaunchError: If Chrome cannot be started
        DirectoryLoadError: If the directory page cannot be loaded
    """
    config = config or ConfigFactory.production()
    orchestrator = DirectoryOrchestrator(config)

    try:
        records = _execute_browser_workflow(config, orchestrator.scrape_directory, driver_factory)
    finally:
        orchestrator.cleanup()

    directory = config.directory
    write_directory_output(records, directory.output_file, directory.csv_file)
    if show_summary:
        print_directory_summary(records, directory.output_file)
    return records
