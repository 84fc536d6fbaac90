# pipelines/orchestrators/crawl_orchestrator.py
"""
Club website crawl orchestrator.
Visits each club's site, follows likely team/league pages and classifies the text.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup

from configurations import ScraperConfig
from coordination import CheckpointManager
from exceptions import NavigationError
from extractors import LeagueClassifier, PageTextExtractor, TeamPageLinkExtractor
from extractors.navigation import NavigationManager
from logger import get_logger
from models import ClubLeagueResult, ClubSource, codes_to_values

from .base_orchestrator import BaseOrchestrator
from .orchestrator_utils import OrchestratorUtils

logger = get_logger("crawl")


@dataclass
class CrawlRun:
    """
    Outcome of one pass over the club list
    """

    results: List[ClubLeagueResult] = field(default_factory=list)
    processed_this_run: int = 0
    resumed: int = 0
    remaining: int = 0

    @property
    def run_complete(self) -> bool:
        return self.remaining == 0


class ClubWebsiteOrchestrator(BaseOrchestrator):
    """
    Drives the one shared browser through every club website, one club
    and one page at a time.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        checkpoint: Optional[CheckpointManager] = None,
        navigator: Optional[NavigationManager] = None,
        classifier: Optional[LeagueClassifier] = None,
        text_extractor: Optional[PageTextExtractor] = None,
        link_extractor: Optional[TeamPageLinkExtractor] = None,
    ):
        """
        Initialize the crawl orchestrator.

        Args:
            config: Scraper configuration (uses production if None)
            checkpoint: Checkpoint manager, built from the crawler config if None
            navigator: Navigation manager
            classifier: League classifier
            text_extractor: Page text extractor
            link_extractor: Team page link extractor

        Raises:
            ConfigurationError: If configuration is invalid
        """
        super().__init__(config, navigator)
        crawler = self.config.crawler

        self.checkpoint = checkpoint or CheckpointManager(
            crawler.checkpoint_file,
            batch_size=crawler.checkpoint_batch_size,
            write_retries=crawler.checkpoint_write_retries,
            retry_delay=crawler.checkpoint_retry_delay,
        )
        self.classifier = classifier or LeagueClassifier()
        self.text_extractor = text_extractor or PageTextExtractor()
        self.link_extractor = link_extractor or TeamPageLinkExtractor(
            self.navigator.url_parser
        )

    # ***> Single club <***

    def scrape_club(self, driver, club: ClubSource) -> ClubLeagueResult:
        """
        Crawl one club website and classify everything found on it.

        Never raises: a homepage failure, or anything unexpected, ends up
        in ``error`` with all league sets empty.

        Args:
            driver: Selenium WebDriver instance
            club: Club to crawl

        Returns:
            The club's result
        """
        crawler = self.config.crawler
        result = ClubLeagueResult.for_club(club)
        homepage = OrchestratorUtils.normalize_homepage(club.website_url)
        url_parser = self.link_extractor.url_parser
        visited = set()

        try:
            logger.info("  Loading %s", OrchestratorUtils.format_url_for_display(homepage))
            soup = self.navigator.load_page(
                driver, homepage, crawler.homepage_timeout, crawler.homepage_settle_delay
            )
            texts = [self.text_extractor.extract(soup)]
            result.pages_scraped.append(homepage)
            visited.add(url_parser.page_key(homepage))

            team_pages = self.link_extractor.find_team_pages(
                soup, homepage, crawler.max_team_pages
            )
            logger.info("  Found %d team pages", len(team_pages))

            second_level: List[str] = []
            for url in team_pages:
                if url_parser.page_key(url) in visited:
                    continue
                page = self._load_subpage(driver, url, crawler.subpage_settle_delay)
                if page is None:
                    continue
                texts.append(self.text_extractor.extract(page))
                result.pages_scraped.append(url)
                visited.add(url_parser.page_key(url))

                sub_links = self.link_extractor.find_team_pages(
                    page, url, crawler.max_team_pages
                )
                for sub_link in sub_links[: crawler.second_level_links_per_page]:
                    if url_parser.page_key(sub_link) not in visited and sub_link not in second_level:
                        second_level.append(sub_link)

            logger.info("  Found %d second-level pages", len(second_level))
            for url in second_level[: crawler.max_second_level_pages]:
                if url_parser.page_key(url) in visited:
                    continue
                page = self._load_subpage(driver, url, crawler.second_level_settle_delay)
                if page is None:
                    continue
                texts.append(self.text_extractor.extract(page))
                result.pages_scraped.append(url)
                visited.add(url_parser.page_key(url))

            all_text = "\n".join(texts)
            breakdown = self.classifier.classify(all_text)
            logger.debug("  Breakdown: %s", breakdown.to_dict())
            breakdown.apply_to(result)
            result.text_sample = all_text[: crawler.text_sample_length]
            logger.info("  Total pages scraped: %d", len(result.pages_scraped))

        except Exception as error:
            # Any failure here is contained to this club
            result.clear_leagues()
            result.error = OrchestratorUtils.describe_error(error)
            logger.warning("  Error: %s", result.error)

        return result

    def _load_subpage(self, driver, url: str, settle_delay: float) -> Optional[BeautifulSoup]:
        try:
            return self.navigator.load_page(
                driver, url, self.config.crawler.subpage_timeout, settle_delay
            )
        except NavigationError as error:
            logger.debug("  Skipping %s: %s", url, error)
            return None
        except Exception as error:
            # Transport errors from the driver connection, not wrapped by load_page
            logger.warning("  Skipping %s: %s", url, OrchestratorUtils.describe_error(error))
            return None

    # ***> Batch <***

    def scrape_all_clubs(self, driver, clubs: List[ClubSource]) -> CrawlRun:
        """
        Crawl every club not yet in the checkpoint, up to the per-run cap.

        Progress is snapshotted every checkpoint batch. On Ctrl-C a final
        snapshot is written before the interrupt propagates.

        Args:
            driver: Selenium WebDriver instance
            clubs: All source clubs

        Returns:
            CrawlRun with every result known so far

        Raises:
            CheckpointError: If a snapshot cannot be written
            KeyboardInterrupt: After the snapshot, when interrupted
        """
        crawler = self.config.crawler
        resumed = self.checkpoint.load()

        pending = [club for club in clubs if not self.checkpoint.is_processed(club.id)]
        batch = pending[: crawler.max_clubs]
        total = len(batch)
        processed = 0
        start_time = time.time()

        logger.info(
            "Crawling %d clubs (%d already done, %d pending)", total, resumed, len(pending)
        )

        try:
            for index, club in enumerate(batch, start=1):
                logger.info("[%d/%d] %s", index, total, club.name)

                result = self.scrape_club(driver, club)
                processed += 1
                self._log_club_outcome(result)
                self.checkpoint.record(result)

                # Rate limit, applied whatever the outcome
                if crawler.inter_club_delay > 0:
                    time.sleep(crawler.inter_club_delay)
        except KeyboardInterrupt:
            logger.warning("Interrupted after %d clubs, saving checkpoint", processed)
            self.checkpoint.save()
            raise

        metrics = OrchestratorUtils.calculate_processing_metrics(start_time, processed)
        logger.info(
            "Crawled %d clubs in %s",
            processed,
            OrchestratorUtils.format_duration(metrics["duration"]),
        )

        return CrawlRun(
            results=self.checkpoint.results,
            processed_this_run=processed,
            resumed=resumed,
            remaining=len(pending) - processed,
        )

    @staticmethod
    def _log_club_outcome(result: ClubLeagueResult) -> None:
        if result.has_leagues:
            logger.info("  Found: %s", ", ".join(codes_to_values(result.all_leagues)))
        elif not result.error:
            logger.info("  - No leagues found")

    def cleanup(self) -> None:
        """
        Nothing is held beyond the checkpoint, which the service finalizes.
        """
        logger.debug("Crawl orchestrator cleanup (%s)", self.environment)
