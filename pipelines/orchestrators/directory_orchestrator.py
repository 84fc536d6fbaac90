# pipelines/orchestrators/directory_orchestrator.py
"""
Federation directory orchestrator.
Pages through the club directory and reads league badges from expanded offerings.
"""

import time
from typing import List, Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from configurations import ScraperConfig
from exceptions import DirectoryLoadError, NavigationError
from extractors import DirectoryCardExtractor, OfferingCategory, OfferingParser
from extractors.navigation import NavigationManager
from logger import HTMLConstants, get_logger
from models import DirectoryClubRecord

from .base_orchestrator import BaseOrchestrator
from .orchestrator_config import OrchestratorConfig

logger = get_logger("directory")


class DirectoryOrchestrator(BaseOrchestrator):
    """
    Drives the directory listing: every result page, every club card,
    every offering control on the card.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        navigator: Optional[NavigationManager] = None,
        card_extractor: Optional[DirectoryCardExtractor] = None,
        offering_parser: Optional[OfferingParser] = None,
    ):
        """
        Initialize the directory orchestrator.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        super().__init__(config, navigator)
        self.card_extractor = card_extractor or DirectoryCardExtractor()
        self.offering_parser = offering_parser or OfferingParser()

    def scrape_directory(self, driver) -> List[DirectoryClubRecord]:
        """
        Collect one record per club across all result pages.

        A failure to advance pagination stops early and returns what was
        collected so far.

        Args:
            driver: Selenium WebDriver instance

        Returns:
            Club records in listing order

        Raises:
            DirectoryLoadError: If the directory itself cannot be loaded
        """
        directory = self.config.directory

        logger.info("Loading directory %s", directory.directory_url)
        try:
            self.navigator.load_page(
                driver,
                directory.directory_url,
                directory.initial_load_timeout,
                directory.initial_settle_delay,
            )
        except NavigationError as error:
            raise DirectoryLoadError(f"Directory unavailable: {error}") from error

        total_pages = self.navigator.get_total_pages(driver)
        if directory.max_pages:
            total_pages = min(total_pages, directory.max_pages)
        logger.info("Found %d pages of clubs to scrape", total_pages)

        records: List[DirectoryClubRecord] = []
        for page_number in range(1, total_pages + 1):
            logger.info("=== Page %d/%d ===", page_number, total_pages)

            if page_number == 1:
                self.navigator.wait_for_cards(driver, directory.card_wait_timeout)
            elif not self.navigator.go_to_directory_page(
                driver, page_number, directory.page_settle_delay, directory.card_wait_timeout
            ):
                logger.warning(
                    "Pagination stopped before page %d, keeping %d clubs",
                    page_number,
                    len(records),
                )
                break

            records.extend(self.scrape_current_page(driver))
            logger.info("  Total scraped so far: %d clubs", len(records))

        return records

    def scrape_current_page(self, driver) -> List[DirectoryClubRecord]:
        """
        Read every club card on the current result page.
        """
        try:
            cards = driver.find_elements(By.CSS_SELECTOR, HTMLConstants.CARD_SELECTOR)
        except WebDriverException as error:
            logger.warning("Could not list club cards: %s", error)
            return []

        logger.info("  Found %d clubs on this page", len(cards))
        records = []
        for index, card in enumerate(cards, start=1):
            try:
                record = self.scrape_card(card)
            except WebDriverException as error:
                logger.warning("  Skipping card %d: %s", index, error)
                continue

            if record is not None:
                records.append(record)
            if index % OrchestratorConfig.DIRECTORY_PROGRESS_INTERVAL == 0:
                logger.debug("    Processed %d/%d clubs...", index, len(cards))
        return records

    def scrape_card(self, card) -> Optional[DirectoryClubRecord]:
        """
        Build the record for one club card.

        Args:
            card: WebElement of the card

        Returns:
            The record, or None for a card without a club name
        """
        identity = self.card_extractor.extract_identity(card.get_attribute("outerHTML"))
        if identity is None:
            return None

        record = DirectoryClubRecord(
            name=identity.name, city=identity.city, email=identity.email
        )

        try:
            headers = card.find_elements(By.CSS_SELECTOR, HTMLConstants.OFFER_HEADER_SELECTOR)
        except WebDriverException as error:
            logger.warning("  No offerings read for %s: %s", record.name, error)
            return record

        for index, header in enumerate(headers, start=1):
            try:
                header_text = " ".join((header.text or "").split())
                # Only offerings with a caret expand
                expandable = bool(header_text) and bool(
                    header.find_elements(By.TAG_NAME, "svg")
                )
            except WebDriverException as error:
                logger.warning(
                    "  Skipping offering %d of %s: %s", index, record.name, error
                )
                continue
            if not header_text:
                continue

            record.offerings.append(header_text)
            category = self.offering_parser.parse_header(header_text)
            self.offering_parser.apply_category_flags(record, category)

            if expandable:
                self._expand_offering(header, record, category)

        return record

    def _expand_offering(
        self, header, record: DirectoryClubRecord, category: OfferingCategory
    ) -> None:
        """
        Expand one offering and apply the badges it reveals.

        A failed interaction only loses this offering's badges.
        """
        directory = self.config.directory
        try:
            header.click()
            if directory.expand_settle_delay > 0:
                time.sleep(directory.expand_settle_delay)

            containers = header.find_elements(By.XPATH, OrchestratorConfig.OFFER_CONTAINER_XPATH)
            if containers:
                badges = self.card_extractor.extract_badges(
                    containers[0].get_attribute("outerHTML")
                )
                for badge in badges:
                    self.offering_parser.apply_badge(record, category, badge)
        except WebDriverException as error:
            logger.debug("  Expand failed for %s / %s: %s", record.name, category.label, error)
            return

        if directory.collapse_after_expand:
            try:
                header.click()
                if directory.collapse_settle_delay > 0:
                    time.sleep(directory.collapse_settle_delay)
            except WebDriverException as error:
                logger.debug("  Collapse failed for %s: %s", record.name, error)

    def cleanup(self) -> None:
        logger.debug("Directory orchestrator cleanup (%s)", self.environment)
