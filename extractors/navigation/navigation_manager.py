# extractors/navigation/navigation_manager.py
"""
Navigation management for browser-driven scraping.
Handles page loads with bounded timeouts, settle delays and directory pagination.
"""

import time
from typing import Optional

from bs4 import BeautifulSoup
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from exceptions import NavigationError
from logger import HTMLConstants, ScrapingConstants, get_logger

from .navigation_config import NavigationConfig
from .pagination_finder import PaginationFinder
from .url_parser import URLParser

logger = get_logger("navigation")


class NavigationManager:
    """
    Orchestrates navigation on the one shared browser driver.

    Every call blocks until the page is loaded or the timeout is hit, so
    navigations on the driver never overlap.
    """

    def __init__(self, config: Optional[NavigationConfig] = None):
        """
        Initialize navigation manager with all required components.

        Args:
            config: Navigation settings, built from the shared constants if omitted
        """
        self.config = config or NavigationConfig.from_constants(
            HTMLConstants, ScrapingConstants
        )
        self.url_parser = URLParser(self.config)
        self.pagination_finder = PaginationFinder(self.config)

    def load_page(
        self, driver, url: str, timeout: float, settle_delay: float = 0.0
    ) -> BeautifulSoup:
        """
        Load a URL, wait for client-rendered content and parse the result.

        Args:
            driver: Selenium WebDriver instance
            url: Page to load
            timeout: Page-load timeout in seconds
            settle_delay: Fixed pause after the load returns

        Returns:
            Parsed page source

        Raises:
            NavigationError: If the page fails to load or times out
        """
        display_url = self.url_parser.truncate_url_for_display(url)
        try:
            driver.set_page_load_timeout(timeout)
            driver.get(url)
        except TimeoutException as e:
            raise NavigationError(f"Timed out after {timeout}s loading {display_url}") from e
        except WebDriverException as e:
            # Chrome appends a multi-line stacktrace to the message
            detail = e.msg.splitlines()[0] if e.msg else type(e).__name__
            raise NavigationError(f"Failed to load {display_url}: {detail}") from e

        if settle_delay > 0:
            time.sleep(settle_delay)

        try:
            page_source = driver.page_source
        except WebDriverException as e:
            raise NavigationError(f"Could not read page source of {display_url}") from e

        return BeautifulSoup(page_source or "", "html.parser")

    def wait_for_cards(self, driver, timeout: float) -> bool:
        """
        Wait until at least one directory club card is present.

        Returns:
            True if cards appeared, False on timeout
        """
        try:
            WebDriverWait(driver, timeout).until(
                EC.presence_of_element_located((By.CSS_SELECTOR, self.config.CARD_SELECTOR))
            )
            return True
        except TimeoutException:
            logger.warning("No club cards rendered within %ss", timeout)
            return False

    def get_total_pages(self, driver) -> int:
        return self.pagination_finder.get_total_pages(driver)

    def go_to_directory_page(
        self, driver, page_number: int, settle_delay: float, card_wait: float
    ) -> bool:
        """
        Move the directory listing to the given result page.

        Strategy 1 clicks the direct page link, strategy 2 clicks the
        generic next control.

        Args:
            driver: Selenium WebDriver instance
            page_number: Page to move to
            settle_delay: Pause after the click
            card_wait: Seconds to wait for the cards of the new page

        Returns:
            True if a control was clicked, False if pagination cannot advance
        """
        try:
            control = self.pagination_finder.find_page_link(driver, page_number)
            if control is None:
                logger.info(
                    "Could not find link to page %s, trying the next control", page_number
                )
                control = self.pagination_finder.find_next_control(driver)

            if control is None:
                logger.warning("No pagination control found for page %s", page_number)
                return False

            control.click()
        except WebDriverException as e:
            logger.warning("Failed to advance to page %s: %s", page_number, e)
            return False

        if settle_delay > 0:
            time.sleep(settle_delay)
        self.wait_for_cards(driver, card_wait)
        return True
