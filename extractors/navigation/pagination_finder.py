# extractors/navigation/pagination_finder.py
"""
Pagination control finding utilities.
Locates directory pagination elements on the live page.
"""

from typing import List, Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from logger import get_logger

from .navigation_config import NavigationConfig
from .page_number_extractor import PageNumberExtractor

logger = get_logger("navigation")


class PaginationFinder:
    """
    Finds pagination controls using multiple strategies.

    Responsible for locating a direct page link first and falling back
    to a generic "next" control.
    """

    def __init__(self, config: NavigationConfig):
        """
        Initialize pagination finder with configuration.

        Args:
            config: NavigationConfig instance with pagination settings
        """
        self.config = config
        self.page_extractor = PageNumberExtractor(config)

    def get_page_labels(self, driver) -> List[str]:
        try:
            links = driver.find_elements(By.CSS_SELECTOR, self.config.PAGE_LINK_SELECTOR)
            return [link.get_attribute("aria-label") or "" for link in links]
        except WebDriverException as e:
            logger.warning("Could not read pagination labels: %s", e)
            return []

    def get_total_pages(self, driver) -> int:
        return self.page_extractor.get_total_pages(self.get_page_labels(driver))

    def find_page_link(self, driver, page_number: int):
        """
        Find the direct link to one result page.

        Args:
            driver: Selenium WebDriver instance
            page_number: Page to look for

        Returns:
            Link element if found, None otherwise
        """
        selector = self.config.PAGE_LINK_TEMPLATE.format(page=page_number)
        links = driver.find_elements(By.CSS_SELECTOR, selector)
        return links[0] if links else None

    def find_next_control(self, driver):
        """
        Find a generic "next page" control.

        Tries the arrow icon's enclosing link first, then common
        rel/aria-label next links.

        Args:
            driver: Selenium WebDriver instance

        Returns:
            Clickable element if found, None otherwise
        """
        arrows = driver.find_elements(By.CSS_SELECTOR, self.config.NEXT_ARROW_SELECTOR)
        for arrow in arrows:
            anchors = arrow.find_elements(By.XPATH, "./ancestor::a[1]")
            if anchors:
                logger.debug("Found next page arrow link")
                return anchors[0]

        generic = driver.find_elements(By.CSS_SELECTOR, self.config.GENERIC_NEXT_SELECTOR)
        if generic:
            logger.debug("Found generic next page link")
            return generic[0]

        return None
