# extractors/navigation/browser_session.py
"""
Scoped ownership of the single headless browser used by a run.
"""

from typing import Callable, Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options

from configurations import BrowserConfig
from exceptions import BrowserLaunchError
from logger import get_logger

logger = get_logger("navigation")


def build_chrome_options(config: BrowserConfig) -> Options:
    options = Options()
    for argument in config.chrome_arguments():
        options.add_argument(argument)
    options.page_load_strategy = config.page_load_strategy
    return options


class BrowserSession:
    """
    Context manager that launches Chrome on entry and always quits it on exit.

    Usage:
        with BrowserSession(config.browser) as driver:
            ...

    Args:
        config: Browser launch settings
        driver_factory: Callable building the driver from Chrome options,
            ``webdriver.Chrome`` unless given
    """

    def __init__(
        self,
        config: BrowserConfig,
        driver_factory: Optional[Callable[..., object]] = None,
    ):
        self.config = config
        self.driver_factory = driver_factory or (
            lambda options: webdriver.Chrome(options=options)
        )
        self.driver = None

    def __enter__(self):
        options = build_chrome_options(self.config)
        try:
            self.driver = self.driver_factory(options)
            self.driver.set_page_load_timeout(self.config.page_load_timeout)
        except WebDriverException as e:
            self._quit()
            raise BrowserLaunchError(f"Could not launch Chrome: {e}") from e

        logger.info(
            "Browser launched (headless=%s, strategy=%s)",
            self.config.headless,
            self.config.page_load_strategy,
        )
        return self.driver

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._quit()
        return False

    def _quit(self) -> None:
        if self.driver is None:
            return
        try:
            self.driver.quit()
            logger.info("Browser closed")
        except WebDriverException as e:
            logger.warning("Error while closing browser: %s", e)
        finally:
            self.driver = None
