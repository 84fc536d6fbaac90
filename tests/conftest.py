"""Shared fixtures: an in-memory WebDriver standing in for Chrome.

The fakes implement only the calls the scrapers make: page loads,
``page_source``, ``find_elements``/``find_element``, ``get_attribute``,
``click`` and ``quit``.
"""

import os
import sys

import pytest
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from configurations import ConfigFactory
from extractors.navigation import NavigationConfig
from logger import HTMLConstants
from pipelines.orchestrators import OrchestratorConfig


class FakeElement:
    def __init__(self, text="", attributes=None, children=None, on_click=None, fail_click=False):
        self.text = text
        self.attributes = attributes or {}
        self.children = children or {}
        self.on_click = on_click
        self.fail_click = fail_click
        self.clicks = 0

    def get_attribute(self, name):
        return self.attributes.get(name)

    def find_elements(self, by, value):
        return list(self.children.get(value, []))

    def click(self):
        if self.fail_click:
            raise ElementClickInterceptedException("element click intercepted")
        self.clicks += 1
        if self.on_click:
            self.on_click()


class StaleElement:
    """Control detached from the DOM after the card was listed."""

    @property
    def text(self):
        raise StaleElementReferenceException("stale element reference: element is not attached")

    def find_elements(self, by, value):
        raise StaleElementReferenceException("stale element reference: element is not attached")

    def click(self):
        raise StaleElementReferenceException("stale element reference: element is not attached")


class FakeDriver:
    """Serves HTML by URL. Unknown URLs time out."""

    def __init__(self, pages=None, failing=None):
        self.pages = dict(pages or {})
        self.failing = dict(failing or {})
        self.visited = []
        self.timeouts = []
        self.page_source = ""
        self.quit_called = False

    def set_page_load_timeout(self, timeout):
        self.timeouts.append(timeout)

    def get(self, url):
        self.visited.append(url)
        if url in self.failing:
            raise self.failing[url]
        if url not in self.pages:
            raise TimeoutException("timeout: Timed out receiving message from renderer")
        self.page_source = self.pages[url]

    def find_elements(self, by, value):
        return []

    def find_element(self, by, value):
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(value)
        return found[0]

    def quit(self):
        self.quit_called = True


class FakeDirectoryDriver(FakeDriver):
    """Paginated directory listing; pagination clicks switch the visible cards."""

    def __init__(self, directory_url, card_pages, missing_links=(), has_next=True):
        super().__init__(pages={directory_url: "<html><body></body></html>"})
        self.card_pages = card_pages
        self.current = 1
        self.missing_links = set(missing_links)
        self.page_links = {
            number: FakeElement(
                attributes={"aria-label": f"Page {number}"}, on_click=self._go_to(number)
            )
            for number in range(1, len(card_pages) + 1)
        }
        self.next_link = FakeElement(on_click=self._next) if has_next else None

    def _go_to(self, number):
        return lambda: setattr(self, "current", number)

    def _next(self):
        self.current += 1

    def find_elements(self, by, value):
        if value == HTMLConstants.CARD_SELECTOR:
            return list(self.card_pages[self.current - 1])
        if value == HTMLConstants.PAGE_LINK_SELECTOR:
            return list(self.page_links.values())
        for number, link in self.page_links.items():
            if value == HTMLConstants.PAGE_LINK_TEMPLATE.format(page=number):
                return [] if number in self.missing_links else [link]
        if value == NavigationConfig.GENERIC_NEXT_SELECTOR and self.next_link:
            return [self.next_link]
        return []


def make_offering(header_text, badges=None, fail_click=False):
    """Offering header; ``badges=None`` means the header has no expand caret."""
    children = {}
    if badges is not None:
        spans = "".join(f"<span>{badge}</span>" for badge in badges)
        container_html = (
            '<div class="club-search-offer">'
            f'<div class="cursor-pointer"><span>{header_text}</span><svg></svg></div>'
            f"<div>{spans}</div></div>"
        )
        children = {
            "svg": [FakeElement()],
            OrchestratorConfig.OFFER_CONTAINER_XPATH: [
                FakeElement(attributes={"outerHTML": container_html})
            ],
        }
    return FakeElement(text=header_text, children=children, fail_click=fail_click)


def make_card(name, city="8000 Zürich", email=None, offerings=()):
    email_html = f'<a href="mailto:{email}">{email}</a>' if email else ""
    card_html = (
        '<div class="ais-Hits-item">'
        f'<p class="text-[30px]">{name}</p>'
        f'<p class="text-anthrazit-400">{city}</p>'
        f"{email_html}</div>"
    )
    return FakeElement(
        attributes={"outerHTML": card_html},
        children={HTMLConstants.OFFER_HEADER_SELECTOR: list(offerings)},
    )


@pytest.fixture
def test_config(tmp_path):
    """Testing preset with every artifact under tmp_path."""
    config = ConfigFactory.testing()
    config.output_directory = str(tmp_path)
    config.log_dir = str(tmp_path / "logs")
    config.crawler.clubs_file = str(tmp_path / "clubs.json")
    config.crawler.output_file = str(tmp_path / "club-leagues.json")
    config.crawler.checkpoint_file = str(tmp_path / "progress.json")
    config.directory.output_file = str(tmp_path / "directory.json")
    config.directory.card_wait_timeout = 0.1
    return config
