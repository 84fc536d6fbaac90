# logger/constants.py
"""
Constants shared by the scraping components
"""


class HTMLConstants:
    """
    Federation directory markup
    """

    # Club cards
    CARD_SELECTOR = ".ais-Hits-item"
    CARD_NAME_SELECTOR = "p.text-\\[30px\\]"
    CARD_CITY_SELECTOR = "p.text-anthrazit-400"
    CARD_EMAIL_SELECTOR = 'a[href^="mailto:"]'

    # Offering accordions
    OFFER_HEADER_SELECTOR = ".club-search-offer .cursor-pointer"

    # Pagination
    PAGE_LINK_SELECTOR = '.pagination a[aria-label^="Page"]'
    PAGE_LINK_TEMPLATE = 'a[aria-label="Page {page}"]'
    NEXT_ARROW_SELECTOR = ".pagination a svg.rotate-180"

    # Badge vocabulary
    BADGE_PATTERN = r"^(NLA|NLB|\dL|U\d{2})$"
    SENIOR_BADGE_TEXT = "Senioren"
    RANGE_SEPARATOR = "–"


class ScrapingConstants:
    """
    Scraping operation constants
    """

    PAGE_NUMBER_PATTERN = r"Page\s+(\d+)"
    POSTAL_CODE_PATTERN = r"^\d+\s+(.+)$"

    SKIPPED_LINK_PREFIXES = ("mailto:", "tel:", "#", "javascript:")

