# extractors/extraction_config.py
"""
Configuration module for page text and link extraction.
"""

from typing import FrozenSet, Tuple

from logger import HTMLConstants, ScrapingConstants


class ExtractionConfig:
    """
    Configuration class for data extraction settings.
    """

    # Never rendered as visible text
    HIDDEN_TAGS: FrozenSet[str] = frozenset(
        {"script", "style", "noscript", "template", "head", "title", "meta", "link"}
    )

    # Elements that start and end their own line, like innerText
    BLOCK_TAGS: FrozenSet[str] = frozenset(
        {
            "address", "article", "aside", "blockquote", "body", "caption",
            "dd", "details", "dialog", "div", "dl", "dt", "fieldset",
            "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
            "h5", "h6", "header", "hr", "html", "li", "main", "nav", "ol",
            "p", "pre", "section", "summary", "table", "tbody", "tfoot",
            "thead", "tr", "ul",
        }
    )
    CELL_TAGS: FrozenSet[str] = frozenset({"td", "th"})
    LINE_BREAK_TAG = "br"

    # Regions that are extracted on top of the page body
    TABLE_SELECTOR = "table"
    LIST_SELECTOR = "ul, ol"
    HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"
    CARD_SELECTOR = (
        '.card, .team, .mannschaft, .squad, [class*="team"], '
        '[class*="liga"], [class*="league"]'
    )

    # Link discovery
    NAVIGATION_LINK_SELECTOR = (
        'nav a[href], .nav a[href], .menu a[href], .navigation a[href], '
        'header a[href], [role="navigation"] a[href]'
    )
    SKIPPED_LINK_PREFIXES: Tuple[str, ...] = ScrapingConstants.SKIPPED_LINK_PREFIXES

    # Team/league page keywords (de/fr/it/en), matched against href and link text
    TEAM_PAGE_KEYWORDS: Tuple[str, ...] = (
        # German - teams
        "team", "teams", "mannschaft", "mannschaften", "kader", "spielbetrieb",
        "aktive", "spieler", "spielerinnen", "herren", "damen", "frauen",
        "erste", "zweite", "dritte", "juniors", "junioren", "nachwuchs",
        # German - leagues
        "ligen", "liga", "meisterschaft", "nationalliga", "nla", "nlb",
        # French - teams
        "equipe", "équipe", "equipes", "équipes", "effectif", "effectifs",
        "joueurs", "joueuses", "hommes", "femmes", "seniors",
        "premiere", "première", "deuxieme", "deuxième", "troisieme", "troisième",
        # French - leagues
        "ligue", "ligues", "championnat", "championnats", "nationale",
        # Italian - teams
        "squadra", "squadre", "giocatori", "giocatrici", "rosa", "organico",
        "prima", "seconda", "terza", "uomini", "donne", "maschile", "femminile",
        # Italian - leagues
        "lega", "leghe", "campionato", "campionati", "nazionale",
        # English
        "squad", "squads", "roster", "rosters", "leagues", "players", "women", "men",
        # General navigation terms
        "sport", "volley", "volleyball", "indoor", "verein", "club", "saison",
        "season", "spielplan", "calendrier", "calendario", "resultate", "results",
        # Team identifiers
        "u13", "u14", "u15", "u16", "u17", "u18", "u19", "u20", "u21", "u23",
        "m13", "m14", "m15", "m16", "m17", "m18", "m19", "m20", "m21", "m23",
        "1l", "2l", "3l", "4l", "5l", "1.liga", "2.liga", "3.liga", "4.liga", "5.liga",
    )

    # Directory cards
    DIRECTORY_NAME_SELECTOR = HTMLConstants.CARD_NAME_SELECTOR
    DIRECTORY_CITY_SELECTOR = HTMLConstants.CARD_CITY_SELECTOR
    DIRECTORY_EMAIL_SELECTOR = HTMLConstants.CARD_EMAIL_SELECTOR
    POSTAL_CODE_PATTERN = ScrapingConstants.POSTAL_CODE_PATTERN
    BADGE_PATTERN = HTMLConstants.BADGE_PATTERN
    SENIOR_BADGE_TEXT = HTMLConstants.SENIOR_BADGE_TEXT
    RANGE_SEPARATOR = HTMLConstants.RANGE_SEPARATOR

    # Error Messages
    ERROR_MESSAGES = {
        "region_extraction": "Failed to extract {} region: {}",
        "link_extraction": "Failed to scan links on {}: {}",
        "card_extraction": "Failed to read directory card: {}",
    }
