# extractors/parsers/parser_config.py
"""
Configuration module for text classification settings.
Contains the context vocabularies and markers shared across parsers.
"""

import re


class ParserConfig:
    """
    Configuration class containing all parser-related constants and settings.
    Centralizes the multilingual vocabularies to improve maintainability.
    """

    # Text is classified line by line
    LINE_SPLIT_PATTERN = r"[\n\r]+"

    # Women-indicative tokens (de/fr/it/en); "f" only as a standalone letter
    WOMEN_CONTEXT_PATTERN = (
        r"(?:damen|frauen|women|girls?|weiblich|feminin|féminin|female|femmes?"
        r"|donne|ragazze|signore|filles?|féminines?|[^a-z]f\b)"
    )

    # Men-indicative tokens; "men" also occurs inside "damen" and "women"
    MEN_CONTEXT_PATTERN = (
        r"(?:herren|männer|men|jungs?|männlich|masculin|male|hommes?|uomini"
        r"|ragazzi|signori|garçons?|masculins?|[^a-z]m\b|[^a-z]h\b)"
    )

    # Directory offering header markers
    WOMEN_HEADER_MARKER = "Frauen"
    MEN_HEADER_MARKER = "Männer"
    GIRLS_YOUTH_HEADER_MARKER = "Juniorinnen"
    BOYS_YOUTH_HEADER_MARKER = "Junioren"
    KIDS_HEADER_MARKER = "kids"
    BEACH_HEADER_MARKER = "beach"
    SENIOR_BADGE_MARKER = "senioren"

    @classmethod
    def compile_context(cls, pattern: str) -> "re.Pattern":
        return re.compile(pattern, re.IGNORECASE)
