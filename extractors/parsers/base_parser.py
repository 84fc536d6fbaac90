# parsers/base_parser.py
"""
Base parser class providing common functionality for the text classifiers.
Contains shared line handling and gender-context detection.
"""

import re
from typing import List

from .parser_config import ParserConfig


class BaseParser:
    """
    Base class for the league parsers providing common functionality.
    Patterns are compiled once per instance and hold no match state.
    """

    def __init__(self):
        """
        Initialize base parser with configuration.
        """
        self.config = ParserConfig()
        self._line_split = re.compile(self.config.LINE_SPLIT_PATTERN)
        self._women_context = self.config.compile_context(
            self.config.WOMEN_CONTEXT_PATTERN
        )
        self._men_context = self.config.compile_context(self.config.MEN_CONTEXT_PATTERN)

    def _split_lines(self, text: str) -> List[str]:
        """
        Split a text blob into its non-blank lines.

        Args:
            text: Accumulated page text

        Returns:
            List of lines, empty for missing or blank text
        """
        if not text:
            return []
        return [line for line in self._line_split.split(text) if line.strip()]

    def _has_women_context(self, line: str) -> bool:
        return self._women_context.search(line) is not None

    def _has_men_context(self, line: str) -> bool:
        return self._men_context.search(line) is not None
