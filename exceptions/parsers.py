# exceptions/parsers.py
"""
Errors for inputs the run cannot proceed without.

Page text and badge extraction degrade to empty values instead of raising.
"""

from .extractor import LeagueScrapingError


class ParsingError(LeagueScrapingError):
    """
    Input could not be turned into usable data.

    Args:
        message: What failed to parse
        original_error: The exception that triggered it, if any
    """

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error is None:
            return self.message
        return f"{self.message} (caused by {type(self.original_error).__name__}: {self.original_error})"


class ClubSourceError(ParsingError):
    """Club input file is missing, not JSON, or not a list/map of clubs."""

    def __init__(self, source_path: str, original_error: Exception = None):
        super().__init__(f"Could not read club sources from {source_path}", original_error)
        self.source_path = source_path
