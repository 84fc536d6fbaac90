# pipelines/orchestrators/orchestrator_utils.py
"""
Utility functions for orchestrator operations.
Provides helper methods for common orchestrator tasks.
"""

import time
from typing import Dict

from .orchestrator_config import OrchestratorConfig


class OrchestratorUtils:
    """
    Utility class providing helper methods for orchestrator operations.
    """

    @staticmethod
    def format_url_for_display(url: str, max_length: int = None) -> str:
        """
        Format URL for display by truncating if necessary.

        Args:
            url: URL to format
            max_length: Maximum length before truncation

        Returns:
            Formatted URL string
        """
        if max_length is None:
            max_length = OrchestratorConfig.URL_DISPLAY_LENGTH

        if len(url) <= max_length:
            return url

        return "%s%s" % (url[:max_length], OrchestratorConfig.URL_ELLIPSIS)

    @staticmethod
    def normalize_homepage(url: str) -> str:
        """
        Prefix a scheme when the registry lists a bare host like ``www.club.ch``
        """
        url = (url or "").strip()
        if url and "://" not in url:
            return "%s%s" % (OrchestratorConfig.DEFAULT_URL_SCHEME, url)
        return url

    @staticmethod
    def describe_error(error: Exception) -> str:
        """
        One-line error text suitable for a result's ``error`` field.
        """
        lines = str(error).strip().splitlines()
        message = lines[0] if lines else type(error).__name__
        return message[: OrchestratorConfig.ERROR_MESSAGE_LENGTH]

    @staticmethod
    def calculate_processing_metrics(start_time: float, total_items: int) -> Dict[str, float]:
        """
        Calculate processing performance metrics.

        Args:
            start_time: Processing start time
            total_items: Total items processed

        Returns:
            Dictionary containing performance metrics
        """
        duration = time.time() - start_time
        return {
            "duration": duration,
            "avg_time_per_item": duration / max(1, total_items),
            "total_items": total_items,
        }

    @staticmethod
    def format_duration(duration_seconds: float) -> str:
        """
        Format duration in seconds to human-readable string.
        """
        minutes, seconds = divmod(int(duration_seconds), 60)
        hours, minutes = divmod(minutes, 60)
        if hours:
            return "%dh %02dm %02ds" % (hours, minutes, seconds)
        if minutes:
            return "%dm %02ds" % (minutes, seconds)
        return "%.1fs" % duration_seconds
