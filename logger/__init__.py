from .constants import HTMLConstants, ScrapingConstants
from .logger import (
    ROOT_LOGGER_NAME,
    ColoredFormatter,
    get_logger,
    setup_daily_rotating_logger,
    setup_session_based_logger,
    setup_smart_logger,
)

__all__ = [
    "HTMLConstants",
    "ScrapingConstants",
    "ROOT_LOGGER_NAME",
    "ColoredFormatter",
    "get_logger",
    "setup_daily_rotating_logger",
    "setup_session_based_logger",
    "setup_smart_logger",
]
