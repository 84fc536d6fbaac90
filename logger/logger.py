"""
Log setup for scraping runs - one file per session or one per day
"""
import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Union

ROOT_LOGGER_NAME = "league_scraper"

FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-32s | "
    "%(funcName)-15s:%(lineno)-4d | %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s | %(colored_levelname)s | %(name)-24s | %(message)s"
PLAIN_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Adds ``colored_levelname`` (ANSI-colored, padded) for console output"""
    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, '')
        record.colored_levelname = f"{color}{record.levelname:<8}{self.RESET}"
        return super().format(record)


def _attach_handlers(
    name: str,
    file_handler: logging.Handler,
    level: int,
    enable_colors: bool,
) -> logging.Logger:
    console_handler = logging.StreamHandler()

    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    )
    if enable_colors:
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    else:
        console_handler.setFormatter(
            logging.Formatter(PLAIN_CONSOLE_FORMAT, datefmt='%H:%M:%S')
        )

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Re-running setup in one process must not double every line
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger


def setup_daily_rotating_logger(
    name: str,
    log_file: Union[str, Path],
    level: int = logging.INFO,
    days_to_keep: int = 30,
    enable_colors: bool = True
) -> logging.Logger:
    """
    Creates a logger that rotates at midnight.

    The active file keeps its name; older days get a date suffix:
    - league_scraper.log (current day)
    - league_scraper.log.2024-01-15 (previous days)
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        filename=log_path,
        when='midnight',
        interval=1,
        backupCount=days_to_keep,
        encoding='utf-8',
    )
    file_handler.suffix = "%Y-%m-%d"

    return _attach_handlers(name, file_handler, level, enable_colors)


def setup_session_based_logger(
    name: str,
    log_dir: Union[str, Path] = "logs",
    level: int = logging.INFO,
    enable_colors: bool = True
) -> logging.Logger:
    """
    Creates a new log file for each run.

    Each crawl or directory sweep gets its own file, named like:
    - league_scraper_2024-01-15_14-30-25.log
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = log_dir / f"{name}_{timestamp}.log"

    logger = _attach_handlers(
        name, logging.FileHandler(log_file, encoding='utf-8'), level, enable_colors
    )
    logger.info("Session %s started", timestamp)
    logger.info("Writing log to %s", log_file)
    return logger


def setup_smart_logger(
    name: str = ROOT_LOGGER_NAME,
    log_dir: Union[str, Path] = "logs",
    strategy: str = "session",
    level: Union[int, str] = logging.INFO,
    **kwargs
) -> logging.Logger:
    """
    Configure the project root logger with the chosen rotation strategy.

    Args:
        name: Logger name, child loggers hang below it
        log_dir: Directory that receives the log files
        strategy: "daily" or "session"
        level: Logging level, as int or level name
        **kwargs: Additional arguments for the specific handler

    Returns:
        The configured logger

    Raises:
        ValueError: If the strategy is unknown
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if strategy == "daily":
        return setup_daily_rotating_logger(
            name, Path(log_dir) / f"{name}.log", level, **kwargs
        )
    elif strategy == "session":
        return setup_session_based_logger(name, log_dir, level, **kwargs)
    else:
        raise ValueError(f"Unknown strategy: {strategy}")


def get_logger(component: str) -> logging.Logger:
    """
    Child logger for one component, e.g. ``league_scraper.crawl``
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
