#!/usr/bin/env python3
"""
Command line entry point for the league scrapers.

    python main.py crawl --input data/clubs.json --max-clubs 50
    python main.py directory --csv data/directory.csv --headful
"""
import argparse
import logging
import sys

from configurations import get_environment_name
from exceptions import LeagueScrapingError
from logger import setup_smart_logger
from pipelines import ScrapingService, run_club_crawl, run_directory_scrape

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Collect league participation of volleyball clubs"
    )
    parser.add_argument(
        "--environment",
        choices=["development", "testing", "production"],
        help="Configuration preset (default: LEAGUE_SCRAPER_ENVIRONMENT or production)",
    )
    parser.add_argument("--user-agent", help="Browser user agent string")
    parser.add_argument(
        "--headful", action="store_true", help="Show the browser window"
    )
    parser.add_argument(
        "--log-strategy", choices=["session", "daily"], help="Log file rotation"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    crawl = subparsers.add_parser("crawl", help="Crawl club websites for leagues")
    crawl.add_argument("--input", help="Club list JSON file")
    crawl.add_argument("--output", help="Result JSON file")
    crawl.add_argument("--checkpoint", help="Checkpoint file")
    crawl.add_argument("--max-clubs", type=int, help="Clubs processed per run")
    crawl.add_argument("--timeout", type=float, help="Per-navigation timeout in seconds")
    crawl.add_argument(
        "--settle-delay", type=float, help="Pause after a homepage load in seconds"
    )
    crawl.add_argument("--batch-size", type=int, help="Clubs between checkpoint saves")
    crawl.add_argument(
        "--inter-club-delay", type=float, help="Pause between clubs in seconds"
    )

    directory = subparsers.add_parser(
        "directory", help="Scrape the federation club directory"
    )
    directory.add_argument("--output", help="Result JSON file")
    directory.add_argument("--csv", help="Also write the flag view as CSV")
    directory.add_argument("--max-pages", type=int, help="Stop after this many pages")
    directory.add_argument(
        "--timeout", type=float, help="Directory load timeout in seconds"
    )
    directory.add_argument(
        "--settle-delay", type=float, help="Pause after each page change in seconds"
    )

    return parser


def collect_overrides(args: argparse.Namespace) -> dict:
    """
    Translate parsed arguments into ConfigFactory.custom keyword overrides.

    Unset options map to None and are dropped by the service.
    """
    overrides = {
        "browser_user_agent": args.user_agent,
        "browser_headless": False if args.headful else None,
        "log_strategy": args.log_strategy,
    }

    if args.command == "crawl":
        overrides.update(
            {
                "crawler_clubs_file": args.input,
                "crawler_output_file": args.output,
                "crawler_checkpoint_file": args.checkpoint,
                "crawler_max_clubs": args.max_clubs,
                "crawler_homepage_timeout": args.timeout,
                "crawler_subpage_timeout": args.timeout,
                "crawler_homepage_settle_delay": args.settle_delay,
                "crawler_checkpoint_batch_size": args.batch_size,
                "crawler_inter_club_delay": args.inter_club_delay,
            }
        )
    else:
        overrides.update(
            {
                "directory_output_file": args.output,
                "directory_csv_file": args.csv,
                "directory_max_pages": args.max_pages,
                "directory_initial_load_timeout": args.timeout,
                "directory_page_settle_delay": args.settle_delay,
            }
        )
    return overrides


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    environment = args.environment or get_environment_name()

    logging.getLogger("selenium").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    try:
        config = ScrapingService.setup_scraper_config(environment, **collect_overrides(args))
    except LeagueScrapingError as e:
        # No file logging yet, the log settings are part of the config
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger = setup_smart_logger(
        log_dir=config.log_dir, strategy=config.log_strategy, level=config.log_level
    )
    logger.info("Starting %s run (%s)", args.command, config.get_summary()["environment"])

    try:
        if args.command == "crawl":
            run_club_crawl(config)
        else:
            run_directory_scrape(config)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_INTERRUPTED
    except LeagueScrapingError as e:
        logger.critical("Run aborted: %s", e)
        return EXIT_FAILURE

    logger.info("Run finished")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
