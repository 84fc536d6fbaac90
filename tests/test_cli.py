"""Tests for the command line entry point and log setup."""

import logging

import pytest

import main
from exceptions import BrowserLaunchError
from logger import ROOT_LOGGER_NAME, get_logger, setup_smart_logger


class TestArguments:
    def test_crawl_flags_become_overrides(self):
        args = main.build_parser().parse_args(
            ["--headful", "--user-agent", "Agent/1", "crawl", "--max-clubs", "3",
             "--timeout", "12", "--batch-size", "5", "--input", "clubs.json"]
        )
        overrides = main.collect_overrides(args)
        assert overrides["browser_headless"] is False
        assert overrides["browser_user_agent"] == "Agent/1"
        assert overrides["crawler_max_clubs"] == 3
        assert overrides["crawler_homepage_timeout"] == 12.0
        assert overrides["crawler_subpage_timeout"] == 12.0
        assert overrides["crawler_checkpoint_batch_size"] == 5
        assert overrides["crawler_clubs_file"] == "clubs.json"
        assert overrides["crawler_output_file"] is None

    def test_directory_flags(self):
        args = main.build_parser().parse_args(["directory", "--csv", "out.csv", "--max-pages", "2"])
        overrides = main.collect_overrides(args)
        assert overrides["directory_csv_file"] == "out.csv"
        assert overrides["directory_max_pages"] == 2
        assert overrides["browser_headless"] is None

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args([])


class TestExitCodes:
    @pytest.fixture(autouse=True)
    def isolated(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LEAGUE_SCRAPER_ENVIRONMENT", "testing")

    def test_invalid_configuration(self):
        assert main.main(["crawl", "--max-clubs", "0"]) == main.EXIT_FAILURE

    def test_run_error(self, monkeypatch):
        def fail(config):
            raise BrowserLaunchError("Could not launch Chrome")

        monkeypatch.setattr(main, "run_club_crawl", fail)
        assert main.main(["crawl"]) == main.EXIT_FAILURE

    def test_interrupt(self, monkeypatch):
        def interrupt(config):
            raise KeyboardInterrupt

        monkeypatch.setattr(main, "run_directory_scrape", interrupt)
        assert main.main(["directory"]) == main.EXIT_INTERRUPTED

    def test_success(self, monkeypatch):
        seen = []
        monkeypatch.setattr(main, "run_club_crawl", seen.append)
        assert main.main(["crawl", "--max-clubs", "2"]) == main.EXIT_OK
        assert seen[0].crawler.max_clubs == 2


class TestLogger:
    def test_session_log_file(self, tmp_path):
        logger = setup_smart_logger(log_dir=tmp_path, strategy="session", level="debug")
        get_logger("crawl").info("hello from crawl")
        for handler in logger.handlers:
            handler.flush()

        log_files = list(tmp_path.glob(f"{ROOT_LOGGER_NAME}_*.log"))
        assert len(log_files) == 1
        assert "hello from crawl" in log_files[0].read_text(encoding="utf-8")
        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        setup_smart_logger(log_dir=tmp_path, strategy="daily")
        logger = setup_smart_logger(log_dir=tmp_path, strategy="daily")
        assert len(logger.handlers) == 2

    def test_unknown_strategy(self, tmp_path):
        with pytest.raises(ValueError):
            setup_smart_logger(log_dir=tmp_path, strategy="hourly")

    def test_component_logger_name(self):
        assert get_logger("checkpoint").name == f"{ROOT_LOGGER_NAME}.checkpoint"
