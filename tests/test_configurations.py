"""Tests for the configuration factory, validation and environment loading."""

import pytest

from configurations import (
    BrowserConfig,
    ConfigFactory,
    get_config,
    get_environment_config,
    get_environment_name,
)
from exceptions import ConfigurationError
from pipelines import ScrapingService


class TestFactory:
    def test_testing_has_no_delays(self):
        config = ConfigFactory.testing()
        assert config.crawler.inter_club_delay == 0
        assert config.crawler.homepage_settle_delay == 0
        assert config.directory.expand_settle_delay == 0
        assert config.validate()

    def test_production_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = get_config("production")
        assert config.crawler.max_clubs == 254
        assert config.crawler.checkpoint_batch_size == 10
        assert config.crawler.homepage_timeout == 20
        assert config.crawler.inter_club_delay == 1.5
        assert config.get_summary()["environment"] == "production"

    def test_unknown_environment(self):
        with pytest.raises(ValueError):
            get_config("staging")

    def test_custom_routes_prefixes(self):
        config = ConfigFactory.custom(
            "testing",
            crawler_max_clubs=7,
            browser_user_agent="TestAgent/2.0",
            directory_max_pages=4,
            log_strategy="daily",
            crawler_unknown_field=1,
        )
        assert config.crawler.max_clubs == 7
        assert config.browser.user_agent == "TestAgent/2.0"
        assert config.directory.max_pages == 4
        assert config.log_strategy == "daily"
        assert config.get_summary()["environment"] == "custom-testing"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"crawler_max_clubs": 0},
            {"crawler_checkpoint_batch_size": -1},
            {"crawler_homepage_timeout": 0},
            {"crawler_inter_club_delay": -0.5},
            {"directory_max_pages": 0},
            {"browser_user_agent": ""},
            {"log_strategy": "hourly"},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            ConfigFactory.custom("testing", **overrides)


class TestScrapingService:
    def test_none_overrides_are_ignored(self):
        config = ScrapingService.setup_scraper_config("testing", crawler_max_clubs=None)
        assert config.crawler.max_clubs == 5
        assert config.get_summary()["environment"] == "testing"

    def test_invalid_becomes_configuration_error(self):
        with pytest.raises(ConfigurationError):
            ScrapingService.setup_scraper_config("testing", crawler_max_clubs=-3)

    def test_unknown_environment_becomes_configuration_error(self):
        with pytest.raises(ConfigurationError):
            ScrapingService.setup_scraper_config("staging")


class TestEnvironment:
    def test_browser_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LEAGUE_SCRAPER_USER_AGENT", "EnvAgent/1.0")
        monkeypatch.setenv("LEAGUE_SCRAPER_HEADLESS", "false")
        config = BrowserConfig.from_env()
        assert config.user_agent == "EnvAgent/1.0"
        assert config.headless is False

    def test_environment_from_dotenv(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LEAGUE_SCRAPER_ENVIRONMENT", raising=False)
        (tmp_path / ".env").write_text("LEAGUE_SCRAPER_ENVIRONMENT=testing\n", encoding="utf-8")
        try:
            assert get_environment_name() == "testing"
            assert get_environment_config().crawler.max_clubs == 5
        finally:
            monkeypatch.delenv("LEAGUE_SCRAPER_ENVIRONMENT", raising=False)

    def test_default_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LEAGUE_SCRAPER_ENVIRONMENT", raising=False)
        assert get_environment_name() == "production"
