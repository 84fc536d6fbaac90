"""Tests for the federation directory driver: cards, offerings, badges, pagination."""

import json

import pytest

from exceptions import DirectoryLoadError
from extractors import DirectoryCardExtractor, OfferingParser
from models import BeachCategory, DirectoryClubRecord, Gender, LeagueCode
from pipelines import run_directory_scrape
from pipelines.orchestrators import DirectoryOrchestrator

from conftest import FakeDirectoryDriver, FakeDriver, StaleElement, make_card, make_offering


class TestCardExtractor:
    def test_identity(self):
        card = make_card("VBC Bellinzona", city="6500 Bellinzona", email="info@vbc.ch")
        identity = DirectoryCardExtractor().extract_identity(card.get_attribute("outerHTML"))
        assert identity.name == "VBC Bellinzona"
        assert identity.city == "Bellinzona"
        assert identity.email == "info@vbc.ch"

    def test_city_without_postal_code(self):
        assert DirectoryCardExtractor().clean_city("  Bern ") == "Bern"
        assert DirectoryCardExtractor().clean_city("") is None

    def test_card_without_name(self):
        assert DirectoryCardExtractor().extract_identity("<div><p>nothing</p></div>") is None

    def test_badges_strict_vocabulary(self):
        html = (
            "<div><span>Volleyball Frauen (NLA – 5L)</span>"
            "<span>NLB</span><span>1L</span><span>NLB</span>"
            "<div>U18</div><div>Training am Montag</div><span>Senioren</span>"
            "<div><span>2L</span></div></div>"
        )
        assert DirectoryCardExtractor().extract_badges(html) == ["NLB", "1L", "Senioren", "2L", "U18"]

    def test_badges_of_empty_markup(self):
        assert DirectoryCardExtractor().extract_badges(None) == []


class TestOfferingParser:
    @pytest.fixture
    def parser(self):
        return OfferingParser()

    def test_header_categories(self, parser):
        category = parser.parse_header("Volleyball  Juniorinnen (U13 – U23)")
        assert category.is_juniorinnen
        assert not category.is_junioren
        assert not category.is_women
        assert category.short_label == "Volleyball Juniorinnen"

    def test_women_range_scenario(self, parser):
        record = DirectoryClubRecord(name="VBC Test")
        category = parser.parse_header("Volleyball Frauen (NLA – 5L)")
        for badge in ["NLB", "1L", "2L", "3L", "4L"]:
            assert parser.apply_badge(record, category, badge)

        flags = record.to_flags()
        assert flags["womenNLB"] is True
        assert all(flags[f"women{n}L"] for n in range(1, 5))
        assert flags["womenNLA"] is False
        assert flags["women5L"] is False
        assert not any(flags[f"men{code}"] for code in ("NLA", "NLB", "1L"))
        assert record.specific_leagues[0] == "Volleyball Frauen: NLB"

    def test_youth_badges(self, parser):
        record = DirectoryClubRecord(name="VBC Test")
        parser.apply_badge(record, parser.parse_header("Volleyball Junioren (U13 – U23)"), "U17")
        parser.apply_badge(record, parser.parse_header("Volleyball Juniorinnen (U13 – U23)"), "U15")
        assert record.men_youth == {LeagueCode.U17}
        assert record.women_youth == {LeagueCode.U15}
        assert record.women_leagues == record.men_leagues == set()

    def test_regional_badge_in_youth_offering_is_ignored(self, parser):
        record = DirectoryClubRecord(name="VBC Test")
        assert not parser.apply_badge(record, parser.parse_header("Volleyball Junioren"), "2L")
        assert record.men_leagues == set()

    def test_senioren(self, parser):
        record = DirectoryClubRecord(name="VBC Test")
        assert parser.apply_badge(record, parser.parse_header("Volleyball Männer"), "Senioren")
        assert record.senioren == {Gender.MEN}
        assert record.to_flags()["menSenioren"] is True

    def test_kids_and_beach_from_header(self, parser):
        record = DirectoryClubRecord(name="VBC Test")
        parser.apply_category_flags(record, parser.parse_header("Kids Volley"))
        parser.apply_category_flags(record, parser.parse_header("Beachvolleyball Frauen"))
        assert record.kids_volley
        assert record.beach == {BeachCategory.WOMEN}


class TestDirectoryOrchestrator:
    def test_card_with_offerings(self, test_config):
        card = make_card(
            "VBC Lugano",
            city="6900 Lugano",
            offerings=[
                make_offering("Volleyball Frauen (NLA – 5L)", ["NLB", "1L", "2L", "3L", "4L"]),
                make_offering("Volleyball Männer (NLA – 5L)", ["NLA"], fail_click=True),
                make_offering("Kids Volley"),
            ],
        )
        record = DirectoryOrchestrator(test_config).scrape_card(card)

        assert record.city == "Lugano"
        assert record.women_leagues == {
            LeagueCode.NLB, LeagueCode.LIGA_1, LeagueCode.LIGA_2, LeagueCode.LIGA_3, LeagueCode.LIGA_4,
        }
        # The failed expand only loses the men's badges
        assert record.men_leagues == set()
        assert record.kids_volley
        assert record.offerings == [
            "Volleyball Frauen (NLA – 5L)",
            "Volleyball Männer (NLA – 5L)",
            "Kids Volley",
        ]

    def test_stale_offering_keeps_the_card(self, test_config):
        card = make_card(
            "VBC Bellinzona",
            city="6500 Bellinzona",
            offerings=[
                make_offering("Volleyball Frauen (NLA – 5L)", ["NLB"]),
                StaleElement(),
                make_offering("Kids Volley"),
            ],
        )
        records = DirectoryOrchestrator(test_config).scrape_current_page(
            FakeDirectoryDriver("https://directory.test", [[card]])
        )

        assert len(records) == 1
        assert records[0].name == "VBC Bellinzona"
        assert records[0].women_leagues == {LeagueCode.NLB}
        assert records[0].offerings == [
            "Volleyball Frauen (NLA – 5L)",
            "Kids Volley",
        ]

    def test_offering_without_caret_is_not_clicked(self, test_config):
        offering = make_offering("Kids Volley")
        DirectoryOrchestrator(test_config).scrape_card(make_card("VBC Kids", offerings=[offering]))
        assert offering.clicks == 0

    def test_expanded_offering_is_collapsed(self, test_config):
        offering = make_offering("Volleyball Frauen (NLA – 5L)", ["NLA"])
        DirectoryOrchestrator(test_config).scrape_card(make_card("VBC A", offerings=[offering]))
        assert offering.clicks == 2

    def test_all_pages(self, test_config):
        test_config.directory.max_pages = None
        pages = [[make_card("Club 1"), make_card("Club 2")], [make_card("Club 3")], [make_card("Club 4")]]
        driver = FakeDirectoryDriver(test_config.directory.directory_url, pages, missing_links={3})

        records = DirectoryOrchestrator(test_config).scrape_directory(driver)
        assert [r.name for r in records] == ["Club 1", "Club 2", "Club 3", "Club 4"]

    def test_pagination_stops_when_stuck(self, test_config):
        test_config.directory.max_pages = None
        pages = [[make_card("Club 1")], [make_card("Club 2")], [make_card("Club 3")]]
        driver = FakeDirectoryDriver(
            test_config.directory.directory_url, pages, missing_links={2}, has_next=False
        )

        records = DirectoryOrchestrator(test_config).scrape_directory(driver)
        assert [r.name for r in records] == ["Club 1"]

    def test_max_pages(self, test_config):
        test_config.directory.max_pages = 1
        pages = [[make_card("Club 1")], [make_card("Club 2")]]
        driver = FakeDirectoryDriver(test_config.directory.directory_url, pages)
        assert len(DirectoryOrchestrator(test_config).scrape_directory(driver)) == 1

    def test_unreachable_directory(self, test_config):
        with pytest.raises(DirectoryLoadError):
            DirectoryOrchestrator(test_config).scrape_directory(FakeDriver())


class TestRunDirectoryScrape:
    def test_writes_json_and_csv(self, test_config, tmp_path):
        test_config.directory.csv_file = str(tmp_path / "directory.csv")
        pages = [[make_card("VBC Lugano", offerings=[make_offering("Volleyball Frauen (NLA – 5L)", ["NLA"])])]]
        driver = FakeDirectoryDriver(test_config.directory.directory_url, pages)

        records = run_directory_scrape(test_config, lambda options: driver, show_summary=False)

        assert driver.quit_called
        assert records[0].has_league(Gender.WOMEN, LeagueCode.NLA)
        with open(test_config.directory.output_file, encoding="utf-8") as f:
            written = json.load(f)
        assert written[0]["womenLeagues"] == ["NLA"]
        assert written[0]["flags"]["womenNLA"] is True
        assert (tmp_path / "directory.csv").exists()
