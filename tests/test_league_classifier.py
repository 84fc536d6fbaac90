"""Tests for multilingual league detection and gender/youth attribution."""

import pytest

from extractors import LeagueClassifier
from extractors.parsers import LEAGUE_RULES, build_league_rules
from models import SENIOR_CODES, YOUTH_CODES, LeagueCode


@pytest.fixture(scope='module')
def classifier():
    return LeagueClassifier()


def codes(values):
    return {LeagueCode(value) for value in values}


class TestScenarios:
    def test_damen_first_league(self, classifier):
        breakdown = classifier.classify("Damen 1. Liga")
        assert breakdown.to_dict() == {
            "women": ["1L"], "men": [], "youth": [], "all": ["1L"],
        }

    def test_junioren_u18_with_men_context(self, classifier):
        breakdown = classifier.classify("Herren Junioren U18")
        assert breakdown.all == codes(["U18"])
        assert breakdown.youth == codes(["U18"])
        assert breakdown.men == codes(["U18"])
        assert breakdown.women == set()

    def test_no_matches(self, classifier):
        breakdown = classifier.classify("Willkommen beim Verein\nKontakt und Impressum")
        assert breakdown.to_dict() == {"women": [], "men": [], "youth": [], "all": []}

    @pytest.mark.parametrize("text", ["", None, "\n\n  \n"])
    def test_empty_text(self, classifier, text):
        assert classifier.classify(text).all == set()


class TestLanguages:
    def test_french_men(self, classifier):
        breakdown = classifier.classify("Equipe hommes LNB")
        assert breakdown.men == codes(["NLB"])
        assert breakdown.women == set()

    def test_italian_women(self, classifier):
        breakdown = classifier.classify("Squadra donne Serie 2")
        assert breakdown.women == codes(["2L"])

    def test_german_national_league_long_form(self, classifier):
        assert classifier.classify("Nationalliga A").all == codes(["NLA"])

    def test_french_ordinal(self, classifier):
        assert classifier.classify("Femmes 3ème Ligue").women == codes(["3L"])

    def test_team_line_form(self, classifier):
        assert classifier.classify("Herren 1 (NLA)").men == codes(["NLA"])

    def test_birth_year_maps_to_u13(self, classifier):
        assert classifier.classify("Mixed Team Jg. 2012").all == codes(["U13"])

    def test_moins_de(self, classifier):
        assert classifier.classify("Moins de 15 ans").all == codes(["U15"])


class TestAttribution:
    def test_both_genders_senior_goes_to_women_only(self, classifier):
        breakdown = classifier.classify("Frauen und Herren NLB")
        assert breakdown.women == codes(["NLB"])
        assert breakdown.men == set()

    def test_youth_with_both_genders_goes_to_both(self, classifier):
        breakdown = classifier.classify("Damen und Herren U16")
        assert breakdown.youth == codes(["U16"])
        assert breakdown.women == codes(["U16"])
        assert breakdown.men == codes(["U16"])

    def test_no_context_only_in_all(self, classifier):
        breakdown = classifier.classify("Wir spielen in der NLA")
        assert breakdown.all == codes(["NLA"])
        assert breakdown.women == set()
        assert breakdown.men == set()

    def test_umbrella_term_alone(self, classifier):
        breakdown = classifier.classify("Unser Nachwuchs")
        assert breakdown.all == codes(["NACHWUCHS"])
        assert breakdown.youth == codes(["NACHWUCHS"])

    def test_umbrella_suppressed_next_to_age_category(self, classifier):
        assert classifier.classify("Juniorinnen U17").all == codes(["U17"])

    def test_context_is_per_line(self, classifier):
        breakdown = classifier.classify("Damen\n2. Liga")
        assert breakdown.all == codes(["2L"])
        assert breakdown.women == set()

    def test_all_is_superset(self, classifier):
        text = "Damen NLA\nHerren 3. Liga\nU19 Juniorinnen\nJunioren\nNLB"
        breakdown = classifier.classify(text)
        assert breakdown.women | breakdown.men | breakdown.youth <= breakdown.all

    def test_youth_never_in_senior_sets_without_context(self, classifier):
        breakdown = classifier.classify("Herren NLA\nU18\nCadets")
        assert breakdown.men & YOUTH_CODES == set()
        assert breakdown.youth <= YOUTH_CODES
        assert breakdown.youth.isdisjoint(SENIOR_CODES)


class TestDeterminism:
    def test_repeated_calls_agree(self, classifier):
        text = "Damen 1 NLA\nHerren 2. Liga\nU15 Junioren\nLigue Nationale B femmes"
        first = classifier.classify(text).to_dict()
        for _ in range(5):
            assert classifier.classify(text).to_dict() == first

    def test_fresh_instance_agrees(self, classifier):
        text = "Hommes 1ère Ligue\nDonne Serie 4"
        assert LeagueClassifier().classify(text) == classifier.classify(text)

    def test_ruleset_is_rebuilt_identically(self):
        rebuilt = build_league_rules()
        assert [rule.key for rule in rebuilt] == [rule.key for rule in LEAGUE_RULES]
        assert isinstance(LEAGUE_RULES, tuple)

    def test_rule_keys_unique(self):
        keys = [rule.key for rule in LEAGUE_RULES]
        assert len(keys) == len(set(keys))
