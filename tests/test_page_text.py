"""Tests for page text flattening and team page discovery."""

from bs4 import BeautifulSoup

from extractors import LeagueClassifier, PageTextExtractor, TeamPageLinkExtractor, extract_page_text
from models import LeagueCode

CLUB_PAGE = """
<html>
  <head><title>VBC Seeland</title><style>.x { color: red; }</style></head>
  <body>
    <script>var league = "NLA";</script>
    <h2>Unsere Teams</h2>
    <table>
      <tr><td>Damen</td><td>2. Liga</td></tr>
      <tr><td>Herren</td><td>NLB</td></tr>
    </table>
    <ul><li>Juniorinnen U17</li><li>Mixed</li></ul>
    <div class="team-card">Damen 2</div>
    <img src="logo.png" alt="Logo VBC Seeland">
    <a href="/kontakt" title="Kontaktformular">Kontakt</a>
  </body>
</html>
"""


class TestPageTextExtractor:
    def test_regions_are_included(self):
        text = PageTextExtractor().extract(BeautifulSoup(CLUB_PAGE, "html.parser"))
        assert "Unsere Teams" in text
        assert "Juniorinnen U17" in text
        assert "Damen 2" in text
        assert "Logo VBC Seeland" in text
        assert "Kontaktformular" in text

    def test_table_row_stays_on_one_line(self):
        lines = PageTextExtractor().extract(CLUB_PAGE).splitlines()
        assert "Damen 2. Liga" in lines
        assert "Herren NLB" in lines

    def test_script_and_style_are_skipped(self):
        text = PageTextExtractor().extract(CLUB_PAGE)
        assert "var league" not in text
        assert "color: red" not in text

    def test_text_feeds_classifier(self):
        breakdown = LeagueClassifier().classify(extract_page_text(CLUB_PAGE))
        assert LeagueCode.LIGA_2 in breakdown.women
        assert LeagueCode.NLB in breakdown.men
        assert LeagueCode.U17 in breakdown.youth
        assert LeagueCode.NLA not in breakdown.all

    def test_empty_page(self):
        assert PageTextExtractor().extract(None).strip() == ""
        assert PageTextExtractor().extract("").strip() == ""

    def test_page_without_body(self):
        text = PageTextExtractor().extract("<p>Herren 3. Liga</p>")
        assert "Herren 3. Liga" in text

    def test_comments_are_skipped(self):
        text = PageTextExtractor().extract("<body><!-- Damen NLA --><p>Hallo</p></body>")
        assert "NLA" not in text

    def test_broken_region_degrades_to_empty(self, monkeypatch):
        extractor = PageTextExtractor()

        def broken(*args, **kwargs):
            raise RuntimeError("selector engine failure")

        monkeypatch.setattr(extractor, "select_text", broken)
        text = extractor.extract(CLUB_PAGE)
        assert "Logo VBC Seeland" in text


HOME_PAGE = """
<html><body>
  <header><a href="/kontakt">Kontakt</a></header>
  <a href="/teams">Teams</a>
  <a href="/teams#damen">Damen</a>
  <a href="https://other.ch/team">Partner Team</a>
  <a href="mailto:info@club.ch">Damen Kontakt</a>
  <a href="#top">Team</a>
  <a href="javascript:void(0)">Team</a>
  <a href="/impressum">Impressum</a>
</body></html>
"""


class TestTeamPageLinkExtractor:
    def test_discovery(self):
        links = TeamPageLinkExtractor().find_team_pages(HOME_PAGE, "https://club.ch/")
        assert links == ["https://club.ch/teams", "https://club.ch/kontakt"]

    def test_keyword_in_link_text(self):
        html = '<a href="/seite-7">Mannschaften</a>'
        links = TeamPageLinkExtractor().find_team_pages(html, "https://club.ch/")
        assert links == ["https://club.ch/seite-7"]

    def test_relative_to_page_url(self):
        html = '<a href="damen">Damen</a>'
        links = TeamPageLinkExtractor().find_team_pages(html, "https://club.ch/de/")
        assert links == ["https://club.ch/de/damen"]

    def test_cap(self):
        html = "".join(f'<a href="/team-{n}">x</a>' for n in range(1, 21))
        links = TeamPageLinkExtractor().find_team_pages(html, "https://club.ch/", limit=15)
        assert len(links) == 15
        assert links[0] == "https://club.ch/team-1"

    def test_zero_limit(self):
        assert TeamPageLinkExtractor().find_team_pages(HOME_PAGE, "https://club.ch/", limit=0) == []

    def test_empty_page(self):
        assert TeamPageLinkExtractor().find_team_pages(None, "https://club.ch/") == []
