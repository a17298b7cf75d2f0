"""Tests for the field extractor (HTML → CompanyInfo).

No network access: every test feeds a literal HTML string straight into the
extractor.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from leadsmith.scraper.extractor import (
    COMPANY_NAME_STRATEGIES,
    extract_company_info,
    extract_company_name,
    extract_description,
    extract_industry,
    extract_location,
    extract_size,
    first_acceptable,
)
from leadsmith.scraper.models import NO_DESCRIPTION, UNKNOWN_COMPANY, CompanyInfo


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_FULL_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>Acme Widgets | Home</title>
  <meta property="og:site_name" content="Acme Corp">
  <meta name="description" content="Acme Corp builds reliable widgets for industrial automation teams.">
  <meta property="og:type" content="website">
  <meta property="og:locality" content="Springfield">
</head>
<body>
  <header><h1>Welcome to Acme</h1></header>
  <div class="company-size">51-200 employees</div>
  <main><p>Some body paragraph that is long enough to count as a description.</p></main>
</body>
</html>
"""


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


# ---------------------------------------------------------------------------
# first_acceptable combinator
# ---------------------------------------------------------------------------

class TestFirstAcceptable:
    def test_returns_first_accepted_value(self) -> None:
        strategies = [lambda s: None, lambda s: "  ", lambda s: "second", lambda s: "third"]
        assert first_acceptable(_soup(""), strategies, lambda v: True) == "second"

    def test_skips_rejected_values(self) -> None:
        strategies = [lambda s: "x" * 300, lambda s: "short"]
        assert first_acceptable(_soup(""), strategies, lambda v: len(v) < 100) == "short"

    def test_returns_none_when_nothing_accepted(self) -> None:
        assert first_acceptable(_soup(""), [lambda s: None], lambda v: True) is None

    def test_strips_ends_only(self) -> None:
        strategies = [lambda s: "\n   Acme \n  Corp  "]
        assert first_acceptable(_soup(""), strategies, lambda v: True) == "Acme \n  Corp"

    def test_inner_whitespace_counts_towards_bounds(self) -> None:
        strategies = [lambda s: "  Acme    Corp  "]
        assert first_acceptable(_soup(""), strategies, lambda v: len(v) <= 9) is None


# ---------------------------------------------------------------------------
# Company name
# ---------------------------------------------------------------------------

class TestCompanyName:
    def test_site_name_meta_beats_title(self) -> None:
        assert extract_company_name(_soup(_FULL_HTML)) == "Acme Corp"

    def test_application_name_meta(self) -> None:
        html = '<head><meta name="application-name" content="Globex"><title>Other</title></head>'
        assert extract_company_name(_soup(html)) == "Globex"

    def test_og_title_meta(self) -> None:
        html = '<head><meta property="og:title" content="Initech"><title>Other</title></head>'
        assert extract_company_name(_soup(html)) == "Initech"

    def test_title_split_on_pipe(self) -> None:
        html = "<head><title>Hooli | Making the world a better place</title></head>"
        assert extract_company_name(_soup(html)) == "Hooli"

    def test_title_split_on_dash(self) -> None:
        html = "<head><title>Pied Piper - Compression</title></head>"
        assert extract_company_name(_soup(html)) == "Pied Piper"

    def test_header_h1_when_title_empty(self) -> None:
        html = "<head><title></title></head><body><header><h1>Umbrella</h1></header><h1>Other</h1></body>"
        assert extract_company_name(_soup(html)) == "Umbrella"

    def test_logo_class(self) -> None:
        html = '<body><div class="logo">Cyberdyne</div><h1>Other</h1></body>'
        assert extract_company_name(_soup(html)) == "Cyberdyne"

    def test_logo_substring_class(self) -> None:
        html = '<body><a class="site-logo-link">Tyrell</a><h1>Other</h1></body>'
        assert extract_company_name(_soup(html)) == "Tyrell"

    def test_first_h1_anywhere(self) -> None:
        html = "<body><section><h1>Wonka Industries</h1></section></body>"
        assert extract_company_name(_soup(html)) == "Wonka Industries"

    def test_overlong_candidate_rejected(self) -> None:
        html = f'<head><meta property="og:site_name" content="{"A" * 150}"><title>Soylent</title></head>'
        assert extract_company_name(_soup(html)) == "Soylent"

    def test_sentinel_when_nothing_found(self) -> None:
        assert extract_company_name(_soup("<html><body></body></html>")) == UNKNOWN_COMPANY

    def test_strategy_order_is_fixed(self) -> None:
        assert len(COMPANY_NAME_STRATEGIES) == 8


# ---------------------------------------------------------------------------
# Description
# ---------------------------------------------------------------------------

class TestDescription:
    def test_meta_description(self) -> None:
        assert extract_description(_soup(_FULL_HTML)).startswith("Acme Corp builds reliable widgets")

    def test_og_description(self) -> None:
        html = '<meta property="og:description" content="We make the finest rocket skates on earth.">'
        assert extract_description(_soup(html)) == "We make the finest rocket skates on earth."

    def test_twitter_description(self) -> None:
        html = '<meta name="twitter:description" content="Portable holes for every occasion and budget.">'
        assert extract_description(_soup(html)) == "Portable holes for every occasion and budget."

    def test_hero_paragraph_beats_main(self) -> None:
        html = """
        <div class="hero-banner"><p>Hero copy describing exactly what the company does.</p></div>
        <main><p>Main paragraph that should lose to the hero paragraph.</p></main>
        """
        assert extract_description(_soup(html)) == "Hero copy describing exactly what the company does."

    def test_about_paragraph(self) -> None:
        html = '<section class="about-us"><p>Founded in 1990, we build industrial robots.</p></section>'
        assert extract_description(_soup(html)) == "Founded in 1990, we build industrial robots."

    def test_short_meta_falls_through_to_main(self) -> None:
        html = """
        <meta name="description" content="Too short">
        <main><p>The main paragraph is comfortably longer than twenty characters.</p></main>
        """
        assert extract_description(_soup(html)).startswith("The main paragraph")

    def test_ten_character_paragraph_yields_sentinel(self) -> None:
        html = "<body><p>0123456789</p></body>"
        assert extract_description(_soup(html)) == NO_DESCRIPTION

    def test_exactly_twenty_characters_accepted(self) -> None:
        html = "<body><p>abcdefghijklmnopqrst</p></body>"
        assert extract_description(_soup(html)) == "abcdefghijklmnopqrst"

    def test_overlong_paragraph_rejected(self) -> None:
        html = f"<body><p>{'word ' * 200}</p></body>"
        assert extract_description(_soup(html)) == NO_DESCRIPTION

    def test_indented_paragraph_measured_with_inner_whitespace(self) -> None:
        html = f"<body><p>{('word' + ' ' * 30) * 16}</p></body>"
        assert extract_description(_soup(html)) == NO_DESCRIPTION


# ---------------------------------------------------------------------------
# Optional fields
# ---------------------------------------------------------------------------

class TestOptionalFields:
    def test_industry_from_og_type(self) -> None:
        assert extract_industry(_soup(_FULL_HTML)) == "website"

    def test_industry_from_class(self) -> None:
        html = '<span class="company-industry">Logistics</span>'
        assert extract_industry(_soup(html)) == "Logistics"

    def test_industry_from_itemprop(self) -> None:
        html = '<span itemprop="industry">Biotech</span>'
        assert extract_industry(_soup(html)) == "Biotech"

    def test_industry_absent(self) -> None:
        assert extract_industry(_soup("<p>nothing</p>")) is None

    def test_size_from_class(self) -> None:
        assert extract_size(_soup(_FULL_HTML)) == "51-200 employees"

    def test_size_from_employees_class(self) -> None:
        html = '<div class="employees-count">1,000+</div>'
        assert extract_size(_soup(html)) == "1,000+"

    def test_size_from_itemprop(self) -> None:
        html = '<span itemprop="numberOfEmployees">42</span>'
        assert extract_size(_soup(html)) == "42"

    def test_location_from_og_locality(self) -> None:
        assert extract_location(_soup(_FULL_HTML)) == "Springfield"

    def test_location_from_address_tag(self) -> None:
        html = "<footer><address>\n  1 Infinite Loop,\n  Cupertino, CA\n</address></footer>"
        assert extract_location(_soup(html)) == "1 Infinite Loop,\n  Cupertino, CA"


# ---------------------------------------------------------------------------
# Length bounds
# ---------------------------------------------------------------------------

class TestLengthBounds:
    @pytest.mark.parametrize("length, expected", [(99, "A" * 99), (100, "Soylent")])
    def test_company_name_upper_bound(self, length: int, expected: str) -> None:
        html = (
            f'<head><meta property="og:site_name" content="{"A" * length}">'
            "<title>Soylent</title></head>"
        )
        assert extract_company_name(_soup(html)) == expected

    @pytest.mark.parametrize("length, accepted", [(19, False), (20, True), (499, True), (500, False)])
    def test_description_bounds(self, length: int, accepted: bool) -> None:
        value = "d" * length
        html = f"<body><p>{value}</p></body>"
        assert extract_description(_soup(html)) == (value if accepted else NO_DESCRIPTION)

    @pytest.mark.parametrize("length, accepted", [(199, True), (200, False)])
    def test_location_upper_bound(self, length: int, accepted: bool) -> None:
        value = "x" * length
        html = f'<div class="location">{value}</div>'
        assert extract_location(_soup(html)) == (value if accepted else None)

    @pytest.mark.parametrize(
        "extract, html_template",
        [
            (extract_industry, '<span class="industry">{}</span>'),
            (extract_size, '<div class="company-size">{}</div>'),
        ],
    )
    @pytest.mark.parametrize("length, accepted", [(99, True), (100, False)])
    def test_short_fields_upper_bound(
        self, extract, html_template: str, length: int, accepted: bool
    ) -> None:
        value = "s" * length
        assert extract(_soup(html_template.format(value))) == (value if accepted else None)


# ---------------------------------------------------------------------------
# extract_company_info
# ---------------------------------------------------------------------------

class TestExtractCompanyInfo:
    def test_full_page(self) -> None:
        info = extract_company_info(_FULL_HTML)
        assert isinstance(info, CompanyInfo)
        assert info.company_name == "Acme Corp"
        assert info.size == "51-200 employees"
        assert info.location == "Springfield"

    def test_empty_html_does_not_raise(self) -> None:
        info = extract_company_info("")
        assert info.company_name == UNKNOWN_COMPANY
        assert info.description == NO_DESCRIPTION
        assert info.industry is None
        assert info.size is None
        assert info.location is None

    def test_malformed_html_does_not_raise(self) -> None:
        info = extract_company_info("<html><head><title>Broken<body><p>unclosed")
        assert isinstance(info.company_name, str)
