"""Field extraction: turns an HTML document into a :class:`CompanyInfo`.

Real-world sites expose company metadata through wildly inconsistent markup,
so every field is resolved by an ordered cascade of small strategy functions.
The first strategy whose trimmed value passes the field's length bounds
wins; when none does the field falls back to its sentinel
(``company_name``/``description``) or ``None`` (the optional fields).
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from bs4 import BeautifulSoup

from leadsmith.scraper.models import NO_DESCRIPTION, UNKNOWN_COMPANY, CompanyInfo

Strategy = Callable[[BeautifulSoup], Optional[str]]
Accept = Callable[[str], bool]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _clean(text: Optional[str]) -> str:
    """Strip the ends; inner whitespace counts towards the length bounds."""
    return text.strip() if text else ""


def _meta(attr: str, value: str) -> Strategy:
    """Strategy reading the ``content`` of ``<meta {attr}="{value}">``."""
    selector = f'meta[{attr}="{value}"]'

    def strategy(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.select_one(selector)
        if tag is None:
            return None
        content = tag.get("content")
        return content if isinstance(content, str) else None

    return strategy


def _first_text(selector: str) -> Strategy:
    """Strategy returning the text of the first element matching *selector*."""

    def strategy(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.select_one(selector)
        return tag.get_text() if tag is not None else None

    return strategy


def _all_text(selector: str) -> Strategy:
    """Strategy returning the concatenated text of every match of *selector*."""

    def strategy(soup: BeautifulSoup) -> Optional[str]:
        return "".join(tag.get_text() for tag in soup.select(selector))

    return strategy


def _title_prefix(soup: BeautifulSoup) -> Optional[str]:
    """Text of ``<title>`` before the first ``|``, then before the first ``-``."""
    if soup.title is None:
        return None
    return soup.title.get_text().split("|")[0].split("-")[0]


def _length_between(low: int, high: int) -> Accept:
    """Accept values with ``low <= len(value) < high``."""
    return lambda value: low <= len(value) < high


def first_acceptable(
    soup: BeautifulSoup,
    strategies: Sequence[Strategy],
    accept: Accept,
) -> Optional[str]:
    """Evaluate *strategies* left to right; return the first accepted value."""
    for strategy in strategies:
        value = _clean(strategy(soup))
        if value and accept(value):
            return value
    return None


# ---------------------------------------------------------------------------
# Per-field cascades
# ---------------------------------------------------------------------------

COMPANY_NAME_STRATEGIES: list[Strategy] = [
    _meta("property", "og:site_name"),
    _meta("name", "application-name"),
    _meta("property", "og:title"),
    _title_prefix,
    _first_text("header h1"),
    _first_text(".logo"),
    _first_text('[class*="logo"]'),
    _first_text("h1"),
]

DESCRIPTION_STRATEGIES: list[Strategy] = [
    _meta("name", "description"),
    _meta("property", "og:description"),
    _meta("name", "twitter:description"),
    _first_text('[class*="hero"] p'),
    _first_text('[class*="intro"] p'),
    _first_text('[class*="about"] p'),
    _first_text("main p"),
    _first_text("p"),
]

INDUSTRY_STRATEGIES: list[Strategy] = [
    _meta("property", "og:type"),
    _first_text('[class*="industry"]'),
    _all_text('[itemprop="industry"]'),
]

SIZE_STRATEGIES: list[Strategy] = [
    _first_text('[class*="company-size"]'),
    _first_text('[class*="employees"]'),
    _all_text('[itemprop="numberOfEmployees"]'),
]

LOCATION_STRATEGIES: list[Strategy] = [
    _meta("property", "og:locality"),
    _first_text('[class*="location"]'),
    _all_text('[itemprop="address"]'),
    _first_text("address"),
]

_NAME_BOUNDS = _length_between(1, 100)
_DESCRIPTION_BOUNDS = _length_between(20, 500)
_SHORT_FIELD_BOUNDS = _length_between(1, 100)
_LOCATION_BOUNDS = _length_between(1, 200)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_company_name(soup: BeautifulSoup) -> str:
    return first_acceptable(soup, COMPANY_NAME_STRATEGIES, _NAME_BOUNDS) or UNKNOWN_COMPANY


def extract_description(soup: BeautifulSoup) -> str:
    return (
        first_acceptable(soup, DESCRIPTION_STRATEGIES, _DESCRIPTION_BOUNDS)
        or NO_DESCRIPTION
    )


def extract_industry(soup: BeautifulSoup) -> Optional[str]:
    return first_acceptable(soup, INDUSTRY_STRATEGIES, _SHORT_FIELD_BOUNDS)


def extract_size(soup: BeautifulSoup) -> Optional[str]:
    return first_acceptable(soup, SIZE_STRATEGIES, _SHORT_FIELD_BOUNDS)


def extract_location(soup: BeautifulSoup) -> Optional[str]:
    return first_acceptable(soup, LOCATION_STRATEGIES, _LOCATION_BOUNDS)


def extract_company_info(html: str) -> CompanyInfo:
    """Parse *html* and resolve every company field.

    Never raises on empty or malformed markup; missing data simply resolves
    to the sentinels or ``None``.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    return CompanyInfo(
        company_name=extract_company_name(soup),
        description=extract_description(soup),
        industry=extract_industry(soup),
        size=extract_size(soup),
        location=extract_location(soup),
    )
