"""Exception hierarchy for the scraping pipeline.

Only :class:`InvalidUrl` and :class:`ScrapeFailed` ever escape
:meth:`~leadsmith.scraper.service.ScrapingService.scrape_url`.  The backend
errors are recovered by the service and folded into the aggregate.
"""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for every error raised by the scraper package."""


class InvalidUrl(ScraperError):
    """The input is not an absolute ``http``/``https`` URL."""

    def __init__(self, url: object) -> None:
        self.url = url
        super().__init__(f"Invalid URL format: {url!r}")


# ---------------------------------------------------------------------------
# Backend-local failures
# ---------------------------------------------------------------------------

class BackendError(ScraperError):
    """A single backend produced nothing usable."""


class FetchError(BackendError):
    """Static fetch failed (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RenderError(BackendError):
    """Headless browser could not launch, navigate or capture the page."""


class ReaderError(BackendError):
    """The remote reader service call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(BackendError):
    """The remote reader has no API key configured."""


# ---------------------------------------------------------------------------
# Terminal failure
# ---------------------------------------------------------------------------

class ScrapeFailed(ScraperError):
    """Every backend failed or returned low-quality data.

    ``errors`` holds one ``"<backend>: <reason>"`` entry per backend, in the
    order the backends were tried.
    """

    def __init__(self, url: str, errors: list[str]) -> None:
        self.url = url
        self.errors = list(errors)
        super().__init__(
            f"All scraping methods failed for {url}. "
            f"Errors: {'; '.join(self.errors)}. "
            "Please try a different URL or check if the website is accessible."
        )
