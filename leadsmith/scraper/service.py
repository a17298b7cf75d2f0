"""Scraping service: ordered fallback across extraction backends.

``scrape_url`` validates the URL, then tries each backend in turn:

    validate → [static → quality gate] → [headless → quality gate]
             → [remote-reader → quality gate] → result | ScrapeFailed

A backend that raises, or that returns a result failing the quality gate, is
recorded as ``"<backend>: <reason>"`` and the next backend is tried.  Only
:class:`InvalidUrl` and :class:`ScrapeFailed` leave this module.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from leadsmith.config import Settings
from leadsmith.scraper.backends import (
    ExtractionBackend,
    HeadlessBrowserBackend,
    RemoteReaderBackend,
    StaticFetchBackend,
)
from leadsmith.scraper.errors import ScrapeFailed
from leadsmith.scraper.models import (
    NO_DESCRIPTION,
    UNKNOWN_COMPANY,
    ExtractionAttempt,
    ScrapedResult,
)
from leadsmith.scraper.validation import validate_url

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 20
INSUFFICIENT_DATA = "Insufficient data extracted"


def is_quality_result(result: ScrapedResult) -> bool:
    """Return ``True`` if *result* carries a usable name and description.

    Optional fields (industry, size, location) do not affect the verdict.
    """
    has_name = bool(result.company_name) and result.company_name != UNKNOWN_COMPANY
    has_description = (
        bool(result.description)
        and result.description != NO_DESCRIPTION
        and len(result.description) >= MIN_DESCRIPTION_LENGTH
    )
    return has_name and has_description


class ScrapingService:
    """Try backends in order; return the first result that passes the gate."""

    def __init__(self, backends: Sequence[ExtractionBackend]) -> None:
        if not backends:
            raise ValueError("ScrapingService needs at least one backend.")
        self._backends = list(backends)

    @property
    def backends(self) -> list[ExtractionBackend]:
        return list(self._backends)

    async def _attempt(self, backend: ExtractionBackend, url: str) -> ExtractionAttempt:
        try:
            result = await backend.fetch(url)
        except Exception as exc:
            return ExtractionAttempt(
                backend=backend.name,
                reason=str(exc) or exc.__class__.__name__,
            )
        if not is_quality_result(result):
            return ExtractionAttempt(
                backend=backend.name,
                result=result,
                reason=INSUFFICIENT_DATA,
            )
        return ExtractionAttempt(backend=backend.name, result=result)

    async def scrape_url(self, url: str) -> ScrapedResult:
        """Scrape *url* and return the first valid :class:`ScrapedResult`.

        Raises:
            InvalidUrl: *url* is not an absolute http(s) URL.  No backend runs.
            ScrapeFailed: every backend failed or yielded low-quality data.
        """
        url = validate_url(url)
        errors: list[str] = []

        for backend in self._backends:
            logger.info("[scrape] trying %s for %s", backend.name, url)
            attempt = await self._attempt(backend, url)
            if attempt.succeeded:
                logger.info("[scrape] ✓ %s succeeded for %s", backend.name, url)
                return attempt.result  # type: ignore[return-value]
            logger.warning("[scrape] ✗ %s", attempt.describe())
            errors.append(attempt.describe())

        logger.error("[scrape] all backends exhausted for %s", url)
        raise ScrapeFailed(url, errors)


# ---------------------------------------------------------------------------
# Default service factory
# ---------------------------------------------------------------------------

def build_default_service(settings: Optional[Settings] = None) -> ScrapingService:
    """Static → headless (unless disabled) → remote reader.

    Backend order follows cost: a plain GET first, the browser only when that
    yields nothing usable, the paid reader service last.
    """
    if settings is None:
        from leadsmith.config import settings as default_settings  # noqa: PLC0415

        settings = default_settings

    backends: list[ExtractionBackend] = [
        StaticFetchBackend(
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )
    ]
    if settings.headless_enabled:
        backends.append(
            HeadlessBrowserBackend(
                user_agent=settings.user_agent,
                navigation_timeout=settings.navigation_timeout,
                settle_delay=settings.settle_delay,
            )
        )
    backends.append(
        RemoteReaderBackend(
            api_key=settings.reader_api_key,
            base_url=settings.reader_base_url,
            timeout=settings.reader_timeout,
        )
    )
    return ScrapingService(backends)
