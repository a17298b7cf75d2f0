"""Extraction backends, ordered from cheapest to heaviest.

Backend priority (tried in this order by :class:`ScrapingService`):
  1. Static fetch: a single ``httpx`` GET; fast, blind to client-side rendering.
  2. Headless browser: Playwright Chromium, waits for network idle plus a
     settle delay; handles JS-heavy sites at a much higher resource cost.
  3. Remote reader: an external URL-to-HTML service (Jina Reader by
     default); last resort, requires an API key.

All backends share one interface: ``await backend.fetch(url) -> ScrapedResult``.
Every failure is raised as a :class:`~leadsmith.scraper.errors.BackendError`
subclass so the service can record it and move on.  No backend retries.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Optional

import httpx

from leadsmith.config import DEFAULT_USER_AGENT
from leadsmith.scraper.errors import (
    ConfigurationError,
    FetchError,
    ReaderError,
    RenderError,
)
from leadsmith.scraper.extractor import extract_company_info
from leadsmith.scraper.models import HEADLESS, REMOTE_READER, STATIC, ScrapedResult

logger = logging.getLogger(__name__)

BrowserLauncher = Callable[[], AsyncContextManager[Any]]

_CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def _describe(exc: BaseException) -> str:
    """``str(exc)``, or the class name when the message is empty (httpx timeouts)."""
    return str(exc) or exc.__class__.__name__


def _to_result(html: str, *, method: str, url: str) -> ScrapedResult:
    return ScrapedResult.from_company_info(
        extract_company_info(html),
        raw_html=html,
        method=method,
        url=url,
    )


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class ExtractionBackend(ABC):
    """Abstract base class for a single extraction backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name used in metadata and failure messages."""

    @abstractmethod
    async def fetch(self, url: str) -> ScrapedResult:
        """Return a :class:`ScrapedResult`.  Raise a ``BackendError`` on failure."""


# ---------------------------------------------------------------------------
# Static fetch backend
# ---------------------------------------------------------------------------

class StaticFetchBackend(ExtractionBackend):
    """Plain HTTP GET with a desktop browser user agent."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 20.0,
    ) -> None:
        self._user_agent = user_agent
        self._timeout = timeout

    @property
    def name(self) -> str:
        return STATIC

    async def fetch(self, url: str) -> ScrapedResult:
        logger.debug("[static] GET %s", url)
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(f"Request failed: {_describe(exc)}") from exc

        if not response.is_success:
            raise FetchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        return _to_result(response.text, method=STATIC, url=url)


# ---------------------------------------------------------------------------
# Headless browser backend
# ---------------------------------------------------------------------------

@asynccontextmanager
async def launch_chromium() -> AsyncIterator[Any]:
    """Start Playwright and yield a fresh headless Chromium browser.

    Playwright is imported lazily so the rest of the package can be imported
    (and tested) without a browser install.  The browser is closed when the
    context exits, whether or not the body raised.
    """
    from playwright.async_api import async_playwright  # noqa: PLC0415

    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=True, args=_CHROMIUM_ARGS)
        try:
            yield browser
        finally:
            await browser.close()


class HeadlessBrowserBackend(ExtractionBackend):
    """Render the page in an isolated headless browser, one per call.

    *launcher* is a zero-argument factory returning an async context manager
    that yields a browser; it defaults to :func:`launch_chromium`.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        navigation_timeout: float = 30.0,
        settle_delay: float = 2.0,
        launcher: Optional[BrowserLauncher] = None,
    ) -> None:
        self._user_agent = user_agent
        self._navigation_timeout = navigation_timeout
        self._settle_delay = settle_delay
        self._launcher = launcher or launch_chromium

    @property
    def name(self) -> str:
        return HEADLESS

    async def fetch(self, url: str) -> ScrapedResult:
        logger.debug("[headless] rendering %s", url)
        try:
            async with self._launcher() as browser:
                context = await browser.new_context(user_agent=self._user_agent)
                page = await context.new_page()
                await page.goto(
                    url,
                    wait_until="networkidle",
                    timeout=int(self._navigation_timeout * 1000),
                )
                # Late client-side rendering.
                await asyncio.sleep(self._settle_delay)
                html = await page.content()
        except Exception as exc:
            raise RenderError(f"Rendering failed: {_describe(exc)}") from exc

        return _to_result(html, method=HEADLESS, url=url)


# ---------------------------------------------------------------------------
# Remote reader backend
# ---------------------------------------------------------------------------

class RemoteReaderBackend(ExtractionBackend):
    """Delegate rendering to a URL-to-HTML reader service.

    Fails with :class:`ConfigurationError` before any I/O when no API key is
    configured.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = "https://r.jina.ai",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def name(self) -> str:
        return REMOTE_READER

    async def fetch(self, url: str) -> ScrapedResult:
        if not self._api_key:
            raise ConfigurationError("Remote reader API key is not configured")

        reader_url = f"{self._base_url}/{url}"
        logger.debug("[remote-reader] GET %s", reader_url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    reader_url,
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "X-Return-Format": "html",
                    },
                )
        except httpx.HTTPError as exc:
            raise ReaderError(f"Request failed: {_describe(exc)}") from exc

        if not response.is_success:
            raise ReaderError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        return _to_result(response.text, method=REMOTE_READER, url=url)
