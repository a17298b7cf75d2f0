"""Data models for the scraping pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

UNKNOWN_COMPANY = "Unknown Company"
NO_DESCRIPTION = "No description available"

# Backend names, in the order the service tries them.
STATIC = "static"
HEADLESS = "headless"
REMOTE_READER = "remote-reader"


@dataclass
class CompanyInfo:
    """Company fields derived from a single HTML document."""

    company_name: str
    description: str
    industry: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None


@dataclass
class ScrapedResult:
    """The canonical output of :meth:`ScrapingService.scrape_url`.

    ``raw_html`` is the payload exactly as the winning backend obtained it,
    kept for downstream re-analysis.  ``metadata`` always carries ``method``,
    ``url`` and ``scraped_at``.
    """

    company_name: str
    description: str
    industry: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None
    raw_html: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_company_info(
        cls,
        info: CompanyInfo,
        *,
        raw_html: str,
        method: str,
        url: str,
        scraped_at: datetime | None = None,
    ) -> "ScrapedResult":
        stamp = scraped_at or datetime.now(timezone.utc)
        return cls(
            company_name=info.company_name,
            description=info.description,
            industry=info.industry,
            size=info.size,
            location=info.location,
            raw_html=raw_html,
            metadata={
                "method": method,
                "url": url,
                "scraped_at": stamp.isoformat(),
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ExtractionAttempt:
    """One backend's outcome inside a single ``scrape_url`` call."""

    backend: str
    result: Optional[ScrapedResult] = None
    reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None and self.reason is None

    def describe(self) -> str:
        """Render the attempt as ``"<backend>: <reason>"``."""
        return f"{self.backend}: {self.reason or 'Unknown error'}"
