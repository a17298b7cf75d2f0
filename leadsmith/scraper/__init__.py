"""Scraper package: multi-backend company extraction.

Public API::

    from leadsmith.scraper import build_default_service
    result = await build_default_service().scrape_url("https://example.com")
"""

from leadsmith.scraper.errors import InvalidUrl, ScrapeFailed
from leadsmith.scraper.extractor import extract_company_info
from leadsmith.scraper.models import CompanyInfo, ScrapedResult
from leadsmith.scraper.service import ScrapingService, build_default_service

__all__ = [
    "ScrapingService",
    "build_default_service",
    "extract_company_info",
    "CompanyInfo",
    "ScrapedResult",
    "InvalidUrl",
    "ScrapeFailed",
]
