"""Scrape endpoint.

Routes
------
POST /scrape    Body: {"url": "https://..."}    → ScrapingService.scrape_url

Status mapping
--------------
200  scrape succeeded
400  missing or non-string ``url``; ``InvalidUrl``: not an absolute http(s) URL
422  ``ScrapeFailed``: every backend failed or returned low-quality data
500  anything else
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from leadsmith.scraper.errors import InvalidUrl, ScrapeFailed

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_URL_MESSAGE = "URL is required and must be a string"
INVALID_URL_MESSAGE = "Invalid URL format. Please provide a valid HTTP or HTTPS URL."
GENERIC_FAILURE_MESSAGE = (
    "Failed to scrape the provided URL. Please try again or contact support."
)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    # Untyped so a missing or non-string url gets the 400 envelope, not 422.
    url: Any = None


class ScrapedData(BaseModel):
    company_name: str
    description: str
    industry: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None
    raw_html: str
    metadata: dict[str, Any]


class ScrapeResponse(BaseModel):
    success: bool
    data: Optional[ScrapedData] = None
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "data": None, "error": message},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=ScrapeResponse)
async def scrape_endpoint(body: ScrapeRequest, request: Request) -> Any:
    """Scrape company information from ``body.url``."""
    if not body.url or not isinstance(body.url, str):
        return _error(400, MISSING_URL_MESSAGE)

    service = request.app.state.scraper
    try:
        result = await service.scrape_url(body.url)
    except InvalidUrl:
        return _error(400, INVALID_URL_MESSAGE)
    except ScrapeFailed as exc:
        return _error(422, str(exc))
    except Exception:
        logger.exception("[api] unexpected scraping error for %s", body.url)
        return _error(500, GENERIC_FAILURE_MESSAGE)

    return {"success": True, "data": result.to_dict(), "error": None}
