"""Leadsmith CLI: entry-point for the scraping backend.

Usage:
    python cli/main.py --help

Commands:
    scrape    → run the full fallback pipeline against a URL
    extract   → run the field extractor over a local HTML file
    serve     → start the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from leadsmith.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from dataclasses import asdict

import typer

from leadsmith.config import settings
from leadsmith.logging_setup import configure_logging
from leadsmith.scraper import (
    InvalidUrl,
    ScrapeFailed,
    build_default_service,
    extract_company_info,
)

app = typer.Typer(
    name="leadsmith",
    help="Leadsmith company scraping CLI.",
    no_args_is_help=True,
)


def _echo_fields(fields: dict) -> None:
    for label, key in (
        ("Company ", "company_name"),
        ("Desc    ", "description"),
        ("Industry", "industry"),
        ("Size    ", "size"),
        ("Location", "location"),
    ):
        typer.echo(f"  {label}: {fields.get(key) or '(none)'}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Configure logging before any command runs."""
    configure_logging("DEBUG" if verbose else settings.log_level)


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Argument(..., help="Company website URL."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
    include_html: bool = typer.Option(
        False, "--include-html", help="Keep raw_html in --json output."
    ),
) -> None:
    """Scrape a company website, falling back across backends."""
    service = build_default_service(settings)

    typer.echo(f"[scrape] Scraping {url!r} …", err=True)
    try:
        result = asyncio.run(service.scrape_url(url))
    except InvalidUrl:
        typer.echo(
            "[scrape] Invalid URL format. Please provide a valid HTTP or HTTPS URL.",
            err=True,
        )
        raise typer.Exit(1)
    except ScrapeFailed as exc:
        typer.echo(f"[scrape] {exc}", err=True)
        raise typer.Exit(1)

    payload = result.to_dict()
    if as_json:
        if not include_html:
            payload.pop("raw_html", None)
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"[scrape] Method  : {result.metadata.get('method')}")
    _echo_fields(payload)


# ---------------------------------------------------------------------------
# Extract
# ---------------------------------------------------------------------------
@app.command("extract")
def extract(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Local HTML file."),
) -> None:
    """Run the field extractor over a saved HTML page (no network)."""
    info = extract_company_info(path.read_text(encoding="utf-8", errors="replace"))
    typer.echo(f"[extract] {path}")
    _echo_fields(asdict(info))


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
    reload: bool = typer.Option(False, help="Auto-reload on code changes."),
) -> None:
    """Start the HTTP API."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run("leadsmith.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
