"""Leadsmith: company research scraping backend."""

__version__ = "0.1.0"
