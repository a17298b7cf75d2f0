"""URL validation, run before any backend touches the network."""

from __future__ import annotations

import ipaddress
from urllib.parse import unquote, urlsplit

from leadsmith.scraper.errors import InvalidUrl

_ALLOWED_SCHEMES = {"http", "https"}

# Code points a browser URL parser refuses inside a domain name.
_FORBIDDEN_HOST_CHARS = frozenset(
    " #%/:<>?@[\\]^|" + "".join(chr(c) for c in range(0x20)) + "\x7f"
)


def _is_valid_host(hostname: str) -> bool:
    if ":" in hostname:
        # urlsplit strips the brackets from IPv6 literals.
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError:
            return False
        return True

    try:
        host = unquote(hostname, errors="strict")
        if any(ch in _FORBIDDEN_HOST_CHARS for ch in host):
            return False
        host.encode("idna")
    except UnicodeError:
        return False
    return True


def is_valid_url(url: object) -> bool:
    """Return ``True`` if *url* is an absolute ``http``/``https`` URL."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parts = urlsplit(url.strip())
        # Accessing .port raises ValueError for out-of-range ports.
        parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not parts.hostname:
        return False
    return _is_valid_host(parts.hostname)


def validate_url(url: object) -> str:
    """Return *url* stripped of surrounding whitespace, or raise :class:`InvalidUrl`."""
    if not is_valid_url(url):
        raise InvalidUrl(url)
    return url.strip()  # type: ignore[union-attr]
