"""
Bookmark URL helpers.

Derive display metadata (favicon, domain, fallback title) from a bookmark URL.
Unparseable URLs never raise: helpers fall back to the input or a placeholder.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https"
FALLBACK_TITLE = "Website"

# "localhost:3000", "example.com:8080/path": a host and port, not a scheme
_HOST_PORT = re.compile(r"^[\w.-]+:\d+(?:[/?#]|$)")


def _split(url: str) -> tuple[str, str] | None:
    """Return (scheme, hostname) or None when the URL is not absolute."""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not hostname:
        return None
    return parsed.scheme, hostname


def normalize_url(url: str) -> str:
    """
    Trim the URL and prepend https:// when it has no scheme.

    A URL with some other scheme ("javascript:", "mailto:") is returned
    as is so validation can reject it.
    """
    url = url.strip()
    if not url or "://" in url:
        return url
    if _HOST_PORT.match(url) or not urlparse(url).scheme:
        return f"{DEFAULT_SCHEME}://{url}"
    return url


def base_url(url: str) -> str:
    parts = _split(url)
    if parts is None:
        logger.debug("Invalid URL: %s", url)
        return url
    scheme, hostname = parts
    return f"{scheme}://{hostname}"


def favicon_url(url: str) -> str:
    return f"{base_url(url)}/favicon.ico"


def large_icon_url(url: str) -> str:
    """Apple touch icon, larger than the favicon where a site provides one."""
    return f"{base_url(url)}/apple-touch-icon.png"


def extract_domain(url: str) -> str:
    parts = _split(url)
    if parts is None:
        logger.debug("Invalid URL: %s", url)
        return url
    return parts[1]


def title_from_url(url: str) -> str:
    """
    Build a display title from the host name.

    "https://www.github.com/x" -> "Github"
    """
    parts = _split(url)
    if parts is None:
        return FALLBACK_TITLE
    domain = parts[1].removeprefix("www.")
    label = domain.split(".")[0]
    if not label:
        return FALLBACK_TITLE
    return label[0].upper() + label[1:]
