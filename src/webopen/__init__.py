"""Open URLs in the host's default web browser.

Usage::

    import webopen
    webopen.open("example.com/docs")  # opens https://example.com/docs

See `webopen.opener.BrowserOpener` for an injectable variant.
"""

from webopen.errors import (
    BrowserOpenError,
    NoStrategyAvailableError,
    ParseError,
    UnsupportedPlatformError,
)
from webopen.opener import NIX_STRATEGIES, BrowserOpener, create_browser_opener, open, open_url
from webopen.url import Url, parse_url, with_default_scheme

__all__ = [
    "NIX_STRATEGIES",
    "BrowserOpenError",
    "BrowserOpener",
    "NoStrategyAvailableError",
    "ParseError",
    "UnsupportedPlatformError",
    "Url",
    "create_browser_opener",
    "open",
    "open_url",
    "parse_url",
    "with_default_scheme",
]
