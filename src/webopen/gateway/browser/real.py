"""Real BrowserLauncher implementation using BrowserOpener."""

from webopen.gateway.browser.abc import BrowserLauncher
from webopen.opener import BrowserOpener, create_browser_opener


class RealBrowserLauncher(BrowserLauncher):
    """Production implementation that opens URLs in the system browser."""

    def __init__(self, *, opener: BrowserOpener) -> None:
        self._opener = opener

    def launch(self, url: str) -> None:
        """Launch URL in the default web browser.

        Args:
            url: The URL to open in the browser
        """
        self._opener.open(url)


def create_browser_launcher() -> RealBrowserLauncher:
    """Create a RealBrowserLauncher for the host this process runs on."""
    return RealBrowserLauncher(opener=create_browser_opener())
