"""Fake BrowserLauncher implementation for testing.

FakeBrowserLauncher is an in-memory implementation that captures launched URLs
without actually opening browser windows, enabling fast and predictable tests.
"""

from webopen.gateway.browser.abc import BrowserLauncher


class FakeBrowserLauncher(BrowserLauncher):
    """In-memory fake that captures URLs without opening a browser.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution for test assertions.
    """

    def __init__(self, *, launch_error: Exception | None) -> None:
        """Create FakeBrowserLauncher with empty URL tracking.

        Args:
            launch_error: If set, launch() raises this exception instead of
                capturing the URL. Use to simulate a missing launcher.
        """
        self._launch_error = launch_error
        self._launched_urls: list[str] = []

    def launch(self, url: str) -> None:
        """Capture URL without opening browser.

        Args:
            url: The URL that would have been opened
        """
        if self._launch_error is not None:
            raise self._launch_error
        self._launched_urls.append(url)

    @property
    def launched_urls(self) -> list[str]:
        """Get the list of URLs that were launched.

        Returns list of URL strings passed to launch().

        This property is for test assertions only.
        """
        return list(self._launched_urls)
