"""Open URLs in the host's default web browser.

macOS uses `open` and Windows uses `start`. Linux and FreeBSD use the first
of `xdg-open`, `sensible-browser` and `x-www-browser` found on the search path.
"""

import logging

from webopen.errors import NoStrategyAvailableError, UnsupportedPlatformError
from webopen.gateway.process.abc import ProcessRunner
from webopen.gateway.process.real import RealProcessRunner
from webopen.host import DARWIN, FREEBSD, LINUX, WINDOWS, detect_platform
from webopen.url import Url, parse_url, with_default_scheme

# Probed in this order; the first one found is used.
NIX_STRATEGIES = ("xdg-open", "sensible-browser", "x-www-browser")

_DIRECT_LAUNCHERS = {
    DARWIN: "open",
    WINDOWS: "start",
}

_NIX_PLATFORMS = frozenset({LINUX, FREEBSD})

logger = logging.getLogger(__name__)


class BrowserOpener:
    """Hands URLs to the platform's browser launcher program."""

    def __init__(self, *, platform: str, process_runner: ProcessRunner) -> None:
        """Create BrowserOpener.

        Args:
            platform: Platform identifier ("darwin", "windows", "linux",
                "freebsd"); any other value is unsupported
            process_runner: Used to probe for and run launcher programs
        """
        self._platform = platform
        self._process_runner = process_runner

    def open(self, raw: str) -> Url:
        """Parse `raw` and open it in the default browser.

        Args:
            raw: URL text; the https scheme is assumed when it has none

        Returns:
            The URL that was handed to the launcher

        Raises:
            ParseError: If `raw` is not a valid URL. Nothing is run.
            UnsupportedPlatformError: See open_url()
            NoStrategyAvailableError: See open_url()
        """
        return self.open_url(parse_url(raw))

    def open_url(self, url: Url) -> Url:
        """Open `url` in the default browser.

        Blocks until the launcher program exits, not until the browser does.
        Errors raised while running the launcher propagate unchanged.

        Args:
            url: URL to open; relative URLs get the https scheme

        Returns:
            The normalized URL that was handed to the launcher. `url` itself
            is left untouched.

        Raises:
            UnsupportedPlatformError: If the platform has no launcher
            NoStrategyAvailableError: If no Linux/FreeBSD launcher is installed
        """
        target = with_default_scheme(url)
        launcher = self.resolve_launcher()
        logger.debug("launching %s %s", launcher, target)
        self._process_runner.run(launcher, [str(target)])
        return target

    def resolve_launcher(self) -> str:
        """Return the program used to open URLs on this platform.

        Raises:
            UnsupportedPlatformError: If the platform has no launcher
            NoStrategyAvailableError: If no Linux/FreeBSD launcher is installed
        """
        logger.debug("resolving browser launcher for platform %s", self._platform)
        launcher = _DIRECT_LAUNCHERS.get(self._platform)
        if launcher is not None:
            return launcher
        if self._platform in _NIX_PLATFORMS:
            return self._select_nix_strategy()
        raise UnsupportedPlatformError(self._platform)

    def _select_nix_strategy(self) -> str:
        for candidate in NIX_STRATEGIES:
            if self._process_runner.exists(candidate):
                logger.debug("selected launcher %s", candidate)
                return candidate
            logger.debug("launcher %s not found", candidate)
        raise NoStrategyAvailableError()


def create_browser_opener() -> BrowserOpener:
    """Create a BrowserOpener for the host this process runs on."""
    platform = detect_platform()
    return BrowserOpener(platform=platform, process_runner=RealProcessRunner(platform=platform))


def open(raw: str) -> Url:
    """Open `raw` in the default browser. See BrowserOpener.open()."""
    return create_browser_opener().open(raw)


def open_url(url: Url) -> Url:
    """Open `url` in the default browser. See BrowserOpener.open_url()."""
    return create_browser_opener().open_url(url)
