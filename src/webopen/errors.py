"""Errors raised before any launcher program is run.

Failures of the launcher process itself are not wrapped: callers see the
exception raised by the process layer (FileNotFoundError, PermissionError,
subprocess.CalledProcessError).
"""


class BrowserOpenError(Exception):
    """Base class for webopen errors."""


class ParseError(BrowserOpenError, ValueError):
    """The input string is not a valid URL."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"parse {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class UnsupportedPlatformError(BrowserOpenError):
    """The host OS has no known way to launch a browser."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"OS type {platform} not implemented")
        self.platform = platform


class NoStrategyAvailableError(BrowserOpenError):
    """None of the Linux/FreeBSD launcher programs is installed."""

    def __init__(self) -> None:
        super().__init__("no strategy available")
