"""URL values handed to the browser.

`parse_url` splits a string with `urllib.parse.urlsplit` and adds the checks
urlsplit skips: malformed percent-escapes, control characters, invalid host
characters, and a colon in the first segment of a scheme-less path.
`with_default_scheme` gives relative input the https scheme without touching
the value it was given. Rendering percent-encodes the path and fragment.
"""

import re
import string
from dataclasses import dataclass, replace
from urllib.parse import quote, urlsplit

from webopen.errors import ParseError

DEFAULT_SCHEME = "https"

_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Unreserved and sub-delims, plus percent-escapes and the port separator.
# Non-ASCII hosts are left to IDNA handling downstream.
_HOST_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-._~" + "!$&'()*+,;=" + "%:")

_PATH_SAFE = "/:@!$&'()*+,;=%"
_FRAGMENT_SAFE = _PATH_SAFE + "?"


@dataclass(frozen=True)
class Url:
    """A parsed URL.

    Attributes:
        scheme: Lower-cased scheme, empty when the input had none
        netloc: Authority (userinfo, host and port), empty when absent
        path: Hierarchical path
        query: Query string without the leading "?"
        fragment: Fragment without the leading "#"
        opaque: Scheme-specific part of a non-hierarchical URL such as
            "mailto:user@example.com"; empty for hierarchical URLs
    """

    scheme: str
    netloc: str
    path: str
    query: str
    fragment: str
    opaque: str

    def is_absolute(self) -> bool:
        """Return True if the URL has a scheme."""
        return self.scheme != ""

    def __str__(self) -> str:
        parts: list[str] = []
        if self.scheme:
            parts.append(f"{self.scheme}:")
        if self.opaque:
            parts.append(self.opaque)
        else:
            if self.scheme or self.netloc:
                if self.netloc or self.path:
                    parts.append("//")
                parts.append(self.netloc)
            if self.path and self.netloc and not self.path.startswith("/"):
                parts.append("/")
            parts.append(quote(self.path, safe=_PATH_SAFE))
        if self.query:
            parts.append(f"?{self.query}")
        if self.fragment:
            parts.append(f"#{quote(self.fragment, safe=_FRAGMENT_SAFE)}")
        return "".join(parts)


def parse_url(raw: str) -> Url:
    """Parse a string into a Url.

    Args:
        raw: URL text, with or without a scheme

    Returns:
        The parsed Url. The scheme is left empty when `raw` has none.

    Raises:
        ParseError: If `raw` is not a valid URL
    """
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in raw):
        raise ParseError(raw, "invalid control character in URL")
    if raw.startswith(":"):
        raise ParseError(raw, "missing protocol scheme")

    try:
        split = urlsplit(raw)
        # Port validation is lazy in urlsplit. Ports above 65535 are rejected.
        split.port
    except ValueError as e:
        raise ParseError(raw, str(e)) from e

    for component in (split.netloc, split.path, split.fragment):
        match = _BAD_PERCENT_ESCAPE.search(component)
        if match is not None:
            escape = component[match.start() : match.start() + 3]
            raise ParseError(raw, f"invalid URL escape {escape!r}")

    host = split.netloc.rpartition("@")[2]
    if not host.startswith("["):
        for char in host:
            if char.isascii() and char not in _HOST_CHARACTERS:
                raise ParseError(raw, f"invalid character {char!r} in host name")

    if not split.scheme and not split.netloc:
        first_segment = split.path.split("/", 1)[0]
        if ":" in first_segment:
            raise ParseError(raw, "first path segment in URL cannot contain colon")

    path = split.path
    opaque = ""
    if split.scheme and not split.netloc and path and not path.startswith("/"):
        opaque, path = path, ""

    return Url(
        scheme=split.scheme,
        netloc=split.netloc,
        path=path,
        query=split.query,
        fragment=split.fragment,
        opaque=opaque,
    )


def with_default_scheme(url: Url) -> Url:
    """Return `url` with the https scheme if it has none.

    Absolute URLs are returned as-is. The argument is never modified.
    """
    if url.is_absolute():
        return url
    return replace(url, scheme=DEFAULT_SCHEME)
