"""Host operating system identifiers."""

import sys

DARWIN = "darwin"
WINDOWS = "windows"
LINUX = "linux"
FREEBSD = "freebsd"

SUPPORTED_PLATFORMS = (DARWIN, WINDOWS, LINUX, FREEBSD)


def normalize_platform(sys_platform: str) -> str:
    """Map a `sys.platform` value to a webopen platform identifier.

    Release-suffixed values such as "freebsd14" collapse to their family.
    Values with no mapping are returned unchanged so that error messages
    name the real host.
    """
    if sys_platform == "win32":
        return WINDOWS
    for family in (LINUX, FREEBSD):
        if sys_platform.startswith(family):
            return family
    return sys_platform


def detect_platform() -> str:
    """Return the identifier of the platform this interpreter runs on."""
    return normalize_platform(sys.platform)
