"""Tests for the module-level open() and open_url() helpers."""

from unittest.mock import patch

import webopen
from webopen.opener import create_browser_opener


def test_create_browser_opener_targets_detected_platform() -> None:
    """The factory probes PATH and spawns the launcher for the detected host."""
    with (
        patch("webopen.opener.detect_platform", return_value="linux"),
        patch("webopen.gateway.process.real.shutil.which", return_value="/usr/bin/xdg-open") as which,
        patch("webopen.gateway.process.real.subprocess.run") as run,
    ):
        create_browser_opener().open("example.com")

    which.assert_called_once_with("xdg-open")
    run.assert_called_once_with(["xdg-open", "https://example.com"], check=True)


def test_create_browser_opener_uses_startfile_on_windows() -> None:
    with (
        patch("webopen.opener.detect_platform", return_value="windows"),
        patch("webopen.gateway.process.real.os.startfile", create=True) as startfile,
    ):
        create_browser_opener().open("https://example.com/?a=1&b=2")

    startfile.assert_called_once_with("https://example.com/?a=1&b=2")


def test_open_runs_host_launcher() -> None:
    """webopen.open() dispatches through the detected platform."""
    with (
        patch("webopen.opener.detect_platform", return_value="darwin"),
        patch("webopen.gateway.process.real.subprocess.run") as run,
    ):
        launched = webopen.open("example.com")

    assert str(launched) == "https://example.com"
    run.assert_called_once_with(["open", "https://example.com"], check=True)


def test_open_url_probes_path_on_linux() -> None:
    """webopen.open_url() probes PATH for a Linux launcher."""
    url = webopen.parse_url("https://example.com")

    with (
        patch("webopen.opener.detect_platform", return_value="linux"),
        patch(
            "webopen.gateway.process.real.shutil.which",
            side_effect=lambda name: "/usr/bin/sensible-browser" if name == "sensible-browser" else None,
        ),
        patch("webopen.gateway.process.real.subprocess.run") as run,
    ):
        webopen.open_url(url)

    run.assert_called_once_with(["sensible-browser", "https://example.com"], check=True)
