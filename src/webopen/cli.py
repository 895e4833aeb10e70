import logging
import subprocess

import click

from webopen.errors import BrowserOpenError
from webopen.gateway.browser.abc import BrowserLauncher
from webopen.gateway.browser.real import create_browser_launcher

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("webopen", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="webopen")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.argument("url")
@click.pass_context
def cli(ctx: click.Context, debug: bool, url: str) -> None:
    """Open URL in the default web browser.

    URLs without a scheme are opened as https.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create the launcher if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_browser_launcher()
    launcher: BrowserLauncher = ctx.obj

    try:
        launcher.launch(url)
    except BrowserOpenError as e:
        raise click.ClickException(str(e)) from e
    except (OSError, subprocess.CalledProcessError) as e:
        raise click.ClickException(f"Browser launcher failed: {e}") from e


def main() -> None:
    """CLI entry point used by the `webopen` console script."""
    cli()
