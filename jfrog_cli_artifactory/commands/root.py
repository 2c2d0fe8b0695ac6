"""CLI command registrations."""

from __future__ import annotations

# mypy: ignore-errors
# ruff: noqa: B008,F403,F405,I001
from jfrog_cli_artifactory.commands.common import *


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the plugin version and exit.",
            is_eager=True,
            callback=_version_callback,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose debug logging."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write logs to this file instead of stderr."),
    ] = None,
) -> None:
    """JFrog Artifactory repository, lifecycle, and evidence commands."""
    configure_logging(log_file=log_file, verbose=verbose)
