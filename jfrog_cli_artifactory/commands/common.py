"""Shared Typer application, options, and helpers for CLI commands."""

from __future__ import annotations

# ruff: noqa: F401
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from jfrog_cli_artifactory import __version__
from jfrog_cli_artifactory.artifactory.repository.command import RepoCommand
from jfrog_cli_artifactory.config import (
    ACCESS_TOKEN_ENV,
    PASSWORD_ENV,
    URL_ENV,
    USER_ENV,
    ServerDetails,
)
from jfrog_cli_artifactory.errors import JFrogCliError, ValidationError
from jfrog_cli_artifactory.evidence.create import (
    evidence_server_details,
    new_create_evidence_command,
    validate_create_evidence_context,
)
from jfrog_cli_artifactory.evidence.subject import (
    BUILD_NAME,
    BUILD_NUMBER,
    PACKAGE_NAME,
    RELEASE_BUNDLE,
    SUBJECT_REPO_PATH,
    resolve_subject,
)
from jfrog_cli_artifactory.logging_utils import configure_logging
from jfrog_cli_artifactory.platform.client import ArtifactoryClient

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)

UrlOption = Annotated[
    str | None,
    typer.Option("--url", envvar=URL_ENV, help="JFrog platform URL."),
]
AccessTokenOption = Annotated[
    str | None,
    typer.Option("--access-token", envvar=ACCESS_TOKEN_ENV, help="JFrog access token."),
]
UserOption = Annotated[
    str | None,
    typer.Option("--user", envvar=USER_ENV, help="JFrog username."),
]
PasswordOption = Annotated[
    str | None,
    typer.Option("--password", envvar=PASSWORD_ENV, help="JFrog password."),
]


def _version_callback(value: bool) -> None:
    """Print package version and exit when requested."""
    if value:
        console.print(__version__)
        raise typer.Exit()


def _cli_error(code: str, message: str, hint: str | None = None) -> typer.BadParameter:
    """Create a standardized CLI error with error code and optional remediation hint."""
    if hint is None:
        return typer.BadParameter(f"[{code}] {message}")
    return typer.BadParameter(f"[{code}] {message} Hint: {hint}")


def _fail(exc: JFrogCliError) -> typer.Exit:
    """Render a command failure to stderr and return the exit to raise."""
    err_console.print(f"[FAIL] {exc}", markup=False)
    return typer.Exit(code=1)


def _server_details(
    url: str | None,
    access_token: str | None,
    user: str | None,
    password: str | None,
) -> ServerDetails:
    """Build server details from the connection options."""
    if not url:
        raise _cli_error(
            "missing-url",
            "The platform URL is required.",
            f"Pass --url or set {URL_ENV}.",
        )
    return ServerDetails.from_platform_url(
        url, access_token=access_token, user=user, password=password
    )


def _run_repo_command(
    template: Path,
    template_vars: str | None,
    details: ServerDetails,
    *,
    is_update: bool,
) -> None:
    """Run repository create/update and translate failures to exit codes."""
    command = RepoCommand(ArtifactoryClient(details), template, template_vars)
    try:
        command.perform_repo_cmd(is_update)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except JFrogCliError as exc:
        raise _fail(exc) from exc


__all__ = [name for name in globals() if not name.startswith("__")]
